"""Custom exceptions for values2md."""

from __future__ import annotations


class Values2mdError(Exception):
    """Base exception for values2md operations."""


class ParseError(Values2mdError):
    """Structural problem in the values document.

    Carries the breadcrumb of the enclosing node and the offending key so the
    failure can be located in the source document.
    """

    def __init__(self, parent_anchor: str, curr_anchor: str, message: str) -> None:
        self.parent_anchor = parent_anchor
        self.curr_anchor = curr_anchor
        self.message = message
        location = "/".join(part for part in (parent_anchor, curr_anchor) if part) or "<root>"
        super().__init__(f"{location}: {message}")


class SerializationError(Values2mdError):
    """Error while rendering a sequence as inline YAML."""


class UnhandledNodeError(Values2mdError):
    """A YAML node kind the tree builder does not know how to handle."""

    def __init__(self, breadcrumb: str) -> None:
        self.breadcrumb = breadcrumb
        super().__init__(f"fell through cases unexpectedly at breadcrumb: {breadcrumb}")


class UnknownTemplateError(Values2mdError):
    """Requested output template is not supported."""


class MarkerNotFoundError(Values2mdError):
    """A codegen marker is missing from the reference document."""
