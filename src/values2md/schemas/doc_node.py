"""Document tree model."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, model_validator

from values2md.annotations import default_annotation, strip_annotations, type_annotation

_ANCHOR_STRIP_RE = re.compile(r"[^a-z0-9_-]")
_COMMENT_MARKER_RE = re.compile(r"^#+ ?")

_KIND_NAMES = {
    "!!str": "string",
    "!!bool": "boolean",
    "!!int": "integer",
    "!!float": "float",
    "!!map": "map",
    "!!seq": "array",
    "!!null": "",
}


def normalize_anchor(text: str) -> str:
    """Lowercase ``text`` and drop characters that are not valid in an anchor."""
    return _ANCHOR_STRIP_RE.sub("", text.lower())


class DocNode(BaseModel):
    """A documented configuration key.

    Leaves carry a rendered ``default``; containers carry ``children`` in
    source order. A key collapsed with ``@recurse: false`` has neither.

    Attributes:
        key: The configuration key at this position.
        parent_breadcrumb: Anchor of the enclosing node.
        parent_was_map: True for entries of the document's root mapping.
        column: 1-based source column of the key.
        comment: Raw head comment of the key, ``#`` markers included.
        kind_tag: Short YAML tag of the value, e.g. ``!!str``.
        default: Rendered default for leaves, None for containers.
        children: Child nodes in source order.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    parent_breadcrumb: str = ""
    parent_was_map: bool = False
    column: int = 0
    comment: str = ""
    kind_tag: str = ""
    default: str | None = None
    children: list["DocNode"] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_leaf_or_container(self) -> "DocNode":
        if self.default is not None and self.children:
            raise ValueError(f"node {self.key!r} has both a default and children")
        return self

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def html_anchor(self) -> str:
        """Anchor for this node, also the breadcrumb handed to its children."""
        key = normalize_anchor(self.key)
        if not self.parent_breadcrumb:
            return key
        return f"{self.parent_breadcrumb}-{key}"

    @property
    def toc_anchor(self) -> str:
        """Lowercased key, the link target used by the table of contents."""
        return self.key.lower()

    @property
    def formatted_kind(self) -> str:
        annotated = type_annotation(self.comment)
        if annotated:
            return annotated
        if self.kind_tag in _KIND_NAMES:
            return _KIND_NAMES[self.kind_tag]
        return self.kind_tag.lstrip("!")

    @property
    def formatted_default(self) -> str | None:
        annotated = default_annotation(self.comment)
        if annotated:
            return annotated
        if self.default is None:
            return None
        if self.default == "":
            # An empty null scalar (``key:``) documents as null.
            return "null" if self.kind_tag == "!!null" else '""'
        return self.default

    @property
    def description(self) -> str:
        lines = [_COMMENT_MARKER_RE.sub("", line.strip()) for line in strip_annotations(self.comment).splitlines()]
        return "\n".join(lines).strip()
