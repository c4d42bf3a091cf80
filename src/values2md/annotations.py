"""Read documentation annotations embedded in YAML comments.

Annotations are comment lines of the form ``# @name: value``. Three are
understood:

``@recurse``
    ``false`` collapses the key's subtree into a single documented entry.
``@type``
    Overrides the displayed kind, e.g. ``array<string>``.
``@default``
    Overrides the displayed default value.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_ANNOTATION_RE = re.compile(r"^[ \t]*#*[ \t]*@(?P<name>\w+):[ \t]*(?P<value>.*?)[ \t]*$", re.MULTILINE)
_BOOL_VALUES = {"true": True, "false": False}


def find_annotation(comment: str, name: str) -> str | None:
    """Return the value of the first ``@name:`` annotation in ``comment``."""
    for match in _ANNOTATION_RE.finditer(comment or ""):
        if match.group("name") == name:
            return match.group("value")
    return None


def recurse_annotation(comment: str) -> bool | None:
    """Return the ``@recurse`` directive, or None when absent or malformed."""
    value = find_annotation(comment, "recurse")
    if value is None:
        return None
    parsed = _BOOL_VALUES.get(value.lower())
    if parsed is None:
        logger.warning("Ignoring malformed @recurse annotation value %r", value)
    return parsed


def type_annotation(comment: str) -> str | None:
    value = find_annotation(comment, "type")
    return value or None


def default_annotation(comment: str) -> str | None:
    value = find_annotation(comment, "default")
    return value or None


def strip_annotations(comment: str) -> str:
    """Remove every annotation line from ``comment``."""
    lines = [line for line in (comment or "").splitlines() if not _ANNOTATION_RE.match(line)]
    return "\n".join(lines)
