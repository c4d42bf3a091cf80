"""Parse an annotated values document into a DocNode tree."""

from __future__ import annotations

import logging
from typing import AbstractSet, Sequence

import yaml
from yaml.nodes import MappingNode, ScalarNode, SequenceNode

from values2md.annotations import recurse_annotation
from values2md.config import ROOT_BREADCRUMB
from values2md.exceptions import ParseError, SerializationError, UnhandledNodeError
from values2md.inline_yaml import to_inline_yaml
from values2md.schemas import DocNode

logger = logging.getLogger(__name__)

_TAG_PREFIX = "tag:yaml.org,2002:"
_STR_TAG = _TAG_PREFIX + "str"


def parse_values(yaml_text: str) -> DocNode:
    """Build the documentation tree for a YAML document.

    Args:
        yaml_text: The document source. Its root must be a mapping.

    Returns:
        A root DocNode whose children are the document's top-level keys.

    Raises:
        ParseError: If the text is not valid YAML, is empty, or its root is
            not a mapping, or if a key/value pair is malformed.
    """
    try:
        document = yaml.compose(yaml_text, Loader=yaml.SafeLoader)
    except yaml.YAMLError as exc:
        raise ParseError("", "", f"invalid YAML: {exc}") from exc

    if document is None:
        raise ParseError("", "", "document is empty")
    if not isinstance(document, MappingNode):
        raise ParseError("", "", f"expected a mapping at the document root, got {short_tag(document.tag)}")

    source_lines = yaml_text.splitlines()
    children = _build_mapping_children(
        document,
        source_lines=source_lines,
        scalar_lines=scalar_content_lines(document),
        ancestors=frozenset({id(document)}),
        parent_breadcrumb=ROOT_BREADCRUMB,
        parent_was_map=True,
    )
    logger.debug("Parsed %d top-level keys", len(children))
    return DocNode(key="", kind_tag=short_tag(document.tag), children=children)


def build_doc_node(
    key_node: yaml.Node,
    value_node: yaml.Node | None,
    *,
    source_lines: Sequence[str],
    scalar_lines: AbstractSet[int] = frozenset(),
    ancestors: frozenset[int] = frozenset(),
    parent_breadcrumb: str,
    parent_was_map: bool,
) -> DocNode:
    """Build the DocNode for one key/value pair, recursing into containers.

    ``scalar_lines`` holds the source lines inside multi-line scalars, which
    never count as comments. ``ancestors`` holds the ids of the container
    nodes on the current path, so recursive aliases are reported instead of
    followed.
    """
    if not isinstance(key_node, ScalarNode):
        raise ParseError(parent_breadcrumb, _describe(key_node), "mapping keys must be scalars")

    key = key_node.value
    comment = head_comment(source_lines, key_node, scalar_lines=scalar_lines)
    base = {
        "key": key,
        "parent_breadcrumb": parent_breadcrumb,
        "parent_was_map": parent_was_map,
        "column": key_node.start_mark.column + 1 if key_node.start_mark else 0,
        "comment": comment,
    }

    # @recurse: false documents the key as a single entry without looking at its value.
    if recurse_annotation(comment) is False:
        return DocNode(**base)

    if value_node is None:
        raise ParseError(parent_breadcrumb, key, "key has no paired value")
    if isinstance(value_node, (MappingNode, SequenceNode)) and id(value_node) in ancestors:
        raise ParseError(parent_breadcrumb, key, "recursive alias")

    kind_tag = short_tag(value_node.tag)

    if isinstance(value_node, ScalarNode):
        return DocNode(**base, kind_tag=kind_tag, default=value_node.value)

    if isinstance(value_node, MappingNode):
        node = DocNode(**base, kind_tag=kind_tag)
        children = _build_mapping_children(
            value_node,
            source_lines=source_lines,
            scalar_lines=scalar_lines,
            ancestors=ancestors | {id(value_node)},
            parent_breadcrumb=node.html_anchor,
            parent_was_map=False,
        )
        return node.model_copy(update={"children": children})

    if isinstance(value_node, SequenceNode):
        items = value_node.value
        if not items:
            return DocNode(**base, kind_tag=kind_tag, default="[]")

        if all(isinstance(item, ScalarNode) for item in items):
            try:
                inline = to_inline_yaml(items)
            except SerializationError as exc:
                raise ParseError(parent_breadcrumb, key, str(exc)) from exc
            return DocNode(**base, kind_tag=kind_tag, default=inline)

        node = DocNode(**base, kind_tag=kind_tag)
        children = _build_sequence_children(
            items,
            source_lines=source_lines,
            scalar_lines=scalar_lines,
            ancestors=ancestors | {id(value_node)},
            parent_breadcrumb=node.html_anchor,
        )
        return node.model_copy(update={"children": children})

    raise UnhandledNodeError(parent_breadcrumb)


def _build_mapping_children(
    mapping: MappingNode,
    *,
    source_lines: Sequence[str],
    scalar_lines: AbstractSet[int],
    ancestors: frozenset[int],
    parent_breadcrumb: str,
    parent_was_map: bool,
) -> list[DocNode]:
    return [
        build_doc_node(
            key_node,
            value_node,
            source_lines=source_lines,
            scalar_lines=scalar_lines,
            ancestors=ancestors,
            parent_breadcrumb=parent_breadcrumb,
            parent_was_map=parent_was_map,
        )
        for key_node, value_node in mapping.value
    ]


def _build_sequence_children(
    items: Sequence[yaml.Node],
    *,
    source_lines: Sequence[str],
    scalar_lines: AbstractSet[int],
    ancestors: frozenset[int],
    parent_breadcrumb: str,
) -> list[DocNode]:
    children: list[DocNode] = []
    for index, item in enumerate(items):
        if isinstance(item, MappingNode):
            if id(item) in ancestors:
                raise ParseError(parent_breadcrumb, f"[{index}]", "recursive alias")
            children.extend(
                _build_mapping_children(
                    item,
                    source_lines=source_lines,
                    scalar_lines=scalar_lines,
                    ancestors=ancestors | {id(item)},
                    parent_breadcrumb=parent_breadcrumb,
                    parent_was_map=False,
                )
            )
            continue
        # Elements that are not mappings have no key of their own; use their position.
        key_node = ScalarNode(_STR_TAG, f"[{index}]", item.start_mark, item.end_mark)
        children.append(
            build_doc_node(
                key_node,
                item,
                source_lines=source_lines,
                scalar_lines=scalar_lines,
                ancestors=ancestors,
                parent_breadcrumb=parent_breadcrumb,
                parent_was_map=False,
            )
        )
    return children


def head_comment(
    source_lines: Sequence[str],
    key_node: yaml.Node,
    *,
    scalar_lines: AbstractSet[int] = frozenset(),
) -> str:
    """Return the comment block directly above ``key_node``.

    Only keys that open their line (optionally after sequence dashes) own a
    head comment. The block ends at the first blank or non-comment line, or
    at a line that belongs to the body of a multi-line scalar.
    """
    mark = key_node.start_mark
    if mark is None or mark.line >= len(source_lines):
        return ""
    prefix = source_lines[mark.line][: mark.column]
    if prefix.replace("-", "").strip():
        return ""

    comment_lines: list[str] = []
    for line_number in range(mark.line - 1, -1, -1):
        stripped = source_lines[line_number].strip()
        if line_number in scalar_lines or not stripped.startswith("#"):
            break
        comment_lines.append(stripped)
    comment_lines.reverse()
    return "\n".join(comment_lines)


def scalar_content_lines(document: yaml.Node) -> frozenset[int]:
    """Return the line numbers holding the body of quoted or block scalars."""
    lines: set[int] = set()
    seen: set[int] = set()
    stack = [document]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        if isinstance(node, ScalarNode):
            if not node.style or node.start_mark is None or node.end_mark is None:
                continue
            last = node.end_mark.line
            # Block scalars end on the first line past their body.
            if node.style in "|>":
                last -= 1
            lines.update(range(node.start_mark.line + 1, last + 1))
        elif isinstance(node, MappingNode):
            for key_node, value_node in node.value:
                stack.extend((key_node, value_node))
        elif isinstance(node, SequenceNode):
            stack.extend(node.value)
    return frozenset(lines)


def short_tag(tag: str | None) -> str:
    """Shorten a core-schema tag, e.g. ``tag:yaml.org,2002:str`` to ``!!str``."""
    if not tag:
        return ""
    if tag.startswith(_TAG_PREFIX):
        return "!!" + tag[len(_TAG_PREFIX) :]
    return tag


def _describe(node: yaml.Node) -> str:
    kind = type(node).__name__
    if node.start_mark is None:
        return kind
    return f"{kind} at line {node.start_mark.line + 1}"
