"""Format a DocNode tree into Markdown reference documentation."""

from __future__ import annotations

import logging

from values2md.config import TOC_PREFIX, TOC_SUFFIX
from values2md.schemas import DocNode

logger = logging.getLogger(__name__)

_TOP_LEVEL_HEADING = 3
_MAX_HEADING = 6


def generate_toc(root: DocNode) -> str:
    """Link every top-level key, in source order."""
    toc = TOC_PREFIX
    for child in root.children:
        toc += f"- [`{child.key}`](#{child.toc_anchor})\n"
    return toc + TOC_SUFFIX


def format_as_tables(root: DocNode) -> str:
    """Render one section with a Key/Default/Description table per container."""
    blocks = [generate_toc(root)]
    for child in root.children:
        blocks.extend(_table_sections(child, path=child.key, level=_TOP_LEVEL_HEADING))
    logger.debug("Rendered %d table blocks", len(blocks))
    return "\n\n".join(block for block in blocks if block) + "\n"


def format_as_list(root: DocNode) -> str:
    """Render each top-level key as a heading followed by nested bullets."""
    blocks = [generate_toc(root)]
    for child in root.children:
        blocks.extend(_list_section(child))
    logger.debug("Rendered %d list blocks", len(blocks))
    return "\n\n".join(block for block in blocks if block) + "\n"


def _heading(node: DocNode, *, path: str, level: int) -> str:
    if node.parent_was_map:
        anchor = node.toc_anchor
        title = f"`{node.key}`"
    else:
        anchor = node.html_anchor
        title = f"`{path}`"
    return f"{'#' * min(level, _MAX_HEADING)} {title} {_anchor_tag(anchor)}"


def _anchor_tag(anchor: str) -> str:
    return f'<a id="{anchor}"></a>'


def _summary(node: DocNode) -> str:
    """Kind and default as shown next to a key, e.g. ``boolean: true``."""
    kind = node.formatted_kind
    default = node.formatted_default
    if default is None:
        return kind
    if not kind:
        return default
    return f"{kind}: {default}"


def _describes_itself(node: DocNode) -> bool:
    """Top-level leaves carry their own kind and default; empty mappings do not."""
    return not node.children and node.kind_tag != "!!map"


def _table_sections(node: DocNode, *, path: str, level: int) -> list[str]:
    blocks = [_heading(node, path=path, level=level)]
    if node.description:
        blocks.append(node.description)

    if _describes_itself(node):
        blocks.append(_table([_table_row(node)]))
    if not node.children:
        return blocks

    blocks.append(_table([_table_row(child) for child in node.children]))
    for child in node.children:
        if child.children:
            blocks.extend(_table_sections(child, path=f"{path}.{child.key}", level=level + 1))
    return blocks


def _table(rows: list[str]) -> str:
    lines = [
        "| Key | Default | Description |",
        "| --- | --- | --- |",
    ]
    lines.extend(rows)
    return "\n".join(lines)


def _table_row(node: DocNode) -> str:
    key = f"`{node.key}`"
    if node.children:
        key = f"[{key}](#{node.html_anchor})"
    summary = _summary(node)
    cells = [key, f"`{summary}`" if summary else "", node.description]
    return "| " + " | ".join(_escape_cell(cell) for cell in cells) + " |"


def _escape_cell(text: str) -> str:
    return text.replace("|", "\\|").replace("\n", "<br>")


def _list_section(node: DocNode) -> list[str]:
    blocks = [_heading(node, path=node.key, level=_TOP_LEVEL_HEADING)]
    if _describes_itself(node):
        summary = _summary(node)
        if summary:
            blocks.append(f"`{summary}`")
    if node.description:
        blocks.append(node.description)
    if node.children:
        base_column = node.children[0].column
        lines: list[str] = []
        for child in node.children:
            lines.extend(_list_items(child, base_column=base_column, indent=0))
        blocks.append("\n\n".join(lines))
    return blocks


def _list_items(node: DocNode, *, base_column: int, indent: int) -> list[str]:
    prefix = " " * indent
    item = f"{prefix}- `{node.key}` {_anchor_tag(node.html_anchor)}"
    summary = _summary(node)
    if summary:
        item += f" (`{summary}`)"
    if node.description:
        # Continuation lines stay inside the bullet.
        item += " - " + node.description.replace("\n", "\n" + prefix + "  ")

    items = [item]
    for child in node.children:
        child_indent = max(child.column - base_column, indent + 2)
        items.extend(_list_items(child, base_column=base_column, indent=child_indent))
    return items
