"""Generation pipeline for values YAML -> Markdown."""

from __future__ import annotations

import logging
from typing import Callable

from values2md.exceptions import UnknownTemplateError
from values2md.output_formatter import format_as_list, format_as_tables
from values2md.schemas import DocNode
from values2md.values_parser import parse_values

logger = logging.getLogger(__name__)

TEMPLATES: dict[str, Callable[[DocNode], str]] = {
    "table": format_as_tables,
    "list": format_as_list,
}


def generate_docs(yaml_text: str, template: str = "table") -> str:
    """Parse a values document and render it with the named template.

    Args:
        yaml_text: The annotated values document.
        template: One of the names in ``TEMPLATES``.

    Returns:
        The generated Markdown, table of contents first.

    Raises:
        UnknownTemplateError: If ``template`` is not supported. Raised before
            the document is parsed.
        ParseError: If the document cannot be turned into a tree.
    """
    formatter = TEMPLATES.get(template)
    if formatter is None:
        raise UnknownTemplateError(f"unknown template name: {template!r}")

    root = parse_values(yaml_text)
    logger.debug("Formatting %d top-level keys with the %s template", len(root.children), template)
    return formatter(root)
