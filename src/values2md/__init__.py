"""values2md: document annotated YAML values as Markdown."""

from values2md.exceptions import (
    MarkerNotFoundError,
    ParseError,
    SerializationError,
    UnhandledNodeError,
    UnknownTemplateError,
    Values2mdError,
)
from values2md.generation import TEMPLATES, generate_docs
from values2md.output_formatter import format_as_list, format_as_tables, generate_toc
from values2md.schemas import DocNode
from values2md.splice import splice_generated, update_reference_file
from values2md.values_parser import parse_values

__all__ = [
    "DocNode",
    "MarkerNotFoundError",
    "ParseError",
    "SerializationError",
    "TEMPLATES",
    "UnhandledNodeError",
    "UnknownTemplateError",
    "Values2mdError",
    "format_as_list",
    "format_as_tables",
    "generate_docs",
    "generate_toc",
    "parse_values",
    "splice_generated",
    "update_reference_file",
]
