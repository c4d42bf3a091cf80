"""Tests for the generation pipeline."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from values2md.exceptions import ParseError, UnknownTemplateError
from values2md.generation import TEMPLATES, generate_docs
from values2md.output_formatter import format_as_list, format_as_tables
from values2md.values_parser import parse_values


class TestGenerateDocs:
    """Tests for generate_docs function."""

    def test_defaults_to_table_template(self, sample_values: str) -> None:
        """Without a template name the table formatter is used."""
        assert generate_docs(sample_values) == format_as_tables(parse_values(sample_values))

    def test_list_template(self, sample_values: str) -> None:
        """The list template dispatches to the list formatter."""
        assert generate_docs(sample_values, "list") == format_as_list(parse_values(sample_values))

    def test_unknown_template_fails_before_parsing(self) -> None:
        """Unknown templates are rejected without touching the document."""
        with patch("values2md.generation.parse_values") as mock_parse:
            with pytest.raises(UnknownTemplateError, match="unknown template name: 'html'"):
                generate_docs("a: [unterminated", "html")

            mock_parse.assert_not_called()

    def test_parse_errors_propagate(self) -> None:
        """Invalid documents abort generation."""
        with pytest.raises(ParseError):
            generate_docs("- not\n- a mapping\n")

    def test_supported_templates(self) -> None:
        """Exactly the table and list templates are offered."""
        assert sorted(TEMPLATES) == ["list", "table"]
