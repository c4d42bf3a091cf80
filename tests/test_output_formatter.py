"""Tests for the Markdown formatters."""

from __future__ import annotations

from typing import Iterator

import pytest

from values2md.output_formatter import format_as_list, format_as_tables, generate_toc
from values2md.schemas import DocNode
from values2md.values_parser import parse_values

_TOC_HEAD = "## Top-Level Stanzas\n\nUse these links to navigate to a particular top-level stanza.\n\n"


def _walk(node: DocNode) -> Iterator[DocNode]:
    for child in node.children:
        yield child
        yield from _walk(child)


class TestGenerateToc:
    """Tests for generate_toc function."""

    def test_links_top_level_keys_in_order(self) -> None:
        """Each root child is linked by its lowercased key, in source order."""
        root = parse_values("zeta: 1\nAlpha:\n  nested: true\nmid: []\n")

        assert generate_toc(root) == (
            _TOC_HEAD + "- [`zeta`](#zeta)\n- [`Alpha`](#alpha)\n- [`mid`](#mid)\n" + "\n## All Values"
        )

    def test_dotted_key_links_to_lowercased_key(self) -> None:
        """Link targets are the lowercased key, punctuation included."""
        root = parse_values("Foo.Bar: 1\n")

        assert "- [`Foo.Bar`](#foo.bar)\n" in generate_toc(root)
        assert '### `Foo.Bar` <a id="foo.bar"></a>' in format_as_tables(root)

    def test_does_not_recurse(self) -> None:
        """Nested keys are not listed."""
        toc = generate_toc(parse_values("outer:\n  inner: 1\n"))

        assert "inner" not in toc

    def test_empty_root(self) -> None:
        """A root without children still yields prefix and suffix."""
        assert generate_toc(DocNode(key="")) == _TOC_HEAD + "\n## All Values"


class TestFormatAsTables:
    """Tests for format_as_tables function."""

    @pytest.fixture
    def output(self, sample_values: str) -> str:
        return format_as_tables(parse_values(sample_values))

    def test_starts_with_toc(self, output: str) -> None:
        """The table of contents comes first."""
        assert output.startswith(_TOC_HEAD + "- [`global`](#global)\n")

    def test_top_level_section(self, output: str) -> None:
        """Top-level keys get a heading anchored for the TOC, then their description."""
        assert '### `global` <a id="global"></a>\n\nHolds values that affect multiple components of the chart.' in output

    def test_leaf_rows(self, output: str) -> None:
        """Leaves show kind, default and description."""
        assert "| `enabled` | `boolean: true` | The main enabled/disabled setting. |" in output
        assert "| `name` | `null` | The prefix used for all resources. |" in output
        assert "| `ports` | `array: [8500, 8501]` | Ports exposed by every agent. |" in output
        assert "| `serverAdditionalDNSSANs` | `array: []` |  |" in output

    def test_container_rows_link_to_nested_sections(self, output: str) -> None:
        """Container rows link to their own section, which follows the parent."""
        assert "| [`tls`](#v-global-tls) | `map` |  |" in output
        assert '#### `global.tls` <a id="v-global-tls"></a>' in output
        assert output.index("| [`tls`]") < output.index("#### `global.tls`") < output.index("### `server`")

    def test_collapsed_key(self, output: str) -> None:
        """@recurse: false keys show the annotated type and no children."""
        assert "| `extraVolumes` | `array<map>` | Extra volumes mounted into the server pods. |" in output
        assert "consul-certs" not in output

    def test_sequence_of_mappings_section(self, output: str) -> None:
        """Mappings inside sequences are documented in a nested section."""
        assert "| [`gateways`](#v-server-gateways) | `array` |  |" in output
        assert "| `name` | `string: ingress-gateway` |  |" in output
        assert "| `port` | `integer: 8080` |  |" in output

    def test_top_level_leaf_describes_itself(self, output: str) -> None:
        """A top-level scalar gets a one-row table."""
        assert '### `fullnameOverride` <a id="fullnameoverride"></a>' in output
        assert '| `fullnameOverride` | `string: ""` |  |' in output

    def test_empty_mapping_renders_empty_section(self) -> None:
        """`c: {}` produces a heading and no table."""
        output = format_as_tables(parse_values("c: {}\nnext: 1\n"))
        section = output[output.index("### `c`") : output.index("### `next`")]

        assert section.strip() == '### `c` <a id="c"></a>'

    def test_collapsed_mapping_has_no_children(self) -> None:
        """A collapsed mapping never shows its grandchildren."""
        output = format_as_tables(
            parse_values("# Collapsed.\n# @recurse: false\nd:\n  inner:\n    deeper: 1\n")
        )

        assert "| `d` |  | Collapsed. |" in output
        assert "inner" not in output
        assert "deeper" not in output

    def test_escapes_cells(self) -> None:
        """Pipes are escaped and newlines become <br>."""
        output = format_as_tables(parse_values("outer:\n  # Use a | b.\n  # Second.\n  k: x\n"))

        assert "| `k` | `string: x` | Use a \\| b.<br>Second. |" in output

    def test_heading_depth_is_capped(self) -> None:
        """Deeply nested sections never exceed six heading markers."""
        output = format_as_tables(parse_values("a:\n  b:\n    c:\n      d:\n        e:\n          f: 1\n"))

        assert '###### `a.b.c.d.e` <a id="v-a-b-c-d-e"></a>' in output
        assert "#######" not in output

    def test_ends_with_newline(self, output: str) -> None:
        """Output is newline terminated."""
        assert output.endswith(" |\n")


class TestFormatAsList:
    """Tests for format_as_list function."""

    @pytest.fixture
    def output(self, sample_values: str) -> str:
        return format_as_list(parse_values(sample_values))

    def test_starts_with_toc(self, output: str) -> None:
        """The table of contents comes first."""
        assert output.startswith(_TOC_HEAD)

    def test_top_level_bullets(self, output: str) -> None:
        """Direct children of a top-level key are unindented bullets."""
        assert (
            '- `enabled` <a id="v-global-enabled"></a> (`boolean: true`) - The main enabled/disabled setting.'
            in output
        )

    def test_nested_bullets_are_indented(self, output: str) -> None:
        """Nesting follows the source indentation."""
        assert '\n- `tls` <a id="v-global-tls"></a> (`map`)\n' in output
        assert (
            '\n  - `enabled` <a id="v-global-tls-enabled"></a> (`boolean: false`) - Enable TLS for the cluster.\n'
            in output
        )
        assert '\n    - `name` <a id="v-server-gateways-name"></a> (`string: ingress-gateway`)\n' in output

    def test_top_level_leaf(self, output: str) -> None:
        """A top-level scalar shows its summary under its heading."""
        assert '### `fullnameOverride` <a id="fullnameoverride"></a>\n\n`string: ""`\n\nTop-level scalar.' in output

    def test_multiline_description_stays_in_bullet(self) -> None:
        """Continuation lines are indented under the bullet."""
        output = format_as_list(parse_values("outer:\n  # One.\n  # Two.\n  k: x\n"))

        assert '- `k` <a id="v-outer-k"></a> (`string: x`) - One.\n  Two.' in output

    def test_shallow_indentation_still_nests(self) -> None:
        """Children are always indented deeper than their parent."""
        output = format_as_list(parse_values("top:\n  a:\n   b: 1\n"))

        assert '\n  - `b` <a id="v-top-a-b"></a> (`integer: 1`)' in output

    def test_collapsed_mapping_has_no_children(self) -> None:
        """A collapsed mapping never shows its grandchildren."""
        output = format_as_list(parse_values("top:\n  # @recurse: false\n  d:\n    inner: 1\n"))

        assert '- `d` <a id="v-top-d"></a>' in output
        assert "inner" not in output


class TestFormatterEquivalence:
    """Both formatters document the same content."""

    def test_same_keys_defaults_and_descriptions(self, sample_values: str) -> None:
        """Every key, default and description shows up in both outputs."""
        root = parse_values(sample_values)
        tables = format_as_tables(root)
        listing = format_as_list(root)

        for node in _walk(root):
            assert f"`{node.key}`" in tables
            assert f"`{node.key}`" in listing
            if node.formatted_default is not None:
                assert node.formatted_default in tables
                assert node.formatted_default in listing
            for line in node.description.splitlines():
                assert line in tables
                assert line in listing

    @pytest.mark.parametrize("formatter", [format_as_tables, format_as_list])
    def test_deterministic(self, sample_values: str, formatter) -> None:
        """Identical input yields identical output."""
        assert formatter(parse_values(sample_values)) == formatter(parse_values(sample_values))
