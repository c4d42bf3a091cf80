"""Render short scalar sequences as inline YAML."""

from __future__ import annotations

from typing import Sequence

import yaml
from yaml.nodes import ScalarNode, SequenceNode

from values2md.exceptions import SerializationError

_SEQ_TAG = "tag:yaml.org,2002:seq"


def to_inline_yaml(nodes: Sequence[yaml.Node]) -> str:
    """Serialize scalar nodes as a flow sequence, e.g. ``[a, b, c]``.

    Args:
        nodes: Scalar nodes as composed from the source document. Their
            quoting style is preserved.

    Returns:
        The single-line flow sequence.

    Raises:
        SerializationError: If an element is not a scalar or PyYAML refuses
            to emit the sequence.
    """
    for node in nodes:
        if not isinstance(node, ScalarNode):
            raise SerializationError(f"cannot render {type(node).__name__} inline, expected a scalar")

    sequence = SequenceNode(_SEQ_TAG, list(nodes), flow_style=True)
    try:
        rendered = yaml.serialize(sequence, Dumper=yaml.SafeDumper, width=float("inf"))
    except yaml.YAMLError as exc:
        raise SerializationError(f"failed to serialize sequence: {exc}") from exc
    return rendered.strip()
