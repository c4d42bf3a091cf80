"""Shared schemas for values2md."""

from values2md.schemas.doc_node import DocNode, normalize_anchor

__all__ = ["DocNode", "normalize_anchor"]
