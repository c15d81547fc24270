"""Diagram transform: rewrites fenced Mermaid blocks in rendered HTML."""

from .document import DocumentTransformer, transform_output
from .matcher import find_diagram_blocks, has_marker, is_diagram_block
from .models import DiagramBlock, DiagramContainer, RenderedDocument, TransformResult
from .pipeline import Transform, TransformPipeline
from .rewriter import MermaidRewriter

__all__ = [
    "DiagramBlock",
    "DiagramContainer",
    "DocumentTransformer",
    "MermaidRewriter",
    "RenderedDocument",
    "Transform",
    "TransformPipeline",
    "TransformResult",
    "find_diagram_blocks",
    "has_marker",
    "is_diagram_block",
    "transform_output",
]
