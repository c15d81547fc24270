"""Mermaidify - rewrites fenced Mermaid code blocks in generated HTML into diagram containers."""

from mermaidify.config import MermaidifyConfig, load_config
from mermaidify.hooks import HookRegistry, hooks, install
from mermaidify.site import SiteProcessor
from mermaidify.transform import DocumentTransformer, MermaidRewriter, RenderedDocument, transform_output

__version__ = "0.1.0"

__all__ = [
    "DocumentTransformer",
    "HookRegistry",
    "MermaidRewriter",
    "MermaidifyConfig",
    "RenderedDocument",
    "SiteProcessor",
    "hooks",
    "install",
    "load_config",
    "transform_output",
]
