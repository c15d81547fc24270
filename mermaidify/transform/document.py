"""DocumentTransformer — applies the diagram rewrite to rendered documents."""

from __future__ import annotations

import logging

from mermaidify.config.models import MermaidifyConfig
from mermaidify.transform.models import RenderedDocument
from mermaidify.transform.pipeline import TransformPipeline
from mermaidify.transform.rewriter import MermaidRewriter

logger = logging.getLogger(__name__)


def is_html_output(output_ext: str, config: MermaidifyConfig) -> bool:
    ext = output_ext.lower()
    return any(ext == allowed.lower() for allowed in config.hooks.output_exts)


class DocumentTransformer:
    """Gates on output format and runs the transform pipeline.

    Non-HTML documents are returned untouched and are never parsed.
    """

    def __init__(
        self,
        config: MermaidifyConfig | None = None,
        pipeline: TransformPipeline | None = None,
    ) -> None:
        self.config = config or MermaidifyConfig()
        self.pipeline = pipeline or TransformPipeline([MermaidRewriter(self.config.diagram)])

    def transform_output(self, output_ext: str, content: str) -> str:
        if not is_html_output(output_ext, self.config):
            return content
        return self.pipeline.apply(content)

    def transform(self, document: RenderedDocument) -> RenderedDocument:
        output = self.transform_output(document.output_ext, document.output)
        if output != document.output:
            logger.debug("Rewrote diagram blocks in %s", document.path or document.owner)
            document.output = output
        return document


def transform_output(output_ext: str, content: str, config: MermaidifyConfig | None = None) -> str:
    """Pure ``(format, content) -> content`` entry point."""
    return DocumentTransformer(config).transform_output(output_ext, content)
