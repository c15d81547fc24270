"""Rewrites fenced Mermaid code blocks into client-side diagram containers."""

from __future__ import annotations

import logging
import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from bs4.dammit import EntitySubstitution
from bs4.element import NavigableString
from bs4.formatter import HTMLFormatter

from mermaidify.config.models import DiagramConfig
from mermaidify.transform.matcher import find_diagram_blocks
from mermaidify.transform.models import DiagramBlock, DiagramContainer, TransformResult
from mermaidify.transform.pipeline import Transform

logger = logging.getLogger(__name__)


class _ContainerFormatter(HTMLFormatter):
    """Minimal formatter that leaves `>` unescaped inside diagram containers.

    Mermaid arrows (`-->`, `->>`) stay literal in the output; `&` and `<`
    are still escaped so the source can never turn into markup.
    """

    def __init__(self, containers: list[DiagramContainer]):
        super().__init__(entity_substitution=EntitySubstitution.substitute_xml)
        self._container_ids = {id(c.element) for c in containers}

    def substitute(self, ns):
        parent = getattr(ns, "parent", None)
        if isinstance(ns, NavigableString) and id(parent) in self._container_ids:
            return ns.replace("&", "&amp;").replace("<", "&lt;")
        return super().substitute(ns)


def parse_fragment(content: str) -> BeautifulSoup:
    """Parse an HTML fragment without adding document wrappers."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        return BeautifulSoup(content, "html.parser", multi_valued_attributes=None)


class MermaidRewriter(Transform):
    """Replaces every ``<pre><code class="language-mermaid">`` with a container."""

    def __init__(self, config: DiagramConfig | None = None) -> None:
        self.config = config or DiagramConfig()

    def apply(self, content: str) -> str:
        return self.rewrite(content).content

    def rewrite(self, content: str) -> TransformResult:
        """Rewrite all diagram blocks. Never raises; falls back to the input."""
        if self.config.code_class not in content:
            return TransformResult(content=content)

        try:
            tree = parse_fragment(content)
            blocks = find_diagram_blocks(tree, self.config)
            if not blocks:
                return TransformResult(content=content)

            containers = [self._replace(tree, block) for block in blocks]
            output = tree.decode(formatter=_ContainerFormatter(containers))
        except Exception:
            logger.warning("Could not rewrite diagram blocks, leaving output unchanged", exc_info=True)
            return TransformResult(content=content, fallback=True)

        logger.debug("Replaced %d diagram block(s)", len(containers))
        return TransformResult(content=output, replaced=len(containers))

    def _replace(self, tree: BeautifulSoup, block: DiagramBlock) -> DiagramContainer:
        element = tree.new_tag(
            self.config.container_tag,
            attrs={"class": self.config.container_class},
        )
        element.string = block.source
        block.pre.replace_with(element)
        return DiagramContainer(element=element, block=block)
