"""Models for the diagram transform."""

from __future__ import annotations

from dataclasses import dataclass

from bs4.element import Tag
from pydantic import BaseModel


class RenderedDocument(BaseModel):
    """One rendered output file, as handed over by the generator."""

    output_ext: str
    output: str
    owner: str = "pages"
    path: str | None = None


class TransformResult(BaseModel):
    content: str
    replaced: int = 0
    fallback: bool = False  # parse failure, content is the untouched input

    @property
    def changed(self) -> bool:
        return self.replaced > 0


@dataclass(frozen=True)
class DiagramBlock:
    """A `<pre><code class="language-mermaid">` match found in the tree."""

    code: Tag
    pre: Tag
    source: str


@dataclass(frozen=True)
class DiagramContainer:
    """The element that takes the place of a DiagramBlock's `<pre>`."""

    element: Tag
    block: DiagramBlock
