"""MkDocs hook module.

Add to ``mkdocs.yml``::

    hooks:
      - mermaidify/hooks/mkdocs.py

or reference the installed module path. Reads ``mermaidify.yaml`` the same
way the CLI does.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from mermaidify.config import load_config
from mermaidify.transform.document import DocumentTransformer
from mermaidify.transform.models import RenderedDocument


@lru_cache(maxsize=1)
def _transformer() -> DocumentTransformer:
    return DocumentTransformer(load_config())


def _output_ext(page: Any) -> str:
    dest = getattr(getattr(page, "file", None), "dest_uri", None)
    if not dest:
        return ".html"
    return Path(dest).suffix or ".html"


def on_post_page(output: str, page: Any = None, config: Any = None, **kwargs: object) -> str:
    """Rewrite Mermaid code blocks in the fully rendered page."""
    document = RenderedDocument(
        output_ext=_output_ext(page),
        output=output,
        path=getattr(getattr(page, "file", None), "src_uri", None),
    )
    return _transformer().transform(document).output
