"""Structural predicates for locating diagram blocks in a parsed fragment.

The tree is BeautifulSoup's: element nodes are ``Tag``, text nodes are
``NavigableString``. Fragments are parsed with ``multi_valued_attributes=None``
so ``class`` is always the raw attribute string.
"""

from __future__ import annotations

from typing import Literal

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from mermaidify.config.models import DiagramConfig
from mermaidify.transform.models import DiagramBlock

MatchMode = Literal["token", "exact"]


def is_element(node: PageElement | None, name: str) -> bool:
    return isinstance(node, Tag) and node.name == name


def class_tokens(tag: Tag) -> list[str]:
    raw = tag.get("class")
    if raw is None:
        return []
    if isinstance(raw, list):
        return list(raw)
    return raw.split()


def has_marker(tag: Tag, marker: str, mode: MatchMode = "token") -> bool:
    """Check the tag's class against ``marker``.

    ``token`` matches when the class list contains the marker (what the CSS
    selector ``code.language-mermaid`` does); ``exact`` requires the whole
    attribute to equal it. Both are case-sensitive.
    """
    if mode == "exact":
        raw = tag.get("class")
        if isinstance(raw, list):
            raw = " ".join(raw)
        return raw == marker
    return marker in class_tokens(tag)


def is_diagram_block(node: PageElement, config: DiagramConfig) -> bool:
    """A marked ``<code>`` whose immediate parent is a ``<pre>``."""
    if not is_element(node, "code"):
        return False
    if not has_marker(node, config.code_class, config.match):
        return False
    return is_element(node.parent, "pre")


def find_diagram_blocks(tree: BeautifulSoup, config: DiagramConfig) -> list[DiagramBlock]:
    """Return every diagram block in document order.

    A block nested inside another block's ``<pre>`` is dropped; it goes away
    when the outer ``<pre>`` is replaced.
    """
    blocks: list[DiagramBlock] = []
    claimed: set[int] = set()
    for code in tree.find_all("code"):
        if not is_diagram_block(code, config):
            continue
        if any(id(parent) in claimed for parent in code.parents):
            continue
        claimed.add(id(code.parent))
        blocks.append(DiagramBlock(code=code, pre=code.parent, source=code.get_text()))
    return blocks
