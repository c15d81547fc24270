"""Generator hook registration.

Static-site generators expose post-render events keyed by document owner
(``posts``, ``pages``). ``HookRegistry`` is that event bus; ``install`` wires
the DocumentTransformer into it.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Iterable

from mermaidify.config.models import MermaidifyConfig
from mermaidify.transform.document import DocumentTransformer
from mermaidify.transform.models import RenderedDocument

logger = logging.getLogger(__name__)

HookCallback = Callable[[RenderedDocument], None]


class HookRegistry:
    def __init__(self) -> None:
        self._hooks: dict[tuple[str, str], list[HookCallback]] = defaultdict(list)

    def register(self, owners: str | Iterable[str], event: str) -> Callable[[HookCallback], HookCallback]:
        """Decorator registering a callback for ``event`` on each owner."""
        if isinstance(owners, str):
            owners = [owners]
        owners = list(owners)

        def decorator(fn: HookCallback) -> HookCallback:
            for owner in owners:
                self._hooks[(owner, event)].append(fn)
            return fn

        return decorator

    def callbacks(self, owner: str, event: str) -> list[HookCallback]:
        return list(self._hooks.get((owner, event), []))

    def trigger(self, owner: str, event: str, document: RenderedDocument) -> RenderedDocument:
        """Run callbacks in registration order. A failing callback never stops the build."""
        for fn in self.callbacks(owner, event):
            try:
                fn(document)
            except Exception:
                logger.error(
                    "Hook %s failed for %s:%s on %s",
                    getattr(fn, "__name__", fn), owner, event, document.path or owner,
                    exc_info=True,
                )
        return document

    def clear(self) -> None:
        self._hooks.clear()


def install(registry: HookRegistry, config: MermaidifyConfig | None = None) -> DocumentTransformer:
    """Register the diagram transform for the configured owners and event."""
    config = config or MermaidifyConfig()
    transformer = DocumentTransformer(config)

    @registry.register(config.hooks.owners, config.hooks.event)
    def mermaid_post_render(document: RenderedDocument) -> None:
        transformer.transform(document)

    return transformer


hooks = HookRegistry()
