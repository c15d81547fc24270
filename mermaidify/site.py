"""SiteProcessor — rewrites diagram blocks across a generated site directory."""

import fnmatch
import hashlib
import logging
import os
import signal
import time
from pathlib import Path

from mermaidify.config import MermaidifyConfig
from mermaidify.models import SiteError, SiteReport
from mermaidify.transform.rewriter import MermaidRewriter

logger = logging.getLogger(__name__)


class SiteProcessor:
    def __init__(self, site_dir: str, config: MermaidifyConfig, rewriter: MermaidRewriter | None = None):
        """
        Args:
            site_dir: Generator output directory (e.g. ``_site`` or ``public``)
            config: MermaidifyConfig with site and diagram settings
            rewriter: MermaidRewriter to use; built from config when omitted
        """
        self.site_dir = Path(site_dir)
        self.config = config
        self.rewriter = rewriter or MermaidRewriter(config.diagram)
        self._content_hashes: dict[str, str] = {}

    # -- Public API ----------------------------------------------------------

    def iter_files(self) -> list[Path]:
        """HTML files selected by the include/exclude globs, sorted."""
        found: set[Path] = set()
        for pattern in self.config.site.include:
            for path in self.site_dir.glob(pattern):
                rel = path.relative_to(self.site_dir).as_posix()
                if path.is_file() and not self._is_excluded(rel):
                    found.add(path)
        return sorted(found)

    def process(self, dry_run: bool = False) -> SiteReport:
        """One-shot pass: transform every selected file, writing back changes."""
        start = time.monotonic()
        report = SiteReport()

        for path in self.iter_files():
            rel = path.relative_to(self.site_dir).as_posix()
            report.scanned += 1
            try:
                if not path.resolve().is_relative_to(self.site_dir.resolve()):
                    report.errors.append(SiteError(file=rel, error="Path traversal detected"))
                    continue

                content = path.read_text(encoding=self.config.site.encoding)
                content_hash = hashlib.sha256(content.encode()).hexdigest()
                if self._content_hashes.get(rel) == content_hash:
                    report.skipped += 1
                    continue

                result = self.rewriter.rewrite(content)
                if result.fallback:
                    report.fallbacks += 1
                if result.changed:
                    report.rewritten += 1
                    report.diagrams += result.replaced
                    if not dry_run:
                        path.write_text(result.content, encoding=self.config.site.encoding)
                    logger.info("Rewrote %d diagram(s) in %s", result.replaced, rel)

                if not dry_run:
                    self._content_hashes[rel] = hashlib.sha256(result.content.encode()).hexdigest()
            except (OSError, UnicodeError) as exc:
                report.errors.append(SiteError(file=rel, error=str(exc)))
                logger.error("Error processing %s: %s", rel, exc)

        report.duration = time.monotonic() - start
        return report

    def process_file(self, path: Path) -> int:
        """Transform a single file in place. Returns the number of diagrams replaced."""
        try:
            if not path.resolve().is_relative_to(self.site_dir.resolve()):
                logger.error("Path traversal detected: %s", path)
                return 0
            content = path.read_text(encoding=self.config.site.encoding)
            result = self.rewriter.rewrite(content)
            if result.changed:
                path.write_text(result.content, encoding=self.config.site.encoding)
                logger.info("Rewrote %d diagram(s) in %s", result.replaced, path)
            rel = Path(os.path.relpath(path, self.site_dir)).as_posix()
            self._content_hashes[rel] = hashlib.sha256(result.content.encode()).hexdigest()
            return result.replaced
        except (OSError, UnicodeError) as exc:
            logger.error("Error processing %s: %s", path, exc)
            return 0

    def watch(self) -> None:
        """File watcher mode: re-process HTML files as the generator writes them."""
        from watchdog.events import PatternMatchingEventHandler
        from watchdog.observers import Observer

        processor = self
        patterns = [Path(p).name for p in self.config.site.include]

        class HtmlHandler(PatternMatchingEventHandler):
            def __init__(self):
                super().__init__(patterns=patterns, ignore_directories=True)
                self._last_event: dict[str, float] = {}
                self._debounce = 0.5

            def on_modified(self, event):
                self._handle(event)

            def on_created(self, event):
                self._handle(event)

            def _handle(self, event):
                now = time.time()
                last = self._last_event.get(event.src_path, 0)
                if now - last < self._debounce:
                    return
                self._last_event[event.src_path] = now
                rel = os.path.relpath(event.src_path, processor.site_dir)
                if processor._is_excluded(Path(rel).as_posix()):
                    return
                processor.process_file(Path(event.src_path))

        observer = Observer()
        observer.schedule(HtmlHandler(), str(self.site_dir), recursive=True)
        observer.start()
        logger.info("Watching %s for changes... (Ctrl+C to stop)", self.site_dir)

        stop = False

        def _signal_handler(sig, frame):
            nonlocal stop
            stop = True

        signal.signal(signal.SIGINT, _signal_handler)
        signal.signal(signal.SIGTERM, _signal_handler)

        try:
            while not stop:
                time.sleep(1)
        finally:
            observer.stop()
            observer.join()
            logger.info("Watcher stopped.")

    # -- Internals -----------------------------------------------------------

    def _is_excluded(self, rel: str) -> bool:
        return any(fnmatch.fnmatch(rel, pattern) for pattern in self.config.site.exclude)
