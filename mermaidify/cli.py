"""CLI entry point for Mermaidify."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from mermaidify.config import MermaidifyConfig, load_config
from mermaidify.config.loader import DEFAULT_CONFIG_TEMPLATE
from mermaidify.log import configure_logging
from mermaidify.site import SiteProcessor
from mermaidify.transform import DocumentTransformer, RenderedDocument

app = typer.Typer(
    name="mermaidify",
    help="Rewrite fenced Mermaid code blocks in generated HTML into diagram containers.",
)

config_app = typer.Typer(help="Manage Mermaidify configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: MermaidifyConfig | None = None


def _get_config() -> MermaidifyConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to mermaidify.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    configure_logging(_config)


def _require_site_dir(site_dir: str) -> Path:
    path = Path(site_dir)
    if not path.is_dir():
        rprint(f"[red]Error:[/red] {site_dir} is not a directory")
        raise typer.Exit(1)
    return path


@app.command()
def process(
    site_dir: str = typer.Argument(..., help="Generated site directory (e.g. _site)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report without writing files"),
) -> None:
    """Rewrite Mermaid blocks in every HTML file of a generated site."""
    cfg = _get_config()
    _require_site_dir(site_dir)

    processor = SiteProcessor(site_dir, cfg)
    report = processor.process(dry_run=dry_run)

    title = "Mermaidify (dry run)" if dry_run else "Mermaidify"
    table = Table(title=title)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Scanned", str(report.scanned))
    table.add_row("Rewritten", str(report.rewritten))
    table.add_row("Diagrams", str(report.diagrams))
    table.add_row("Skipped", str(report.skipped))
    table.add_row("Unparsed", str(report.fallbacks))
    table.add_row("Errors", str(len(report.errors)))
    table.add_row("Duration", f"{report.duration:.2f}s")
    rprint(table)

    for err in report.errors:
        rprint(f"  [red]error:[/red] {escape(err.file)}: {escape(err.error)}")

    if report.errors:
        raise typer.Exit(1)


@app.command()
def render(
    file: str = typer.Argument(..., help="Rendered HTML file"),
    output: str | None = typer.Option(None, "--output", "-o", help="Write result to file"),
) -> None:
    """Rewrite Mermaid blocks in a single file."""
    cfg = _get_config()
    path = Path(file)
    try:
        content = path.read_text(encoding=cfg.site.encoding)
    except (OSError, UnicodeError) as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    document = RenderedDocument(output_ext=path.suffix, output=content, path=str(path))
    result = DocumentTransformer(cfg).transform(document)

    if output:
        Path(output).write_text(result.output, encoding=cfg.site.encoding)
        rprint(f"[green]Written:[/green] {output}")
    else:
        typer.echo(result.output, nl=False)


@app.command()
def watch(
    site_dir: str = typer.Argument(..., help="Generated site directory to watch"),
) -> None:
    """Watch a site directory and rewrite HTML files as they are generated."""
    cfg = _get_config()
    _require_site_dir(site_dir)

    processor = SiteProcessor(site_dir, cfg)
    processor.process()
    processor.watch()


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default mermaidify.yaml in current directory."""
    target = Path("mermaidify.yaml")
    if target.exists() and not force:
        rprint("[yellow]mermaidify.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
