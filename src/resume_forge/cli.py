"""CLI interface using typer + rich."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from resume_forge.config import load_config
from resume_forge.errors import BuildError, ErrorKind
from resume_forge.events import BuildEvent
from resume_forge.options import BuildOptions
from resume_forge.pipeline.orchestrator import BuildOrchestrator, BuildResult
from resume_forge.templates.loader import THEMES_DIR, list_themes, load_theme

app = typer.Typer(
    name="resume-forge",
    help="Build themed resumes from FRESH or JSON Resume sources",
    no_args_is_help=True,
)
console = Console()

TO_KEYWORD = "TO"


def split_paths(paths: list[str]) -> tuple[list[str], list[str]]:
    """Split ``a.json b.json TO out/resume.all`` into sources and destinations."""
    for i, p in enumerate(paths):
        if p.upper() == TO_KEYWORD:
            return paths[:i], paths[i + 1:]
    return list(paths), []


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_options_file(path: Path | None) -> dict[str, Any]:
    if path is None:
        return {}
    if not path.exists():
        console.print(f"[red]Options file not found: {path}[/red]")
        raise typer.Exit(1)
    # YAML is a superset of JSON, so this reads both
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        console.print(f"[red]Options file must contain a mapping: {path}[/red]")
        raise typer.Exit(1)
    return data


def _print_error(error: BuildError) -> None:
    color = "red" if error.fatal else "yellow"
    console.print(f"[{color}]{'Error' if error.fatal else 'Warning'} ({error.kind.value}): {escape(str(error))}[/{color}]")
    if error.kind is ErrorKind.INVALID_OUTPUT_FORMAT and error.data:
        for invalid in error.data:
            console.print(f"  - {escape(invalid.file)} [dim](format {invalid.format!r})[/dim]")


def _on_event(event: BuildEvent, payload: dict[str, Any]) -> None:
    if event is BuildEvent.BEFORE_THEME:
        console.print(f"[dim]Applying theme[/dim] [bold]{payload['theme']}[/bold]")
    elif event is BuildEvent.BEFORE_MERGE:
        names = " + ".join(Path(p).name for p in payload["f"])
        console.print(f"[dim]Merging[/dim] {names}")
    elif event is BuildEvent.BEFORE_INLINE_CONVERT:
        console.print(f"[dim]Converting source to[/dim] {payload['fmt']}")
    elif event is BuildEvent.AFTER_GENERATE:
        mark = "[red]✗[/red]" if payload.get("error") else "[green]✓[/green]"
        console.print(f"  {mark} {payload['fmt'].upper():<5} {escape(payload['file'])}")


def _print_summary(result: BuildResult) -> None:
    table = Table(title="Build targets")
    table.add_column("Format")
    table.add_column("File")
    table.add_column("Status")
    for target in result.targets:
        if target.result is None:
            status = "[dim]skipped[/dim]"
        elif target.result.ok:
            status = "[green]ok[/green]" if target.result.value else "[dim]skipped[/dim]"
        else:
            status = f"[red]{target.result.error.kind.value}[/red]"
        table.add_row(target.format_name, escape(str(target.file)), status)
    console.print(table)


def _print_tips(result: BuildResult) -> None:
    tips = []
    kinds = {t.result.error.kind for t in result.failures}
    if ErrorKind.PDF_GENERATION in kinds:
        tips.append("PDF output failed; try [bold]--pdf fpdf[/bold] or skip it with [bold]--pdf none[/bold].")
    if any(t.fmt and t.fmt.freebie for t in result.targets):
        tips.append("JSON, YAML and PNG outputs are generated for every theme, whether it declares them or not.")
    if len(result.targets) > 1:
        tips.append("Name specific outputs with TO, e.g. [bold]resume-forge build resume.json TO out/resume.pdf[/bold].")
    for tip in tips:
        console.print(f"[dim]Tip: {tip}[/dim]")


@app.command()
def build(
    paths: list[str] = typer.Argument(help="Source resume file(s), optionally followed by TO and output file(s)"),
    theme: str = typer.Option(None, "--theme", "-t", help="Theme name or path to a theme folder"),
    pdf: str = typer.Option(None, "--pdf", "-p", help="PDF engine: weasyprint, fpdf or none"),
    css: str = typer.Option(None, "--css", help="Stylesheet handling for HTML output: embed or link"),
    prettify: bool = typer.Option(None, "--prettify/--no-prettify", help="Pretty-print HTML output"),
    wrap: int = typer.Option(None, "--wrap", "-w", help="Line width for plain-text output"),
    sort: bool = typer.Option(None, "--sort/--no-sort", help="Sort dated history newest first"),
    no_tips: bool = typer.Option(False, "--no-tips", help="Don't print tips"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Verbose logging"),
    options_file: Path = typer.Option(None, "--options", "-o", help="JSON or YAML file with extra options (e.g. sectionTitles)"),
    config_path: Path = typer.Option(None, "--config", help="Path to resume-forge.yaml"),
) -> None:
    """Generate resumes in the formats the theme supports.

    Examples:
      resume-forge build resume.json
      resume-forge build resume.json TO out/resume.html out/resume.pdf
      resume-forge build base.json overrides.json TO out/resume.all -t modern
    """
    _configure_logging(debug)
    try:
        config = load_config(config_path)
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(1)
    sources, destinations = split_paths(paths)

    defaults = config.build
    raw: dict[str, Any] = {
        "theme": defaults.theme,
        "pdf": defaults.pdf,
        "css": defaults.css,
        "wrap": defaults.wrap,
        "prettify": defaults.prettify,
        "sort": defaults.sort,
        "tips": defaults.tips,
    }
    raw.update(_load_options_file(options_file))
    cli_values = {
        "theme": theme, "pdf": pdf, "css": css, "wrap": wrap,
        "prettify": prettify, "sort": sort,
    }
    raw.update({k: v for k, v in cli_values.items() if v is not None})
    raw.update({"noTips": no_tips, "debug": debug, "errHandler": _print_error})

    try:
        options = BuildOptions.from_mapping(raw)
    except ValueError as e:
        console.print(f"[red]Invalid option: {e}[/red]")
        raise typer.Exit(1)

    orchestrator = BuildOrchestrator(
        _on_event,
        default_destination=config.output.default_destination,
    )
    result = orchestrator.run(sources, destinations, options)

    if result.error is not None:
        raise typer.Exit(1)

    _print_summary(result)
    console.print(f"[dim]Done in {result.elapsed_seconds:.1f}s[/dim]")
    if options.show_tips:
        _print_tips(result)
    if result.failures:
        raise typer.Exit(2)


@app.command()
def themes() -> None:
    """List the packaged themes and their output formats."""
    names = list_themes()
    if not names:
        console.print("[yellow]No themes installed.[/yellow]")
        return

    for name in names:
        try:
            loaded = load_theme(THEMES_DIR / name, name)
        except BuildError as e:
            console.print(f"  [bold]{name}[/bold]: [red]{escape(str(e))}[/red]")
            continue
        formats = ", ".join(f.value for f in loaded.formats)
        console.print(f"  [bold]{name}[/bold]: {loaded.title} \\[{formats}]")


if __name__ == "__main__":
    app()
