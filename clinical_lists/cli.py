"""Typer CLI for building category lists from converted record markdown."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from config.settings import ListsSettings
from list_schemas import ListsResult

from .common.exceptions import ConfigurationError, ListsError
from .common.logger import get_logger
from .common.text_io import load_markdown
from .pipeline import ListsEngine
from .presentation import render_category_markdown

app = typer.Typer(help="Split converted clinical-record markdown into category lists.")
console = Console()
log = get_logger("clinical_lists.cli")

MARKDOWN_SUFFIXES = (".md", ".markdown", ".txt")


def _engine() -> ListsEngine:
    try:
        settings = ListsSettings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid LISTS_* settings:\n{exc}") from exc
    return ListsEngine(settings)


def _read(source: str) -> str:
    # A bare file name must exist; it is never parsed as markdown.
    if "\n" not in source and Path(source).suffix.lower() in MARKDOWN_SUFFIXES:
        return load_markdown(Path(source))
    return load_markdown(source)


def _prepare(source: str) -> tuple[ListsEngine, str]:
    try:
        return _engine(), _read(source)
    except ListsError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _load(source: str) -> ListsResult:
    engine, text = _prepare(source)
    return engine.run(text)


@app.command()
def parse(
    source: str = typer.Argument(..., help="Markdown file path or raw markdown text."),
    json_output: bool = typer.Option(False, "--json", help="Emit JSON output."),
    tagged_out: Path | None = typer.Option(
        None,
        "--tagged-out",
        help="Also write the tagged markdown here (for debugging).",
    ),
) -> None:
    """Parse SOURCE and list its categories."""

    result = _load(source)

    if tagged_out is not None:
        tagged_out.write_text(result.tagged_markdown, encoding="utf-8")
        log.info("Tagged markdown written to %s", tagged_out)

    if json_output:
        typer.echo(json.dumps(result.to_payload(), indent=2))
        return

    _print_summary(result)


@app.command()
def show(
    source: str = typer.Argument(..., help="Markdown file path or raw markdown text."),
    category: str = typer.Argument(..., help="Category name, exactly as headed."),
) -> None:
    """Print the rendered list for one CATEGORY."""

    result = _load(source)
    found = result.category(category)
    if found is None:
        typer.secho(f"No category named {category!r}", fg=typer.colors.RED, err=True)
        if result.categories:
            typer.echo("Available: " + ", ".join(result.category_names()), err=True)
        raise typer.Exit(code=1)
    typer.echo(render_category_markdown(found))


@app.command()
def tag(
    source: str = typer.Argument(..., help="Markdown file path or raw markdown text."),
) -> None:
    """Print SOURCE with entry lines tagged."""

    engine, text = _prepare(source)
    typer.echo(engine.tag(text))


def _print_summary(result: ListsResult) -> None:
    table = Table(title=f"Categories ({result.page_count} pages)", show_lines=False)
    table.add_column("Category", style="cyan")
    table.add_column("Lines", justify="right")
    table.add_column("Observations", justify="right")

    for category in result.categories:
        table.add_row(
            category.name,
            f"{category.start_line}-{category.end_line}",
            str(category.observation_count),
        )
    console.print(table)


def main() -> None:  # pragma: no cover - console script entry
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
