# src/qbank/cli/app.py
"""Command-line interface for the question bank.

This module provides a thin Typer wrapper around the commands layer.
Each command:
1. Parses args (via Typer)
2. Creates confirmation callbacks where needed
3. Calls commands module functions
4. Renders results with Rich
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.table import Table
except ImportError as e:
    raise SystemExit(
        "CLI requires additional dependencies.\nInstall with: pip install qbank-engine[cli]"
    ) from e

from qbank import __version__
from qbank.commands import clear, config_cmd, info, load, sample, search, stats
from qbank.commands.base import ConfirmRequest
from qbank.models import Question, QuestionFilter

app = typer.Typer(
    name="qbank",
    help="Question bank - filter, search and sample past exam questions.",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"qbank {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging.",
    ),
) -> None:
    """Question bank query engine."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# Shared options
TENANT_OPTION = typer.Option(None, "--tenant", "-t", help="Tenant ID (default: from settings)")
DATA_DIR_OPTION = typer.Option(
    None, "--data-dir", "-d", help="Data directory (default: from settings)"
)
CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Path to config file")
PLAIN_OPTION = typer.Option(False, "--plain", help="Plain output (no colors/formatting)")
JSON_OPTION = typer.Option(False, "--json", help="Print results as JSON")


def _fail(message: str | None, plain: bool) -> NoReturn:
    if plain:
        console.print(f"Error: {message}", markup=False)
    else:
        console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


def _build_filters(**fields: list[Any] | None) -> dict[str, list[Any]]:
    """Collect repeatable filter options into a QuestionFilter mapping."""
    return {name: values for name, values in fields.items() if values}


def _question_json(questions: list[Question]) -> list[dict[str, Any]]:
    return [q.model_dump(mode="json", by_alias=True, exclude_none=True) for q in questions]


def _render_questions(questions: list[Question], title: str, plain: bool) -> None:
    if plain:
        console.print(title, markup=False)
        for i, q in enumerate(questions, 1):
            console.print(
                f"  {i}. [{q.year} {q.paper_type}] {q.subject} / {q.topic} "
                f"({q.difficulty}, {q.marks} marks)",
                markup=False,
            )
            console.print(f"     {q.question_text}", markup=False)
        return

    table = Table(title=title)
    table.add_column("#", style="dim", width=3)
    table.add_column("Year", justify="right")
    table.add_column("Paper", style="cyan")
    table.add_column("Subject")
    table.add_column("Topic")
    table.add_column("Difficulty")
    table.add_column("Marks", justify="right", style="green")
    table.add_column("Question")

    for i, q in enumerate(questions, 1):
        preview = q.question_text.replace("\n", " ")
        if len(preview) > 80:
            preview = preview[:80] + "..."
        table.add_row(
            str(i),
            str(q.year),
            q.paper_type,
            q.subject,
            q.topic,
            q.difficulty,
            str(q.marks),
            preview,
        )

    console.print(table)


@app.command(name="load")
def load_cmd(
    path: str = typer.Argument(..., help="JSON file of questions or question papers"),
    tenant: str = TENANT_OPTION,
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Replace a tenant's questions with the contents of a JSON file."""
    result = load.load_file(path, tenant_id=tenant, data_dir=data_dir, config_path=config_file)

    if not result.success:
        _fail(result.error, plain)

    message = f"Saved {result.questions_saved} questions"
    if result.papers_saved is not None:
        message += f" and {result.papers_saved} question papers"
    message += f" for tenant {result.tenant_id}"

    if plain:
        console.print(message, markup=False)
    else:
        console.print(f"[green]{message}[/green]")


@app.command(name="search")
def search_cmd(
    query: str = typer.Option(None, "--query", "-q", help="Free-text search"),
    year: list[int] = typer.Option(None, "--year", "-y", help="Year (repeatable)"),
    exam_type: list[str] = typer.Option(None, "--exam-type", help="Exam type (repeatable)"),
    paper_type: list[str] = typer.Option(None, "--paper-type", help="Paper type (repeatable)"),
    subject: list[str] = typer.Option(None, "--subject", "-s", help="Subject (repeatable)"),
    topic: list[str] = typer.Option(None, "--topic", help="Topic (repeatable)"),
    difficulty: list[str] = typer.Option(None, "--difficulty", help="Difficulty (repeatable)"),
    question_type: list[str] = typer.Option(
        None, "--question-type", help="Question type (repeatable)"
    ),
    keyword: list[str] = typer.Option(None, "--keyword", "-k", help="Keyword (repeatable)"),
    tag: list[str] = typer.Option(None, "--tag", help="Tag (repeatable)"),
    sort_by: str = typer.Option(
        None, "--sort-by", help="year, marks, difficulty or relevance (default: from settings)"
    ),
    sort_order: str = typer.Option(None, "--sort-order", help="asc or desc"),
    limit: int = typer.Option(None, "--limit", "-n", help="Page size (default: from settings)"),
    offset: int = typer.Option(0, "--offset", help="Matches to skip"),
    tenant: str = TENANT_OPTION,
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    as_json: bool = JSON_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Filter, search, sort and page through questions."""
    filters = _build_filters(
        year=year,
        exam_type=exam_type,
        paper_type=paper_type,
        subject=subject,
        topic=topic,
        difficulty=difficulty,
        question_type=question_type,
        keywords=keyword,
        tags=tag,
    )
    result = search.search(
        filters,
        search_query=query,
        sort_by=sort_by,
        sort_order=sort_order,
        limit=limit,
        offset=offset,
        tenant_id=tenant,
        data_dir=data_dir,
        config_path=config_file,
    )

    if not result.success:
        _fail(result.error, plain)

    if as_json:
        console.print_json(
            data={
                "questions": _question_json(result.questions),
                "totalCount": result.total_count,
                "filters": QuestionFilter.model_validate(filters).model_dump(
                    mode="json", by_alias=True, exclude_none=True
                ),
                "searchQuery": result.search_query,
                "sortBy": result.sort_by,
                "sortOrder": result.sort_order,
                "limit": result.limit,
                "offset": result.offset,
            }
        )
        return

    if not result.questions:
        if plain:
            console.print(f"No questions found ({result.total_count} matches).")
        else:
            console.print(f"[yellow]No questions found ({result.total_count} matches).[/yellow]")
        raise typer.Exit(0)

    first = result.offset + 1
    last = result.offset + len(result.questions)
    title = (
        f"Questions {first}-{last} of {result.total_count} "
        f"(by {result.sort_by} {result.sort_order})"
    )
    _render_questions(result.questions, title, plain)


@app.command(name="random")
def random_cmd(
    count: int = typer.Option(None, "--count", "-n", help="Questions to draw"),
    year: list[int] = typer.Option(None, "--year", "-y", help="Year (repeatable)"),
    subject: list[str] = typer.Option(None, "--subject", "-s", help="Subject (repeatable)"),
    paper_type: list[str] = typer.Option(None, "--paper-type", help="Paper type (repeatable)"),
    difficulty: list[str] = typer.Option(None, "--difficulty", help="Difficulty (repeatable)"),
    tenant: str = TENANT_OPTION,
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    as_json: bool = JSON_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Draw a random practice set of distinct questions."""
    filters = _build_filters(
        year=year,
        subject=subject,
        paper_type=paper_type,
        difficulty=difficulty,
    )
    result = sample.sample(
        count,
        filters,
        tenant_id=tenant,
        data_dir=data_dir,
        config_path=config_file,
    )

    if not result.success:
        _fail(result.error, plain)

    if as_json:
        console.print_json(data=_question_json(result.questions))
        return

    if not result.questions:
        if plain:
            console.print("No questions available. Run 'qbank load' first.")
        else:
            console.print("[dim]No questions available. Run 'qbank load' first.[/dim]")
        raise typer.Exit(0)

    title = f"Random Questions ({len(result.questions)} of {result.requested} requested)"
    _render_questions(result.questions, title, plain)


@app.command(name="stats")
def stats_cmd(
    tenant: str = TENANT_OPTION,
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    as_json: bool = JSON_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Show question counts by year, subject, topic and other dimensions."""
    result = stats.stats(tenant_id=tenant, data_dir=data_dir, config_path=config_file)

    if not result.success:
        _fail(result.error, plain)

    if result.stats is None:
        if as_json:
            console.print_json(data=None)
        elif plain:
            console.print("No statistics. Run 'qbank load' first.")
        else:
            console.print("[dim]No statistics. Run 'qbank load' first.[/dim]")
        raise typer.Exit(0)

    if as_json:
        console.print_json(data=result.stats.model_dump(mode="json", by_alias=True))
        return

    if plain:
        console.print(f"Total questions: {result.stats.total_questions}")
        for dimension, counts in result.stats.breakdowns().items():
            console.print(f"By {dimension}:")
            for value, count in sorted(counts.items(), key=lambda item: str(item[0])):
                console.print(f"  {value}: {count}", markup=False)
        return

    console.print(f"[bold]Total questions:[/bold] {result.stats.total_questions}")
    for dimension, counts in result.stats.breakdowns().items():
        if not counts:
            continue
        table = Table(title=f"By {dimension.replace('_', ' ')}")
        table.add_column(dimension, style="cyan")
        table.add_column("Questions", justify="right", style="green")
        for value, count in sorted(counts.items(), key=lambda item: (-item[1], str(item[0]))):
            table.add_row(str(value), str(count))
        console.print(table)


@app.command(name="info")
def info_cmd(
    tenant: str = TENANT_OPTION,
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    plain: bool = PLAIN_OPTION,
) -> None:
    """Show record counts and approximate storage size."""
    result = info.info(tenant_id=tenant, data_dir=data_dir, config_path=config_file)

    if not result.success:
        _fail(result.error, plain)

    if plain:
        console.print("Storage Info:")
        console.print(f"  Tenant: {result.tenant_id}", markup=False)
        console.print(f"  Data directory: {result.data_dir}", markup=False)
        console.print(f"  Questions: {result.questions_count}")
        console.print(f"  Question papers: {result.papers_count}")
        console.print(f"  Storage size: {result.storage_size} bytes")
        return

    table = Table(title="Storage Info")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("Tenant", result.tenant_id)
    table.add_row("Data directory", result.data_dir)
    table.add_row("Questions", str(result.questions_count))
    table.add_row("Question papers", str(result.papers_count))
    table.add_row("Storage size", f"{result.storage_size} bytes")

    console.print(table)


@app.command(name="clear")
def clear_cmd(
    tenant: str = TENANT_OPTION,
    data_dir: str = DATA_DIR_OPTION,
    config_file: str = CONFIG_OPTION,
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Skip confirmation prompt",
    ),
    plain: bool = PLAIN_OPTION,
) -> None:
    """Remove all questions, papers and statistics for a tenant."""

    def cli_confirm(request: ConfirmRequest) -> bool:
        """CLI confirmation callback using typer.confirm."""
        console.print(request.message, markup=False)
        if request.details:
            if plain:
                console.print(request.details)
            else:
                console.print(f"[yellow]{request.details}[/yellow]")
        return typer.confirm("Continue?")

    # Use callback only if not --force
    on_confirm = None if force else cli_confirm

    result = clear.clear(
        tenant_id=tenant,
        data_dir=data_dir,
        config_path=config_file,
        on_confirm=on_confirm,
    )

    if not result.success:
        # Handle cancellation gracefully (exit 0, not error)
        if result.error == "Cancelled.":
            console.print("Cancelled.")
            raise typer.Exit(0)
        _fail(result.error, plain)

    message = (
        f"Removed {result.questions_removed} questions and "
        f"{result.papers_removed} question papers for tenant {result.tenant_id}"
    )
    if plain:
        console.print(message, markup=False)
    else:
        console.print(f"[green]{message}[/green]")


@app.command(name="config")
def config_cmd_handler(
    config_file: str = CONFIG_OPTION,
) -> None:
    """Show current configuration settings."""
    result = config_cmd.config(config_path=config_file)

    if not result.success:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)

    table = Table(title="Question Bank Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_column("Source", style="dim")

    table.add_row("data_dir", result.data_dir, "")
    table.add_row("tenant_id", result.tenant_id, "")

    # Separator
    table.add_row("", "", "")

    for setting in result.settings:
        table.add_row(setting.name, setting.value, setting.source)

    console.print(table)

    if result.config_path:
        console.print(f"\n[dim]Config file: {result.config_path}[/dim]")
    else:
        console.print("\n[dim]No config file found. Using env vars / defaults.[/dim]")

    console.print("\n[dim]Precedence: env var > yaml settings > default[/dim]")
