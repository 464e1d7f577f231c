"""Command line interface for SkillFinder."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from skillfinder.config import SKILLS_DIR_ENV, AppConfig
from skillfinder.importer import import_skills
from skillfinder.index.categories import build_categories
from skillfinder.index.dedup import find_duplicates
from skillfinder.index.indexer import Indexer
from skillfinder.index.search import search_skills
from skillfinder.ingestion.collection import SkillCollection
from skillfinder.ingestion.loader import find_entry, load_skill
from skillfinder.web.app import app as web_app


console = Console()
app = typer.Typer(help="SkillFinder - keyword search and duplicate checks for skill libraries")

SKILLS_DIR_HELP = "Skills directory (one sub-directory with a SKILL.md per skill)"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _resolve_skills_dir(skills_dir: Path | None) -> Path:
    config = AppConfig(skills_dir=skills_dir if skills_dir is not None else AppConfig().skills_dir)
    return config.resolve_skills_dir(Path.cwd())


def _require_collection(skills_dir: Path | None) -> SkillCollection:
    resolved = _resolve_skills_dir(skills_dir)
    if not resolved.is_dir():
        raise typer.BadParameter(f"Skills directory not found: {resolved}")
    return SkillCollection(resolved)


@app.command()
def index(
    skills_dir: Path = typer.Option(None, "--skills-dir", help=SKILLS_DIR_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Index a skills directory and report what was found."""
    _setup_logging(verbose)
    collection = _require_collection(skills_dir)

    indexer = Indexer(collection)
    skill_index = indexer.build()
    with_resources = sum(1 for entry in skill_index.entries if entry.has_resources)
    console.print(
        f"Indexed: {indexer.stats.indexed}, skipped: {indexer.stats.skipped}, "
        f"with resources: {with_resources}, tokens: {len(skill_index.idf_scores)}"
    )


@app.command()
def search(
    query: str = typer.Argument(..., help="Keywords to search for"),
    skills_dir: Path = typer.Option(None, "--skills-dir", help=SKILLS_DIR_HELP),
    limit: int = typer.Option(AppConfig().search_limit, help="Number of results to display"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search skills by keyword."""
    _setup_logging(verbose)
    collection = _require_collection(skills_dir)

    results = search_skills(Indexer(collection).build(), query, limit)
    if not results:
        console.print(f'[yellow]No skills found matching "{escape(query)}".[/yellow]')
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Score")
    table.add_column("Skill")
    table.add_column("Directory")
    table.add_column("Description")

    for result in results:
        name = f"{result.name} [+resources]" if result.has_resources else result.name
        table.add_row(
            f"{result.score:.2f}",
            escape(name),
            escape(result.dir_name),
            escape(result.description[:180]),
        )

    console.print(table)


@app.command()
def show(
    name: str = typer.Argument(..., help="Skill name or directory name"),
    resources: bool = typer.Option(False, "--resources", help="Append resource files"),
    skills_dir: Path = typer.Option(None, "--skills-dir", help=SKILLS_DIR_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the full content of a skill."""
    _setup_logging(verbose)
    collection = _require_collection(skills_dir)
    skill_index = Indexer(collection).build()

    entry = find_entry(skill_index, name)
    if entry is None:
        suggestions = search_skills(skill_index, name, 5)
        message = f'Skill "{name}" not found.'
        if suggestions:
            message += f" Did you mean: {', '.join(result.name for result in suggestions)}?"
        console.print(f"[red]{escape(message)}[/red]")
        raise typer.Exit(code=1)

    console.print(load_skill(entry, collection, resources), markup=False, highlight=False, soft_wrap=True)


@app.command()
def categories(
    skills_dir: Path = typer.Option(None, "--skills-dir", help=SKILLS_DIR_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Group indexed skills into categories."""
    _setup_logging(verbose)
    skill_index = Indexer(_require_collection(skills_dir)).build()
    grouped = build_categories(skill_index.entries)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Category")
    table.add_column("Count")
    table.add_column("Skills")
    for category, names in sorted(grouped.items(), key=lambda item: (-len(item[1]), item[0])):
        table.add_row(category, str(len(names)), escape(", ".join(sorted(names))))

    console.print(f"{skill_index.total_docs} skills in {len(grouped)} categories")
    console.print(table)


@app.command()
def dedup(
    skills_dir: Path = typer.Option(None, "--skills-dir", help=SKILLS_DIR_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Find exact and near-duplicate skills. Exits with 1 when exact duplicates exist."""
    _setup_logging(verbose)
    report = find_duplicates(_require_collection(skills_dir))

    if report.exact_duplicates:
        console.print(f"[red]Found {len(report.exact_duplicates)} exact duplicate group(s):[/red]")
        for group in report.exact_duplicates:
            console.print(f'  Name: "{group[0].name}"', markup=False)
            console.print(f"  Dirs: {', '.join(record.dir_name for record in group)}", markup=False)
    else:
        console.print("[green]No exact duplicates found.[/green]")

    if report.near_duplicates:
        console.print(f"[yellow]Found {len(report.near_duplicates)} near-duplicate pair(s):[/yellow]")
        for near in report.near_duplicates:
            first, second = near.pair
            console.print(
                f"  {first.dir_name} <-> {second.dir_name} ({near.similarity * 100:.0f}% similar)",
                markup=False,
            )
    else:
        console.print("[green]No near-duplicates found.[/green]")

    if report.exact_duplicates:
        raise typer.Exit(code=1)


@app.command("import")
def import_command(
    source: Path = typer.Argument(..., help="Directory holding the skills to import"),
    target: Path = typer.Option(None, "--target", help="Skills directory to copy into"),
    dry_run: bool = typer.Option(True, "--dry-run/--no-dry-run", help="Only report what would be copied"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Copy skills from another directory, skipping names that already exist."""
    _setup_logging(verbose)
    target_dir = _resolve_skills_dir(target)

    console.print(f"Importing skills from [bold]{source}[/bold] into [bold]{target_dir}[/bold]")
    console.print(f"Mode: {'DRY RUN' if dry_run else 'LIVE'}")

    try:
        report = import_skills(source, target_dir, dry_run=dry_run)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    for name in report.added:
        console.print(f"  + {name}", markup=False)
    console.print(f"Added: {len(report.added)}, skipped (already exists): {len(report.conflicts)}")
    for name in report.conflicts:
        console.print(f"  - {name}", markup=False)

    if dry_run or not report.added:
        return

    duplicates = find_duplicates(target_dir)
    if duplicates.exact_duplicates:
        console.print(f"[red]{len(duplicates.exact_duplicates)} exact duplicate group(s) created:[/red]")
        for group in duplicates.exact_duplicates:
            console.print(
                f'  "{group[0].name}": {", ".join(record.dir_name for record in group)}',
                markup=False,
            )
    else:
        console.print("[green]No new exact duplicates.[/green]")


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    skills_dir: Path = typer.Option(None, "--skills-dir", help=SKILLS_DIR_HELP),
) -> None:
    """Start the web interface."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - optional extra
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    resolved = _resolve_skills_dir(skills_dir)
    if not resolved.is_dir():
        console.print("[yellow]Warning: skills directory not found, searches will fail.[/yellow]")

    # The app resolves its default skills directory from the environment
    os.environ[SKILLS_DIR_ENV] = str(resolved)

    console.print(f"Starting web interface on http://{host}:{port} (skills: {resolved})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
