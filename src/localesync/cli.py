"""CLI interface for localesync using Typer."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from localesync import __version__
from localesync.config import (
    ENV_API_KEY,
    ENV_BASE_LANG,
    ENV_MODEL,
    ENV_PRUNE,
    ENV_ROOTS,
    ENV_TARGET_LANGS,
    SyncConfig,
)
from localesync.errors import ConfigurationMissing

app = typer.Typer(
    name="localesync",
    help="Keep translated sibling files in sync with their base-language files.",
    add_completion=False,
)
console = Console()

_verbose = False
_quiet = False

COMPLETED_MESSAGE = "Translation completed successfully!"


def _print(msg: str, *, verbose_only: bool = False) -> None:
    """Print respecting --verbose/--quiet flags. Errors bypass --quiet."""
    if _quiet:
        return
    if verbose_only and not _verbose:
        return
    console.print(msg)


def _setup_logging(verbose: bool) -> None:
    """Route package logs through Rich. Failures are already printed, so
    only errors are logged unless --verbose is given."""
    pkg_logger = logging.getLogger("localesync")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.ERROR)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        pkg_logger.addHandler(RichHandler(console=console, show_path=False))


def _on_progress(event: str, path: Path, detail: str) -> None:
    if event == "removed":
        _print(f"Removed file: {escape(str(path))}")
    elif event == "written":
        _print(f"Wrote [cyan]{escape(str(path))}[/cyan] ({escape(detail)})")
    elif event == "skipped":
        _print(f"[yellow]Skipped[/yellow] {escape(str(path))}: {escape(detail)}")
    elif event == "error":
        console.print(f"[red]Error:[/red] {escape(detail)}")


def _load_config(
    *,
    roots: str | None,
    base_lang: str | None,
    target_langs: str | None,
    api_key: str | None = None,
    model: str | None = None,
    prune: bool = True,
    require_api_key: bool = False,
) -> SyncConfig:
    try:
        return SyncConfig.from_values(
            roots=roots,
            base_lang=base_lang,
            target_langs=target_langs,
            api_key=api_key,
            model=model,
            prune=prune,
            require_api_key=require_api_key,
        )
    except ConfigurationMissing as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e


def version_callback(value: bool) -> None:
    if value:
        console.print(f"localesync {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Show extra info (backend, timing, debug logs).",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Only show errors.",
    ),
) -> None:
    """localesync: translate base-language files into sibling locale files."""
    global _verbose, _quiet
    _verbose = verbose
    _quiet = quiet
    _setup_logging(verbose)


@app.command()
def sync(
    roots: str | None = typer.Option(
        None, "--roots",
        envvar=ENV_ROOTS, help="Comma-separated translation folders.",
    ),
    base_lang: str | None = typer.Option(
        None, "--base-lang",
        envvar=ENV_BASE_LANG, help="Base language identifier (e.g. en).",
    ),
    target_langs: str | None = typer.Option(
        None, "--target-langs",
        envvar=ENV_TARGET_LANGS, help="Comma-separated target languages (e.g. es,fr,de).",
    ),
    api_key: str | None = typer.Option(
        None, "--api-key", "-k",
        envvar=ENV_API_KEY, help="OpenAI API key.",
    ),
    model: str | None = typer.Option(
        None, "--model", "-m",
        envvar=ENV_MODEL, help="OpenAI chat model.",
    ),
    prune: bool = typer.Option(
        True, "--prune/--no-prune",
        envvar=ENV_PRUNE, help="Delete every non-base file before translating.",
    ),
    backend_name: str = typer.Option(
        "openai", "--backend", "-b",
        help="Backend: openai, dummy.",
    ),
    use_dummy: bool = typer.Option(
        False, "--dummy",
        help="Use dummy backend (shortcut for --backend dummy).",
    ),
    report: Path | None = typer.Option(
        None, "--report", "-r",
        help="Save report to file (json/md/csv).",
    ),
) -> None:
    """Remove stale translations and regenerate them from the base files."""
    from localesync.pipeline import create_backend, run_sync
    from localesync.reporting.formatters import save_report
    from localesync.reporting.report import SyncReport

    if use_dummy:
        backend_name = "dummy"

    config = _load_config(
        roots=roots,
        base_lang=base_lang,
        target_langs=target_langs,
        api_key=api_key,
        model=model,
        prune=prune,
        require_api_key=backend_name == "openai",
    )

    try:
        backend, backend_label = create_backend(
            backend_name, api_key=config.api_key, model=config.model,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e

    _print(f"Backend: [cyan]{backend_label}[/cyan]", verbose_only=True)

    rpt = SyncReport(
        roots=[str(r) for r in config.roots],
        base_locale=config.base_locale,
        target_locales=list(config.locales.targets),
        backend=backend_label,
        prune=config.prune,
    )

    result = run_sync(config, backend, on_progress=_on_progress)

    rpt.files_removed = len(result.removed)
    rpt.base_files = result.base_files
    rpt.outputs_written = len(result.written)
    rpt.jobs_failed = result.failed_jobs
    rpt.errors = [msg for _, msg in result.errors]
    rpt.finish()

    if not _quiet:
        table = Table(title="Sync Summary")
        table.add_column("Metric")
        table.add_column("Count", justify="right")
        if config.prune:
            table.add_row("Removed", f"[yellow]{len(result.removed)}[/yellow]")
        table.add_row("Base files", str(result.base_files))
        table.add_row("Written", f"[green]{len(result.written)}[/green]")
        table.add_row("Failed jobs", f"[red]{result.failed_jobs}[/red]")
        console.print(table)

    _print(f"Finished in {result.elapsed_seconds:.1f}s", verbose_only=True)

    if report:
        save_report(rpt, report)
        _print(f"Report saved: [cyan]{escape(str(report))}[/cyan]")

    # Per-file failures are diagnostics only; the run itself always completes
    console.print(COMPLETED_MESSAGE)


@app.command()
def scan(
    roots: str | None = typer.Option(
        None, "--roots",
        envvar=ENV_ROOTS, help="Comma-separated translation folders.",
    ),
    base_lang: str | None = typer.Option(
        None, "--base-lang",
        envvar=ENV_BASE_LANG, help="Base language identifier (e.g. en).",
    ),
    target_langs: str | None = typer.Option(
        None, "--target-langs",
        envvar=ENV_TARGET_LANGS, help="Comma-separated target languages (e.g. es,fr,de).",
    ),
    prune: bool = typer.Option(
        True, "--prune/--no-prune",
        envvar=ENV_PRUNE, help="Show files a sync would delete.",
    ),
) -> None:
    """Show what a sync would delete and write, without changing anything."""
    from localesync.pipeline import plan_sync

    config = _load_config(
        roots=roots, base_lang=base_lang, target_langs=target_langs, prune=prune,
    )
    plan = plan_sync(config)

    for _, message in plan.errors:
        console.print(f"[red]Error:[/red] {escape(message)}")

    if config.prune:
        _print(f"Stale files: [yellow]{len(plan.stale)}[/yellow]")
        for path in plan.stale:
            _print(f"  {escape(str(path))}", verbose_only=True)

    _print(f"Planned translations: [green]{len(plan.jobs)}[/green]\n")
    if _quiet or not plan.jobs:
        return

    table = Table(title="Planned translations")
    table.add_column("Source")
    table.add_column("Locale")
    table.add_column("Output", style="green")
    for job in plan.jobs:
        table.add_row(escape(job.source.name), job.target, escape(job.output_name))
    console.print(table)
