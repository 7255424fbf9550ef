"""Command-line interface for the localization sync tasks."""

import logging
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from . import __version__
from .config import PRODUCTS, config, get_product
from .errors import L10nError
from .tasks.discovery import discover_locales
from .tasks.export_task import ExportTask
from .tasks.import_task import ImportTask
from .tasks.templates_task import TemplatesTask

console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        # reported by _check_config
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _check_config() -> None:
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()


def _resolve_locales(l10n_project_path: str, locale: Optional[str]) -> List[str]:
    if locale:
        return [locale]
    return discover_locales(l10n_project_path)


def _fail(error: L10nError) -> None:
    console.print(f"[red]Error:[/red] {error}")
    raise click.Abort()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def cli(verbose: bool):
    """Localization tools for managing XLIFF files and translations.

    Moves strings between Xcode projects and the l10n repositories used by
    Pontoon, handling locale code mapping, non-translatable keys, required
    translations and comment overrides from l10n_comments.txt.
    """
    _setup_logging(verbose)


@cli.command()
@click.option(
    "--product",
    type=click.Choice(sorted(PRODUCTS), case_sensitive=False),
    help="Product preset. Required unless --project-path is specified."
)
@click.option(
    "--project-path",
    type=click.Path(),
    help="Path to the Xcode project (.xcodeproj). Required unless --product is specified."
)
@click.option(
    "--repo-root",
    type=click.Path(exists=True, file_okay=False),
    default=".",
    show_default=True,
    help="Root of the app repository, used to locate --product projects"
)
@click.option(
    "--l10n-project-path",
    required=True,
    type=click.Path(),
    help="Path to the l10n repository"
)
@click.option("--locale", "locale", help="Single locale to export (discovers all if omitted)")
@click.option("--xliff-name", help="XLIFF filename (default from product)")
@click.option("--export-base-path", help="Base path for export temp files (default from product)")
@click.option("--create-templates", is_flag=True, help="Create template XLIFF files after export")
def export(
    product: Optional[str],
    project_path: Optional[str],
    repo_root: str,
    l10n_project_path: str,
    locale: Optional[str],
    xliff_name: Optional[str],
    export_base_path: Optional[str],
    create_templates: bool,
):
    """Export localizable strings from an Xcode project to XLIFF files.

    Runs xcodebuild -exportLocalizations, filters excluded keys, maps locale
    codes to Pontoon format, applies comment overrides and copies the results
    into the l10n repository.
    """
    if product and project_path:
        raise click.UsageError("Cannot specify both --product and --project-path")
    if not product and not project_path:
        raise click.UsageError("Must specify either --product or --project-path")
    _check_config()

    preset = get_product(product)
    resolved_project = project_path or str(Path(repo_root) / preset.project_path)
    resolved_xliff_name = xliff_name or (preset.xliff_name if preset else config.xliff_name)
    resolved_base_path = export_base_path or (
        preset.export_base_path if preset else config.export_base_path
    )

    try:
        locales = _resolve_locales(l10n_project_path, locale)
        console.print(
            f"[blue]Exporting {len(locales)} locale(s) from[/blue] {resolved_project}"
        )
        ExportTask(
            xcode_proj_path=resolved_project,
            l10n_repo_path=l10n_project_path,
            locales=locales,
            xliff_name=resolved_xliff_name,
            export_base_path=resolved_base_path,
            create_templates=create_templates,
            max_workers=config.worker_limit,
        ).run()
    except L10nError as e:
        _fail(e)

    if create_templates:
        console.print("[green]Templates created[/green]")
    console.print(Panel(f"Exported {len(locales)} locale(s)", title="Export completed"))


@cli.command(name="import")
@click.option(
    "--project-path",
    required=True,
    type=click.Path(),
    help="Path to the Xcode project (.xcodeproj)"
)
@click.option(
    "--l10n-project-path",
    required=True,
    type=click.Path(),
    help="Path to the l10n repository"
)
@click.option("--locale", "locale", help="Single locale to import (discovers all if omitted)")
@click.option("--xliff-name", default=config.xliff_name, show_default=True, help="XLIFF filename")
@click.option(
    "--development-region",
    default=config.development_region,
    show_default=True,
    help="Development region for the xcloc manifest"
)
@click.option(
    "--project-name",
    default=config.project_name,
    show_default=True,
    help="Project name for the xcloc manifest"
)
@click.option("--skip-widget-kit", is_flag=True, help="Exclude WidgetKit strings from required translations")
def import_(
    project_path: str,
    l10n_project_path: str,
    locale: Optional[str],
    xliff_name: str,
    development_region: str,
    project_name: str,
    skip_widget_kit: bool,
):
    """Import translated XLIFF files into an Xcode project.

    Builds an .xcloc bundle per locale, maps locale codes to Xcode format,
    filters excluded keys, fills missing required translations from their
    source text and runs xcodebuild -importLocalizations.
    """
    _check_config()

    def show_progress(current: int, total: int, locale_code: str):
        console.print(f"[cyan][{current}/{total}][/cyan] Importing {locale_code}...")

    try:
        locales = _resolve_locales(l10n_project_path, locale)
        console.print(f"[blue]Importing {len(locales)} locale(s) into[/blue] {project_path}")
        ImportTask(
            xcode_proj_path=project_path,
            l10n_repo_path=l10n_project_path,
            locales=locales,
            xliff_name=xliff_name,
            development_region=development_region,
            project_name=project_name,
            skip_widget_kit=skip_widget_kit,
            work_dir=config.import_work_dir,
            progress_callback=show_progress,
        ).run()
    except L10nError as e:
        _fail(e)

    console.print(Panel(f"Imported {len(locales)} locale(s)", title="Import completed"))


@cli.command()
@click.option(
    "--l10n-project-path",
    required=True,
    type=click.Path(),
    help="Path to the l10n repository"
)
@click.option("--xliff-name", default=config.xliff_name, show_default=True, help="XLIFF filename")
def templates(l10n_project_path: str, xliff_name: str):
    """Create template XLIFF files from the en-US source.

    The template keeps source strings and notes but drops every
    target-language attribute and <target> element.
    """
    console.print("[blue]Creating template XLIFF files...[/blue]")
    try:
        path = TemplatesTask(l10n_project_path, xliff_name).run()
    except L10nError as e:
        _fail(e)

    console.print(f"[green]Template written:[/green] {path}")


if __name__ == "__main__":
    cli()
