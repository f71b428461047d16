"""Verificile CLI application with Typer."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from verificile import __version__
from verificile.bootstrap import bootstrap_application
from verificile.config import get_settings, set_settings
from verificile.core.errors import PathExhaustedError, TypesFileError
from verificile.core.models import AnomalyRecord, RunSummary
from verificile.core.registry import build_registry
from verificile.utils.cli_output import json_response

app = typer.Typer(
    name="verificile",
    help="Verify that file extensions match their detected content types",
    add_completion=True,
    no_args_is_help=True,
)

# Fixed column widths for the verbose anomaly table
TYPE_WIDTH = 25
EXT_WIDTH = 8
EXPECTED_WIDTH = 15

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"Verificile version {__version__}")
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.ERROR
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)


def _secho(message: str, color: bool, **style) -> None:
    if color:
        typer.secho(message, **style)
    else:
        typer.echo(message)


def _table_separator() -> str:
    return " ".join(["-" * TYPE_WIDTH, "-" * EXT_WIDTH, "-" * EXPECTED_WIDTH, "-" * 9])


def _print_table_header(color: bool) -> None:
    _secho("Anomalies found during processing:", color, bold=True)
    header = (
        f"{'Detected Type':<{TYPE_WIDTH}} {'Ext':<{EXT_WIDTH}} "
        f"{'Expected':<{EXPECTED_WIDTH}} File Path"
    )
    _secho(header, color, fg=typer.colors.CYAN)
    typer.echo(_table_separator())


def _table_row(anomaly: AnomalyRecord) -> str:
    # Extension is truncated; the path is last so it may wrap freely.
    return (
        f"{anomaly.content_type:<{TYPE_WIDTH}} "
        f"{anomaly.actual_extension[:EXT_WIDTH]:<{EXT_WIDTH}} "
        f"{anomaly.expected_extensions:<{EXPECTED_WIDTH}} {anomaly.path}"
    )


def _print_summary(summary: RunSummary, color: bool) -> None:
    if summary.suggestions:
        typer.echo()
        _secho("Suggested additions to the type registry:", color, bold=True)
        typer.echo("Add the following entries to support new content types:")
        _secho("-" * 54, color, fg=typer.colors.CYAN)
        for suggestion in summary.suggestions:
            _secho(suggestion.format_line(), color, fg=typer.colors.CYAN)
        _secho("-" * 54, color, fg=typer.colors.CYAN)
        typer.echo()

    if summary.found_anomalies:
        if summary.forensic:
            _secho(
                f"Anomalies detected! ({summary.anomalies_remaining}) "
                "[FORENSIC MODE] Results not saved to file.",
                color,
                fg=typer.colors.MAGENTA,
                bold=True,
            )
        else:
            _secho(
                f"Anomalies detected! ({summary.anomalies_remaining}) "
                f"See the list in {summary.report_path}",
                color,
                bold=True,
            )
    else:
        _secho(
            "No anomalies detected. All file extensions match their detected types.",
            color,
            fg=typer.colors.GREEN,
        )

    if summary.renames and summary.rename_log_path:
        typer.echo()
        _secho(
            f"File operations: {summary.renames} files renamed "
            f"(see {summary.rename_log_path} for details)",
            color,
            fg=typer.colors.GREEN,
        )

    if summary.files_skipped:
        _secho(f"Skipped: {summary.files_skipped}", color, fg=typer.colors.YELLOW)

    if summary.forensic:
        _secho(
            "[FORENSIC MODE] No files were created or modified.",
            color,
            fg=typer.colors.MAGENTA,
        )


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", "-n", help="Disable colored output (for basic terminals)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Show detailed processing steps"),
    ] = False,
) -> None:
    """Verificile - verify file extensions against detected content types."""
    # Update settings with CLI flags
    settings = get_settings()
    if no_color:
        settings.color = False
    if debug:
        settings.debug = True
    set_settings(settings)
    _configure_logging(settings.debug)


@app.command("scan")
def scan(
    directories: Annotated[
        list[Path],
        typer.Argument(help="One or more directories to check"),
    ],
    interactive: Annotated[
        bool,
        typer.Option("--interactive", "-i", help="Fix anomalies as they are found"),
    ] = False,
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Recursively check subdirectories"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print anomalies to the console as they are found"),
    ] = False,
    forensic: Annotated[
        bool,
        typer.Option("--forensic", "-f", help="Don't write or rename any files (implies --verbose)"),
    ] = False,
    report_dir: Annotated[
        Path | None,
        typer.Option("--report-dir", help="Directory for the anomaly report and rename log"),
    ] = None,
    types_file: Annotated[
        Path | None,
        typer.Option("--types-file", help="YAML file with extra type-to-extension mappings"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output the summary as JSON"),
    ] = False,
) -> None:
    """Check that each file's extension matches its detected content type.

    Exits 0 when no anomalies remain, 1 when some do, and 2 on configuration errors.
    """
    settings = get_settings()
    if interactive:
        settings.interactive = True
    if recursive:
        settings.recursive = True
    if forensic:
        settings.forensic = True
    if verbose or settings.forensic:
        settings.verbose = True
    if report_dir:
        settings.report_dir = report_dir
    if types_file:
        settings.types_file = types_file
    set_settings(settings)

    try:
        container = bootstrap_application(settings)
    except (TypesFileError, PathExhaustedError) as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    color = settings.color
    show_table = (
        settings.verbose and not settings.debug and not settings.interactive and not json_output
    )

    if show_table:
        _print_table_header(color)

    def _on_anomaly(anomaly: AnomalyRecord) -> None:
        if show_table:
            _secho(_table_row(anomaly), color, fg=typer.colors.YELLOW)

    summary = container.scan_service.run(
        [directory.expanduser() for directory in directories],
        on_anomaly=_on_anomaly,
    )

    if show_table:
        typer.echo(_table_separator())

    if json_output:
        typer.echo(json_response("scan_summary", 1, **summary.model_dump(mode="json")))
    else:
        _print_summary(summary, color)

    if summary.found_anomalies:
        raise typer.Exit(code=1)


@app.command("types")
def types(
    types_file: Annotated[
        Path | None,
        typer.Option("--types-file", help="YAML file with extra type-to-extension mappings"),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output the registry as JSON"),
    ] = False,
) -> None:
    """List the content types Verificile knows and their accepted extensions."""
    settings = get_settings()
    if types_file:
        settings.types_file = types_file

    try:
        registry = build_registry(settings.get_types_file())
    except TypesFileError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc

    if json_output:
        typer.echo(
            json_response(
                "type_registry",
                1,
                types={content_type: list(exts) for content_type, exts in registry.items()},
            )
        )
        return

    for content_type, extensions in registry.items():
        typer.echo(f"{content_type:<{TYPE_WIDTH + 5}} {','.join(extensions)}")


if __name__ == "__main__":
    app()
