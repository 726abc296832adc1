"""Command-line interface for the vulnreport tool."""

from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from vulnreport.config.settings import AppConfig

app = typer.Typer(
    name="vulnreport",
    help="Merge security finding spreadsheets into a severity-ordered problem report.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

SourcesArgument = Annotated[
    list[Path] | None,
    typer.Argument(
        help="Finding spreadsheets (.xlsx/.csv) in merge order. Defaults to 'sources' in the config.",
        dir_okay=False,
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to configuration YAML file.",
        exists=True,
        dir_okay=False,
    ),
]


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)."),
    ] = "WARNING",
    json_logs: Annotated[
        bool,
        typer.Option("--json-logs", help="Emit log events as JSON lines on stderr."),
    ] = False,
) -> None:
    """Configure logging for all commands."""
    from vulnreport.utils.logging import configure_logging

    configure_logging(level=log_level, json_output=json_logs)


def _load(config: Path | None, sources: list[Path] | None) -> tuple["AppConfig", list[Path]]:
    """Load configuration and pick the sources to process."""
    import yaml

    from vulnreport.config.loader import load_config
    from vulnreport.config.settings import AppConfig

    if config is not None:
        console.print(f"[blue]Loading configuration from {config}[/blue]")
        try:
            app_config = load_config(config)
        except (ValueError, yaml.YAMLError) as e:
            raise _fail("Invalid configuration", e) from e
    else:
        app_config = AppConfig()

    selected = list(sources) if sources else list(app_config.sources)
    if not selected:
        err_console.print("[red]Error: no source files given (pass paths or set 'sources').[/red]")
        raise typer.Exit(code=1)
    return app_config, selected


def _fail(prefix: str, error: Exception) -> typer.Exit:
    err_console.print(f"[red]{prefix}: {error}[/red]")
    return typer.Exit(code=1)


@app.command()
def process(
    sources: SourcesArgument = None,
    config: ConfigOption = None,
    json_output: Annotated[
        Path | None,
        typer.Option("--json", "-j", help="Also write the consolidated result as JSON."),
    ] = None,
) -> None:
    """Consolidate findings and print the statistics table."""
    from vulnreport.errors import ReportError
    from vulnreport.pipeline import ReportPipeline
    from vulnreport.report import ConsoleReporter, write_result_json

    app_config, selected = _load(config, sources)

    try:
        run = ReportPipeline(app_config).run(selected)
    except ReportError as e:
        raise _fail("Processing failed", e) from e

    ConsoleReporter(console).print_results(run)

    if json_output is not None:
        path = write_result_json(run, json_output)
        console.print(f"\n[green]Saved to: {path}[/green]")


@app.command()
def report(
    sources: SourcesArgument = None,
    config: ConfigOption = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory for the generated report."),
    ] = None,
    tag: Annotated[
        str | None, typer.Option("--tag", help="Prefix of problem report numbers.")
    ] = None,
    code_version: Annotated[
        str | None, typer.Option("--version", help="Software version under test.")
    ] = None,
    tester: Annotated[str | None, typer.Option("--tester", help="Name of the tester.")] = None,
    test_time: Annotated[str | None, typer.Option("--time", help="Test date.")] = None,
    offset: Annotated[
        int | None,
        typer.Option("--offset", min=0, help="Added to each report number."),
    ] = None,
) -> None:
    """Consolidate findings and write the Word problem report."""
    from vulnreport.errors import ReportError
    from vulnreport.pipeline import ProgressRecorder, ReportPipeline
    from vulnreport.report import DocxReportRenderer

    app_config, selected = _load(config, sources)

    overrides = {
        "output_dir": output_dir,
        "identifier_tag": tag,
        "code_version": code_version,
        "tester": tester,
        "test_time": test_time,
        "number_offset": offset,
    }
    report_config = app_config.report.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )

    recorder = ProgressRecorder()
    pipeline = ReportPipeline(app_config, observer=recorder)

    with console.status("[blue]Consolidating findings...[/blue]"):
        try:
            run = pipeline.run(selected)
        except ReportError as e:
            raise _fail("Processing failed", e) from e

    renderer = DocxReportRenderer(report_config, app_config.columns, pipeline.classifier)
    try:
        path = renderer.render(run.result, run.statistics)
    except OSError as e:
        raise _fail("Writing report failed", e) from e

    for message in recorder.logs:
        console.print(f"[dim]{message.timestamp}[/dim] {message.message}")

    console.print(
        f"\n[green]Report written: {path} "
        f"({run.result.total_groups} groups, {run.result.total_records} records)[/green]"
    )


@app.command()
def check(
    sources: SourcesArgument = None,
    config: ConfigOption = None,
) -> None:
    """Validate that all sources share the same header row."""
    from vulnreport.errors import ReportError
    from vulnreport.ingestion import TableMerger, WorkbookReader

    app_config, selected = _load(config, sources)

    try:
        merged = TableMerger(
            WorkbookReader(),
            parallel=app_config.reading.parallel,
            max_workers=app_config.reading.max_workers,
        ).merge(selected)
    except ReportError as e:
        raise _fail("Check failed", e) from e

    table = Table(title="Header Check", show_header=True)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Header")
    for index, header in enumerate(merged.headers, start=1):
        table.add_row(str(index), header)
    console.print(table)

    console.print(
        f"[green]{len(selected)} source(s) consistent, {merged.row_count} data rows[/green]"
    )


if __name__ == "__main__":
    app()
