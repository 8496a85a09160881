"""Analyze command: component dependencies of every decomposition."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis.engine import AnalysisEngine
from ..exceptions import ComponentInsightError
from ..formatters import JsonFormatter, RichFormatter
from ..inputs import load_analysis_input
from ..logging_config import set_verbosity, setup_logging
from . import app
from ._common import console, err_console, resolve_config


@app.command()
def analyze(
    input_file: Path = typer.Argument(
        ...,
        help="Scan result (JSON) with files, lines of code and file dependencies",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    fmt: str = typer.Option(
        "rich",
        "--format",
        "-f",
        help="Output format: rich (default) or json",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the report to a file instead of stdout",
        dir_okay=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (TOML) with logical decompositions",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging and list contributing files",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress all but ERROR logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Append log records to this file",
        dir_okay=False,
    ),
):
    """
    Report static dependencies between the logical components of a codebase.

    [bold cyan]Examples:[/bold cyan]

      component-insight analyze scan.json

      component-insight analyze scan.json --config component-insight.toml

      component-insight analyze scan.json --format json | jq .
    """
    logger = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)

    if fmt not in ("rich", "json"):
        err_console.print(f"[red]Error:[/red] unknown format '{fmt}' (use rich or json)")
        raise typer.Exit(2)

    try:
        settings = resolve_config(config=config, verbose=verbose, quiet=quiet)
        set_verbosity(settings.verbosity)
        results = AnalysisEngine(load_analysis_input(input_file), settings).run()

        if fmt == "json":
            text = JsonFormatter(highlight_cycles=settings.highlight_cycles).format(results)
        else:
            formatter = RichFormatter(console=console, verbose=verbose)
            if output is None:
                formatter.render(results)
                text = None
            else:
                text = formatter.format(results)

        if text is not None:
            if output is not None:
                output.write_text(text, encoding="utf-8")
                err_console.print(f"[green]Report written to {output}[/green]")
            else:
                typer.echo(text)

        if results.failures:
            raise typer.Exit(1)

    except typer.Exit:
        raise
    except ComponentInsightError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.exception("Unexpected error")
        err_console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)
