"""Graph command: Graphviz description of component dependencies."""

from pathlib import Path
from typing import Optional

import typer

from ..analysis.engine import AnalysisEngine
from ..exceptions import ComponentInsightError
from ..inputs import load_analysis_input
from ..logging_config import set_verbosity, setup_logging
from . import app
from ._common import err_console, resolve_config


@app.command()
def graph(
    input_file: Path = typer.Argument(
        ...,
        help="Scan result (JSON) with files, lines of code and file dependencies",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    decomposition: Optional[str] = typer.Option(
        None,
        "--decomposition",
        "-d",
        help="Only print the graph of this decomposition",
    ),
    orientation: Optional[str] = typer.Option(
        None,
        "--orientation",
        help="Default orientation (TB, BT, LR, RL) for decompositions without one",
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
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
):
    """
    Print the component dependency graph in Graphviz DOT format.

    [bold cyan]Examples:[/bold cyan]

      component-insight graph scan.json | dot -Tsvg > components.svg

      component-insight graph scan.json -d layers --orientation LR
    """
    setup_logging(verbose=verbose)

    try:
        settings = resolve_config(config=config, orientation=orientation, verbose=verbose)
        set_verbosity(settings.verbosity)
        results = AnalysisEngine(load_analysis_input(input_file), settings).run()
    except ComponentInsightError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    summaries = list(results.summaries)
    if decomposition is not None:
        summaries = [s for s in summaries if s.name == decomposition]
        if not summaries:
            err_console.print(f"[red]Error:[/red] unknown decomposition '{decomposition}'")
            raise typer.Exit(1)

    for summary in summaries:
        typer.echo(
            summary.graph.to_dot(name=summary.name, highlight_cycles=settings.highlight_cycles),
            nl=False,
        )
