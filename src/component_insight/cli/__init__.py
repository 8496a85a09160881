"""CLI entry point: registers all subcommands."""

import typer

app = typer.Typer(
    name="component-insight",
    help="Component Insight - Logical Component Dependency Analyzer",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


# Import subcommands to register them
from .analyze import analyze as _analyze  # noqa: F401, E402
from .graph import graph as _graph  # noqa: F401, E402
