"""Rich terminal formatter for Component Insight."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analysis.models import AnalysisResults, DecompositionSummary
from .base import BaseFormatter
from .text import (
    describe_decomposition,
    describe_dependencies,
    describe_edge_files,
    describe_error,
    plural,
)


class RichFormatter(BaseFormatter):
    """Per-decomposition component tables, dependency edges and warnings."""

    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console or Console()
        self.verbose = verbose

    def render(self, results: AnalysisResults) -> None:
        count = len(results.summaries)
        self.console.print()
        self.console.print("[bold cyan]COMPONENT INSIGHT: Logical Components[/bold cyan]")
        self.console.print(
            f"  Analyzed system has [bold]{count}[/bold] logical "
            f"decomposition{'s' if count != 1 else ''}"
        )
        for summary in results.summaries:
            self.console.print(
                f"  • {escape(summary.name)} ({plural(summary.component_count, 'component')})"
            )
        self.console.print()

        for index, summary in enumerate(results.summaries, 1):
            self._print_summary(index, summary)

        self._print_warnings(results)
        self._print_failures(results)

    def format(self, results: AnalysisResults) -> str:
        recorder = Console(record=True, width=120, file=io.StringIO())
        RichFormatter(console=recorder, verbose=self.verbose).render(results)
        return recorder.export_text()

    def _print_summary(self, index: int, summary: DecompositionSummary) -> None:
        console = self.console
        console.print(
            f"[bold]Logical Decomposition #{index}: {escape(summary.name.upper())}[/bold]"
        )
        console.print(f"  {escape(describe_decomposition(summary))}")
        console.print()

        components = Table(title="Components", title_justify="left")
        components.add_column("Component")
        components.add_column("Files", justify="right")
        components.add_column("LOC", justify="right")
        for component in summary.decomposition.components:
            components.add_row(
                escape(component.name), str(component.file_count), str(component.lines_of_code)
            )
        console.print(components)
        console.print()

        console.print("[bold]Dependencies[/bold]")
        for line in describe_dependencies(summary):
            console.print(f"  • {escape(line)}")

        if summary.edges:
            edges = Table(show_header=True)
            edges.add_column("From")
            edges.add_column("From Files")
            edges.add_column("")
            edges.add_column("To")
            for edge in summary.edges:
                dep = edge.dependency
                arrow = "->"
                if summary.cycles.is_cyclic(dep.from_component, dep.to_component):
                    arrow = "[red]->[/red]"
                files = escape(describe_edge_files(edge))
                if self.verbose:
                    files += "\n" + "\n".join(f"[dim]{escape(p)}[/dim]" for p in dep.paths_from)
                edges.add_row(escape(dep.from_component), files, arrow, escape(dep.to_component))
            console.print(edges)
        console.print()

    def _print_warnings(self, results: AnalysisResults) -> None:
        for summary in results.summaries:
            if not summary.errors:
                continue
            self.console.print(
                f"[bold yellow]WARNINGS ({len(summary.errors)})[/bold yellow] "
                "[dim]Places where dependencies cannot be resolved uniquely[/dim]"
            )
            for error in summary.errors:
                self.console.print(f"  • {escape(describe_error(summary, error))}")
            self.console.print()

    def _print_failures(self, results: AnalysisResults) -> None:
        for failure in results.failures:
            self.console.print(
                f"[red]Decomposition {escape(failure.name)} failed:[/red] {escape(failure.message)}"
            )
