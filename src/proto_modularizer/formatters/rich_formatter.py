"""Rich terminal formatter for proto-modularizer."""

from typing import List, Optional

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table

from ..evaluation.models import ComparisonReport, Direction, QualityMetrics, ValidationReport
from ..graph.dependency_graph import DependencyGraph
from ..partitioning.models import Partition
from .base import BaseFormatter


def _score_label(score: float) -> str:
    if score >= 80.0:
        return "[green bold]excellent[/green bold]"
    elif score >= 60.0:
        return "[green]good[/green]"
    elif score >= 40.0:
        return "[yellow]fair[/yellow]"
    else:
        return "[red]poor[/red]"


def _gini_label(gini: float) -> str:
    if gini < 0.20:
        return "[green]balanced[/green]"
    elif gini < 0.40:
        return "[yellow]moderate skew[/yellow]"
    else:
        return "[red]dominated[/red]"


def _number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


class RichFormatter(BaseFormatter):
    """Rich terminal output: summary panels and tables."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _print(self, renderables: List[RenderableType]) -> None:
        for renderable in renderables:
            self.console.print(renderable)

    def _capture(self, renderables: List[RenderableType]) -> str:
        with self.console.capture() as capture:
            self._print(renderables)
        return capture.get()

    # -- BaseFormatter --

    def format_graph(self, graph: DependencyGraph) -> str:
        return self._capture(self._graph(graph))

    def format_partition(self, partition: Partition, build_order: Optional[List[str]]) -> str:
        return self._capture(self._partition(partition, build_order))

    def format_evaluation(self, report: ValidationReport, metrics: QualityMetrics) -> str:
        return self._capture(self._validation(report) + self._metrics(metrics))

    def format_comparison(self, report: ComparisonReport) -> str:
        return self._capture(self._comparison(report))

    def render_graph(self, graph: DependencyGraph) -> None:
        self._print(self._graph(graph))

    def render_partition(self, partition: Partition, build_order: Optional[List[str]]) -> None:
        self._print(self._partition(partition, build_order))

    def render_evaluation(self, report: ValidationReport, metrics: QualityMetrics) -> None:
        self._print(self._validation(report) + self._metrics(metrics))

    def render_comparison(self, report: ComparisonReport) -> None:
        self._print(self._comparison(report))

    # -- private helpers --

    def _graph(self, graph: DependencyGraph) -> List[RenderableType]:
        stats = graph.statistics()
        summary = (
            f"[bold]{stats.total_files}[/bold] files in "
            f"[cyan]{stats.total_namespaces}[/cyan] namespaces  |  "
            f"{stats.total_messages} messages, {stats.total_enums} enums  |  "
            f"{stats.total_edges} import edges"
        )
        out: List[RenderableType] = [
            Panel(summary, title="[bold cyan]Dependency Graph[/bold cyan]", expand=False)
        ]

        table = Table(title="Graph Statistics")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_row("Root files", str(stats.root_files))
        table.add_row("Leaf files", str(stats.leaf_files))
        table.add_row("Cross-namespace edges", str(stats.cross_namespace_edges))
        table.add_row("Unresolved imports", str(stats.unresolved_imports))
        cycle_style = "red" if stats.cycle_count else "green"
        table.add_row("Cycles", f"[{cycle_style}]{stats.cycle_count}[/{cycle_style}]")
        out.append(table)

        cycles = graph.detect_cycles()
        for cycle in cycles:
            out.append(f"  [red]![/red] {' -> '.join(cycle + cycle[:1])}")

        edges = graph.cross_namespace_edges()
        if edges:
            edge_table = Table(title="Namespace Dependencies")
            edge_table.add_column("Namespace", style="yellow")
            edge_table.add_column("Depends on", style="white")
            for source, target in edges:
                edge_table.add_row(source, target)
            out.append(edge_table)
        return out

    def _partition(
        self, partition: Partition, build_order: Optional[List[str]]
    ) -> List[RenderableType]:
        stats = partition.statistics()
        summary = (
            f"Strategy: [cyan]{partition.strategy}[/cyan]  |  "
            f"[bold]{stats.total_modules}[/bold] modules, {stats.total_files} files  |  "
            f"avg {stats.average_files_per_module:.1f} files/module "
            f"(min {stats.smallest_module}, max {stats.largest_module})"
        )
        out: List[RenderableType] = [
            Panel(summary, title="[bold cyan]Partition[/bold cyan]", expand=False)
        ]

        table = Table(title="Modules", expand=True)
        table.add_column("Module", style="yellow", no_wrap=True)
        table.add_column("Files", justify="right", width=6)
        table.add_column("Messages", justify="right", width=9)
        table.add_column("Enums", justify="right", width=6)
        table.add_column("Dependencies", style="white", ratio=2)
        for module in partition.modules:
            deps = ", ".join(sorted(module.dependencies)) or "[dim]-[/dim]"
            table.add_row(
                module.name,
                str(module.file_count),
                str(module.message_count),
                str(module.enum_count),
                deps,
            )
        out.append(table)

        if build_order is None:
            out.append("[red]No build order: modules have circular dependencies or duplicate names[/red]")
        else:
            out.append("[bold]Build order:[/bold]")
            for i, name in enumerate(build_order, 1):
                out.append(f"  {i:>3}. {name}")
        return out

    def _validation(self, report: ValidationReport) -> List[RenderableType]:
        if report.is_valid:
            status = "[green bold]VALID[/green bold]"
        else:
            status = f"[red bold]INVALID[/red bold] ({len(report.errors)} error(s))"
        out: List[RenderableType] = [
            Panel(status, title="[bold cyan]Validation[/bold cyan]", expand=False)
        ]
        for error in report.errors:
            out.append(f"  [red]x[/red] {error}")
        for warning in report.warnings:
            out.append(f"  [yellow]![/yellow] {warning}")
        return out

    def _metrics(self, metrics: QualityMetrics) -> List[RenderableType]:
        table = Table(title="Quality Metrics")
        table.add_column("Section", style="dim")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")

        rows = [
            ("Granularity", "Total modules", _number(metrics.total_modules)),
            ("", "Module size (min / max)",
             f"{metrics.min_module_size} / {metrics.max_module_size}"),
            ("", "Module size (mean / median)",
             f"{metrics.average_module_size:.2f} / {_number(metrics.median_module_size)}"),
            ("", "Module size std-dev", f"{metrics.stddev_module_size:.2f}"),
            ("", "Gini coefficient",
             f"{metrics.gini_coefficient:.3f} ({_gini_label(metrics.gini_coefficient)})"),
            ("Cohesion", "Namespaces per module", f"{metrics.namespaces_per_module:.2f}"),
            ("", "Cross-namespace edges inside modules",
             str(metrics.cross_namespace_edges_within_modules)),
            ("Coupling", "Module dependencies (total)", str(metrics.total_module_dependencies)),
            ("", "Dependencies per module (avg / max)",
             f"{metrics.average_dependencies_per_module:.2f} / "
             f"{metrics.max_dependencies_per_module}"),
            ("", "Max dependency depth", str(metrics.max_dependency_depth)),
            ("", "Fan-in (avg / max)", f"{metrics.average_fan_in:.2f} / {metrics.max_fan_in}"),
            ("Build", "Root / leaf modules", f"{metrics.root_modules} / {metrics.leaf_modules}"),
            ("", "Build levels", str(metrics.build_levels)),
            ("", "Max parallelism", str(metrics.max_parallelism)),
            ("", "Critical path", str(metrics.critical_path_length)),
        ]
        for row in rows:
            table.add_row(*row)

        breakdown = metrics.score_breakdown
        score_text = (
            f"[bold]{metrics.quality_score:.1f}[/bold] / 100 "
            f"({_score_label(metrics.quality_score)})\n"
            f"[dim]granularity {breakdown.granularity:.1f}  |  "
            f"cohesion {breakdown.cohesion:.1f}  |  "
            f"coupling {breakdown.coupling:.1f}  |  "
            f"build {breakdown.build_efficiency:.1f}[/dim]"
        )
        return [table, Panel(score_text, title="[bold cyan]Quality Score[/bold cyan]", expand=False)]

    def _comparison(self, report: ComparisonReport) -> List[RenderableType]:
        table = Table(title=f"{report.name_a} vs {report.name_b}")
        table.add_column("Section", style="dim")
        table.add_column("Metric", style="cyan")
        table.add_column(report.name_a, justify="right")
        table.add_column(report.name_b, justify="right")
        table.add_column("Better", justify="center")
        table.add_column("Winner", style="green")

        arrows = {Direction.LOWER: "lower", Direction.HIGHER: "higher", Direction.NEUTRAL: "-"}
        section = None
        for row in report.rows:
            table.add_row(
                row.section if row.section != section else "",
                row.label,
                _number(row.value_a),
                _number(row.value_b),
                arrows[row.direction],
                report.winner_name(row) or "",
            )
            section = row.section
        return [table]
