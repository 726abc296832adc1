"""
Console reporter for pipeline results.

Formats the statistics table using Rich for clear, colored output.
"""

from rich.console import Console
from rich.table import Table

from vulnreport.pipeline.core import PipelineResult

SEVERITY_STYLES: dict[str, str] = {
    "高": "bold red",
    "中": "yellow",
    "低": "green",
    "未知": "dim",
}


class ConsoleReporter:
    """Formats and displays consolidation results to the console."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_results(self, run: PipelineResult) -> None:
        """
        Print the statistics table followed by a totals summary.

        Args:
            run: Result of a pipeline run.
        """
        table = Table(title="问题统计表格", show_header=True)
        table.add_column("序号", justify="right", style="cyan", no_wrap=True)
        table.add_column("问题名称")
        table.add_column("严重性级别", justify="center")
        table.add_column("问题个数", justify="right")

        for item in run.statistics:
            style = SEVERITY_STYLES.get(item.severity_level, "")
            table.add_row(
                str(item.seq_num),
                item.problem_name or "-",
                f"[{style}]{item.severity_level}[/{style}]" if style else item.severity_level,
                str(item.problem_count),
            )

        self.console.print(table)
        self._print_summary(run)

    def _print_summary(self, run: PipelineResult) -> None:
        """
        Print summary statistics.

        Args:
            run: Result of a pipeline run.
        """
        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  Merged rows: {run.merged_rows}")
        self.console.print(f"  [yellow]Duplicates removed: {run.duplicates_removed}[/yellow]")
        self.console.print(f"  [green]Records: {run.result.total_records}[/green]")
        self.console.print(f"  Groups: {run.result.total_groups}")
