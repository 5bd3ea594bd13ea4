"""Rich terminal formatter for ts-analyzer."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..analysis.duplicates import duplicate_paths
from ..models import AnalysisResult
from .base import BaseFormatter

console = Console()

TOP_N = 15

_LEVEL_COLORS = {
    "Low": "green",
    "Medium": "yellow",
    "High": "red",
    "Very High": "bold red",
}


def _level_label(level: str) -> str:
    color = _LEVEL_COLORS.get(level, "white")
    return f"[{color}]{level}[/{color}]"


class RichFormatter(BaseFormatter):
    """Summary table, most complex files, duplicate groups and skips."""

    def __init__(self, top_n: int = TOP_N, root: str = ""):
        self.top_n = top_n
        self.root = root

    def render(self, result: AnalysisResult) -> None:
        self._print_summary(result)
        self._print_files(result)
        self._print_duplicates(result)
        self._print_skipped(result)

    def format(self, result: AnalysisResult) -> str:
        # Rich output goes directly to console; return empty string
        self.render(result)
        return ""

    def _display_path(self, path: str) -> str:
        if self.root and path.startswith(self.root):
            path = path[len(self.root):].lstrip("/\\") or path
        return escape(path)

    def _print_summary(self, result: AnalysisResult) -> None:
        s = result.summary
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column(style="dim")
        table.add_column(style="bold")

        table.add_row("Files", str(s.total_files))
        table.add_row("Lines", f"{s.total_lines} ({s.total_code_lines} code)")
        if s.total_functions is not None:
            table.add_row("Functions", str(s.total_functions))
        if s.total_complexity is not None:
            table.add_row(
                "Complexity", f"{s.total_complexity} ({_level_label(s.complexity_level or '')})"
            )
        if s.duplicate_group_count is not None:
            color = "yellow" if s.duplicate_group_count else "green"
            table.add_row("Duplicate groups", f"[{color}]{s.duplicate_group_count}[/{color}]")
        if result.skipped:
            table.add_row("Skipped", f"[red]{len(result.skipped)}[/red]")

        console.print()
        console.print("[bold cyan]TS ANALYZER[/bold cyan]")
        console.print(table)
        console.print()

    def _print_files(self, result: AnalysisResult) -> None:
        if not result.results:
            return

        opts = result.options
        dupes = duplicate_paths(result.duplicate_groups)

        if opts.complexity:
            ranked = sorted(result.results, key=lambda r: (-r.complexity, r.path))
            title = f"Top {min(self.top_n, len(ranked))} files by complexity"
        else:
            ranked = sorted(result.results, key=lambda r: (-r.total_lines, r.path))
            title = f"Top {min(self.top_n, len(ranked))} files by size"

        table = Table(title=title, title_justify="left", show_lines=False)
        table.add_column("File", overflow="fold")
        table.add_column("Lines", justify="right")
        table.add_column("Code", justify="right")
        if opts.functions:
            table.add_column("Functions", justify="right")
        if opts.complexity:
            table.add_column("Complexity", justify="right")
        table.add_column("Deps", justify="right")

        for r in ranked[: self.top_n]:
            name = self._display_path(r.path)
            if r.path in dupes:
                name = f"[yellow]{name}[/yellow] [dim](dup)[/dim]"
            row = [name, str(r.total_lines), str(r.code_lines)]
            if opts.functions:
                row.append(str(r.function_count))
            if opts.complexity:
                row.append(str(r.complexity))
            row.append(str(len(r.dependencies)))
            table.add_row(*row)

        console.print(table)
        remaining = len(ranked) - self.top_n
        if remaining > 0:
            console.print(f"  [dim]... and {remaining} more[/dim]")
        console.print()

    def _print_duplicates(self, result: AnalysisResult) -> None:
        if not result.duplicate_groups:
            return
        console.print(
            f"[bold yellow]DUPLICATES[/bold yellow] — "
            f"{len(result.duplicate_groups)} group(s) of identical files"
        )
        for group in result.duplicate_groups:
            console.print(f"  [dim]{group.hash[:12]}[/dim]")
            for path in group.files:
                console.print(f"    {self._display_path(path)}")
        console.print()

    def _print_skipped(self, result: AnalysisResult) -> None:
        if not result.skipped:
            return
        console.print(f"[bold red]SKIPPED[/bold red] — {len(result.skipped)} file(s)")
        for skip in result.skipped:
            console.print(f"  {self._display_path(skip.path)}: [dim]{escape(skip.reason)}[/dim]")
        console.print()
