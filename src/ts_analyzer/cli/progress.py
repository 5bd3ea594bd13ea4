"""Progress display for the per-file analysis loop."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from ..analysis.engine import ProgressCallback


@contextmanager
def file_progress(
    console: Console, label: str = "Analyzing", enabled: bool = True
) -> Iterator[Optional[ProgressCallback]]:
    """Yield an ``on_progress(done, total)`` callback backed by a Rich bar.

    Yields ``None`` when disabled (quiet or machine-readable output).
    """
    if not enabled:
        yield None
        return

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(bar_width=30),
        TaskProgressColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    ) as progress:
        task_id = progress.add_task(label, total=None)

        def _update(done: int, total: int) -> None:
            progress.update(task_id, completed=done, total=total)

        yield _update
