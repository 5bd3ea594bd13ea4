"""Main analysis command."""

from pathlib import Path
from typing import Optional

import typer

from ..api import analyze as run_analysis
from ..exceptions import TsAnalyzerError
from ..formatters import JsonFormatter, RichFormatter
from ..logging_config import setup_logging
from ..visualization import generate_report
from . import app
from ._common import console, err_console, resolve_config
from .progress import file_progress


@app.command()
def analyze(
    project_dir: Optional[Path] = typer.Argument(
        None,
        help="Project root to analyze",
        show_default=False,
    ),
    path: Optional[str] = typer.Option(
        None,
        "-p",
        "--path",
        help="Output HTML report path, relative to the project [default: analysis_report.html]",
    ),
    duplicates: bool = typer.Option(
        False, "-d", "--duplicates", help="Detect duplicate files by content hash"
    ),
    complexity: bool = typer.Option(
        False, "-c", "--complexity", help="Calculate cyclomatic complexity"
    ),
    functions: bool = typer.Option(
        False, "-f", "--functions", help="Count functions, classes and arrow functions"
    ),
    all_analyses: bool = typer.Option(
        False, "-a", "--all", help="Enable all analysis features (default when none is given)"
    ),
    ignore: Optional[str] = typer.Option(
        None,
        "-i",
        "--ignore",
        help="Additional ignore globs, comma-separated",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print machine-readable JSON to stdout instead of writing a report",
    ),
    no_report: bool = typer.Option(
        False,
        "--no-report",
        help="Print the terminal summary only",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers for file analysis",
        min=1,
        max=32,
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose output"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only print errors"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """
    Analyze a TypeScript project: lines of code, functions, dependencies,
    cyclomatic complexity and duplicate files.

    [bold cyan]Examples:[/bold cyan]

      ts-analyzer ./my-app --all

      ts-analyzer ./my-app -d -c --path report.html

      ts-analyzer ./my-app --all --ignore "**/__mocks__/**,**/fixtures/**"

      ts-analyzer ./my-app --json
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]ts-analyzer[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    if project_dir is None:
        err_console.print("[red]Error:[/red] project directory is required.")
        err_console.print("Run 'ts-analyzer --help' for usage.")
        raise typer.Exit(1)

    logger = setup_logging(verbose=verbose, quiet=quiet or json_output)

    if not project_dir.is_dir():
        err_console.print(f"[red]Error:[/red] Directory not found: {project_dir}")
        raise typer.Exit(1)

    root = project_dir.resolve()

    try:
        settings = resolve_config(
            config=config,
            duplicates=duplicates,
            complexity=complexity,
            functions=functions,
            all_analyses=all_analyses,
            ignore=ignore,
            output_path=path,
            workers=workers,
            verbose=verbose,
            quiet=quiet,
        )

        # Config files and env vars may also set verbosity
        quiet = settings.verbosity == "quiet"
        verbose = settings.verbosity == "verbose"
        logger = setup_logging(verbose=verbose, quiet=quiet or json_output)

        if not json_output and not quiet:
            err_console.print(f"Scanning {root} ...")

        with file_progress(err_console, enabled=not (json_output or quiet)) as on_progress:
            result = run_analysis(str(root), config=settings, on_progress=on_progress)

        if json_output:
            JsonFormatter().render(result)
            return

        if not result.results and not result.skipped:
            err_console.print("[yellow]No .ts or .tsx files found.[/yellow]")
            raise typer.Exit(0)

        if not quiet:
            RichFormatter(root=str(root)).render(result)

        if not no_report:
            report_path = generate_report(
                result,
                project_name=root.name,
                output_path=root / settings.output_path,
                root=str(root),
            )
            logger.info(f"Report written to {report_path}")
            if not quiet:
                console.print(f"[green]Report generated:[/green] {report_path}")

    except typer.Exit:
        raise

    except TsAnalyzerError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        err_console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            err_console.print_exception()
        raise typer.Exit(1)
