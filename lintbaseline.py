#!/usr/bin/env python3
"""lintbaseline — run ESLint against a baseline so only new problems are reported"""
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

sys.path.insert(0, str(Path(__file__).parent))

import click  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.progress import Progress, SpinnerColumn, TextColumn  # noqa: E402

from core import serialize  # noqa: E402
from core.config import (  # noqa: E402
    DEFAULT_BASELINE_FILE, ENV_BASELINE_FILE, ENV_CWD, ENV_ESLINT, ENV_UPDATE, ProcessorConfig,
)
from core.log import setup_logging  # noqa: E402
from core.models import LintResult  # noqa: E402
from core.processor import Processor  # noqa: E402
from reporters import console as con_reporter  # noqa: E402
from reporters import report as rep  # noqa: E402
from scanners import eslint  # noqa: E402

__version__ = "1.0.0"

console = Console(stderr=True)
logger = logging.getLogger("lintbaseline")


class FatalError(click.ClickException):
    """Bad baseline, analyzer failure, unreadable input: distinct from 'problems found'."""
    exit_code = 2


@click.group()
@click.version_option(__version__, prog_name="lintbaseline")
def cli():
    """lintbaseline — run ESLint against a baseline so only new problems are reported"""


_baseline_option = click.option(
    "--baseline-file", "-b", default=DEFAULT_BASELINE_FILE, show_default=True, envvar=ENV_BASELINE_FILE,
    help="Path to the baseline file (relative paths are taken from --cwd).",
)
_cwd_option = click.option(
    "--cwd", default=None, envvar=ENV_CWD, type=click.Path(exists=True, file_okay=False),
    help="Working directory. Files in the baseline are resolved relative to this. [default: current directory]",
)
_verbose_option = click.option("--verbose", "-v", is_flag=True, help="Verbose output")


@cli.command()
@click.argument("files", nargs=-1)
@_baseline_option
@click.option(
    "--update-baseline", "-u", "update", is_flag=True, envvar=ENV_UPDATE,
    help="Replace the baseline with the current findings.",
)
@_cwd_option
@click.option(
    "--results", "-r", "results_file", default=None,
    help="Read ESLint JSON results from this file ('-' for stdin) instead of running ESLint.",
)
@click.option("--eslint", "eslint_bin", default=None, envvar=ENV_ESLINT, help="Path to the eslint executable.")
@click.option(
    "--format", "-f", "fmt",
    type=click.Choice(["stylish", "json"], case_sensitive=False),
    default="stylish", show_default=True,
    help="Output format for the remaining findings.",
)
@click.option("--output", "-o", default=None, help="Write the report to this file instead of stdout.")
@_verbose_option
def run(files: Tuple[str, ...], baseline_file: str, update: bool, cwd: Optional[str], results_file: Optional[str],
        eslint_bin: Optional[str], fmt: str, output: Optional[str], verbose: bool):
    """
    Lint FILES with ESLint and report only problems not in the baseline.

    \b
    The first run (no baseline file) records every current problem and reports them once.
    Later runs report only new problems. --update-baseline accepts the current state.

    \b
    Examples:
      lintbaseline run src/
      lintbaseline run -u src/
      eslint -f json src/ | lintbaseline run --results -
    """
    setup_logging(verbose)
    cwd = os.path.abspath(cwd or os.getcwd())
    config = ProcessorConfig(baseline_file=baseline_file, update_baseline=update, cwd=cwd)

    results = _collect_results(files, cwd, results_file, eslint_bin)
    processor = Processor(config)
    try:
        processed = processor.process(results)
    except serialize.BaselineFormatError as exc:
        raise FatalError(f"Invalid baseline {config.baseline_path}: {exc}") from exc
    except OSError as exc:
        raise FatalError(f"Baseline I/O failed: {exc}") from exc

    con_reporter.print_state(processor.state, str(config.baseline_path), processor.baseline, out=console)
    _report(processed, fmt, output)
    sys.exit(1 if any(r.error_count > 0 for r in processed) else 0)


@cli.command()
@_baseline_option
@_cwd_option
@_verbose_option
def show(baseline_file: str, cwd: Optional[str], verbose: bool):
    """Summarize the violations recorded in a baseline file."""
    setup_logging(verbose)
    config = ProcessorConfig(baseline_file=baseline_file, cwd=os.path.abspath(cwd or os.getcwd()))
    path = config.baseline_path
    if not path.is_file():
        raise FatalError(f"No baseline file at {path}")
    try:
        baseline = serialize.deserialize(path.read_text(encoding="utf-8"))
    except serialize.BaselineFormatError as exc:
        raise FatalError(f"Invalid baseline {path}: {exc}") from exc
    except OSError as exc:
        raise FatalError(f"Unable to read baseline: {exc}") from exc
    con_reporter.print_baseline_summary(baseline, str(path), out=Console())


def _collect_results(files: Tuple[str, ...], cwd: str, results_file: Optional[str],
                     eslint_bin: Optional[str]) -> List[LintResult]:
    try:
        if results_file:
            if files:
                logger.warning("FILES are ignored when --results is given")
            return eslint.load_results(results_file)
        with _spinner("Running eslint…"):
            return eslint.run_eslint(list(files), cwd=cwd, eslint_bin=eslint_bin)
    except eslint.AnalyzerError as exc:
        raise FatalError(str(exc)) from exc


def _report(results: List[LintResult], fmt: str, output: Optional[str]) -> None:
    if fmt == "json":
        if output:
            console.print(f"[bold]Report:[/bold] [cyan]{rep.save_json(results, output)}[/cyan]")
        else:
            click.echo(rep.render_json(results))
        return

    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8") as fh:
            con_reporter.print_results(results, out=Console(file=fh, no_color=True, width=120))
        console.print(f"[bold]Report:[/bold] [cyan]{out_path}[/cyan]")
    else:
        con_reporter.print_results(results)


class _spinner:
    def __init__(self, msg: str):
        self._progress = Progress(
            SpinnerColumn(), TextColumn(f"[progress.description]{msg}"),
            console=console, transient=True,
        )

    def __enter__(self):
        self._progress.__enter__()
        self._progress.add_task("", total=None)
        return self

    def __exit__(self, *args):
        self._progress.__exit__(*args)


if __name__ == "__main__":
    cli()
