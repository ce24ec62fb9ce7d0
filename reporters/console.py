"""Terminal output — stylish-format findings and baseline summaries via rich."""
from collections import Counter
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from core.baseline import Baseline
from core.models import SEVERITY_ERROR, LintResult
from core.processor import BaselineState
from reporters.report import summarize

console = Console()

_STATE_NOTICES = {
    BaselineState.CREATED: "[bold cyan]Baseline created[/bold cyan] at {path} ({count} violation(s)); reporting all findings this once.",
    BaselineState.APPLIED: "[dim]Baseline {path}: {count} known violation(s) suppressed where unchanged.[/dim]",
    BaselineState.UPDATED: "[bold cyan]Baseline updated[/bold cyan] at {path} ({count} violation(s)).",
}


def _plural(n: int, word: str) -> str:
    return f"{n} {word}{'' if n == 1 else 's'}"


def print_state(state: Optional[BaselineState], path: str, baseline: Optional[Baseline],
                out: Optional[Console] = None) -> None:
    if state is None:
        return
    out = out or console
    out.print(_STATE_NOTICES[state].format(path=escape(path), count=len(baseline) if baseline is not None else 0))


def print_results(results: List[LintResult], out: Optional[Console] = None) -> None:
    out = out or console
    totals = summarize(results)
    problems = totals["errors"] + totals["warnings"]

    if problems == 0 and not any(r.messages for r in results):
        out.print("\n[bold green]✓ No new problems.[/bold green]\n")
        return

    for result in results:
        if not result.messages:
            continue
        out.print()
        out.print(Text(result.file_path, style="underline"))
        table = Table.grid(padding=(0, 2))
        table.add_column(style="dim", justify="right")
        table.add_column()
        table.add_column()
        table.add_column(style="dim")
        for m in result.messages:
            level = Text("error", style="red") if m.severity == SEVERITY_ERROR else Text("warning", style="yellow")
            table.add_row(f"{m.line or 0}:{m.column or 0}", level, Text(m.message), Text(m.rule_id or ""))
        out.print(table)

    style = "bold red" if totals["errors"] else "bold yellow"
    out.print()
    out.print(
        f"[{style}]✖ {_plural(problems, 'problem')} "
        f"({_plural(totals['errors'], 'error')}, {_plural(totals['warnings'], 'warning')})[/{style}]"
    )
    if totals["fixable_errors"] or totals["fixable_warnings"]:
        out.print(
            f"[{style}]  {_plural(totals['fixable_errors'], 'error')} and "
            f"{_plural(totals['fixable_warnings'], 'warning')} potentially fixable with the `--fix` option.[/{style}]"
        )
    out.print()


def print_baseline_summary(baseline: Baseline, path: str, out: Optional[Console] = None) -> None:
    out = out or console
    out.print(f"\n[bold]Baseline:[/bold] [cyan]{escape(path)}[/cyan]  ({_plural(len(baseline), 'violation')})\n")
    if not len(baseline):
        return

    by_file = Table(title="By file", title_justify="left")
    by_file.add_column("File")
    by_file.add_column("Violations", justify="right")
    by_file.add_column("Unhashed", justify="right")
    for file_path in sorted(baseline.files()):
        vs = baseline.violations_for(file_path)
        by_file.add_row(Text(file_path), str(len(vs)), str(sum(1 for v in vs if not v.hash)))
    out.print(by_file)

    rule_counts = Counter(v.rule_id for v in baseline.get_violations())
    by_rule = Table(title="By rule", title_justify="left")
    by_rule.add_column("Rule")
    by_rule.add_column("Violations", justify="right")
    for rule_id, count in rule_counts.most_common():
        by_rule.add_row(Text(rule_id), str(count))
    out.print(by_rule)
    out.print()
