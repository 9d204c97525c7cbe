"""Rich display helpers — run reports, declaration trees, status lines."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme
from rich.tree import Tree

from lifecycle import Group, RunResult, Status

# ── Colour palette ───────────────────────────────────────────────────────────
THEME = Theme(
    {
        "hooks.accent": "#C8A84B",
        "hooks.text": "#A4B4CC",
        "hooks.muted": "#5A6278",
        "hooks.ok": "#3d9e5a",
        "hooks.warn": "#d4a017",
        "hooks.err": "#e05555",
    }
)

console = Console(theme=THEME, highlight=False)

_STATUS_STYLE = {
    Status.PASSED: ("hooks.ok", "✓"),
    Status.FAILED: ("hooks.err", "✗"),
    Status.ERROR: ("hooks.err", "!"),
    Status.SKIPPED: ("hooks.warn", "○"),
}


# ── Run report ────────────────────────────────────────────────────────────────


def print_run_result(result: RunResult, verbose: bool = False, tracebacks: bool = False) -> None:
    """Print every unit's status, then failures, then a summary panel."""
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 2))
    table.add_column("", no_wrap=True, width=2)
    table.add_column("Unit", style="hooks.text")
    table.add_column("Status", no_wrap=True)
    table.add_column("ms", justify="right", style="hooks.muted")
    if verbose:
        table.add_column("Detail", style="hooks.muted")

    for unit in result.results:
        style, icon = _STATUS_STYLE[unit.status]
        row = [
            f"[{style}]{icon}[/{style}]",
            escape(unit.name),
            f"[{style}]{unit.status.value}[/{style}]",
            f"{unit.duration_ms:.1f}",
        ]
        if verbose:
            row.append(escape(unit.message))
        table.add_row(*row)
    console.print(table)

    skipped = [u for u in result.results if u.status is Status.SKIPPED]
    for unit in skipped:
        warn(f"{escape(unit.name)} — skipped: {escape(unit.skip_reason)}")

    for unit in result.results:
        for failure in unit.failures:
            err(f"{escape(unit.name)} — {failure.phase}: {escape(str(failure))}")
            if tracebacks:
                console.print(failure.details, markup=False, style="hooks.muted")
    for failure in result.group_failures:
        err(f"{escape(failure.group)} — group teardown: {escape(str(failure))}")
        if tracebacks:
            console.print(failure.details, markup=False, style="hooks.muted")

    color = "hooks.ok" if result.success else "hooks.err"
    label = "PASSED" if result.success else "FAILED"
    summary = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    summary.add_column(style="hooks.muted", no_wrap=True, width=12)
    summary.add_column()
    summary.add_row("Status", f"[{color}]{label}[/{color}]")
    summary.add_row(
        "Units",
        f"[hooks.accent]{result.total}[/hooks.accent]  "
        f"[hooks.ok]{result.passed} passed[/hooks.ok] · "
        f"[hooks.err]{result.failed} failed[/hooks.err] · "
        f"[hooks.err]{result.errors} errors[/hooks.err] · "
        f"[hooks.warn]{result.skipped} skipped[/hooks.warn]",
    )
    summary.add_row("Duration", f"[hooks.text]{result.duration_ms:.1f}ms[/hooks.text]")
    console.print(Panel(summary, title=f"[{color}]Run Results[/{color}]", border_style=color, padding=(1, 2)))


# ── Declaration tree ─────────────────────────────────────────────────────────


def print_group_tree(group: Group) -> None:
    """Print a group's nested groups, hooks and units."""
    console.print(_build_tree(group, Tree(f"[hooks.accent]{escape(group.name)}[/hooks.accent]")))


def _build_tree(group: Group, tree: Tree) -> Tree:
    for scope in ("group", "unit"):
        for action in group.actions(scope):
            tree.add(f"[hooks.muted]{scope} {action.kind.value}: {escape(action.name)}[/hooks.muted]")
    for child in group.children:
        if isinstance(child, Group):
            _build_tree(child, tree.add(f"[hooks.accent]{escape(child.name)}[/hooks.accent]"))
        elif child.skip_reason is not None:
            tree.add(
                f"[hooks.warn]○ {escape(child.description)}[/hooks.warn] "
                f"[hooks.muted]({escape(child.skip_reason)})[/hooks.muted]"
            )
        else:
            tree.add(f"[hooks.text]{escape(child.description)}[/hooks.text]")
    return tree


# ── Status lines ─────────────────────────────────────────────────────────────


def warn(message: str) -> None:
    console.print(f"  [hooks.warn]⚠[/hooks.warn]  {message}", soft_wrap=True)


def err(message: str) -> None:
    console.print(f"  [hooks.err]✗[/hooks.err]  [hooks.err]{message}[/hooks.err]", soft_wrap=True)
