"""
recipe-hooks — CLI entry point.

Usage:
  recipe-hooks run                      # run the bundled RecipeBox suite
  recipe-hooks run --verbose --tracebacks
  recipe-hooks run --log-level DEBUG    # stream lifecycle transitions to stderr
  recipe-hooks list                     # show groups, hooks and units
  recipe-hooks --version
"""

from __future__ import annotations

import typer

from core.config import LOG_LEVEL, LOG_LEVEL_ENV, SHOW_TRACEBACKS, TRACEBACKS_ENV
from lifecycle import Runner
from lifecycle.logger import set_level
from recipes.examples import build_suite

from . import __version__
from .display import console, err, print_group_tree, print_run_result

# ── App ───────────────────────────────────────────────────────────────────────

app = typer.Typer(
    name="recipe-hooks",
    help="Run the RecipeBox fixture lifecycle walkthrough",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# ── Shared options ────────────────────────────────────────────────────────────

VERBOSE_OPT = typer.Option(False, "--verbose", "-v", help="Show failure and skip detail per unit")
LOG_LEVEL_OPT = typer.Option(LOG_LEVEL, "--log-level", "-l", help="Harness log level on stderr", envvar=LOG_LEVEL_ENV)
TRACEBACKS_OPT = typer.Option(
    SHOW_TRACEBACKS, "--tracebacks/--no-tracebacks", help="Print tracebacks of failures", envvar=TRACEBACKS_ENV
)


@app.callback()
def root(
    version: bool = typer.Option(False, "--version", "-V", help="Print version and exit", is_eager=True),
) -> None:
    """[bold]recipe-hooks[/bold] — per-unit and per-group fixture lifecycles, demonstrated on a RecipeBox"""
    if version:
        console.print(f"recipe-hooks [bold]v{__version__}[/bold]")
        raise typer.Exit()


# ── Subcommands ───────────────────────────────────────────────────────────────


@app.command()
def run(
    verbose: bool = VERBOSE_OPT,
    log_level: str = LOG_LEVEL_OPT,
    tracebacks: bool = TRACEBACKS_OPT,
) -> None:
    """
    Run the bundled suite and print a per-unit report.

    Exits 1 when any unit failed or errored, or a group teardown failed.
    """
    try:
        set_level(log_level)
    except ValueError:
        err(f"Unknown log level [bold]{log_level}[/bold]")
        raise typer.Exit(2) from None

    result = Runner().run(build_suite())
    print_run_result(result, verbose=verbose, tracebacks=tracebacks)
    raise typer.Exit(result.exit_code)


@app.command(name="list")
def list_units() -> None:
    """Show the bundled suite's groups, hooks and units without running them."""
    print_group_tree(build_suite())


# ── Entry ─────────────────────────────────────────────────────────────────────


def main() -> None:
    app()


if __name__ == "__main__":
    main()
