from __future__ import annotations

import typer

from create_release import __version__
from create_release.cli.context import build_context
from create_release.core.errors import ErrorCode
from create_release.release.creator import run

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)


@app.command()
def create(
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    timeout: float = typer.Option(
        30.0,
        "--timeout",
        min=1.0,
        help="Seconds to wait for the GitHub API before giving up.",
    ),
) -> None:
    """Create a GitHub release from the step inputs (INPUT_* variables)."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))

    ctx = build_context(timeout=timeout)
    run(ctx.runtime, ctx.context, ctx.http, ctx.console)

    if ctx.runtime.failed:
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))


def main() -> None:
    app()
