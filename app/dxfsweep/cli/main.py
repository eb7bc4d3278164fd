"""Main CLI application entry point.

Defines the Typer application. A plain ``dxfsweep`` invocation runs one
sweep against the job share; the options only adjust logging or point
the sweep at another tree.
"""

from pathlib import Path
from typing import Annotated

import typer

from dxfsweep import __version__
from dxfsweep.sweep.errors import PolicyError, SweepError
from dxfsweep.sweep.policy import build_policy
from dxfsweep.sweep.sweeper import RetentionSweeper
from dxfsweep.utils.formatting import configure_logging, print_error

app = typer.Typer(
    name="dxfsweep",
    help="Delete expired NX DXF exports and their log files from the job share.",
    no_args_is_help=False,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dxfsweep version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every skipped entry and removed file.",
        ),
    ] = False,
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            envvar="DXF_SWEEP_ROOT",
            hidden=True,
            help="Sweep this tree instead of the job share.",
        ),
    ] = None,
) -> None:
    """Sweep Fab/**/DXF folders and delete DXF files older than the retention window."""
    configure_logging(verbose)

    overrides: dict[str, object] = {}
    if root is not None:
        overrides["root"] = root

    try:
        policy = build_policy(**overrides)
        sweeper = RetentionSweeper(policy)
    except PolicyError as e:
        print_error(str(e))
        raise typer.Exit(code=2) from e

    try:
        sweeper.run()
    except SweepError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
