"""CLI commands using Typer.

Each command loads a fixture file into a simulated filesystem, runs one
operation against it, and prints the result. ``mkdir --write`` saves the
mutated tree back to the fixture.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from simfs import __version__
from simfs.console import ConsoleOutput
from simfs.context import AppContext, create_context
from simfs.errors import SimFSError
from simfs.fixtures import dump_tree
from simfs.memory import SimulatedFileSystem
from simfs.mkdirs import make_dirs

app = typer.Typer(
    name="simfs",
    help="Inspect and modify simulated filesystem fixtures",
    no_args_is_help=True,
)

console = Console()
output = ConsoleOutput(console)

FixtureArg = Annotated[
    Path, typer.Argument(help="YAML or JSON fixture holding the tree")
]
ConfigOption = Annotated[
    Path | None, typer.Option("--config", "-c", help="YAML settings file")
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"simfs v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log filesystem operations")
    ] = False,
) -> None:
    """Inspect and modify simulated filesystem fixtures."""
    if verbose:
        _enable_debug_logging()


def _enable_debug_logging() -> None:
    """Send simfs debug logs to the console."""
    package_logger = logging.getLogger("simfs")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=console, show_path=False))


def _load_context(ctx: typer.Context, fixture: Path, config: Path | None) -> AppContext:
    """Build the context for a command, reporting load failures.

    An AppContext passed as the Click ``obj`` (``runner.invoke(..., obj=...)``)
    is used as is, so tests can inject their own filesystem.

    Raises:
        typer.Exit: If the fixture or settings cannot be loaded.
    """
    if isinstance(ctx.obj, AppContext):
        return ctx.obj
    try:
        return create_context(fixture=fixture, config_file=config)
    except (FileNotFoundError, ValueError, TypeError) as e:
        output.show_error(escape(str(e)))
        raise typer.Exit(1) from e


def _fail(error: SimFSError) -> typer.Exit:
    output.show_error(escape(str(error)))
    return typer.Exit(1)


@app.command("tree")
def tree(
    ctx: typer.Context,
    fixture: FixtureArg,
    path: Annotated[str, typer.Argument(help="Directory to start at")] = "/",
    config: ConfigOption = None,
) -> None:
    """Show the directory tree."""
    app_ctx = _load_context(ctx, fixture, config)
    try:
        output.show_tree(app_ctx.filesystem, path)
    except SimFSError as e:
        raise _fail(e) from e


@app.command("ls")
def ls(
    ctx: typer.Context,
    fixture: FixtureArg,
    path: Annotated[str, typer.Argument(help="Directory to list")] = "/",
    config: ConfigOption = None,
) -> None:
    """List a directory."""
    app_ctx = _load_context(ctx, fixture, config)
    try:
        output.show_listing(app_ctx.filesystem.listdir(path))
    except SimFSError as e:
        raise _fail(e) from e


@app.command("cat")
def cat(
    ctx: typer.Context,
    fixture: FixtureArg,
    path: Annotated[str, typer.Argument(help="File to print")],
    config: ConfigOption = None,
) -> None:
    """Print the contents of a file."""
    app_ctx = _load_context(ctx, fixture, config)
    try:
        output.show_contents(app_ctx.filesystem.read_file(path), app_ctx.config.encoding)
    except SimFSError as e:
        raise _fail(e) from e


@app.command("stat")
def stat(
    ctx: typer.Context,
    fixture: FixtureArg,
    path: Annotated[str, typer.Argument(help="Path to inspect")],
    no_follow: Annotated[
        bool, typer.Option("--no-follow", "-L", help="Report symbolic links themselves")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Show node kind, size and modification time."""
    app_ctx = _load_context(ctx, fixture, config)
    try:
        info = app_ctx.filesystem.lstat(path) if no_follow else app_ctx.filesystem.stat(path)
    except SimFSError as e:
        raise _fail(e) from e
    output.show_stat(path, info)


@app.command("mkdir")
def mkdir(
    ctx: typer.Context,
    fixture: FixtureArg,
    path: Annotated[str, typer.Argument(help="Directory to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parent directories")
    ] = False,
    write: Annotated[
        bool, typer.Option("--write", "-w", help="Save the result back to the fixture")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Create a directory in the fixture's tree."""
    app_ctx = _load_context(ctx, fixture, config)
    try:
        if parents:
            created = make_dirs(app_ctx.filesystem, path)
        else:
            app_ctx.filesystem.mkdir(path)
            created = [path]
    except SimFSError as e:
        raise _fail(e) from e

    for directory in created:
        output.show_success(f"Created {escape(directory)}")

    if write and isinstance(app_ctx.filesystem, SimulatedFileSystem):
        dump_tree(app_ctx.fixture or fixture, app_ctx.filesystem.get_mock_filesystem())
        output.show_success(f"Saved {escape(str(app_ctx.fixture or fixture))}")
    elif not write:
        output.show_tree(app_ctx.filesystem, "/")


if __name__ == "__main__":
    app()
