"""Command line interface for clialgo."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click
from loguru import logger

from . import __version__
from .config import Config, config_path, load_config
from .core import DEFAULT_REGISTRY
from .utils import console
from .workspace import init_workspace, open_session


class DefaultCommandGroup(click.Group):
    """Group that hands unknown first arguments to a default command.

    ``clialgo ~/notes`` is read as ``clialgo run ~/notes``.
    """

    def __init__(
        self,
        *args: Any,
        default_command: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.default_command = default_command

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, Any, list[str]]:
        if args and self.get_command(ctx, args[0]) is not None:
            return args[0], self.get_command(ctx, args[0]), args[1:]
        if self.default_command is None:
            result: tuple[str | None, Any, list[str]] = super().resolve_command(
                ctx, args
            )
            return result

        fallback = self.get_command(ctx, self.default_command)
        if fallback is None:
            raise click.UsageError(f"Default command '{self.default_command}' not found.")
        return self.default_command, fallback, args


def setup_logger(verbose: bool = False) -> Any:
    """Set up logger with appropriate level.

    The interactive session talks to the user through the Ui, so only
    warnings and errors reach stderr unless --verbose is given.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="{level}: {message}",
        level="DEBUG" if verbose else "WARNING",
    )
    return logger


def get_config_or_default(root: Path, **kwargs: Any) -> Config:
    """Load config from the notes root and merge with CLI arguments.

    CLI arguments override config values. If config doesn't exist, uses defaults.

    Args:
        root: Path to the notes root.
        **kwargs: CLI argument values that override config.

    Returns:
        Effective config object.
    """
    config = load_config(root) or Config()
    config = config.model_copy(deep=True)

    if kwargs.get("data_file"):
        config.storage.data_file = str(kwargs["data_file"])
    if kwargs.get("export_folder"):
        config.export.folder = str(kwargs["export_folder"])

    return config


@click.group(cls=DefaultCommandGroup, default_command="run")
@click.version_option(version=__version__, prog_name="clialgo")
def cli() -> None:
    """Tag CS2040C notes and code files to topics, filter and export them.

    Give a ROOT directory without a command (e.g. `clialgo .`) to start an
    interactive session there. Type `help` inside the session for the
    available commands.
    """


@cli.command()
@click.argument(
    "root",
    default=".",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Data file holding the tracked files, relative to ROOT (default: data/clialgo.yaml)",
)
@click.option(
    "--export-folder",
    "-e",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Folder that 'export' copies files into, relative to ROOT (default: export)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def run(
    ctx: click.Context,
    root: Path,
    data_file: Path | None,
    export_folder: Path | None,
    verbose: bool,
) -> None:
    """Start an interactive session.

    ROOT: Directory holding the .txt notes and .cpp code files (default: .)

    Commands are read one per line from standard input:
    - add n/NAME t/TOPIC i/IMPORTANCE
    - remove n/NAME
    - list
    - filter k/KEYWORD t/TOPIC_NAME i/IMPORTANCE
    - export
    - help c/COMMAND_TYPE
    - exit
    """
    setup_logger(verbose)
    logger.debug(f"Starting session in {root}")

    config = get_config_or_default(
        root, data_file=data_file, export_folder=export_folder
    )
    dispatcher = open_session(root, config)
    ctx.exit(dispatcher.run(click.get_text_stream("stdin")))


@cli.command()
@click.argument(
    "root",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--overwrite-config",
    is_flag=True,
    help="Overwrite existing config.yaml if it exists",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def init(root: Path, overwrite_config: bool, verbose: bool) -> None:
    """Initialize a notes root with config.yaml, data and export folders.

    ROOT: Directory where the notes live

    This command will:
    - Create .clialgo/config.yaml with default configuration values
    - Create the data folder and the export folder
    """
    log = setup_logger(verbose)

    try:
        config = init_workspace(root, overwrite_config=overwrite_config)
    except FileExistsError as e:
        log.error(str(e))
        raise click.ClickException(str(e)) from e
    except OSError as e:
        log.error(f"Error initializing {root}: {e}")
        raise click.ClickException(str(e)) from e

    console.print(f"[bold green]Initialized[/] {root}")
    console.print(f"Config: [bold]{config_path(root)}[/]")
    console.print(f"Export folder: [bold]{root / config.export.folder}[/]")


@cli.command()
def topics() -> None:
    """List the topics files can be tagged to."""
    console.print("[bold green]CS2040C topics[/]")
    for topic in DEFAULT_REGISTRY.all_topics():
        console.print(f"- [bold]{topic}[/]")


if __name__ == "__main__":
    cli()
