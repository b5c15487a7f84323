"""CLI entrypoint for ncy."""

import logging
import sys
from pathlib import Path
from typing import Any, Callable, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .config import CONFIG_ENV_VAR
from .errors import NcyError


def configure_logging(debug: bool) -> None:
    """Send ncy's log records to stderr through rich."""
    logger = logging.getLogger("ncy")
    logger.handlers = [
        RichHandler(console=Console(stderr=True), show_time=False, show_path=debug, markup=False)
    ]
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)


def _run(func: Callable[..., int], *args: Any, **kwargs: Any) -> NoReturn:
    """Run a command, reporting NcyError as `Application error` with exit status 1."""
    try:
        exit_code = func(*args, **kwargs)
    except NcyError as e:
        Console(stderr=True, soft_wrap=True).print(
            f"Application error: {e}", style="red", markup=False, highlight=False
        )
        sys.exit(1)
    sys.exit(exit_code)


def _external_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--external",
        "-e",
        is_flag=True,
        help="Print paths instead of launching programs, and pick with fzf (for editor integration)",
    )(func)


def _options(ctx: click.Context, external: bool = False) -> dict[str, Any]:
    return {
        "vault": ctx.obj["vault"],
        "external": ctx.obj["external"] or external,
    }


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="ncy")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    envvar=CONFIG_ENV_VAR,
    default=None,
    help=f"Directory holding config.yaml (defaults to ${CONFIG_ENV_VAR})",
)
@click.option(
    "--vault",
    type=str,
    default=None,
    metavar="NAME",
    help="Vault to use instead of default_vault",
)
@_external_option
@click.option("--debug", is_flag=True, help="Log pipeline steps to stderr")
@click.pass_context
def cli(ctx: click.Context, config_dir: Path | None, vault: str | None, external: bool, debug: bool) -> None:
    """ncy - a CLI PKM (Personal Knowledge Management) tool.

    Without a command, pick a note from the default vault and open it.
    """
    ctx.ensure_object(dict)
    configure_logging(debug)
    ctx.obj["config_dir"] = config_dir
    ctx.obj["vault"] = vault
    ctx.obj["external"] = external

    if ctx.invoked_subcommand is None:
        from .commands.open_cmd import run_open

        _run(run_open, config_dir, **_options(ctx))


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Initialize and configure ncy.

    Creates config.yaml if needed, opens it in $EDITOR, then creates each
    vault directory with its journal and workspaces folders.
    """
    from .commands.init_cmd import run_init

    _run(run_init, ctx.obj["config_dir"])


@cli.command("set")
@click.argument("vault_name", metavar="VAULT")
@click.pass_context
def set_default(ctx: click.Context, vault_name: str) -> None:
    """Set the default vault."""
    from .commands.set_cmd import run_set

    _run(run_set, ctx.obj["config_dir"], vault_name)


@cli.command("open")
@_external_option
@click.pass_context
def open_note(ctx: click.Context, external: bool) -> None:
    """Pick a note and open it in $EDITOR.

    With --external, pick with fzf and print the note's path instead.
    """
    from .commands.open_cmd import run_open

    _run(run_open, ctx.obj["config_dir"], **_options(ctx, external))


@cli.command("dir")
@_external_option
@click.pass_context
def open_dir(ctx: click.Context, external: bool) -> None:
    """Pick a note and open its folder in the file manager.

    With --external, pick with fzf and print the folder's path instead.
    """
    from .commands.dir_cmd import run_dir

    _run(run_dir, ctx.obj["config_dir"], **_options(ctx, external))


@cli.command("new")
@click.argument("args", nargs=-1, required=True)
@_external_option
@click.pass_context
def new_note(ctx: click.Context, args: tuple[str, ...], external: bool) -> None:
    """Create a new note.

    ARGS are joined into one reference: 'title @ project/path +vault'.

    Examples:

        ncy new Meeting notes @ work/meetings

        ncy n Reading list +personal
    """
    from .commands.new import run_new

    _run(run_new, ctx.obj["config_dir"], " ".join(args), **_options(ctx, external))


@cli.command("jrnl")
@click.argument("text", nargs=-1)
@_external_option
@click.pass_context
def jrnl(ctx: click.Context, text: tuple[str, ...], external: bool) -> None:
    """Open or add to today's journal entry.

    Without TEXT, today's entry is opened in $EDITOR. With TEXT, it is appended
    as a new entry.
    """
    from .commands.jrnl import run_jrnl

    _run(run_jrnl, ctx.obj["config_dir"], " ".join(text), **_options(ctx, external))


cli.add_command(new_note, "n")
cli.add_command(jrnl, "j")


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
