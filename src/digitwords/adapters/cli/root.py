"""Root command group and global options (--traceback, --profile, --set).

Contents:
    * :func:`cli` - Root command group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from digitwords import __init__conf__
from digitwords.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from digitwords.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Apply ``--set`` values, turning malformed ones into a usage error."""
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", is_flag=True, default=False, help="Show full Python traceback on errors")
@click.option("--profile", type=str, default=None, help="Load configuration from a named profile (e.g., 'test')")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. translator.style=chain",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration once, start logging, and hand state to subcommands.

    ``ctx.obj`` arrives as the services factory and leaves as a
    :class:`~digitwords.adapters.cli.context.CLIContext`.
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]
    try:
        config = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from this package, so registration waits until ``cli`` exists.
def _register_commands() -> None:
    from .commands import (
        cli_compare,
        cli_config,
        cli_config_deploy,
        cli_config_generate_examples,
        cli_info,
        cli_logdemo,
        cli_status,
        cli_translate,
    )

    for cmd in (
        cli_translate,
        cli_compare,
        cli_status,
        cli_info,
        cli_config,
        cli_config_deploy,
        cli_config_generate_examples,
        cli_logdemo,
    ):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
