"""Optional-value demo command."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from digitwords.application.translation import run_status_demo

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import resolve_status_demo_settings

logger = logging.getLogger(__name__)


@click.command("status", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--value", type=int, default=1, show_default=True, help="Value to record")
@click.option("--absent", is_flag=True, default=False, help="Run without a value so the fallback applies")
@click.pass_context
def cli_status(ctx: click.Context, value: int, absent: bool) -> None:
    r"""Resolve an optional value and print the status and recorded value.

    \b
    Example:
        $ digitwords status --absent
        Status -> DEFAULTED WITH 99
        Value -> 99
    """
    cli_ctx = get_cli_context(ctx)
    settings = resolve_status_demo_settings(cli_ctx)

    with lib_log_rich.runtime.bind(job_id="cli-status", extra={"command": "status", "absent": absent}):
        report = run_status_demo(None if absent else value, default=settings.default_value)
        click.echo(f"Status -> {report.status}")
        click.echo(f"Value -> {report.value}")


__all__ = ["cli_status"]
