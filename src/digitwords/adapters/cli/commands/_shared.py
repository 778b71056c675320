"""Helpers shared by the translation and status commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click

from digitwords.domain.enums import Language, TranslationStyle
from digitwords.domain.errors import ConfigurationError

from ..exit_codes import ExitCode

if TYPE_CHECKING:
    from digitwords.adapters.config.settings import StatusDemoSettings, TranslatorSettings

    from ..context import CLIContext

logger = logging.getLogger(__name__)


def _fail_on_config(exc: ConfigurationError) -> SystemExit:
    logger.error("Invalid configuration", extra={"error": str(exc)})
    click.echo(f"\nError: {exc}", err=True)
    return SystemExit(ExitCode.CONFIG_ERROR)


def resolve_translator_settings(
    cli_ctx: CLIContext,
    *,
    style: str | None = None,
    language: str | None = None,
    default_token: str | None = None,
) -> TranslatorSettings:
    """Load ``[translator]`` settings and lay explicit CLI options on top.

    Raises:
        SystemExit: ``ExitCode.CONFIG_ERROR`` if the section is invalid,
            ``ExitCode.INVALID_ARGUMENT`` if ``--default-token`` is empty.
    """
    try:
        settings = cli_ctx.services.load_translator_settings(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        raise _fail_on_config(exc) from exc

    updates: dict[str, object] = {}
    if style is not None:
        updates["style"] = TranslationStyle(style.lower())
    if language is not None:
        updates["language"] = Language(language.lower())
    if default_token is not None:
        if not default_token:
            click.echo("\nError: --default-token must not be empty", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT)
        updates["default_token"] = default_token
    return settings.model_copy(update=updates) if updates else settings


def resolve_status_demo_settings(cli_ctx: CLIContext) -> StatusDemoSettings:
    """Load ``[status_demo]`` settings, exiting with CONFIG_ERROR when invalid."""
    try:
        return cli_ctx.services.load_status_demo_settings(cli_ctx.config.as_dict())
    except ConfigurationError as exc:
        raise _fail_on_config(exc) from exc


__all__ = ["resolve_status_demo_settings", "resolve_translator_settings"]
