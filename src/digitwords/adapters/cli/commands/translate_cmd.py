"""Translation commands.

Contents:
    * :func:`cli_translate` - Translate one or more codes.
    * :func:`cli_compare` - Show every style's output side by side.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from digitwords.application.translation import compare_styles, translate_code
from digitwords.domain.enums import Language, TranslationStyle

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import resolve_translator_settings

logger = logging.getLogger(__name__)

_STYLE_CHOICE = click.Choice([s.value for s in TranslationStyle], case_sensitive=False)
_LANGUAGE_CHOICE = click.Choice([lang.value for lang in Language], case_sensitive=False)


@click.command("translate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("codes", nargs=-1, required=True)
@click.option("--style", type=_STYLE_CHOICE, default=None, help="Translation style (default from [translator].style)")
@click.option(
    "--language", type=_LANGUAGE_CHOICE, default=None, help="Token vocabulary (default from [translator].language)"
)
@click.option("--default-token", type=str, default=None, help="Token for unrecognised symbols (default '<?>')")
@click.pass_context
def cli_translate(
    ctx: click.Context,
    codes: tuple[str, ...],
    style: str | None,
    language: str | None,
    default_token: str | None,
) -> None:
    r"""Translate each CODE into word tokens, one line per CODE.

    \b
    Example:
        $ digitwords translate 123413
        <one><two><three><?><one><three>
    """
    cli_ctx = get_cli_context(ctx)
    settings = resolve_translator_settings(cli_ctx, style=style, language=language, default_token=default_token)
    table = settings.build_table()

    extra = {"command": "translate", "style": settings.style.value, "language": settings.language.value}
    with lib_log_rich.runtime.bind(job_id="cli-translate", extra=extra):
        logger.info("Translating codes", extra={"count": len(codes)})
        for code in codes:
            click.echo(translate_code(code, table=table, style=settings.style).output)


@click.command("compare", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("code")
@click.option(
    "--language", type=_LANGUAGE_CHOICE, default=None, help="Token vocabulary (default from [translator].language)"
)
@click.pass_context
def cli_compare(ctx: click.Context, code: str, language: str | None) -> None:
    """Translate CODE with every style and print the results in a table."""
    cli_ctx = get_cli_context(ctx)
    settings = resolve_translator_settings(cli_ctx, language=language)

    with lib_log_rich.runtime.bind(job_id="cli-compare", extra={"command": "compare"}):
        logger.info("Comparing translation styles", extra={"language": settings.language.value})
        outputs = compare_styles(code, table=settings.build_table())

    # Codes and tokens are user text, never markup.
    table = Table(title=escape(f"{code!r} ({settings.language.value})"))
    table.add_column("style")
    table.add_column("output")
    for style, output in outputs.items():
        table.add_row(style.value, escape(output))
    Console(soft_wrap=True, emoji=False, highlight=False).print(table)


__all__ = ["cli_compare", "cli_translate"]
