"""Use cases that drive the domain translators and the status demo."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.enums import TranslationStyle
from ..domain.status import DEFAULT_VALUE, StatusReport, resolve_status
from ..domain.tables import TranslationTable
from ..domain.translators import translate

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """One translated code together with how it was produced."""

    code: str
    output: str
    style: TranslationStyle
    table_name: str


def translate_code(
    code: str,
    *,
    table: TranslationTable,
    style: TranslationStyle = TranslationStyle.IMPERATIVE,
) -> TranslationResult:
    """Translate ``code`` with ``table`` and ``style``.

    Example:
        >>> from digitwords.domain.tables import ENGLISH
        >>> translate_code("12", table=ENGLISH).output
        '<one><two>'
    """
    output = translate(code, style=style, table=table)
    logger.debug(
        "Translated code",
        extra={"style": style.value, "table": table.name, "input_length": len(code), "output_length": len(output)},
    )
    return TranslationResult(code=code, output=output, style=style, table_name=table.name)


def compare_styles(code: str, *, table: TranslationTable) -> dict[TranslationStyle, str]:
    """Run every style on ``code``; the values are expected to be identical.

    Logs a warning if two styles ever disagree.
    """
    outputs = {style: translate(code, style=style, table=table) for style in TranslationStyle}
    if len(set(outputs.values())) > 1:
        logger.warning("Translation styles disagree", extra={"code": code, "table": table.name})
    return outputs


def run_status_demo(value: int | None, *, default: int = DEFAULT_VALUE) -> StatusReport:
    """Resolve ``value`` (or the fallback) and log which path ran."""
    report = resolve_status(value, default=default)
    logger.info("Status resolved", extra={"status": report.status, "value": report.value})
    return report


__all__ = [
    "TranslationResult",
    "compare_styles",
    "run_status_demo",
    "translate_code",
]
