"""Application use-case stories."""

from __future__ import annotations

import logging

import pytest

from digitwords.application.translation import compare_styles, run_status_demo, translate_code
from digitwords.domain.enums import TranslationStyle
from digitwords.domain.status import StatusReport
from digitwords.domain.tables import ENGLISH, FRENCH, TranslationTable


@pytest.mark.os_agnostic
def test_translate_code_reports_what_it_did() -> None:
    """The result carries input, output, style, and table name."""
    result = translate_code("13", table=FRENCH, style=TranslationStyle.COMPOSED)

    assert result.output == "<un><trois>"
    assert result.code == "13"
    assert result.style is TranslationStyle.COMPOSED
    assert result.table_name == "french"


@pytest.mark.os_agnostic
def test_compare_styles_returns_one_entry_per_style() -> None:
    """Every style appears once, all with the same output."""
    outputs = compare_styles("123413", table=ENGLISH)

    assert list(outputs) == list(TranslationStyle)
    assert set(outputs.values()) == {"<one><two><three><?><one><three>"}


@pytest.mark.os_agnostic
def test_compare_styles_stays_quiet_when_styles_agree(caplog: pytest.LogCaptureFixture) -> None:
    """No disagreement warning for a normal table."""
    with caplog.at_level(logging.WARNING, logger="digitwords.application.translation"):
        compare_styles("42", table=ENGLISH)

    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


@pytest.mark.os_agnostic
def test_run_status_demo_passes_configured_default() -> None:
    """The configured fallback value reaches the domain."""
    assert run_status_demo(None, default=5) == StatusReport("DEFAULTED WITH 5", 5)
    assert run_status_demo(2, default=5) == StatusReport("UPDATED WITH 2", 2)


@pytest.mark.os_agnostic
def test_translate_code_names_custom_tables() -> None:
    """Tables built outside the language registry keep their own name."""
    table = TranslationTable.from_mapping({"5": "<five>"}, name="custom")

    result = translate_code("5", table=table)

    assert result.output == "<five>"
    assert result.table_name == "custom"
