"""Optional-value demo stories: primary path, lazy fallback, explicit state."""

from __future__ import annotations

import pytest

from digitwords.domain.status import DEFAULT_VALUE, StatusReport, default_with, resolve_status, update_with


@pytest.mark.os_agnostic
def test_present_value_updates_counter() -> None:
    """A present value takes the primary path."""
    assert resolve_status(1) == StatusReport(status="UPDATED WITH 1", value=1)


@pytest.mark.os_agnostic
def test_absent_value_falls_back_to_default() -> None:
    """An absent value takes the fallback path and records 99."""
    assert resolve_status(None) == StatusReport(status="DEFAULTED WITH 99", value=99)


@pytest.mark.os_agnostic
def test_zero_counts_as_present() -> None:
    """Only None is absent; falsy values still take the primary path."""
    assert resolve_status(0).status == "UPDATED WITH 0"


@pytest.mark.os_agnostic
def test_custom_default_is_used_only_when_absent() -> None:
    """The fallback value is configurable and ignored for present values."""
    assert resolve_status(None, default=7) == default_with(7)
    assert resolve_status(3, default=7) == update_with(3)


@pytest.mark.os_agnostic
def test_fallback_is_not_evaluated_for_present_value(monkeypatch: pytest.MonkeyPatch) -> None:
    """The fallback runs lazily, so it never fires when a value is present."""
    from digitwords.domain import status as status_mod

    calls: list[int] = []

    def _spy(default: int = DEFAULT_VALUE) -> StatusReport:
        calls.append(default)
        return StatusReport("spy", default)

    monkeypatch.setattr(status_mod, "default_with", _spy)

    status_mod.resolve_status(1)

    assert calls == []


@pytest.mark.os_agnostic
def test_each_call_is_independent() -> None:
    """No shared counter: a later call cannot observe an earlier one."""
    first = resolve_status(5)
    second = resolve_status(None)

    assert (first.value, second.value) == (5, 99)
