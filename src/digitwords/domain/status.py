"""Optional-value resolution with a lazily evaluated fallback.

The counter that records the outcome is returned alongside the status
string instead of living in a module-level variable.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_VALUE = 99


@dataclass(frozen=True, slots=True)
class StatusReport:
    """Status message plus the counter value it produced."""

    status: str
    value: int


def update_with(value: int) -> StatusReport:
    """Primary path: record ``value``.

    Example:
        >>> update_with(1)
        StatusReport(status='UPDATED WITH 1', value=1)
    """
    return StatusReport(status=f"UPDATED WITH {value}", value=value)


def default_with(default: int = DEFAULT_VALUE) -> StatusReport:
    """Fallback path: record the default value."""
    return StatusReport(status=f"DEFAULTED WITH {default}", value=default)


def resolve_status(value: int | None, *, default: int = DEFAULT_VALUE) -> StatusReport:
    """Run the primary path for a present value, the fallback otherwise.

    The fallback only runs when ``value`` is absent.

    Example:
        >>> resolve_status(1).value
        1
        >>> resolve_status(None).status
        'DEFAULTED WITH 99'
    """
    if value is None:
        return default_with(default)
    return update_with(value)


__all__ = [
    "DEFAULT_VALUE",
    "StatusReport",
    "default_with",
    "resolve_status",
    "update_with",
]
