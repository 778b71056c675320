"""Domain error hierarchy tests."""

from __future__ import annotations

import pytest

from digitwords.domain.errors import ChainOrderError, ConfigurationError, InvalidSymbolError


@pytest.mark.os_agnostic
@pytest.mark.parametrize("error_cls", [InvalidSymbolError, ChainOrderError])
def test_construction_errors_are_value_errors(error_cls: type[Exception]) -> None:
    """Callers catching ValueError also catch table and chain errors."""
    assert issubclass(error_cls, ValueError)


@pytest.mark.os_agnostic
def test_configuration_error_is_not_a_value_error() -> None:
    """Config problems are mapped to their own exit code, not INVALID_ARGUMENT."""
    assert not issubclass(ConfigurationError, ValueError)


@pytest.mark.os_agnostic
def test_error_message_is_preserved() -> None:
    """str() returns the message unchanged."""
    assert str(ConfigurationError("bad [translator]")) == "bad [translator]"
