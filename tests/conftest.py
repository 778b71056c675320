"""Shared pytest fixtures for domain, CLI, and module-entry tests.

Fixtures read as plain English and are discovered implicitly by pytest.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from digitwords.composition import AppServices


def _load_dotenv() -> None:
    """Load a project-level .env for integration settings when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide ``build_production`` for CLI invocations that need real adapters."""
    from digitwords.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from CLI output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from disabled traceback flags and restore the originals afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test (not after; it may be patched)."""
    from digitwords.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real ``Config`` objects from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
    production_factory: Callable[[], AppServices],
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a factory turning a config dict into a services factory for the CLI.

    Only ``get_config`` is replaced; logging, display, and settings loading
    stay production-wired so commands run exactly as they do for users.

    Example:
        def test_style(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"translator": {"style": "chain"}})
            result = cli_runner.invoke(cli, ["translate", "1"], obj=factory)
    """

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = replace(production_factory(), get_config=_fake_get_config)
        return lambda: services

    return _create


@pytest.fixture
def default_factory(
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> Callable[[], AppServices]:
    """Services factory whose configuration is empty, so built-in defaults apply."""
    return config_cli_context({})
