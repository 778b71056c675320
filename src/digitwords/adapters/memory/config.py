"""In-memory configuration adapters for testing.

Same Protocols as the production adapters, no filesystem access. The
in-memory config carries the bundled defaults so commands behave as they
would on a fresh install.
"""

from __future__ import annotations

import tempfile
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import DeployTarget, OutputFormat
from ...domain.status import DEFAULT_VALUE
from ...domain.tables import DEFAULT_TOKEN

_DEFAULTS: dict[str, object] = {
    "translator": {"style": "imperative", "language": "english", "default_token": DEFAULT_TOKEN},
    "status_demo": {"default_value": DEFAULT_VALUE},
}


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config holding only the built-in defaults."""
    return Config(dict(_DEFAULTS), {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path (not a real file)."""
    return Path(tempfile.gettempdir()) / "digitwords" / "defaultconfig.toml"


def deploy_configuration_in_memory(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
) -> list[Path]:
    """Pretend to deploy; touches nothing and reports nothing written."""
    return []


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


__all__ = [
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
