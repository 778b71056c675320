"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol's ``__call__`` matches the signature of the adapter function
that implements it, so plain module-level functions satisfy them
structurally (PEP 544). ``Config`` is imported for type checking only.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import DeployTarget, OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import StatusDemoSettings, TranslatorSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DeployConfiguration(Protocol):
    """Deploy default configuration to specified target layers."""

    def __call__(
        self,
        *,
        targets: Sequence[DeployTarget],
        force: bool = ...,
        profile: str | None = ...,
    ) -> list[Path]: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadTranslatorSettings(Protocol):
    """Parse the ``[translator]`` section into typed settings."""

    def __call__(self, config_dict: Mapping[str, Any]) -> TranslatorSettings: ...


class LoadStatusDemoSettings(Protocol):
    """Parse the ``[status_demo]`` section into typed settings."""

    def __call__(self, config_dict: Mapping[str, Any]) -> StatusDemoSettings: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DeployConfiguration",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadStatusDemoSettings",
    "LoadTranslatorSettings",
]
