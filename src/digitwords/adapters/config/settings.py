"""Typed settings models for the ``[translator]`` and ``[status_demo]`` sections.

Bridges lib_layered_config's dictionary output with frozen Pydantic models.
Validation happens once, at the boundary; domain code only ever sees the
typed models.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from digitwords.domain.enums import Language, TranslationStyle
from digitwords.domain.errors import ConfigurationError
from digitwords.domain.status import DEFAULT_VALUE
from digitwords.domain.tables import DEFAULT_TOKEN, TranslationTable, table_for


class TranslatorSettings(BaseModel):
    """Validated, immutable translator settings.

    Example:
        >>> settings = TranslatorSettings(style="chain", language="french")
        >>> settings.style
        <TranslationStyle.CHAIN: 'chain'>
        >>> settings.build_table().lookup("3")
        '<trois>'
    """

    model_config = ConfigDict(frozen=True)

    style: TranslationStyle = TranslationStyle.IMPERATIVE
    language: Language = Language.ENGLISH
    default_token: str = DEFAULT_TOKEN

    @field_validator("style", "language", mode="before")
    @classmethod
    def _normalize_case(cls, v: Any) -> Any:
        """Accept ``"Chain"`` or ``" FRENCH "`` from env vars and .env files.

        Examples:
            >>> TranslatorSettings._normalize_case(" Chain ")
            'chain'
        """
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("default_token")
    @classmethod
    def _require_token(cls, v: str) -> str:
        if not v:
            raise ValueError("default_token must not be empty")
        return v

    def build_table(self) -> TranslationTable:
        """Return the language table with the configured default token."""
        return table_for(self.language).with_default(self.default_token)


class StatusDemoSettings(BaseModel):
    """Validated settings for the optional-value demo.

    Example:
        >>> StatusDemoSettings().default_value
        99
    """

    model_config = ConfigDict(frozen=True)

    default_value: int = DEFAULT_VALUE


def _section(config_dict: Mapping[str, Any], name: str) -> dict[str, Any]:
    raw: Any = config_dict.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[{name}] must be a table, got {type(raw).__name__}")
    return dict(cast(Mapping[str, Any], raw))


def _describe(exc: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())


def load_translator_settings(config_dict: Mapping[str, Any]) -> TranslatorSettings:
    """Load TranslatorSettings from a configuration dictionary.

    Args:
        config_dict: Configuration dictionary, typically ``Config.as_dict()``.
            Settings are read from its ``translator`` section.

    Returns:
        Validated settings with defaults for missing values.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.

    Example:
        >>> load_translator_settings({"translator": {"language": "french"}}).language
        <Language.FRENCH: 'french'>
        >>> load_translator_settings({}).style
        <TranslationStyle.IMPERATIVE: 'imperative'>
    """
    section = _section(config_dict, "translator")
    try:
        return TranslatorSettings.model_validate(section)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [translator] configuration: {_describe(exc)}") from exc


def load_status_demo_settings(config_dict: Mapping[str, Any]) -> StatusDemoSettings:
    """Load StatusDemoSettings from the ``status_demo`` section.

    Raises:
        ConfigurationError: If the section is not a table or holds invalid values.
    """
    section = _section(config_dict, "status_demo")
    try:
        return StatusDemoSettings.model_validate(section)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [status_demo] configuration: {_describe(exc)}") from exc


__all__ = [
    "StatusDemoSettings",
    "TranslatorSettings",
    "load_status_demo_settings",
    "load_translator_settings",
]
