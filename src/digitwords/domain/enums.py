"""Type-safe domain enums for translation styles, languages, and config handling."""

from __future__ import annotations

from enum import Enum


class TranslationStyle(str, Enum):
    """Interchangeable implementations of the digit-to-word translation.

    Inherits from str so members compare equal to their plain values and can
    be fed straight into ``click.Choice`` and configuration files.

    Attributes:
        IMPERATIVE: Single loop with one branch per recognised symbol.
        FUNCTIONAL: Single pass through a total mapping.
        CHAIN: Chain of responsibility, one handler object per symbol.
        COMPOSED: Substitution steps joined with ``Step.and_then``.

    Example:
        >>> TranslationStyle.CHAIN.value
        'chain'
        >>> TranslationStyle("composed") is TranslationStyle.COMPOSED
        True
    """

    IMPERATIVE = "imperative"
    FUNCTIONAL = "functional"
    CHAIN = "chain"
    COMPOSED = "composed"


class Language(str, Enum):
    """Token vocabularies shipped with the package.

    Example:
        >>> Language.FRENCH == "french"
        True
    """

    ENGLISH = "english"
    FRENCH = "french"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Configuration deployment target layers.

    Attributes:
        APP: System-wide application configuration (requires privileges).
        HOST: System-wide host-specific configuration (requires privileges).
        USER: User-specific configuration (~/.config on Linux).

    Example:
        >>> DeployTarget.USER.value
        'user'
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = [
    "DeployTarget",
    "Language",
    "OutputFormat",
    "TranslationStyle",
]
