"""Domain layer - pure translation logic with no I/O or framework dependencies.

Contents:
    * :mod:`.tables` - Symbol-to-token tables (English, French)
    * :mod:`.translators` - Imperative, functional, and chain-of-responsibility styles
    * :mod:`.chain` - Composable substitution steps
    * :mod:`.status` - Optional-value resolution demo
    * :mod:`.enums` - Domain enumerations
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .chain import Step, chain_for, compose, fill_default, run_chain, substitute
from .enums import DeployTarget, Language, OutputFormat, TranslationStyle
from .errors import ChainOrderError, ConfigurationError, InvalidSymbolError
from .status import DEFAULT_VALUE, StatusReport, resolve_status
from .tables import DEFAULT_TOKEN, ENGLISH, FRENCH, TranslationTable, table_for
from .translators import (
    ChainOfResponsibilityTranslator,
    DefaultHandler,
    SymbolHandler,
    translate,
)

__all__ = [
    # Tables
    "DEFAULT_TOKEN",
    "ENGLISH",
    "FRENCH",
    "TranslationTable",
    "table_for",
    # Translators
    "ChainOfResponsibilityTranslator",
    "DefaultHandler",
    "SymbolHandler",
    "translate",
    # Composable chain
    "Step",
    "chain_for",
    "compose",
    "fill_default",
    "run_chain",
    "substitute",
    # Status demo
    "DEFAULT_VALUE",
    "StatusReport",
    "resolve_status",
    # Enums
    "DeployTarget",
    "Language",
    "OutputFormat",
    "TranslationStyle",
    # Errors
    "ChainOrderError",
    "ConfigurationError",
    "InvalidSymbolError",
]
