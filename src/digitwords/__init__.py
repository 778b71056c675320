"""Translate digit codes into word tokens.

Public surface:
- Domain: tables, the ``translate`` function, the composable chain, and
  the optional-value status demo
- Composition: ``get_config`` for layered configuration
- Metadata: ``print_info``
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import get_config
from .domain import (
    DEFAULT_TOKEN,
    ENGLISH,
    FRENCH,
    ChainOfResponsibilityTranslator,
    Language,
    StatusReport,
    TranslationStyle,
    TranslationTable,
    chain_for,
    compose,
    fill_default,
    resolve_status,
    run_chain,
    substitute,
    translate,
)

__all__ = [
    "DEFAULT_TOKEN",
    "ENGLISH",
    "FRENCH",
    "ChainOfResponsibilityTranslator",
    "Language",
    "StatusReport",
    "TranslationStyle",
    "TranslationTable",
    "chain_for",
    "compose",
    "fill_default",
    "get_config",
    "print_info",
    "resolve_status",
    "run_chain",
    "substitute",
    "translate",
]
