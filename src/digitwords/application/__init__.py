"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.translation` - Translation and status demo use cases
"""

from __future__ import annotations

from .ports import (
    DeployConfiguration,
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadStatusDemoSettings,
    LoadTranslatorSettings,
)
from .translation import TranslationResult, compare_styles, run_status_demo, translate_code

__all__ = [
    "DeployConfiguration",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadStatusDemoSettings",
    "LoadTranslatorSettings",
    "TranslationResult",
    "compare_styles",
    "run_status_demo",
    "translate_code",
]
