"""Configuration adapter - loading, typed settings, deployment, display, overrides.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.settings` - Pydantic models for the translator and status demo sections
    * :mod:`.deploy` - Configuration deployment to target layers
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .deploy import deploy_configuration
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides
from .settings import (
    StatusDemoSettings,
    TranslatorSettings,
    load_status_demo_settings,
    load_translator_settings,
)

__all__ = [
    "StatusDemoSettings",
    "TranslatorSettings",
    "apply_overrides",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_status_demo_settings",
    "load_translator_settings",
]
