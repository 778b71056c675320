"""CLI command implementations, re-exported for registration on the root group.

Contents:
    * Translation commands from :mod:`.translate_cmd`
    * Status demo command from :mod:`.status_cmd`
    * Info command from :mod:`.info`
    * Config commands from :mod:`.config`
    * Logging commands from :mod:`.logging`
"""

from __future__ import annotations

from .config import cli_config, cli_config_deploy, cli_config_generate_examples
from .info import cli_info
from .logging import cli_logdemo
from .status_cmd import cli_status
from .translate_cmd import cli_compare, cli_translate

__all__ = [
    "cli_compare",
    "cli_config",
    "cli_config_deploy",
    "cli_config_generate_examples",
    "cli_info",
    "cli_logdemo",
    "cli_status",
    "cli_translate",
]
