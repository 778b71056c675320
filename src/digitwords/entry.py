"""Console script entry point (``digitwords``) with production wiring.

Lives at package level so the composition root can be handed to the
adapters layer without the adapters importing it themselves.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return the exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
