"""Copy the bundled defaults into app, host, or user configuration layers."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import deploy_config
from lib_layered_config.examples.deploy import DeployAction

from digitwords import __init__conf__
from digitwords.adapters.config.loader import get_default_config_path, validate_profile
from digitwords.domain.enums import DeployTarget

logger = logging.getLogger(__name__)

_WRITTEN = frozenset({DeployAction.CREATED, DeployAction.OVERWRITTEN})


def deploy_configuration(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
) -> list[Path]:
    r"""Deploy ``defaultconfig.toml`` to the requested layers.

    On Linux the user layer lands in ``~/.config/digitwords/config.toml``
    (``~/.config/digitwords/profile/<name>/config.toml`` with a profile);
    macOS and Windows use the vendor/app directories instead.

    Args:
        targets: Layers to write to.
        force: Overwrite files that already exist.
        profile: Optional profile subdirectory.

    Returns:
        Paths that were created or overwritten. Empty when every target
        already existed and ``force`` was False.

    Raises:
        PermissionError: When app/host layers need privileges we lack.
        ValueError: When ``profile`` is invalid.
    """
    if profile is not None:
        validate_profile(profile)

    results = deploy_config(
        source=get_default_config_path(),
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        targets=[t.value for t in targets],
        force=force,
    )

    written = [result.destination for result in results if result.action in _WRITTEN]
    logger.debug("Deployed configuration", extra={"paths": [str(p) for p in written]})
    return written


__all__ = ["deploy_configuration"]
