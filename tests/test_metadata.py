"""Package metadata, PEP 561 marker, and pyproject sync tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, cast

import pytest
import rtoml

from digitwords import __init__conf__

PROJECT_ROOT = Path(__file__).resolve().parent.parent
PYPROJECT_PATH = PROJECT_ROOT / "pyproject.toml"


def _load_pyproject() -> dict[str, Any]:
    return rtoml.load(PYPROJECT_PATH)


def _get_package_dir() -> Path:
    """Locate the package directory from the hatch wheel configuration."""
    tool_table = cast(dict[str, Any], _load_pyproject().get("tool", {}))
    wheel_table = cast(dict[str, Any], tool_table["hatch"]["build"]["targets"]["wheel"])
    for package_entry in cast(list[Any], wheel_table.get("packages", [])):
        candidate = PROJECT_ROOT / str(package_entry)
        if candidate.is_dir():
            return candidate
    raise AssertionError("Unable to locate package directory")


@pytest.mark.os_agnostic
def test_print_info_outputs_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    """print_info lists name and version."""
    from digitwords import print_info

    print_info()

    captured = capsys.readouterr().out
    assert "Info for digitwords:" in captured
    assert __init__conf__.version in captured


@pytest.mark.os_agnostic
def test_version_matches_pyproject() -> None:
    """__init__conf__.version tracks the project version."""
    assert __init__conf__.version == _load_pyproject()["project"]["version"]


@pytest.mark.os_agnostic
def test_layeredconf_slug_matches_project_name() -> None:
    """Config paths use the project name as their slug."""
    project_name: str = _load_pyproject()["project"]["name"]

    assert __init__conf__.LAYEREDCONF_SLUG == project_name.replace("_", "-")


@pytest.mark.os_agnostic
def test_layeredconf_vendor_and_app_are_set() -> None:
    """Vendor and app are needed for macOS and Windows config paths."""
    assert __init__conf__.LAYEREDCONF_VENDOR.strip()
    assert __init__conf__.LAYEREDCONF_APP.strip()


@pytest.mark.os_agnostic
def test_console_script_points_at_entry_main() -> None:
    """The console script resolves to digitwords.entry:main."""
    scripts = _load_pyproject()["project"]["scripts"]

    assert scripts[__init__conf__.shell_command] == "digitwords.entry:main"


@pytest.mark.os_agnostic
def test_package_ships_py_typed_marker() -> None:
    """The PEP 561 marker is present next to the package sources."""
    assert (_get_package_dir() / "py.typed").is_file()


@pytest.mark.os_agnostic
def test_package_ships_default_config() -> None:
    """The bundled defaults file is inside the package tree."""
    assert (_get_package_dir() / "adapters" / "config" / "defaultconfig.toml").is_file()
