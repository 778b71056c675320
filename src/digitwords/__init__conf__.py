"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml``; ``tests/test_metadata.py``
guards against drift.
"""

from __future__ import annotations

name = "digitwords"
title = "Translate digit codes into word tokens, in four programming styles"
version = "1.0.0"
homepage = "https://github.com/digitwords/digitwords"
author = "digitwords maintainers"
author_email = "maintainers@digitwords.invalid"
shell_command = "digitwords"

#: Identifiers used by lib_layered_config to build platform config paths.
LAYEREDCONF_VENDOR = "digitwords"
LAYEREDCONF_APP = "digitwords"
LAYEREDCONF_SLUG = "digitwords"


def print_info() -> None:
    """Print the summarised metadata block used by ``digitwords info``.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for digitwords:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
