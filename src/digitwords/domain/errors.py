"""Domain-specific exceptions for typed error handling at boundaries.

Translation itself never fails: every table is total. These errors guard the
places where tables, chains, and settings are *built*.
"""

from __future__ import annotations


class InvalidSymbolError(ValueError):
    """A table or handler was given a key that is not exactly one character.

    Example:
        >>> from digitwords.domain.errors import InvalidSymbolError
        >>> err = InvalidSymbolError("symbol must be a single character: '12'")
        >>> isinstance(err, ValueError)
        True
    """


class ChainOrderError(ValueError):
    """A default handler was placed before a symbol-specific handler.

    The default handler rewrites every pending symbol, so anything after it
    would never see its own symbol.

    Example:
        >>> from digitwords.domain.errors import ChainOrderError
        >>> str(ChainOrderError("default handler must be last"))
        'default handler must be last'
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[translator]`` or ``[status_demo]`` sections hold values
    that cannot be parsed. Caught at the CLI boundary and mapped to
    ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from digitwords.domain.errors import ConfigurationError
        >>> str(ConfigurationError("unknown style 'baroque'"))
        "unknown style 'baroque'"
    """


__all__ = [
    "ChainOrderError",
    "ConfigurationError",
    "InvalidSymbolError",
]
