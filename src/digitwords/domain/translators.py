"""Four interchangeable renditions of the digit-to-word translation.

Every style honours the same contract: the output is the in-order
concatenation of each input character's token, the empty string maps to the
empty string, and no input can make it fail.

Example:
    >>> translate("123413")
    '<one><two><three><?><one><three>'
    >>> translate("123413", style=TranslationStyle.CHAIN)
    '<one><two><three><?><one><three>'
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .chain import Segment, Segments, chain_for, render, run_chain, split
from .enums import TranslationStyle
from .errors import ChainOrderError, InvalidSymbolError
from .tables import ENGLISH, TranslationTable


def translate_imperative(code: str, table: TranslationTable = ENGLISH) -> str:
    """Translate with one explicit loop and an append per character."""
    parts: list[str] = []
    for char in code:
        parts.append(table.lookup(char))
    return "".join(parts)


class _TotalOrdinalMap(dict[int, str]):
    """Ordinal map for ``str.translate`` that answers for every code point."""

    def __init__(self, table: TranslationTable) -> None:
        super().__init__((ord(symbol), token) for symbol, token in table.items())
        self.default = table.default

    def __missing__(self, key: int) -> str:
        return self.default


def translate_functional(code: str, table: TranslationTable = ENGLISH) -> str:
    """Translate in a single ``str.translate`` pass over a total mapping."""
    return code.translate(_TotalOrdinalMap(table))


class Handler(Protocol):
    """A link in a chain of responsibility over translation segments."""

    def handle(self, segments: Segments) -> Segments: ...


@dataclass(frozen=True, slots=True)
class SymbolHandler:
    """Resolve pending occurrences of one symbol; leave everything else alone."""

    symbol: str
    token: str

    def __post_init__(self) -> None:
        if len(self.symbol) != 1:
            raise InvalidSymbolError(f"symbol must be a single character: {self.symbol!r}")

    def handle(self, segments: Segments) -> Segments:
        resolved = Segment(self.token, resolved=True)
        return tuple(resolved if not seg.resolved and seg.text == self.symbol else seg for seg in segments)


@dataclass(frozen=True, slots=True)
class DefaultHandler:
    """Resolve every segment still pending to the default token."""

    token: str

    def handle(self, segments: Segments) -> Segments:
        resolved = Segment(self.token, resolved=True)
        return tuple(seg if seg.resolved else resolved for seg in segments)


class ChainOfResponsibilityTranslator:
    """Translate by passing segments through an ordered tuple of handlers.

    Args:
        handlers: Handlers applied in order. A :class:`DefaultHandler`, if
            present, must be the last one.

    Raises:
        ChainOrderError: If a default handler is followed by another handler.

    Example:
        >>> translator = ChainOfResponsibilityTranslator.from_table(ENGLISH)
        >>> translator.translate("31")
        '<three><one>'
    """

    def __init__(self, handlers: Sequence[Handler]) -> None:
        handlers = tuple(handlers)
        for position, handler in enumerate(handlers[:-1]):
            if isinstance(handler, DefaultHandler):
                raise ChainOrderError(
                    f"default handler at position {position} must be last (chain has {len(handlers)} handlers)"
                )
        self.handlers: tuple[Handler, ...] = handlers

    @classmethod
    def from_table(cls, table: TranslationTable) -> ChainOfResponsibilityTranslator:
        handlers: list[Handler] = [SymbolHandler(symbol, token) for symbol, token in table.items()]
        handlers.append(DefaultHandler(table.default))
        return cls(handlers)

    def translate(self, code: str) -> str:
        segments = split(code)
        for handler in self.handlers:
            segments = handler.handle(segments)
        return render(segments)


def translate_composed(code: str, table: TranslationTable = ENGLISH) -> str:
    """Translate through a chain of :mod:`.chain` steps built from ``table``."""
    return run_chain(code, chain_for(table))


def translate_chain(code: str, table: TranslationTable = ENGLISH) -> str:
    return ChainOfResponsibilityTranslator.from_table(table).translate(code)


_STYLES = {
    TranslationStyle.IMPERATIVE: translate_imperative,
    TranslationStyle.FUNCTIONAL: translate_functional,
    TranslationStyle.CHAIN: translate_chain,
    TranslationStyle.COMPOSED: translate_composed,
}


def translate(
    code: str,
    *,
    style: TranslationStyle = TranslationStyle.IMPERATIVE,
    table: TranslationTable = ENGLISH,
) -> str:
    """Translate ``code`` using the requested style.

    Args:
        code: Any character sequence, including the empty string.
        style: Which implementation to run. All styles agree on the result.
        table: Symbol-to-token table; defaults to :data:`ENGLISH`.

    Returns:
        Concatenation of the token of each character, left to right.
    """
    return _STYLES[TranslationStyle(style)](code, table)


__all__ = [
    "ChainOfResponsibilityTranslator",
    "DefaultHandler",
    "Handler",
    "SymbolHandler",
    "translate",
    "translate_chain",
    "translate_composed",
    "translate_functional",
    "translate_imperative",
]
