"""Composable single-symbol substitution steps.

A translation in progress is a tuple of :class:`Segment` values. Each input
character starts as a *pending* segment; a step turns the pending segments it
is responsible for into *resolved* ones holding a token. Resolved segments are
never touched again, so a token such as ``<one>`` can never be rewritten by a
later step even though it contains characters of its own.

Steps compose left to right with :meth:`Step.and_then`, which makes it easy to
assemble a chain on the fly::

    >>> chain = substitute("1", "<one>").and_then(substitute("2", "<deux>"))
    >>> run_chain("1221", chain)
    '<one><deux><deux><one>'

Pending segments left over at the end render as their original character.
That is what a chain without :func:`fill_default` produces for unknown input.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .errors import InvalidSymbolError
from .tables import DEFAULT_TOKEN, TranslationTable


@dataclass(frozen=True, slots=True)
class Segment:
    """A pending input character or a resolved token."""

    text: str
    resolved: bool = False


Segments = tuple[Segment, ...]


@dataclass(frozen=True, slots=True)
class Step:
    """A pure ``Segments -> Segments`` transformation that can be chained."""

    apply: Callable[[Segments], Segments]
    label: str = "step"

    def __call__(self, segments: Segments) -> Segments:
        return self.apply(segments)

    def and_then(self, other: Step) -> Step:
        """Return a step running ``self`` first, then ``other``."""
        first, second = self.apply, other.apply

        def _both(segments: Segments) -> Segments:
            return second(first(segments))

        return Step(_both, label=f"{self.label} -> {other.label}")


def split(code: str) -> Segments:
    """Turn every character of ``code`` into a pending segment."""
    return tuple(Segment(char) for char in code)


def render(segments: Iterable[Segment]) -> str:
    """Concatenate the text of all segments in order."""
    return "".join(segment.text for segment in segments)


def substitute(symbol: str, token: str) -> Step:
    """Resolve pending occurrences of ``symbol`` to ``token``.

    Raises:
        InvalidSymbolError: If ``symbol`` is not exactly one character.

    Example:
        >>> run_chain("131", substitute("1", "<one>"))
        '<one>3<one>'
    """
    if len(symbol) != 1:
        raise InvalidSymbolError(f"symbol must be a single character: {symbol!r}")
    resolved = Segment(token, resolved=True)

    def _substitute(segments: Segments) -> Segments:
        return tuple(resolved if not seg.resolved and seg.text == symbol else seg for seg in segments)

    return Step(_substitute, label=f"{symbol}={token}")


def fill_default(token: str = DEFAULT_TOKEN) -> Step:
    """Resolve every segment that is still pending to ``token``.

    Must run after all :func:`substitute` steps, otherwise it claims their
    symbols first.

    Example:
        >>> run_chain("1x", substitute("1", "<one>").and_then(fill_default()))
        '<one><?>'
    """
    resolved = Segment(token, resolved=True)

    def _fill(segments: Segments) -> Segments:
        return tuple(seg if seg.resolved else resolved for seg in segments)

    return Step(_fill, label=f"*={token}")


def identity() -> Step:
    """Return a step that leaves its input untouched."""
    return Step(lambda segments: segments, label="identity")


def compose(*steps: Step) -> Step:
    """Chain ``steps`` left to right; no steps yields :func:`identity`.

    Example:
        >>> run_chain("12", compose(substitute("2", "<two>"), fill_default()))
        '<?><two>'
    """
    if not steps:
        return identity()
    chained = steps[0]
    for step in steps[1:]:
        chained = chained.and_then(step)
    return chained


def chain_for(table: TranslationTable) -> Step:
    """Build the chain equivalent to ``table``: one step per symbol, default last."""
    return compose(*(substitute(symbol, token) for symbol, token in table.items()), fill_default(table.default))


def run_chain(code: str, chain: Step) -> str:
    """Translate ``code`` by feeding its segments through ``chain``."""
    return render(chain(split(code)))


__all__ = [
    "Segment",
    "Segments",
    "Step",
    "chain_for",
    "compose",
    "fill_default",
    "identity",
    "render",
    "run_chain",
    "split",
    "substitute",
]
