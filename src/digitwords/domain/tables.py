"""Translation tables mapping single input symbols to output tokens."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field, replace

from .enums import Language
from .errors import InvalidSymbolError

DEFAULT_TOKEN = "<?>"


@dataclass(frozen=True, slots=True)
class TranslationTable:
    """Immutable, ordered symbol-to-token table with a default token.

    The table is total: :meth:`lookup` answers for every possible character,
    falling back to ``default`` for symbols it does not know.

    Example:
        >>> table = TranslationTable.from_mapping({"1": "<one>"}, name="tiny")
        >>> table.lookup("1"), table.lookup("x")
        ('<one>', '<?>')
        >>> table.symbols
        ('1',)
    """

    entries: tuple[tuple[str, str], ...]
    default: str = DEFAULT_TOKEN
    name: str = "custom"
    _index: dict[str, str] = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        for symbol, _token in self.entries:
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidSymbolError(f"symbol must be a single character: {symbol!r}")
        object.__setattr__(self, "_index", dict(self.entries))

    @classmethod
    def from_mapping(
        cls,
        tokens: Mapping[str, str],
        *,
        default: str = DEFAULT_TOKEN,
        name: str = "custom",
    ) -> TranslationTable:
        """Build a table from a mapping, keeping its iteration order."""
        return cls(entries=tuple(tokens.items()), default=default, name=name)

    def lookup(self, symbol: str) -> str:
        """Return the token for ``symbol`` or the default token."""
        return self._index.get(symbol, self.default)

    def with_default(self, default: str) -> TranslationTable:
        """Return a copy of the table using another default token."""
        return replace(self, default=default)

    @property
    def symbols(self) -> tuple[str, ...]:
        return tuple(symbol for symbol, _ in self.entries)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __len__(self) -> int:
        return len(self.entries)


ENGLISH = TranslationTable.from_mapping({"1": "<one>", "2": "<two>", "3": "<three>"}, name="english")
FRENCH = TranslationTable.from_mapping({"1": "<un>", "2": "<deux>", "3": "<trois>"}, name="french")

_TABLES: dict[Language, TranslationTable] = {
    Language.ENGLISH: ENGLISH,
    Language.FRENCH: FRENCH,
}


def table_for(language: Language) -> TranslationTable:
    """Return the built-in table for ``language``.

    Example:
        >>> table_for(Language.FRENCH).lookup("2")
        '<deux>'
    """
    return _TABLES[Language(language)]


__all__ = [
    "DEFAULT_TOKEN",
    "ENGLISH",
    "FRENCH",
    "TranslationTable",
    "table_for",
]
