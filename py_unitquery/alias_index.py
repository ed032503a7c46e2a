"""Alias index: every spelling a user may type for a unit.

The index maps lowercased, whitespace-collapsed alias text to the units it can
name. It is derived once from a `UnitCatalog` plus the hand-maintained synonym
tables and is read-only afterwards.

Aliases registered for one unit:
    * the symbol, verbatim and lowercased
    * the display name, its plural, and both with any parenthetical removed
    * manual synonyms and temperature degree phrasing
    * micro-sign, superscript, square/cubic and hyphen/space variants of all of
      the above, plus the digit/letter split form the normalizer produces

When two units share an alias the first registered one wins, which makes
catalog order the ambiguity policy.

Examples:
    >>> index = AliasIndex.build()
    >>> index.resolve('Kilograms')
    AliasEntry(symbol='kg', category=Mass)
    >>> index.resolve('degrees celsius').symbol
    '°C'
    >>> index.suggest('kgx')
    ['kg']
"""
import re
from collections import deque
from typing import Deque, Dict, Iterator, List, Mapping, NamedTuple, Optional, Sequence, Tuple

from typing_extensions import Final, Self

from py_unitquery.exceptions import UnitAliasError
from py_unitquery.logger import logger
from py_unitquery.normalizer import collapse_whitespace, split_digit_letter_runs
from py_unitquery.synonyms import EXTRA_UNIT_SYNONYMS, TEMPERATURE_DEGREE_SYNONYMS
from py_unitquery.unit import DEFAULT_CATALOG, Category, Unit, UnitCatalog

__all__ = (
    'AliasEntry',
    'AliasIndex',
    'build_aliases_for_unit',
    'normalize_alias',
)

_SUPERSCRIPT_TO_DIGIT: Final[Mapping[str, str]] = {
    '⁰': '0', '¹': '1', '²': '2', '³': '3', '⁴': '4',
    '⁵': '5', '⁶': '6', '⁷': '7', '⁸': '8', '⁹': '9',
}
_MICRO_SIGNS: Final[Tuple[str, ...]] = ('µ', 'μ')
_POWER_WORDS: Final[Mapping[str, Tuple[str, str]]] = {
    'square': ('squared', '2'),
    'sq': ('squared', '2'),
    'sq.': ('squared', '2'),
    'cubic': ('cubed', '3'),
    'cu': ('cubed', '3'),
    'cu.': ('cubed', '3'),
}
_POWER_SUFFIXES: Final[Mapping[str, str]] = {'squared': '2', 'cubed': '3'}

_PARENTHETICAL_RE: Final = re.compile(r'\s*\([^)]*\)')
_SUPERSCRIPT_RE: Final = re.compile('[' + ''.join(_SUPERSCRIPT_TO_DIGIT) + ']+')
_LEADING_PREPOSITION_RE: Final = re.compile(r'^(?:from|of)\s+', re.IGNORECASE)
_PER_RE: Final = re.compile(r'\s+per\s+', re.IGNORECASE)
_DEG_DOT_RE: Final = re.compile(r'\bdeg\.', re.IGNORECASE)
_DEGREES_RE: Final = re.compile(r'\bdegrees?\b', re.IGNORECASE)
_PLAIN_WORDS_RE: Final = re.compile(r'[a-z]+(?: [a-z]+)+')


class AliasEntry(NamedTuple):
    """A unit an alias resolves to."""

    symbol: str
    category: Category


def normalize_alias(raw: str) -> str:
    """Normalize text into an alias index key.

    Trims, drops a leading 'from'/'of', tidies 'per' spacing and degree
    spelling, maps Greek mu to the micro sign, collapses whitespace and
    lowercases.

        >>> normalize_alias('  Degrees   Celsius ')
        'degree celsius'
        >>> normalize_alias('of μm')
        'µm'
    """
    text = _LEADING_PREPOSITION_RE.sub('', raw.strip())
    text = _PER_RE.sub(' per ', text)
    text = _DEG_DOT_RE.sub('deg', text)
    text = _DEGREES_RE.sub('degree', text)
    text = text.replace('μ', 'µ')
    return collapse_whitespace(text).lower()


def _pluralize(name: str) -> str:
    return name if name.endswith('s') else name + 's'


def _alias_variants(alias: str) -> List[str]:
    """Spelling variants derived from a single alias, the alias itself first."""
    variants = [alias]
    seen = {alias}
    queue: Deque[str] = deque((alias,))

    def _push(candidate: str) -> None:
        candidate = collapse_whitespace(candidate)
        if candidate and candidate not in seen:
            seen.add(candidate)
            variants.append(candidate)
            queue.append(candidate)

    while queue:
        current = queue.popleft()

        for sign in _MICRO_SIGNS:
            if sign in current:
                _push(current.replace(sign, 'u'))
                _push(current.replace(sign, 'micro'))

        match = _SUPERSCRIPT_RE.search(current)
        if match:
            digits = ''.join(_SUPERSCRIPT_TO_DIGIT[c] for c in match.group())
            head, tail = current[:match.start()], current[match.end():]
            _push(f'{head}{digits}{tail}')
            _push(f'{head} {digits}{tail}')
            _push(f'{head}^{digits}{tail}')
            if digits == '2':
                _push(f'{head} squared{tail}')
            elif digits == '3':
                _push(f'{head} cubed{tail}')

        words = current.split(' ')
        if len(words) > 1 and words[0] in _POWER_WORDS:
            word, digit = _POWER_WORDS[words[0]]
            rest = ' '.join(words[1:])
            _push(f'{rest} {word}')
            _push(f'{rest}^{digit}')
            _push(f'{rest} {digit}')
            _push(f'{rest}{digit}')
        elif len(words) > 1 and words[-1] in _POWER_SUFFIXES:
            digit = _POWER_SUFFIXES[words[-1]]
            base = ' '.join(words[:-1])
            _push(f'{base}^{digit}')
            _push(f'{base} {digit}')

        if '-' in current:
            _push(current.replace('-', ' '))
        elif _PLAIN_WORDS_RE.fullmatch(current):
            _push(current.replace(' ', '-'))

        _push(split_digit_letter_runs(current))

    return variants


def build_aliases_for_unit(
        unit: Unit,
        extra_synonyms: Mapping[str, Sequence[str]] = EXTRA_UNIT_SYNONYMS,
        degree_synonyms: Mapping[str, Sequence[str]] = TEMPERATURE_DEGREE_SYNONYMS,
) -> List[str]:
    """All aliases of one unit, lowercased, deduplicated, in registration order.

    Args:
        unit: Catalog unit.
        extra_synonyms: Manual synonyms keyed by unit symbol.
        degree_synonyms: Degree phrasing keyed by temperature unit symbol.

    Returns:
        Alias strings. The lowercased symbol always comes first.

    Raises:
        UnitAliasError: If a synonym table holds a blank alias for this unit.
    """
    name = unit.display_name.lower()
    stripped = _PARENTHETICAL_RE.sub('', name).strip()
    seeds = [unit.symbol, unit.symbol.lower(), name, _pluralize(name)]
    if stripped and stripped != name:
        seeds.extend((stripped, _pluralize(stripped)))
    for table in (extra_synonyms, degree_synonyms):
        for synonym in table.get(unit.symbol, ()):
            if not synonym or not synonym.strip():
                raise UnitAliasError(f"Blank alias registered for unit {unit.symbol!r}")
            seeds.append(synonym)

    aliases: Dict[str, None] = {}
    for seed in seeds:
        for variant in _alias_variants(normalize_alias(seed)):
            aliases.setdefault(variant, None)
    return list(aliases)


class AliasIndex(Mapping[str, Tuple[AliasEntry, ...]]):
    """Read-only alias lookup built from a unit catalog.

    Keys are normalized with `normalize_alias`; each key keeps its entries in
    catalog order and never stores the same unit twice.
    """

    __slots__ = ('_entries',)

    def __init__(self, entries: Mapping[str, Sequence[AliasEntry]]):
        self._entries: Dict[str, Tuple[AliasEntry, ...]] = {
            key: tuple(value) for key, value in entries.items()
        }

    @classmethod
    def build(
            cls,
            catalog: UnitCatalog = DEFAULT_CATALOG,
            extra_synonyms: Mapping[str, Sequence[str]] = EXTRA_UNIT_SYNONYMS,
            degree_synonyms: Mapping[str, Sequence[str]] = TEMPERATURE_DEGREE_SYNONYMS,
    ) -> Self:
        """Build the index for every unit of a catalog.

        Args:
            catalog: Unit catalog; its iteration order decides alias precedence.
            extra_synonyms: Manual synonyms keyed by unit symbol.
            degree_synonyms: Degree phrasing keyed by temperature unit symbol.

        Returns:
            A new AliasIndex.

        Raises:
            UnitAliasError: If a synonym table holds a blank alias.
        """
        entries: Dict[str, List[AliasEntry]] = {}
        for category, unit in catalog.iter_units():
            entry = AliasEntry(unit.symbol, category)
            for alias in build_aliases_for_unit(unit, extra_synonyms, degree_synonyms):
                bucket = entries.setdefault(alias, [])
                if entry not in bucket:
                    bucket.append(entry)
        index = cls(entries)

        for category, unit in catalog.iter_units():
            entry = AliasEntry(unit.symbol, category)
            for text in (unit.symbol, unit.display_name):
                if index.resolve(text) != entry:
                    logger.warning(f"Alias {text!r} of {unit.symbol} ({category}) "
                                   f"resolves to {index.resolve(text)} instead")
        logger.debug(f"Alias index built: {len(index)} aliases for {len(catalog)} categories")
        return index

    def __getitem__(self, key: str) -> Tuple[AliasEntry, ...]:
        if isinstance(key, str):
            if key in self._entries:
                return self._entries[key]
            normalized = normalize_alias(key)
            if normalized in self._entries:
                return self._entries[normalized]
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        try:
            self[key]  # type: ignore[index]
        except KeyError:
            return False
        return True

    def __repr__(self) -> str:
        return f"<AliasIndex: {len(self)} aliases>"

    def entries(self, raw: str) -> Tuple[AliasEntry, ...]:
        """All units an alias names, in precedence order; empty when unknown."""
        return self.get(raw, ())

    def resolve(self, raw: str) -> Optional[AliasEntry]:
        """Resolve an alias to a single unit; the first registered entry wins."""
        found = self.entries(raw)
        return found[0] if found else None

    def suggest(self, raw: str, limit: int = 5, prefix_length: int = 2) -> List[str]:
        """Aliases sharing the first characters of `raw`, in registration order."""
        key = normalize_alias(raw)
        if not key or limit <= 0:
            return []
        prefix = key[:prefix_length]
        suggestions = []
        for alias in self._entries:
            if alias != key and alias.startswith(prefix):
                suggestions.append(alias)
                if len(suggestions) >= limit:
                    break
        return suggestions

    def aliases_for(self, symbol: str, category: Category) -> List[str]:
        """Every key that lists the given unit among its entries."""
        entry = AliasEntry(symbol, category)
        return [alias for alias, found in self._entries.items() if entry in found]
