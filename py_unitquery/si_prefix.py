"""SI prefix table (NIST SP 330, table 3) and prefix token matching.

Matching is exact, never fuzzy. Symbols are tried case-sensitively first, so
'M' is mega and 'm' is milli, 'P' is peta and 'p' is pico; only then are the
case-insensitive aliases (full names, 'kilo-', 'deka', 'u') consulted.

    >>> match_si_prefix_token('M').name
    'mega'
    >>> match_si_prefix_token('m').name
    'milli'
    >>> match_si_prefix_token('Kilo-').symbol
    'k'
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple

from typing_extensions import Final

__all__ = (
    'PrefixGroup',
    'SiPrefix',
    'SI_MULTIPLES',
    'SI_SUBMULTIPLES',
    'ALL_SI_PREFIXES',
    'match_si_prefix_token',
    'get_si_prefix_by_symbol',
    'suggest_si_prefixes',
)


class PrefixGroup(Enum):
    Multiple = 'multiple'
    Submultiple = 'submultiple'


def _collapse(token: str) -> str:
    """Drop whitespace, '-' and '_' and map Greek mu to the micro sign."""
    return ''.join(ch for ch in token if not (ch.isspace() or ch in '-_')).replace('μ', 'µ')


@dataclass(frozen=True)
class SiPrefix:
    """A decimal SI prefix.

    Attributes:
        name: Full prefix name ('kilo').
        symbol: Case-sensitive symbol ('k', 'µ', 'da').
        exponent: Power of ten the prefix stands for.
        group: Whether the prefix scales up or down.
        aliases: Lowercased, collapsed spellings accepted case-insensitively.
    """

    name: str
    symbol: str
    exponent: int
    group: PrefixGroup
    aliases: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def factor(self) -> float:
        """Scaling factor, 10 ** exponent."""
        return 10.0 ** self.exponent


def _define(group: PrefixGroup, name: str, symbol: str, exponent: int, *extra: str) -> SiPrefix:
    spellings = (name, symbol) + extra
    aliases = {_collapse(s).lower() for s in spellings}
    # 'kilo-' collapses to 'kilo', so the hyphenated form needs no extra entry
    return SiPrefix(name, symbol, exponent, group, frozenset(aliases))


_M: Final = PrefixGroup.Multiple
_S: Final = PrefixGroup.Submultiple

# mkdocs.pymdown.snippet marker: --8<-- [start:SI_PREFIXES]
SI_MULTIPLES: Final[Tuple[SiPrefix, ...]] = (
    _define(_M, 'yotta', 'Y', 24),
    _define(_M, 'zetta', 'Z', 21),
    _define(_M, 'exa', 'E', 18),
    _define(_M, 'peta', 'P', 15),
    _define(_M, 'tera', 'T', 12),
    _define(_M, 'giga', 'G', 9),
    _define(_M, 'mega', 'M', 6),
    _define(_M, 'kilo', 'k', 3),
    _define(_M, 'hecto', 'h', 2),
    _define(_M, 'deca', 'da', 1, 'deka'),
)

SI_SUBMULTIPLES: Final[Tuple[SiPrefix, ...]] = (
    _define(_S, 'deci', 'd', -1),
    _define(_S, 'centi', 'c', -2),
    _define(_S, 'milli', 'm', -3),
    _define(_S, 'micro', 'µ', -6, 'u'),
    _define(_S, 'nano', 'n', -9),
    _define(_S, 'pico', 'p', -12),
    _define(_S, 'femto', 'f', -15),
    _define(_S, 'atto', 'a', -18),
    _define(_S, 'zepto', 'z', -21),
    _define(_S, 'yocto', 'y', -24),
)
# --8<-- [end:SI_PREFIXES]

ALL_SI_PREFIXES: Final[Tuple[SiPrefix, ...]] = SI_MULTIPLES + SI_SUBMULTIPLES


def match_si_prefix_token(raw: str, prefixes: Iterable[SiPrefix] = ALL_SI_PREFIXES) -> Optional[SiPrefix]:
    """Match a user token against the prefix table.

    Args:
        raw: Token such as 'kilo', 'k', 'Kilo-', 'µ', 'u'.
        prefixes: Table to search, multiples before submultiples by default.

    Returns:
        The matching prefix, or None when nothing matches exactly.
    """
    collapsed = _collapse(raw)
    if not collapsed:
        return None
    prefixes = tuple(prefixes)
    for prefix in prefixes:
        if prefix.symbol == collapsed:
            return prefix
    lowered = collapsed.lower()
    for prefix in prefixes:
        if lowered in prefix.aliases:
            return prefix
    return None


def get_si_prefix_by_symbol(symbol: str) -> Optional[SiPrefix]:
    """Look up a prefix by symbol, exact case first, then ignoring case."""
    normalized = symbol.strip()
    for prefix in ALL_SI_PREFIXES:
        if prefix.symbol == normalized:
            return prefix
    for prefix in ALL_SI_PREFIXES:
        if prefix.symbol.lower() == normalized.lower():
            return prefix
    return None


def suggest_si_prefixes(raw: str, limit: int = 5) -> List[str]:
    """Prefix names starting with the first two characters of `raw`."""
    head = _collapse(raw).lower()[:2]
    if not head:
        return []
    return [p.name for p in ALL_SI_PREFIXES if p.name.startswith(head)][:limit]
