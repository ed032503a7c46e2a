"""Conversion query parser.

Turns free-form text into a `ParseResult`:

    >>> parser = ConversionQueryParser()
    >>> parser.parse('100 kg in g')
    UnitParseSuccess(value=100.0, from_unit='kg', to_unit='g', category=Mass, value_strategy=<ValueStrategy.Explicit: 'explicit'>)
    >>> parser.parse('atm').to_unit
    'Pa'
    >>> parser.parse('time conversions')
    CategoryParseSuccess(category=Time)
    >>> parser.parse('SI 5 kilo to milli').to_dict()['toPrefixSymbol']
    'm'

Query grammar, after normalization:

    [number] (directive prefix [connector] prefix
              | unit connector unit
              | unit
              | category words)

Malformed input never raises; it yields a `ParseFailure` that names the
problem and, where possible, suggests what the user may have meant.
"""
import math
import re
import threading
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, Tuple

from typing_extensions import Final

from py_unitquery.alias_index import AliasIndex, normalize_alias
from py_unitquery.exceptions import CatalogError
from py_unitquery.logger import logger
from py_unitquery.normalizer import CONNECTOR_WORDS, NUMBER_PATTERN, normalize
from py_unitquery.parse_result import (CategoryParseSuccess, ParseErrorKind, ParseFailure, ParseResult,
                                       SiPrefixParseSuccess, UnitParseSuccess, ValueStrategy)
from py_unitquery.settings import ParserOptions, ParserSettings
from py_unitquery.si_prefix import match_si_prefix_token, suggest_si_prefixes
from py_unitquery.synonyms import (CATEGORY_DEFAULT_PAIRS, CATEGORY_KEYWORDS, CATEGORY_NOISE_WORDS,
                                   SI_PREFIX_KEYWORDS, DefaultPair)
from py_unitquery.unit import DEFAULT_CATALOG, Category, UnitCatalog

__all__ = (
    'ConversionQueryParser',
    'get_default_parser',
    'reset_default_parser',
    'parse',
)

_NUMBER_RE: Final = re.compile(NUMBER_PATTERN)

_UNIT_EXAMPLE: Final = "'10 kg to lb'"
_PREFIX_EXAMPLE: Final = "'si kilo to milli'"


def _to_value(token: str) -> float:
    """Numeric value of a number token; overflowing values fall back to 1."""
    value = float(token)
    if not math.isfinite(value):
        logger.debug(f"Number {token!r} is out of range, using 1")
        return 1.0
    return value


def _is_prefix_request(text: str) -> bool:
    words = [word for word in normalize_alias(text).split() if word not in CATEGORY_NOISE_WORDS]
    return bool(words) and all(word in SI_PREFIX_KEYWORDS for word in words)


class ConversionQueryParser:
    """Parser bound to one unit catalog.

    The alias index and category keyword sets are built on first use and then
    shared read-only, so one parser can serve many threads.

    Args:
        catalog: Unit catalog, `DEFAULT_CATALOG` when omitted.
        index: Prebuilt alias index for `catalog`; built lazily when omitted.
        settings: Options snapshot, `ParserSettings.snapshot()` when omitted.
        default_pairs: Per-category natural pair overrides, applied over the
            built-in table and the settings.

    Raises:
        CatalogError: If a default pair names an unknown category or unit.
    """

    def __init__(self,
                 catalog: Optional[UnitCatalog] = None,
                 index: Optional[AliasIndex] = None,
                 settings: Optional[ParserOptions] = None,
                 default_pairs: Optional[Mapping[Category, DefaultPair]] = None):
        self._catalog: UnitCatalog = catalog if catalog is not None else DEFAULT_CATALOG
        self._options: ParserOptions = settings if settings is not None else ParserSettings.snapshot()
        self._index: Optional[AliasIndex] = index
        self._keywords: Optional[Dict[Category, FrozenSet[str]]] = None
        self._lock = threading.Lock()

        # built-in pairs apply only where the catalog has their units
        pairs: Dict[Category, DefaultPair] = {
            category: pair for category, pair in CATEGORY_DEFAULT_PAIRS.items()
            if category in self._catalog and all(self._catalog.find_unit(category, s) for s in pair)
        }
        for overrides in (self._options.default_pairs, default_pairs or {}):
            for category, pair in overrides.items():
                category = self._check_pair(category, pair)
                pairs[category] = DefaultPair(*pair)
        self._default_pairs: Mapping[Category, DefaultPair] = pairs

    def _check_pair(self, category: Category, pair: Sequence[str]) -> Category:
        try:
            category = Category(category)
        except ValueError as error:
            raise CatalogError(f"Default pair for unknown category {category!r}") from error
        if category not in self._catalog:
            raise CatalogError(f"Default pair for category {category} missing from the catalog")
        if len(pair) != 2:
            raise CatalogError(f"Default pair for {category} must name two units, got {pair!r}")
        for symbol in pair:
            if self._catalog.find_unit(category, symbol) is None:
                raise CatalogError(f"Default pair unit {symbol!r} is not a unit of {category}")
        return category

    def _ensure_tables(self) -> Tuple[AliasIndex, Dict[Category, FrozenSet[str]]]:
        if self._index is None or self._keywords is None:
            with self._lock:
                if self._index is None:
                    self._index = AliasIndex.build(self._catalog)
                if self._keywords is None:
                    self._keywords = self._build_keywords()
        return self._index, self._keywords

    def _build_keywords(self) -> Dict[Category, FrozenSet[str]]:
        keywords = {}
        for category in self._catalog:
            name = category.value.lower()
            words = {name, *name.split()}
            words.update(keyword.lower() for keyword in CATEGORY_KEYWORDS.get(category, ()))
            keywords[category] = frozenset(words)
        return keywords

    @property
    def catalog(self) -> UnitCatalog:
        return self._catalog

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def index(self) -> AliasIndex:
        """Alias index, built on first access."""
        return self._ensure_tables()[0]

    def parse(self, raw: str) -> ParseResult:
        """Parse a conversion query.

        Args:
            raw: Query text as typed by the user.

        Returns:
            One of UnitParseSuccess, CategoryParseSuccess, SiPrefixParseSuccess
            or ParseFailure. Never raises for malformed text.

        Raises:
            TypeError: If `raw` is not a string.
        """
        if not isinstance(raw, str):
            raise TypeError(f"Query must be a string, got {type(raw).__name__}")
        text = normalize(raw, lowercase=False, split_digit_runs=self._options.split_digit_runs)
        if not text:
            result: ParseResult = ParseFailure(ParseErrorKind.EmptyQuery, "Empty query")
        else:
            result = self._parse_normalized(text)
        logger.debug(f"Parsed {raw!r} as {result}")
        return result

    def parse_strict(self, raw: str) -> ParseResult:
        """Parse a query, raising `QueryParseError` instead of returning a failure."""
        result = self.parse(raw)
        if isinstance(result, ParseFailure):
            result.raise_error()
        return result

    def resolve_unit(self, text: str) -> Optional[Tuple[Category, str]]:
        """Resolve alias text to `(category, symbol)`, or None."""
        entry = self.index.resolve(text)
        return (entry.category, entry.symbol) if entry else None

    def resolve_category(self, text: str) -> Optional[Category]:
        """Category named by `text`, or None.

        Every word other than generic noise ('conversions', 'units', ...) must
        name the same category, allowing a plural 's'. The first category in
        catalog order wins.
        """
        _, keywords = self._ensure_tables()
        tokens = [token for token in normalize_alias(text).split() if token not in CATEGORY_NOISE_WORDS]
        if not tokens:
            return None
        for category, words in keywords.items():
            if all(token in words or (token.endswith('s') and token[:-1] in words) for token in tokens):
                return category
        return None

    def default_target(self, category: Category, symbol: str) -> str:
        """Infer a target unit for a single-unit query; never returns `symbol`.

        The category's natural pair decides: its target unit, or its source
        unit when the query already names the target. Otherwise the first
        other unit of the category is used.
        """
        pair = self._default_pairs.get(category)
        if pair is not None:
            if pair.to_unit != symbol:
                return pair.to_unit
            if pair.from_unit != symbol:
                return pair.from_unit
        for unit in self._catalog.units(category):
            if unit.symbol != symbol:
                return unit.symbol
        # a category always has at least two units in a usable catalog
        return symbol

    def _parse_normalized(self, text: str) -> ParseResult:
        match = _NUMBER_RE.match(text)
        if match:
            value, has_value = _to_value(match.group()), True
            remainder = text[match.end():].strip()
        else:
            value, has_value = 1.0, False
            remainder = text
        if not remainder:
            return ParseFailure(ParseErrorKind.MissingUnitInformation,
                                f"Add units to convert, e.g. {_UNIT_EXAMPLE}")

        tokens = remainder.split()
        if tokens[0].lower() == self._options.directive.lower():
            return self._parse_si_prefixes(tokens[1:], value, has_value)

        positions = [i for i, token in enumerate(tokens) if token.lower() in CONNECTOR_WORDS]
        failure: Optional[ParseFailure] = None
        for i in positions:
            source, target = ' '.join(tokens[:i]), ' '.join(tokens[i + 1:])
            if not source or not target:
                continue
            result = self._parse_pair(source, target, value, has_value)
            if not isinstance(result, ParseFailure):
                return result
            if failure is None:
                failure = result
        if failure is not None:
            return failure

        result = self._parse_single(remainder, value, has_value)
        if positions and isinstance(result, ParseFailure):
            return ParseFailure(ParseErrorKind.MissingUnitInformation,
                                f"Specify units on both sides of the connector, e.g. {_UNIT_EXAMPLE}")
        return result

    def _parse_pair(self, source: str, target: str, value: float, has_value: bool) -> ParseResult:
        index = self.index
        from_entry = index.resolve(source)
        if from_entry is None:
            return self._unrecognized_unit(source)
        to_entry = index.resolve(target)
        if to_entry is None:
            return self._unrecognized_unit(target)
        if from_entry.category != to_entry.category:
            return ParseFailure(ParseErrorKind.CategoryMismatch,
                                f"Units do not share a category ({from_entry.category} vs {to_entry.category})")
        strategy = ValueStrategy.Explicit if has_value else ValueStrategy.ForceDefault
        return UnitParseSuccess(value, from_entry.symbol, to_entry.symbol, from_entry.category, strategy)

    def _parse_single(self, text: str, value: float, has_value: bool) -> ParseResult:
        if not has_value:
            category = self.resolve_category(text)
            if category is not None:
                return CategoryParseSuccess(category)
        if _is_prefix_request(text):
            return ParseFailure(ParseErrorKind.MissingUnitInformation,
                                f"Specify two prefixes to convert, e.g. {_PREFIX_EXAMPLE}")
        entry = self.index.resolve(text)
        if entry is None:
            return ParseFailure(ParseErrorKind.MissingConnector,
                                f"Could not understand '{text}'. Try a query like {_UNIT_EXAMPLE}",
                                self._suggest(text))
        strategy = ValueStrategy.Explicit if has_value else ValueStrategy.PreserveExisting
        return UnitParseSuccess(value, entry.symbol, self.default_target(entry.category, entry.symbol),
                                entry.category, strategy)

    def _parse_si_prefixes(self, tokens: List[str], value: float, has_value: bool) -> ParseResult:
        if tokens and not has_value and _NUMBER_RE.fullmatch(tokens[0]):
            value = _to_value(tokens[0])
            tokens = tokens[1:]

        positions = [i for i, token in enumerate(tokens) if token.lower() in CONNECTOR_WORDS]
        if positions:
            splits = [(tokens[:i], tokens[i + 1:]) for i in positions]
        else:
            splits = [(tokens[:i], tokens[i:]) for i in range(1, len(tokens))]

        failure: Optional[ParseFailure] = None
        for left, right in splits:
            if not left or not right:
                continue
            result = self._parse_prefix_pair(' '.join(left), ' '.join(right), value)
            if not isinstance(result, ParseFailure):
                return result
            if failure is None:
                failure = result
        if failure is not None:
            return failure
        return ParseFailure(ParseErrorKind.MissingUnitInformation,
                            f"Specify two prefixes to convert, e.g. {_PREFIX_EXAMPLE}")

    def _parse_prefix_pair(self, source: str, target: str, value: float) -> ParseResult:
        limit = self._options.suggestion_limit
        from_prefix = match_si_prefix_token(source)
        if from_prefix is None:
            return ParseFailure(ParseErrorKind.UnrecognizedPrefix, f"Unrecognized SI prefix: {source}",
                                suggest_si_prefixes(source, limit))
        to_prefix = match_si_prefix_token(target)
        if to_prefix is None:
            return ParseFailure(ParseErrorKind.UnrecognizedPrefix, f"Unrecognized SI prefix: {target}",
                                suggest_si_prefixes(target, limit))
        return SiPrefixParseSuccess(value, from_prefix.symbol, to_prefix.symbol, f"{source} to {target}")

    def _unrecognized_unit(self, text: str) -> ParseFailure:
        return ParseFailure(ParseErrorKind.UnrecognizedUnit, f"Unrecognized unit: {text}", self._suggest(text))

    def _suggest(self, text: str) -> List[str]:
        return self.index.suggest(text, self._options.suggestion_limit, self._options.suggestion_prefix_length)


_default_parser: Optional[ConversionQueryParser] = None
_default_parser_lock = threading.Lock()


def get_default_parser() -> ConversionQueryParser:
    """Shared parser over the default catalog and the current `ParserSettings`."""
    global _default_parser
    if _default_parser is None:
        with _default_parser_lock:
            if _default_parser is None:
                _default_parser = ConversionQueryParser()
    return _default_parser


def reset_default_parser() -> None:
    """Drop the shared parser so the next call picks up changed settings."""
    global _default_parser
    with _default_parser_lock:
        _default_parser = None


def parse(raw: str) -> ParseResult:
    """Parse a query with the shared default parser."""
    return get_default_parser().parse(raw)
