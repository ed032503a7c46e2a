"""Parser configuration.

`ParserSettings` is used at class level, like a module of constants that can be
changed at runtime or loaded from a `pyuq.toml` file by `basicConfig`. Parsers
do not read it live: each parser takes an immutable `ParserOptions` snapshot
when it is constructed.

Examples:
    >>> ParserSettings.set(suggestion_limit=3, directive='prefix')
    >>> ParserSettings.snapshot().suggestion_limit
    3
    >>> ParserSettings.restore_defaults()
"""
from dataclasses import MISSING, dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, NamedTuple

from py_unitquery.logger import logger
from py_unitquery.synonyms import DefaultPair
from py_unitquery.unit import Category

__all__ = (
    'ParserOptions',
    'ParserSettings',
)


class ParserOptions(NamedTuple):
    """Immutable parser configuration taken from `ParserSettings.snapshot()`."""

    suggestion_limit: int = 5
    suggestion_prefix_length: int = 2
    directive: str = 'si'
    split_digit_runs: bool = True
    default_pairs: Mapping[Category, DefaultPair] = MappingProxyType({})


class ParserSettingsMeta(type):
    """Provide representation method for static dataclasses."""

    def __repr__(cls):
        return '\n'.join(f'{name} = {getattr(cls, name)!r}'
                         for name in getattr(cls, '__dataclass_fields__'))


@dataclass
class ParserSettings(metaclass=ParserSettingsMeta):
    """Session-wide defaults for conversion query parsers.

    Attributes:
        suggestion_limit: Maximum number of suggestions attached to a failure.
        suggestion_prefix_length: Leading characters an alias must share with
            the unrecognized text to be suggested.
        directive: Word that switches a query into SI prefix mode.
        split_digit_runs: Separate glued numbers and units ('100kg') before parsing.
        default_pairs: Overrides of the natural conversion pair per category,
            as ``{"Mass": ["lb", "oz"]}``.
    """

    suggestion_limit: int = 5
    suggestion_prefix_length: int = 2
    directive: str = 'si'
    split_digit_runs: bool = True
    default_pairs: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def restore_defaults(cls):
        """Reset every setting to its default value."""
        for f in fields(cls):
            if f.default is not MISSING:
                setattr(cls, f.name, f.default)
            elif getattr(f, "default_factory", MISSING) is not MISSING:
                setattr(cls, f.name, f.default_factory())  # type: ignore

    @classmethod
    def set(cls, **kwargs: Any):
        """Set parser settings from keyword arguments.

        Invalid attributes or values are logged as warnings but do not raise exceptions.

        Examples:
            >>> ParserSettings.set(suggestion_limit=10, split_digit_runs=False)
            >>> ParserSettings.set(default_pairs={'Mass': ['lb', 'oz']})
        """
        for attribute, value in kwargs.items():
            if attribute not in cls.__dataclass_fields__:
                logger.warning(f"{attribute=} not found in parser settings")
            elif attribute in ('suggestion_limit', 'suggestion_prefix_length'):
                if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                    setattr(cls, attribute, value)
                else:
                    logger.warning(f"{attribute}: {value=} is not a non-negative integer")
            elif attribute == 'directive':
                if isinstance(value, str) and value.strip() and len(value.split()) == 1:
                    setattr(cls, attribute, value.strip().lower())
                else:
                    logger.warning(f"directive: {value=} is not a single word")
            elif attribute == 'split_digit_runs':
                if isinstance(value, bool):
                    setattr(cls, attribute, value)
                else:
                    logger.warning(f"split_digit_runs: {value=} is not a bool")
            else:
                cls._set_default_pairs(value)

    @classmethod
    def _set_default_pairs(cls, value: Any) -> None:
        if not isinstance(value, Mapping):
            logger.warning(f"default_pairs: {value=} is not a table")
            return
        pairs = dict(cls.default_pairs)
        for name, pair in value.items():
            try:
                Category(name)
            except ValueError:
                logger.warning(f"default_pairs: {name!r} is not a category")
                continue
            if (not isinstance(pair, (list, tuple)) or len(pair) != 2
                    or not all(isinstance(symbol, str) and symbol for symbol in pair)):
                logger.warning(f"default_pairs: {name} = {pair!r} is not a [from, to] pair")
                continue
            pairs[name] = list(pair)
        cls.default_pairs = pairs

    @classmethod
    def snapshot(cls) -> ParserOptions:
        """Freeze the current settings for a parser instance."""
        return ParserOptions(
            suggestion_limit=cls.suggestion_limit,
            suggestion_prefix_length=cls.suggestion_prefix_length,
            directive=cls.directive,
            split_digit_runs=cls.split_digit_runs,
            default_pairs=MappingProxyType(
                {Category(name): DefaultPair(*pair) for name, pair in cls.default_pairs.items()}),
        )


ParserSettings.restore_defaults()
