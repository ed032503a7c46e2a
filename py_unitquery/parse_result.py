"""Immutable results of parsing a conversion query.

A parse always yields exactly one of four shapes. Every shape carries class
level `ok` and `kind` attributes, so callers can dispatch on either:

    >>> result = parse('100 kg in g')
    >>> result.ok, result.kind
    (True, <ResultKind.Unit: 'unit'>)
    >>> result.to_dict()['valueStrategy']
    'explicit'

`to_dict` renders the camelCase mapping consumed by UI and conversion layers.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, Tuple, Union

from typing_extensions import NoReturn, TypeAlias

from py_unitquery.exceptions import QueryParseError
from py_unitquery.unit import Category

__all__ = (
    'ResultKind',
    'ValueStrategy',
    'ParseErrorKind',
    'UnitParseSuccess',
    'CategoryParseSuccess',
    'SiPrefixParseSuccess',
    'ParseFailure',
    'ParseResult',
)


class ResultKind(str, Enum):
    Unit = 'unit'
    Category = 'category'
    SiPrefix = 'si-prefix'


class ValueStrategy(str, Enum):
    """How a consumer should treat the numeric value of a unit result.

    - Explicit: the user typed a number; use it.
    - PreserveExisting: a single unit without a number; keep the value already
      shown in the UI.
    - ForceDefault: a unit pair without a number; reset the value to the default.
    """

    Explicit = 'explicit'
    PreserveExisting = 'preserve-existing'
    ForceDefault = 'force-default'


class ParseErrorKind(str, Enum):
    EmptyQuery = 'EmptyQuery'
    MissingConnector = 'MissingConnector'
    MissingUnitInformation = 'MissingUnitInformation'
    UnrecognizedUnit = 'UnrecognizedUnit'
    CategoryMismatch = 'CategoryMismatch'
    UnrecognizedPrefix = 'UnrecognizedPrefix'


@dataclass(frozen=True)
class UnitParseSuccess:
    """A unit-to-unit conversion.

    Attributes:
        value: Numeric value, 1.0 when the query had none.
        from_unit: Canonical symbol of the source unit.
        to_unit: Canonical symbol of the target unit; never equal to `from_unit`
            when it was inferred.
        category: Category shared by both units.
        value_strategy: How to treat `value`.
    """

    ok: ClassVar[bool] = True
    kind: ClassVar[ResultKind] = ResultKind.Unit

    value: float
    from_unit: str
    to_unit: str
    category: Category
    value_strategy: ValueStrategy

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ok': self.ok,
            'kind': self.kind.value,
            'value': self.value,
            'fromUnit': self.from_unit,
            'toUnit': self.to_unit,
            'category': self.category.value,
            'valueStrategy': self.value_strategy.value,
        }


@dataclass(frozen=True)
class CategoryParseSuccess:
    """The query named a whole category ("time", "weight units")."""

    ok: ClassVar[bool] = True
    kind: ClassVar[ResultKind] = ResultKind.Category

    category: Category

    def to_dict(self) -> Dict[str, Any]:
        return {'ok': self.ok, 'kind': self.kind.value, 'category': self.category.value}


@dataclass(frozen=True)
class SiPrefixParseSuccess:
    """An SI prefix conversion ("si kilo to milli")."""

    ok: ClassVar[bool] = True
    kind: ClassVar[ResultKind] = ResultKind.SiPrefix

    value: float
    from_prefix_symbol: str
    to_prefix_symbol: str
    input_text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'ok': self.ok,
            'kind': self.kind.value,
            'value': self.value,
            'fromPrefixSymbol': self.from_prefix_symbol,
            'toPrefixSymbol': self.to_prefix_symbol,
            'inputText': self.input_text,
        }


@dataclass(frozen=True)
class ParseFailure:
    """A query that could not be parsed.

    Attributes:
        error_kind: Machine-readable reason.
        error_message: Human-readable message.
        suggestions: Alias or prefix names close to what was typed.
    """

    ok: ClassVar[bool] = False

    error_kind: ParseErrorKind
    error_message: str
    suggestions: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # accept any sequence, store a tuple so the result stays hashable
        object.__setattr__(self, 'suggestions', tuple(self.suggestions))

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'ok': self.ok,
            'error': self.error_message,
            'errorKind': self.error_kind.value,
        }
        if self.suggestions:
            data['suggestions'] = list(self.suggestions)
        return data

    def raise_error(self) -> NoReturn:
        """Raise `QueryParseError` carrying this failure."""
        raise QueryParseError(self)


ParseResult: TypeAlias = Union[UnitParseSuccess, CategoryParseSuccess, SiPrefixParseSuccess, ParseFailure]
