"""py_unitquery exception types.

Malformed user input is never an exception in this library: the parser returns
a `ParseFailure` value for every recoverable condition. Exceptions are reserved
for programming and configuration errors, and for callers that explicitly ask
for raising behaviour.

Exception Hierarchy
-------------------

Exception (built-in Python)
└── ValueError
    ├── CatalogError
    ├── UnitAliasError
    └── QueryParseError

Exception Types
---------------

- CatalogError: Raised when the unit catalog or the default-pair table is
  corrupt: no categories, a category without units, duplicate symbols within a
  category, or a default pair that names a unit the catalog does not have.
  These indicate a configuration bug and fail fast at startup.

- UnitAliasError: Raised while building the alias index when a synonym table
  holds a blank alias.

- QueryParseError: Raised by `ConversionQueryParser.parse_strict` and
  `ParseFailure.raise_error` for callers that prefer exceptions. Contains:
  - failure: the `ParseFailure` describing what went wrong
  - error_kind: shortcut to `failure.error_kind`
  - suggestions: shortcut to `failure.suggestions`
"""
from __future__ import annotations

from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from py_unitquery.parse_result import ParseErrorKind, ParseFailure

__all__ = (
    'CatalogError',
    'UnitAliasError',
    'QueryParseError',
)


class CatalogError(ValueError):
    """Unit catalog error."""


class UnitAliasError(ValueError):
    """Unit alias error."""


class QueryParseError(ValueError):
    """Exception for conversion queries that could not be parsed.

    Contains:
    - The failure value returned by the parser
    - Its error kind and suggestions
    """

    def __init__(self, failure: ParseFailure):
        """
        Parameters:
        - failure: The ParseFailure describing the unparsable query
        """
        self.failure: ParseFailure = failure
        msg = failure.error_message
        if failure.suggestions:
            msg += f" (did you mean: {', '.join(failure.suggestions)}?)"
        super().__init__(msg)

    @property
    def error_kind(self) -> ParseErrorKind:
        return self.failure.error_kind

    @property
    def suggestions(self) -> Tuple[str, ...]:
        return self.failure.suggestions
