"""Unit catalog for conversion queries.

This module holds the static registry of measurement categories and their units.
Each category lists its units in display order; every unit carries a symbol, a
display name and a factor relative to the category's base unit (meter for Length,
kilogram for Mass, joule for Energy, ...). Temperature units do not scale linearly
and carry a placeholder factor of 1; their conversion is formula based.

The catalog is loaded once and never mutated. It is the only data the alias index
and the query parser consume.

Key Features:
    * Closed `Category` enumeration, so category-specific rules are data keyed by enum
    * Validation at construction time: a corrupt catalog fails fast with `CatalogError`
    * Ordered iteration, which defines alias precedence when two units share an alias

Examples:
    >>> DEFAULT_CATALOG.find_unit(Category.Mass, 'kg').display_name
    'Kilogram'
    >>> [u.symbol for u in DEFAULT_CATALOG.units(Category.Bitcoin)]
    ['BTC', 'sat']
    >>> Category.Time == 'Time'
    True

Supported Categories:
    * Length: `m`, `km`, `cm`, `mm`, `µm`, `nm`, `mi`, `yd`, `ft`, `in`
    * Mass: `kg`, `g`, `mg`, `t`, `lb`, `oz`
    * Temperature: `°C`, `°F`, `K`
    * Time: `s`, `ms`, `µs`, `ns`, `ps`, `fs`, `min`, `h`, `day`, `wk`, `a`
    * Pressure: `Pa`, `kPa`, `bar`, `atm`, `psi`
    * Area, Volume, Energy, Speed, Fuel Economy, Data Storage, Data Transfer Rate, Bitcoin
"""

# Standard library imports
from __future__ import annotations
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from typing_extensions import Final

# Local imports
from py_unitquery.exceptions import CatalogError

__all__ = (
    'Category',
    'UnitKind',
    'UnitMode',
    'Unit',
    'CategoryData',
    'UnitCatalog',
    'DEFAULT_CATALOG',
)


class Category(str, Enum):
    """Enumeration of all supported measurement categories.

    Members compare equal to their display names, so results can be matched
    against plain strings coming from a UI layer.
    """

    Length = 'Length'
    Mass = 'Mass'
    Temperature = 'Temperature'
    Time = 'Time'
    Pressure = 'Pressure'
    Area = 'Area'
    Volume = 'Volume'
    Energy = 'Energy'
    Speed = 'Speed'
    FuelEconomy = 'Fuel Economy'
    DataStorage = 'Data Storage'
    DataTransferRate = 'Data Transfer Rate'
    Bitcoin = 'Bitcoin'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


class UnitKind(Enum):
    """Optional unit-type tag used by conversion math for non-linear units."""

    Frequency = 'frequency'
    Wavelength = 'wavelength'
    DirectEfficiency = 'direct_efficiency'
    InverseConsumption = 'inverse_consumption'


class UnitMode(Enum):
    """Visibility tier of a unit in the converter UI."""

    All = 'all'
    Basic = 'basic'
    Advanced = 'advanced'


class Unit(NamedTuple):
    """A single unit of measure.

    Attributes:
        symbol: Canonical symbol, unique within its category (e.g., 'kg', '°C', 'µs').
        display_name: Human-readable name (e.g., 'Kilogram', 'Gallon (US)').
        base_factor: Multiplier to the category's base unit.
        unit_kind: Optional tag for units that do not convert by a plain factor.
        mode: Visibility tier in the converter UI.
    """

    symbol: str
    display_name: str
    base_factor: float
    unit_kind: Optional[UnitKind] = None
    mode: UnitMode = UnitMode.All


class CategoryData(NamedTuple):
    """A category, its base unit symbol and its ordered units."""

    category: Category
    base_symbol: str
    units: Tuple[Unit, ...]


class UnitCatalog(Mapping[Category, CategoryData]):
    """Immutable registry of categories and their units.

    Iteration follows the order the categories were supplied in. That order is
    significant: when two units register the same alias, the first category wins.

    Raises:
        CatalogError: If the supplied data is empty or inconsistent.
    """

    __slots__ = ('_categories',)

    def __init__(self, categories: Iterable[CategoryData]):
        data: Dict[Category, CategoryData] = {}
        for entry in categories:
            if entry.category in data:
                raise CatalogError(f"Category {entry.category} is defined twice")
            UnitCatalog._validate_category(entry)
            data[entry.category] = CategoryData(entry.category, entry.base_symbol, tuple(entry.units))
        if not data:
            raise CatalogError("Unit catalog is empty")
        self._categories: Mapping[Category, CategoryData] = data

    @staticmethod
    def _validate_category(entry: CategoryData) -> None:
        if not isinstance(entry.category, Category):
            raise CatalogError(f"Category expected, got {type(entry.category).__name__} ({entry.category!r})")
        if not entry.units:
            raise CatalogError(f"Category {entry.category} has no units")
        seen = set()
        for unit in entry.units:
            if not unit.symbol or not unit.symbol.strip():
                raise CatalogError(f"Category {entry.category} has a unit with a blank symbol")
            if not unit.display_name or not unit.display_name.strip():
                raise CatalogError(f"Unit {unit.symbol!r} in {entry.category} has a blank display name")
            if unit.symbol in seen:
                raise CatalogError(f"Duplicate unit symbol {unit.symbol!r} in {entry.category}")
            seen.add(unit.symbol)
        if entry.base_symbol not in seen:
            raise CatalogError(f"Base unit {entry.base_symbol!r} is not a unit of {entry.category}")

    def __getitem__(self, category: Category) -> CategoryData:
        return self._categories[category]

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __repr__(self) -> str:
        return f"<UnitCatalog: {len(self)} categories, {sum(1 for _ in self.iter_units())} units>"

    @property
    def categories(self) -> Tuple[Category, ...]:
        """Categories in catalog order."""
        return tuple(self._categories)

    def units(self, category: Category) -> Tuple[Unit, ...]:
        """Ordered units of a category."""
        return self._categories[category].units

    def find_unit(self, category: Category, symbol: str) -> Optional[Unit]:
        """Find a unit by its exact symbol within a category.

        Args:
            category: Category to search.
            symbol: Canonical unit symbol (case-sensitive).

        Returns:
            The unit, or None if the category has no unit with that symbol.
        """
        for unit in self._categories[category].units:
            if unit.symbol == symbol:
                return unit
        return None

    def iter_units(self) -> Iterator[Tuple[Category, Unit]]:
        """Yield `(category, unit)` pairs in catalog order."""
        for category, data in self._categories.items():
            for unit in data.units:
                yield category, unit

    def units_for_mode(self, category: Category, mode: UnitMode) -> List[Unit]:
        """Units of a category visible in the given converter mode.

        The basic mode hides units tagged `UnitMode.Advanced`; any other mode
        returns every unit.
        """
        units = self._categories[category].units
        if mode == UnitMode.Basic:
            return [unit for unit in units if unit.mode != UnitMode.Advanced]
        return list(units)


_ADV: Final = UnitMode.Advanced

# mkdocs.pymdown.snippet marker: --8<-- [start:DEFAULT_CATALOG]
DEFAULT_CATALOG: Final[UnitCatalog] = UnitCatalog((
    CategoryData(Category.Length, 'm', (
        Unit('m', 'Meter', 1.),
        Unit('km', 'Kilometer', 1_000.),
        Unit('cm', 'Centimeter', 0.01),
        Unit('mm', 'Millimeter', 0.001),
        Unit('µm', 'Micrometer', 1e-6, mode=_ADV),
        Unit('nm', 'Nanometer', 1e-9, mode=_ADV),
        Unit('mi', 'Mile', 1_609.344),
        Unit('yd', 'Yard', 0.9144),
        Unit('ft', 'Foot', 0.3048),
        Unit('in', 'Inch', 0.0254),
    )),
    CategoryData(Category.Mass, 'kg', (
        Unit('kg', 'Kilogram', 1.),
        Unit('g', 'Gram', 0.001),
        Unit('mg', 'Milligram', 1e-6),
        Unit('t', 'Metric Ton', 1_000.),
        Unit('lb', 'Pound', 0.45359237),
        Unit('oz', 'Ounce', 0.028349523125),
    )),
    CategoryData(Category.Temperature, '°C', (
        Unit('°C', 'Celsius', 1.),
        Unit('°F', 'Fahrenheit', 1.),
        Unit('K', 'Kelvin', 1.),
    )),
    CategoryData(Category.Time, 's', (
        Unit('s', 'Second', 1.),
        Unit('ms', 'Millisecond', 1e-3),
        Unit('µs', 'Microsecond', 1e-6, mode=_ADV),
        Unit('ns', 'Nanosecond', 1e-9, mode=_ADV),
        Unit('ps', 'Picosecond', 1e-12, mode=_ADV),
        Unit('fs', 'Femtosecond', 1e-15, mode=_ADV),
        Unit('min', 'Minute', 60.),
        Unit('h', 'Hour', 3_600.),
        Unit('day', 'Day', 86_400.),
        Unit('wk', 'Week', 604_800.),
        Unit('a', 'Year', 31_557_600.),
    )),
    CategoryData(Category.Pressure, 'Pa', (
        Unit('Pa', 'Pascal', 1.),
        Unit('kPa', 'Kilopascal', 1_000.),
        Unit('bar', 'Bar', 100_000.),
        Unit('atm', 'Atmosphere', 101_325.),
        Unit('psi', 'Pound per square inch', 6_894.757),
    )),
    CategoryData(Category.Area, 'm²', (
        Unit('m²', 'Square Meter', 1.),
        Unit('km²', 'Square Kilometer', 1e6),
        Unit('cm²', 'Square Centimeter', 1e-4),
        Unit('mm²', 'Square Millimeter', 1e-6),
        Unit('mi²', 'Square Mile', 2_589_988.110336),
        Unit('yd²', 'Square Yard', 0.83612736),
        Unit('ft²', 'Square Foot', 0.09290304),
        Unit('in²', 'Square Inch', 0.00064516),
        Unit('ha', 'Hectare', 10_000.),
        Unit('acre', 'Acre', 4_046.8564224),
    )),
    CategoryData(Category.Volume, 'm³', (
        Unit('m³', 'Cubic Meter', 1.),
        Unit('km³', 'Cubic Kilometer', 1e9),
        Unit('cm³', 'Cubic Centimeter', 1e-6),
        Unit('mm³', 'Cubic Millimeter', 1e-9),
        Unit('L', 'Liter', 1e-3),
        Unit('mL', 'Milliliter', 1e-6),
        Unit('gal', 'Gallon (US)', 0.003785411784),
        Unit('qt', 'Quart (US)', 0.000946352946),
        Unit('pt', 'Pint (US)', 0.000473176473),
        Unit('cup', 'Cup (US)', 0.0002365882365),
        Unit('fl oz', 'Fluid Ounce (US)', 2.95735295625e-5),
        Unit('tbsp', 'Tablespoon (US)', 1.478676478125e-5),
        Unit('tsp', 'Teaspoon (US)', 4.92892159375e-6),
        Unit('ft³', 'Cubic Foot', 0.028316846592),
        Unit('in³', 'Cubic Inch', 1.6387064e-5),
    )),
    CategoryData(Category.Energy, 'J', (
        Unit('J', 'Joule', 1.),
        Unit('kJ', 'Kilojoule', 1_000.),
        Unit('cal', 'Calorie', 4.184),
        Unit('kcal', 'Kilocalorie (food)', 4_184.),
        Unit('Wh', 'Watt Hour', 3_600.),
        Unit('kWh', 'Kilowatt Hour', 3.6e6),
        Unit('eV', 'Electronvolt', 1.602176634e-19, mode=_ADV),
        Unit('BTU', 'British Thermal Unit', 1_055.05585),
        Unit('ft⋅lb', 'Foot-pound', 1.3558179483314),
    )),
    CategoryData(Category.Speed, 'm/s', (
        Unit('m/s', 'Meter per second', 1.),
        Unit('km/h', 'Kilometer per hour', 1. / 3.6),
        Unit('mph', 'Mile per hour', 0.44704),
        Unit('ft/s', 'Foot per second', 0.3048),
        Unit('kn', 'Knot', 1_852. / 3_600.),
    )),
    CategoryData(Category.FuelEconomy, 'km/L', (
        Unit('km/L', 'Kilometer per Liter', 1., UnitKind.DirectEfficiency),
        Unit('L/100km', 'Liter per 100 kilometers', 100., UnitKind.InverseConsumption),
        Unit('MPG (US)', 'Mile per Gallon (US)', 0.425144, UnitKind.DirectEfficiency),
        Unit('MPG (UK)', 'Mile per Gallon (UK)', 0.354006, UnitKind.DirectEfficiency),
    )),
    CategoryData(Category.DataStorage, 'B', (
        Unit('bit', 'Bit', 1. / 8),
        Unit('B', 'Byte', 1.),
        Unit('KB', 'Kilobyte', 1_024.),
        Unit('MB', 'Megabyte', 1_024. ** 2),
        Unit('GB', 'Gigabyte', 1_024. ** 3),
        Unit('TB', 'Terabyte', 1_024. ** 4),
        Unit('PB', 'Petabyte', 1_024. ** 5),
    )),
    CategoryData(Category.DataTransferRate, 'bps', (
        Unit('bps', 'Bits per second', 1.),
        Unit('Kbps', 'Kilobits per second', 1e3),
        Unit('Mbps', 'Megabits per second', 1e6),
        Unit('Gbps', 'Gigabits per second', 1e9),
        Unit('Tbps', 'Terabits per second', 1e12),
        Unit('B/s', 'Bytes per second', 8.),
        Unit('KB/s', 'Kilobytes per second', 8e3),
        Unit('MB/s', 'Megabytes per second', 8e6),
        Unit('GB/s', 'Gigabytes per second', 8e9),
        Unit('TB/s', 'Terabytes per second', 8e12),
    )),
    CategoryData(Category.Bitcoin, 'BTC', (
        Unit('BTC', 'Bitcoin', 1.),
        Unit('sat', 'Satoshi', 1e-8),
    )),
))
# --8<-- [end:DEFAULT_CATALOG]
