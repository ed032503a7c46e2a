"""Hand-maintained synonym tables for alias and category resolution.

Everything here is static data. Category-specific behaviour of the parser is
expressed as tables keyed by `Category` or by unit symbol; adding a category or
a spelling is a data change, never a code change.
"""
from typing import FrozenSet, Mapping, NamedTuple, Tuple

from typing_extensions import Final

from py_unitquery.unit import Category

__all__ = (
    'EXTRA_UNIT_SYNONYMS',
    'TEMPERATURE_DEGREE_SYNONYMS',
    'CATEGORY_KEYWORDS',
    'CATEGORY_NOISE_WORDS',
    'SI_PREFIX_KEYWORDS',
    'DefaultPair',
    'CATEGORY_DEFAULT_PAIRS',
)

#: Manual synonyms per canonical unit symbol.
# mkdocs.pymdown.snippet marker: --8<-- [start:EXTRA_UNIT_SYNONYMS]
EXTRA_UNIT_SYNONYMS: Final[Mapping[str, Tuple[str, ...]]] = {
    # Length
    'km': ('kilometer', 'kilometers', 'kilometre', 'kilometres'),
    'm': ('meter', 'meters', 'metre', 'metres'),
    'cm': ('centimeter', 'centimeters', 'centimetre', 'centimetres'),
    'mm': ('millimeter', 'millimeters', 'millimetre', 'millimetres'),
    'µm': ('micrometer', 'micrometers', 'micrometre', 'micrometres', 'micron', 'microns', 'um'),
    'nm': ('nanometer', 'nanometers', 'nanometre', 'nanometres'),
    'mi': ('mile', 'miles'),
    'yd': ('yard', 'yards'),
    'ft': ('foot', 'feet'),
    'in': ('inch', 'inches'),
    # Mass
    'kg': ('kilogram', 'kilograms', 'kilo', 'kilos', 'kilogramme'),
    'g': ('gram', 'grams', 'gramme'),
    'mg': ('milligram', 'milligrams'),
    't': ('metric ton', 'metric tons', 'tonne', 'tonnes', 'ton', 'tons'),
    'lb': ('pound', 'pounds', 'lbs'),
    'oz': ('ounce', 'ounces'),
    # Temperature
    '°C': ('celsius', 'centigrade', 'c', 'deg c', 'degc', 'c deg', 'c-degree'),
    '°F': ('fahrenheit', 'f', 'deg f', 'degf', 'f deg', 'f-degree'),
    'K': ('kelvin', 'kelvins', 'deg k', 'degk'),
    # Time
    's': ('sec', 'secs', 'second', 'seconds'),
    'ms': ('msec', 'millisecond', 'milliseconds'),
    'µs': ('microsecond', 'microseconds', 'us'),
    'min': ('minute', 'minutes', 'mins'),
    'h': ('hour', 'hours', 'hr', 'hrs'),
    'day': ('days', 'd'),
    'wk': ('week', 'weeks', 'wks'),
    'a': ('year', 'years', 'yr', 'yrs'),
    # Pressure
    'atm': ('atmosphere', 'atmospheres'),
    'psi': ('pounds per square inch', 'lbf/in2', 'lbf/in²'),
    # Area
    'm²': ('square meter', 'square meters', 'square metre', 'square metres', 'sq meter', 'sq meters', 'sqm', 'm2'),
    'km²': ('square kilometer', 'square kilometers', 'square kilometre', 'square kilometres', 'km2'),
    'cm²': ('square centimeter', 'square centimeters', 'square centimetre', 'square centimetres', 'cm2'),
    'mm²': ('square millimeter', 'square millimeters', 'square millimetre', 'square millimetres', 'mm2'),
    'mi²': ('square mile', 'square miles', 'sq mi'),
    'yd²': ('square yard', 'square yards', 'sq yd'),
    'ft²': ('square foot', 'square feet', 'ft2', 'sq ft'),
    'in²': ('square inch', 'square inches', 'in2', 'sq in'),
    'ha': ('hectare', 'hectares'),
    'acre': ('acres', 'ac'),
    # Volume
    'm³': ('cubic meter', 'cubic meters', 'cubic metre', 'cubic metres', 'm3'),
    'km³': ('cubic kilometer', 'cubic kilometers', 'cubic kilometre', 'cubic kilometres', 'km3'),
    'cm³': ('cubic centimeter', 'cubic centimeters', 'cubic centimetre', 'cubic centimetres', 'cm3', 'cc'),
    'mm³': ('cubic millimeter', 'cubic millimeters', 'cubic millimetre', 'cubic millimetres', 'mm3'),
    'ft³': ('cubic foot', 'cubic feet', 'ft3', 'cu ft'),
    'in³': ('cubic inch', 'cubic inches', 'in3', 'cu in'),
    'L': ('liter', 'liters', 'litre', 'litres', 'l'),
    'mL': ('milliliter', 'milliliters', 'millilitre', 'millilitres', 'ml'),
    'gal': ('gallon', 'gallons', 'us gallon', 'us gallons'),
    'qt': ('quart', 'quarts'),
    'pt': ('pint', 'pints'),
    'cup': ('cups',),
    'fl oz': ('fluid ounce', 'fluid ounces', 'floz', 'fl. oz'),
    'tbsp': ('tablespoon', 'tablespoons', 'tbs'),
    'tsp': ('teaspoon', 'teaspoons'),
    # Energy
    'J': ('joule',),
    'kJ': ('kilojoule', 'kilojoules'),
    'cal': ('calorie', 'calories'),
    'kcal': ('kilocalorie', 'kilocalories', 'food calorie', 'food calories'),
    'Wh': ('watt hour', 'watt hours', 'watt-hour'),
    'kWh': ('kilowatt hour', 'kilowatt hours', 'kilowatt-hour', 'kw h'),
    'eV': ('electron volt', 'electron volts', 'electronvolts'),
    'BTU': ('british thermal unit', 'british thermal units', 'btus'),
    'ft⋅lb': ('ft-lb', 'ft lb', 'ft*lb', 'ft·lb', 'ft⋅lbf', 'foot pound', 'foot pounds', 'foot-pounds'),
    # Speed
    'm/s': ('meter per second', 'meters per second', 'metre per second', 'metres per second', 'mps'),
    'km/h': ('kilometer per hour', 'kilometers per hour', 'kilometre per hour', 'kilometres per hour',
             'kph', 'kmh'),
    'mph': ('mile per hour', 'miles per hour'),
    'ft/s': ('foot per second', 'feet per second', 'fps'),
    'kn': ('knot', 'knots', 'kt', 'kts'),
    # Fuel Economy
    'km/L': ('kilometers per liter', 'kilometres per litre', 'kmpl', 'km per liter'),
    'L/100km': ('liters per 100 kilometers', 'litres per 100 kilometres', 'l/100 km', 'liter per 100 km'),
    'MPG (US)': ('mpg', 'mpg us', 'us mpg', 'miles per gallon', 'miles per us gallon'),
    'MPG (UK)': ('mpg uk', 'uk mpg', 'imperial mpg', 'miles per imperial gallon'),
    # Data Storage
    'bit': ('bits',),
    'B': ('byte', 'bytes'),
    'KB': ('kilobyte', 'kilobytes'),
    'MB': ('megabyte', 'megabytes'),
    'GB': ('gigabyte', 'gigabytes', 'gig', 'gigs'),
    'TB': ('terabyte', 'terabytes'),
    'PB': ('petabyte', 'petabytes'),
    # Data Transfer Rate
    'bps': ('bit per second', 'bits/s', 'bit/s'),
    'Kbps': ('kilobit per second', 'kbit/s'),
    'Mbps': ('megabit per second', 'mbit/s'),
    'Gbps': ('gigabit per second', 'gbit/s'),
    'Tbps': ('terabit per second', 'tbit/s'),
    'B/s': ('byte per second', 'bytes/s'),
    # Bitcoin
    'BTC': ('bitcoins', 'xbt'),
    'sat': ('sats', 'satoshis'),
}
# --8<-- [end:EXTRA_UNIT_SYNONYMS]

#: Degree phrasing for temperature units; everyday wording varies more than symbols do.
TEMPERATURE_DEGREE_SYNONYMS: Final[Mapping[str, Tuple[str, ...]]] = {
    '°C': (
        'degree celsius', 'degrees celsius',
        'degree centigrade', 'degrees centigrade',
        'degree °c', 'degrees °c',
        'degree c', 'degrees c',
        'deg c', 'deg. c', 'deg. °c', 'deg °c',
    ),
    '°F': (
        'degree fahrenheit', 'degrees fahrenheit',
        'degree °f', 'degrees °f',
        'degree f', 'degrees f',
        'deg f', 'deg. f', 'deg. °f', 'deg °f',
    ),
    'K': (
        'degree kelvin', 'degrees kelvin',
        'degree k', 'degrees k',
    ),
}

#: Words that name a category besides its own name.
CATEGORY_KEYWORDS: Final[Mapping[Category, Tuple[str, ...]]] = {
    Category.Length: ('distance', 'height', 'width', 'depth', 'span', 'measurement'),
    Category.Mass: ('weight', 'heaviness', 'weigh'),
    Category.Temperature: ('climate', 'weather', 'temp'),
    Category.Time: ('duration', 'interval', 'schedule', 'clock', 'period'),
    Category.Pressure: ('barometric', 'compression'),
    Category.Area: ('surface', 'square', 'space'),
    Category.Volume: ('capacity', 'cubic', 'fluid', 'liquid', 'container'),
    Category.Energy: ('power', 'joules', 'calories', 'watts', 'electricity', 'electric', 'work'),
    Category.Speed: ('velocity', 'pace'),
    Category.FuelEconomy: ('fuel', 'efficiency', 'consumption', 'mileage', 'petrol', 'diesel'),
    Category.DataStorage: ('storage', 'memory', 'drive', 'disk', 'files'),
    Category.DataTransferRate: ('bandwidth', 'network', 'internet', 'upload', 'download', 'connection', 'wifi'),
    Category.Bitcoin: ('crypto', 'cryptocurrency', 'blockchain'),
}

#: Words asking about SI prefixes rather than a unit category.
SI_PREFIX_KEYWORDS: Final[FrozenSet[str]] = frozenset(('prefix', 'prefixes', 'metric'))

#: Generic words a category query may carry ("time conversions").
CATEGORY_NOISE_WORDS: Final[FrozenSet[str]] = frozenset((
    'conversion', 'conversions', 'convert', 'converter', 'converters', 'convertor',
    'unit', 'units', 'calculator', 'chart', 'table', 'measure', 'measures', 'and', 'of',
))


class DefaultPair(NamedTuple):
    """Natural conversion pair of a category."""

    from_unit: str
    to_unit: str


#: Natural pair per category; single-unit queries take their target from here.
# mkdocs.pymdown.snippet marker: --8<-- [start:CATEGORY_DEFAULT_PAIRS]
CATEGORY_DEFAULT_PAIRS: Final[Mapping[Category, DefaultPair]] = {
    Category.Length: DefaultPair('m', 'ft'),
    Category.Mass: DefaultPair('kg', 'g'),
    Category.Temperature: DefaultPair('°C', '°F'),
    Category.Time: DefaultPair('s', 'ms'),
    Category.Pressure: DefaultPair('Pa', 'atm'),
    Category.Area: DefaultPair('m²', 'ft²'),
    Category.Volume: DefaultPair('L', 'mL'),
    Category.Energy: DefaultPair('J', 'kJ'),
    Category.Speed: DefaultPair('m/s', 'km/h'),
    Category.FuelEconomy: DefaultPair('km/L', 'MPG (US)'),
    Category.DataStorage: DefaultPair('GB', 'MB'),
    Category.DataTransferRate: DefaultPair('Mbps', 'MB/s'),
    Category.Bitcoin: DefaultPair('BTC', 'sat'),
}
# --8<-- [end:CATEGORY_DEFAULT_PAIRS]
