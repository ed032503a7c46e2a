import pytest

from py_unitquery import (AliasEntry, AliasIndex, Category, CategoryData, DEFAULT_CATALOG, Unit, UnitAliasError,
                          UnitCatalog, build_aliases_for_unit, normalize_alias)


@pytest.fixture(scope="module")
def index():
    return AliasIndex.build()


class TestNormalizeAlias:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("  Kilograms ", "kilograms"),
            ("Degrees   Celsius", "degree celsius"),
            ("deg. F", "deg f"),
            ("from km", "km"),
            ("of μs", "µs"),
            ("meter   per  second", "meter per second"),
        ],
        ids=lambda v: v if isinstance(v, str) else None,
    )
    def test_normalize_alias(self, raw, expected):
        assert normalize_alias(raw) == expected


class TestBuildAliasesForUnit:

    def test_symbol_first(self):
        aliases = build_aliases_for_unit(Unit('kg', 'Kilogram', 1.))
        assert aliases[0] == 'kg'
        assert {'kilogram', 'kilograms', 'kilo', 'kilos'} <= set(aliases)

    def test_no_duplicates(self):
        aliases = build_aliases_for_unit(Unit('m²', 'Square Meter', 1.))
        assert len(aliases) == len(set(aliases))

    def test_superscript_and_square_variants(self):
        aliases = set(build_aliases_for_unit(Unit('m²', 'Square Meter', 1.)))
        assert {'m²', 'm2', 'm 2', 'm^2', 'm squared', 'square meters', 'meter squared'} <= aliases

    def test_cubic_variants(self):
        aliases = set(build_aliases_for_unit(Unit('ft³', 'Cubic Foot', 1.)))
        assert {'ft3', 'ft^3', 'ft 3', 'cu ft', 'ft cubed', 'foot cubed', 'cubic feet'} <= aliases

    def test_micro_variants(self):
        aliases = set(build_aliases_for_unit(Unit('µs', 'Microsecond', 1e-6)))
        assert {'µs', 'us', 'micros', 'microsecond', 'microseconds'} <= aliases

    def test_parenthetical_stripped(self):
        aliases = set(build_aliases_for_unit(Unit('gal', 'Gallon (US)', 1.)))
        assert {'gallon (us)', 'gallon', 'gallons'} <= aliases

    def test_hyphen_and_space_variants(self):
        aliases = set(build_aliases_for_unit(Unit('ft⋅lb', 'Foot-pound', 1.)))
        assert {'foot-pound', 'foot pound', 'ft-lb', 'ft lb'} <= aliases

    def test_digit_split_variant(self):
        aliases = set(build_aliases_for_unit(Unit('L/100km', 'Liter per 100 kilometers', 100.)))
        assert 'l/100km' in aliases
        assert 'l/100 km' in aliases

    def test_temperature_degree_synonyms(self):
        aliases = set(build_aliases_for_unit(Unit('°C', 'Celsius', 1.)))
        assert {'°c', 'celsius', 'degree celsius', 'deg c', 'degc', 'c'} <= aliases

    def test_blank_synonym_raises(self):
        with pytest.raises(UnitAliasError):
            build_aliases_for_unit(Unit('kg', 'Kilogram', 1.), extra_synonyms={'kg': ('kilo', '  ')})


class TestAliasIndex:

    @pytest.mark.parametrize("category, unit", list(DEFAULT_CATALOG.iter_units()),
                             ids=lambda v: v.symbol if isinstance(v, Unit) else v.value)
    def test_every_unit_reachable_by_symbol_and_name(self, index, category, unit):
        entry = AliasEntry(unit.symbol, category)
        assert index.resolve(unit.symbol) == entry
        assert index.resolve(unit.display_name) == entry

    @pytest.mark.parametrize(
        "alias, symbol",
        [
            ("kilograms", "kg"),
            ("Degrees Fahrenheit", "°F"),
            ("deg. c", "°C"),
            ("um", "µm"),
            ("μm", "µm"),
            ("us", "µs"),
            ("hours", "h"),
            ("yr", "a"),
            ("sq ft", "ft²"),
            ("in 2", "in²"),
            ("m^3", "m³"),
            ("cc", "cm³"),
            ("kph", "km/h"),
            ("mpg", "MPG (US)"),
            ("l/100 km", "L/100km"),
            ("fluid ounces", "fl oz"),
            ("sats", "sat"),
        ],
    )
    def test_resolve(self, index, alias, symbol):
        assert index.resolve(alias).symbol == symbol

    def test_resolve_unknown(self, index):
        assert index.resolve('furlongs') is None
        assert index.entries('furlongs') == ()

    def test_first_registered_wins(self):
        catalog = UnitCatalog((
            CategoryData(Category.Length, 'x', (Unit('x', 'Shared', 1.),)),
            CategoryData(Category.Mass, 'y', (Unit('y', 'Shared', 1.),)),
        ))
        index = AliasIndex.build(catalog, extra_synonyms={}, degree_synonyms={})
        assert index.entries('shared') == (AliasEntry('x', Category.Length), AliasEntry('y', Category.Mass))
        assert index.resolve('shared') == AliasEntry('x', Category.Length)

    def test_no_duplicate_entries_per_key(self, index):
        for alias, entries in index.items():
            assert len(entries) == len(set(entries)), alias

    def test_keys_are_normalized(self, index):
        for alias in index:
            assert alias == alias.lower()
            assert '  ' not in alias
            assert alias == alias.strip()

    def test_mapping_protocol(self, index):
        assert 'KG' in index
        assert 'furlong' not in index
        assert index['kg'] == (AliasEntry('kg', Category.Mass),)
        assert index['KG'] == index['kg']
        assert index.get('KG') == index['kg']
        assert index.get(' Kilograms ') == index['kg']
        assert index.get('furlong') is None
        assert all(key in index for key in index)
        with pytest.raises(KeyError):
            index['furlong']
        with pytest.raises(KeyError):
            index[42]  # type: ignore[index]
        assert len(index) == len(list(index.keys()))
        assert repr(index).startswith('<AliasIndex:')

    def test_suggest(self, index):
        suggestions = index.suggest('kgx')
        assert suggestions == ['kg']
        assert len(index.suggest('me', limit=3)) == 3
        assert all(s.startswith('me') for s in index.suggest('meterz'))
        assert index.suggest('') == []
        assert index.suggest('zzz') == []

    def test_aliases_for(self, index):
        aliases = index.aliases_for('kg', Category.Mass)
        assert aliases[0] == 'kg'
        assert 'kilograms' in aliases

    def test_blank_synonym_fails_build(self):
        with pytest.raises(UnitAliasError):
            AliasIndex.build(extra_synonyms={'kg': ('',)})
