import pytest

from py_unitquery import (ALL_SI_PREFIXES, PrefixGroup, SI_MULTIPLES, SI_SUBMULTIPLES, get_si_prefix_by_symbol,
                          match_si_prefix_token, suggest_si_prefixes)


class TestPrefixTable:

    def test_sizes(self):
        assert len(SI_MULTIPLES) == 10
        assert len(SI_SUBMULTIPLES) == 10
        assert ALL_SI_PREFIXES == SI_MULTIPLES + SI_SUBMULTIPLES

    def test_exponents_descend(self):
        exponents = [p.exponent for p in ALL_SI_PREFIXES]
        assert exponents == sorted(exponents, reverse=True)
        assert exponents[0] == 24 and exponents[-1] == -24

    def test_groups(self):
        assert all(p.group == PrefixGroup.Multiple for p in SI_MULTIPLES)
        assert all(p.group == PrefixGroup.Submultiple for p in SI_SUBMULTIPLES)

    def test_factor(self):
        assert get_si_prefix_by_symbol('k').factor == pytest.approx(1e3)
        assert get_si_prefix_by_symbol('n').factor == pytest.approx(1e-9)


class TestMatchToken:

    @pytest.mark.parametrize(
        "token, name",
        [
            ("kilo", "kilo"),
            ("Kilo-", "kilo"),
            ("k", "kilo"),
            ("K", "kilo"),
            ("M", "mega"),
            ("m", "milli"),
            ("MILLI", "milli"),
            ("P", "peta"),
            ("p", "pico"),
            ("Y", "yotta"),
            ("y", "yocto"),
            ("µ", "micro"),
            ("μ", "micro"),
            ("u", "micro"),
            ("da", "deca"),
            ("deka", "deca"),
            ("centi", "centi"),
            (" nano ", "nano"),
            ("hec_to", "hecto"),
        ],
    )
    def test_match(self, token, name):
        assert match_si_prefix_token(token).name == name

    @pytest.mark.parametrize("token", ["", "   ", "kilogram", "mego", "x", "-"])
    def test_no_match(self, token):
        assert match_si_prefix_token(token) is None


class TestLookupHelpers:

    def test_get_by_symbol(self):
        assert get_si_prefix_by_symbol('M').name == 'mega'
        assert get_si_prefix_by_symbol('m').name == 'milli'
        assert get_si_prefix_by_symbol('DA').name == 'deca'
        assert get_si_prefix_by_symbol('q') is None

    def test_suggest(self):
        assert suggest_si_prefixes('mego') == ['mega']
        assert suggest_si_prefixes('de') == ['deca', 'deci']
        assert suggest_si_prefixes('') == []
        assert suggest_si_prefixes('qq') == []
