import logging
from pathlib import Path

import pytest

from py_unitquery import (Category, DefaultPair, ParserSettings, basicConfig, get_default_parser,
                          reset_default_parser)
from py_unitquery.settings import ParserOptions


class TestParserSettings:

    def test_defaults(self):
        assert ParserSettings.suggestion_limit == 5
        assert ParserSettings.suggestion_prefix_length == 2
        assert ParserSettings.directive == 'si'
        assert ParserSettings.split_digit_runs is True
        assert ParserSettings.default_pairs == {}

    def test_set_and_restore(self):
        ParserSettings.set(suggestion_limit=3, directive='Prefix', split_digit_runs=False)
        assert ParserSettings.suggestion_limit == 3
        assert ParserSettings.directive == 'prefix'
        assert ParserSettings.split_digit_runs is False
        ParserSettings.restore_defaults()
        assert ParserSettings.suggestion_limit == 5
        assert ParserSettings.directive == 'si'

    @pytest.mark.parametrize(
        "kwargs",
        [
            {'unknown': 1},
            {'suggestion_limit': -1},
            {'suggestion_limit': 'five'},
            {'suggestion_limit': True},
            {'directive': 'two words'},
            {'directive': ''},
            {'split_digit_runs': 'yes'},
            {'default_pairs': ['kg', 'g']},
        ],
        ids=lambda kw: next(iter(kw)),
    )
    def test_bad_values_are_logged_not_raised(self, kwargs, caplog):
        with caplog.at_level(logging.WARNING, logger='py_unitquery'):
            ParserSettings.set(**kwargs)
        assert caplog.records
        assert ParserSettings.suggestion_limit == 5
        assert ParserSettings.directive == 'si'
        assert ParserSettings.split_digit_runs is True

    def test_default_pairs_are_validated(self, caplog):
        with caplog.at_level(logging.WARNING, logger='py_unitquery'):
            ParserSettings.set(default_pairs={'Mass': ['lb', 'oz'], 'Nope': ['a', 'b'], 'Time': ['s']})
        assert ParserSettings.default_pairs == {'Mass': ['lb', 'oz']}
        assert len(caplog.records) == 2

    def test_restore_defaults_gives_fresh_pairs(self):
        ParserSettings.set(default_pairs={'Mass': ['lb', 'oz']})
        ParserSettings.restore_defaults()
        assert ParserSettings.default_pairs == {}

    def test_snapshot(self):
        ParserSettings.set(suggestion_limit=2, default_pairs={'Mass': ['lb', 'oz']})
        snapshot = ParserSettings.snapshot()
        assert isinstance(snapshot, ParserOptions)
        assert snapshot.suggestion_limit == 2
        assert snapshot.default_pairs == {Category.Mass: DefaultPair('lb', 'oz')}
        with pytest.raises(TypeError):
            snapshot.default_pairs[Category.Time] = DefaultPair('h', 'min')  # type: ignore[index]

    def test_repr(self):
        assert 'suggestion_limit = 5' in repr(ParserSettings)


class TestConfigLoader:

    def test_basic_config_mutual_exclusion_error(self):
        with pytest.raises(ValueError):
            basicConfig(filename="dummy.toml", settings={"suggestion_limit": 1})

    def test_basic_config_from_mapping_resets_default_parser(self):
        before = get_default_parser()
        basicConfig(settings={"suggestion_limit": 1})
        assert ParserSettings.suggestion_limit == 1
        after = get_default_parser()
        assert after is not before
        assert after.options.suggestion_limit == 1

    def test_load_config_file(self, tmp_path: Path):
        cfg = tmp_path / "pyuq.toml"
        cfg.write_text("""
[pyuq.settings]
directive = "prefix"
suggestion_limit = 2

[pyuq.default_pairs]
Mass = ["lb", "oz"]
""".strip(), encoding="utf-8")
        basicConfig(str(cfg))
        assert ParserSettings.directive == 'prefix'
        parser = get_default_parser()
        assert parser.parse("prefix kilo to milli").ok
        assert parser.parse("kg").to_unit == 'oz'

    def test_load_config_searches_upwards(self, monkeypatch, tmp_path: Path):
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        (tmp_path / "a" / ".pyuq.toml").write_text("[pyuq.settings]\nsuggestion_limit = 4\n", encoding="utf-8")
        with monkeypatch.context() as m:
            m.chdir(str(nested))
            basicConfig()
            assert ParserSettings.suggestion_limit == 4

    @pytest.mark.parametrize(
        "content, message",
        [
            ("[other]\nkey = 1\n", "no `pyuq` section"),
            ("[pyuq.default_pairs]\nMass = [\"lb\", \"oz\"]\n", "no `pyuq.settings` section"),
        ],
    )
    def test_missing_sections_warn(self, tmp_path: Path, caplog, content, message):
        cfg = tmp_path / "pyuq.toml"
        cfg.write_text(content, encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger='py_unitquery'):
            basicConfig(str(cfg))
        assert any(message in record.getMessage() for record in caplog.records)

    def test_missing_sections_can_be_silenced(self, tmp_path: Path, caplog):
        cfg = tmp_path / "pyuq.toml"
        cfg.write_text("[other]\nkey = 1\n", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger='py_unitquery'):
            basicConfig(str(cfg), suppress_warnings=True)
        assert not caplog.records

    def test_bad_default_pair_in_config_fails_fast(self, tmp_path: Path):
        from py_unitquery import CatalogError

        cfg = tmp_path / "pyuq.toml"
        cfg.write_text("[pyuq.settings]\n\n[pyuq.default_pairs]\nMass = [\"kg\", \"m\"]\n", encoding="utf-8")
        basicConfig(str(cfg), suppress_warnings=True)
        reset_default_parser()
        with pytest.raises(CatalogError):
            get_default_parser()


class TestFileLogging:

    def test_enable_and_disable(self, tmp_path: Path):
        from py_unitquery import enable_file_logging, disable_file_logging, logger

        log_file = tmp_path / "parse.log"
        enable_file_logging(str(log_file))
        try:
            logger.debug("file handler probe")
        finally:
            disable_file_logging()
        assert "file handler probe" in log_file.read_text(encoding="utf-8")
        disable_file_logging()
