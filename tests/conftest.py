import logging

import pytest

from py_unitquery import ConversionQueryParser, ParserSettings, reset_default_parser
from py_unitquery.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def clean_settings():
    """Every test starts and ends with default settings and a fresh default parser."""
    ParserSettings.restore_defaults()
    reset_default_parser()
    yield
    ParserSettings.restore_defaults()
    reset_default_parser()


@pytest.fixture(scope="session")
def parser():
    return ConversionQueryParser()
