"""Parser for free-form unit conversion queries."""

import importlib.metadata

__version__ = importlib.metadata.version("py_unitquery")

# Standard library imports
import os
import sys

# Third-party imports
from typing_extensions import Any, Dict, Optional

# Local imports
from .logger import logger as log
from .parser import reset_default_parser
from .settings import ParserSettings

if sys.version_info[:2] < (3, 11):
    import tomli as tomllib
else:
    import tomllib


def _load_config(filepath: Optional[str] = None, suppress_warnings: bool = False) -> None:
    """Load parser settings from a .pyuq.toml file.

    Args:
        filepath: Path to configuration file. If None, searches for .pyuq.toml or pyuq.toml
        suppress_warnings: If True, suppress warning messages
    """
    def find_pyuq_toml(start_dir: str) -> Optional[str]:
        """Search for a pyuq.toml file, walking up from the specified directory.

        Returns:
            The absolute path to the file if found, otherwise None.
        """
        current_dir = os.path.abspath(start_dir)
        while True:
            for candidate in (os.path.join(current_dir, '.pyuq.toml'),
                              os.path.join(current_dir, 'pyuq.toml')):
                if os.path.exists(candidate):
                    return os.path.abspath(candidate)

            parent_dir = os.path.dirname(current_dir)
            # reached the filesystem root
            if parent_dir == current_dir:
                return None
            current_dir = parent_dir

    if filepath is None:
        if (filepath := find_pyuq_toml(os.getcwd())) is None:
            filepath = find_pyuq_toml(os.path.dirname(__file__))

    if filepath is not None:
        log.debug(f"Found {os.path.basename(filepath)} at {os.path.dirname(filepath)}")

        with open(filepath, "rb") as fp:
            _config = tomllib.load(fp)

        if _pyuq := _config.get('pyuq'):
            if settings := _pyuq.get('settings'):
                ParserSettings.set(**settings)
            elif not suppress_warnings:
                log.warning("Config has no `pyuq.settings` section")
            if default_pairs := _pyuq.get('default_pairs'):
                ParserSettings.set(default_pairs=default_pairs)
        elif not suppress_warnings:
            log.warning("Config has no `pyuq` section")

    reset_default_parser()
    log.debug("ParserSettings load success")


def _basic_config(filename: Optional[str] = None,
                  settings: Optional[Dict[str, Any]] = None,
                  suppress_warnings: bool = False) -> None:
    """Load parser settings from file or Mapping.

    Args:
        filename: Configuration file path
        settings: Dictionary of parser settings
        suppress_warnings: If True, suppress warning messages

    Raises:
        ValueError: If both filename and settings are provided
    """
    if filename and settings:
        raise ValueError("Can't use settings and config file at same time")
    if not filename and settings:
        ParserSettings.set(**settings)
        reset_default_parser()
    else:
        # trying to load definitions from pyuq.toml
        _load_config(filename, suppress_warnings)


basicConfig = _basic_config

basicConfig()


from .alias_index import AliasEntry, AliasIndex, build_aliases_for_unit, normalize_alias
from .exceptions import CatalogError, UnitAliasError, QueryParseError
from .logger import logger, enable_file_logging, disable_file_logging
from .normalizer import normalize, normalize_for_completion, is_numeric_query, has_connector
from .parse_result import (ResultKind, ValueStrategy, ParseErrorKind, UnitParseSuccess, CategoryParseSuccess,
                           SiPrefixParseSuccess, ParseFailure, ParseResult)
from .parser import ConversionQueryParser, get_default_parser, parse
from .settings import ParserOptions
from .si_prefix import (PrefixGroup, SiPrefix, SI_MULTIPLES, SI_SUBMULTIPLES, ALL_SI_PREFIXES,
                        match_si_prefix_token, get_si_prefix_by_symbol, suggest_si_prefixes)
from .synonyms import DefaultPair, CATEGORY_DEFAULT_PAIRS
from .unit import Category, UnitKind, UnitMode, Unit, CategoryData, UnitCatalog, DEFAULT_CATALOG

# DRY: build __all__ from global symbols
_SKIP_GLOBALS = {
    # Skip Python builtins
    "__name__", "__doc__", "__package__", "__loader__", "__spec__",
    "__file__", "__cached__", "__builtins__", "__path__",
    # Skip imported modules
    "tomllib", "sys", "os", "importlib",
    # Skip submodules bound as package attributes
    "alias_index", "exceptions", "normalizer", "parse_result", "parser",
    "settings", "si_prefix", "synonyms", "unit",
    # Skip typing helpers and the internal logger alias
    "Any", "Dict", "Optional", "log",
    # Skip private/internal symbols
    "_load_config", "_basic_config",
}
# Build __all__ from the module's global namespace
__all__ = [
    name for name in globals()
    if not name.startswith("_") and name not in _SKIP_GLOBALS
]
# Add the public aliases for private functions
if "basicConfig" not in __all__:
    __all__.append("basicConfig")
