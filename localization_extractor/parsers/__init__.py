"""Parsers for string catalogs and legacy .strings tables."""

from .base import BaseParser
from .catalog import (
    CatalogParser,
    CatalogParseResult,
    CatalogParseError,
    CatalogNotFoundError,
    InvalidCatalogError,
    MissingSourceLanguageError,
)
from .strings_table import (
    StringsTableParser,
    StringsFileParseError,
    StringsFileNotFoundError,
    StringsFileReadError,
    MissingDevelopmentRegionError,
)

__all__ = [
    'BaseParser',
    'CatalogParser',
    'CatalogParseResult',
    'CatalogParseError',
    'CatalogNotFoundError',
    'InvalidCatalogError',
    'MissingSourceLanguageError',
    'StringsTableParser',
    'StringsFileParseError',
    'StringsFileNotFoundError',
    'StringsFileReadError',
    'MissingDevelopmentRegionError',
]
