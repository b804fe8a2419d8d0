"""
Localization Extractor
======================

Reads Apple string catalogs (.xcstrings) and legacy .strings tables and
produces a typed model of every localized string, ready for generating
Swift accessors.

Usage:
    from localization_extractor import LocalizationExtractor

    extractor = LocalizationExtractor(catalog_paths=['Resources/Localizable.xcstrings'])
    result = extractor.extract()
    print(f"Extracted {result.total_strings} strings")

CLI:
    localization-extractor init
    localization-extractor extract --json localized_strings.json
"""

from .__version__ import __version__, __author__, __description__

# Core exports
from .core.models import ArgumentKind, FormatArgument, LocalizedEntry
from .core.extractor import LocalizationExtractor, ExtractionResult, GeneratedAccessor

# Parsers
from .parsers.catalog import CatalogParser, CatalogParseError
from .parsers.strings_table import StringsTableParser, StringsFileParseError

# Features
from .features.identifier_synthesizer import IdentifierSynthesizer
from .features.collision_detector import CollisionDetector, DuplicateIdentifierError

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'ArgumentKind',
    'FormatArgument',
    'LocalizedEntry',
    'LocalizationExtractor',
    'ExtractionResult',
    'GeneratedAccessor',
    'CatalogParser',
    'CatalogParseError',
    'StringsTableParser',
    'StringsFileParseError',
    'IdentifierSynthesizer',
    'CollisionDetector',
    'DuplicateIdentifierError',
]
