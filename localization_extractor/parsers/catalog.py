"""String catalog (.xcstrings) parser."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from ..core import format_parser
from ..core.format_specifier import classify
from ..core.models import FormatArgument, LocalizedEntry
from ..utils.logging import get_logger
from ..utils.naming import sanitize
from .base import BaseParser
from .catalog_models import (
    CatalogDocument,
    CatalogStructureError,
    Localization,
    Substitution,
    VariationValue,
    Variations,
)

# (default text, arguments) resolved for one localization
Resolution = Tuple[str, List[FormatArgument]]

# Category preference inside a variation axis
PREFERRED_CATEGORIES = ('other', 'one')


class CatalogParseError(Exception):
    """Base error for string catalogs that cannot be read."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)


class CatalogNotFoundError(CatalogParseError):
    def __init__(self, path: str):
        super().__init__(path, f"String catalog not found: {path}")


class InvalidCatalogError(CatalogParseError):
    """Malformed JSON, or JSON that is not shaped like a catalog."""

    def __init__(self, path: str, cause: Exception):
        self.cause = cause
        super().__init__(path, f"Invalid JSON in string catalog '{path}': {cause}")


class MissingSourceLanguageError(CatalogParseError):
    def __init__(self, path: str):
        super().__init__(path, f"String catalog missing sourceLanguage: {path}")


@dataclass
class CatalogParseResult:
    """Entries of one catalog file plus its metadata."""
    table_name: str
    source_language: str
    entries: List[LocalizedEntry] = field(default_factory=list)


def _resolve_variation_value(value: VariationValue) -> Optional[str]:
    if value.string_unit is not None:
        return value.string_unit.value
    if value.variations is not None:
        return resolve_variations(value.variations)
    return None


def _resolve_axis(categories: Dict[str, VariationValue]) -> Optional[str]:
    for category in PREFERRED_CATEGORIES:
        if category in categories:
            resolved = _resolve_variation_value(categories[category])
            if resolved is not None:
                return resolved

    for value in categories.values():
        resolved = _resolve_variation_value(value)
        if resolved is not None:
            return resolved

    return None


def resolve_variations(variations: Variations) -> Optional[str]:
    """
    Pick one representative string from a variation tree.

    The plural axis wins over device; inside an axis 'other' is preferred,
    then 'one', then the first category with a value. Nested trees
    (device -> plural) are resolved recursively.
    """
    for axis in (variations.plural, variations.device):
        resolved = _resolve_axis(axis)
        if resolved is not None:
            return resolved
    return None


def arguments_from_substitutions(substitutions: Dict[str, Substitution]) -> List[FormatArgument]:
    """
    Build the argument list of a substitution-based entry.

    Substitutions are visited in name order. Each one without an argNum
    takes the next position after the arguments produced so far; ones
    without a formatSpecifier are ignored. The label is the sanitized
    substitution name.
    """
    arguments = []

    for name, substitution in sorted(substitutions.items()):
        if not substitution.format_specifier:
            continue

        position = substitution.arg_num if substitution.arg_num is not None else len(arguments) + 1
        arguments.append(FormatArgument(
            position=position,
            kind=classify(substitution.format_specifier),
            label=sanitize(name),
        ))

    return sorted(arguments, key=lambda argument: argument.position)


def _from_string_unit(localization: Localization, key: str) -> Optional[Resolution]:
    if localization.string_unit is None:
        return None
    value = localization.string_unit.value
    return value, format_parser.parse(value)


def _from_substitutions(localization: Localization, key: str) -> Optional[Resolution]:
    if not localization.substitutions:
        return None
    # The key holds the %#@name@ placeholders, which are not printf specifiers
    return key, arguments_from_substitutions(localization.substitutions)


def _from_variations(localization: Localization, key: str) -> Optional[Resolution]:
    if localization.variations is None:
        return None
    value = resolve_variations(localization.variations)
    if value is None:
        return None
    return value, format_parser.parse(value)


# Tried in order, the first non-None result wins
EXTRACTION_STRATEGIES: List[Callable[[Localization, str], Optional[Resolution]]] = [
    _from_string_unit,
    _from_substitutions,
    _from_variations,
]


def resolve_localization(localization: Optional[Localization], key: str) -> Resolution:
    """Resolve default text and arguments, falling back to the key itself."""
    if localization is not None:
        for strategy in EXTRACTION_STRATEGIES:
            resolution = strategy(localization, key)
            if resolution is not None:
                return resolution
    return key, format_parser.parse(key)


class CatalogParser(BaseParser):
    """
    Parser for .xcstrings string catalogs.

    Only the catalog's source language is read; its text becomes the
    default value of each entry.
    """

    def get_file_extensions(self) -> List[str]:
        return ['.xcstrings']

    @staticmethod
    def extract(document: CatalogDocument, table: str, source_location: str) -> List[LocalizedEntry]:
        """
        Turn a catalog document into entries sorted by key.

        Entries with shouldTranslate=false are skipped, and so are entries
        whose key or resolved text fails input validation.
        """
        logger = get_logger()
        entries = []

        for key, catalog_entry in document.entries.items():
            if not catalog_entry.translatable:
                logger.debug(f"Skipping non-translatable key '{key[:50]}'")
                continue

            localization = catalog_entry.localizations.get(document.source_language)
            default_text, arguments = resolve_localization(localization, key)

            entry = BaseParser.build_entry(
                key=key,
                default_text=default_text,
                table=table,
                source_location=source_location,
                comment=catalog_entry.comment,
                arguments=tuple(arguments),
            )
            if entry is not None:
                entries.append(entry)

        return sorted(entries, key=lambda entry: entry.key)

    @staticmethod
    def load_document(file_path: Path) -> CatalogDocument:
        """
        Read and decode a catalog file.

        Raises:
            CatalogNotFoundError: If the file does not exist
            InvalidCatalogError: If it is not JSON or not shaped like a catalog
            MissingSourceLanguageError: If 'sourceLanguage' is absent
        """
        path = str(file_path)
        if not file_path.is_file():
            raise CatalogNotFoundError(path)

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InvalidCatalogError(path, e) from e

        if isinstance(data, dict) and 'sourceLanguage' not in data:
            raise MissingSourceLanguageError(path)

        try:
            return CatalogDocument.from_dict(data)
        except CatalogStructureError as e:
            raise InvalidCatalogError(path, e) from e

    def parse_catalog(self, file_path: Path) -> CatalogParseResult:
        """Parse a catalog file and keep its source language and table name."""
        file_path = Path(file_path)
        document = self.load_document(file_path)
        table = self.table_name(file_path)

        entries = self.extract(document, table, str(file_path))
        get_logger().debug(
            f"Parsed {file_path}: {len(entries)} of {len(document.entries)} strings "
            f"(source language '{document.source_language}')"
        )

        return CatalogParseResult(
            table_name=table,
            source_language=document.source_language,
            entries=entries,
        )

    def parse_file(self, file_path: Path) -> List[LocalizedEntry]:
        return self.parse_catalog(file_path).entries
