"""Extraction pipeline: parse files, merge tables, name accessors, check collisions."""

from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..features.collision_detector import CollisionDetector
from ..features.identifier_synthesizer import IdentifierSynthesizer
from ..parsers.catalog import CatalogParser
from ..parsers.strings_table import StringsTableParser
from ..utils.logging import get_logger
from .models import LocalizedEntry


@dataclass(frozen=True)
class GeneratedAccessor:
    """A localized entry with its Swift name and parameter labels."""
    entry: LocalizedEntry
    identifier: str
    parameter_labels: tuple = ()

    @property
    def is_function(self) -> bool:
        return self.entry.requires_callable


@dataclass
class ExtractionResult:
    """Accessors grouped by table, each list sorted by key."""
    tables: Dict[str, List[GeneratedAccessor]] = field(default_factory=dict)

    @property
    def total_strings(self) -> int:
        return sum(len(accessors) for accessors in self.tables.values())

    @property
    def function_count(self) -> int:
        return sum(
            1 for accessors in self.tables.values()
            for accessor in accessors if accessor.is_function
        )

    @property
    def property_count(self) -> int:
        return self.total_strings - self.function_count


class LocalizationExtractor:
    """
    Runs the whole extraction for a set of catalogs and legacy tables.

    All files are parsed first; collision checks run afterwards per table,
    because a catalog and a .strings file with the same name share one
    namespace.

    Usage:
        extractor = LocalizationExtractor(
            catalog_paths=[Path('Resources/Localizable.xcstrings')],
            table_paths=[Path('Resources/en.lproj/Errors.strings')],
        )
        result = extractor.extract()
    """

    def __init__(
        self,
        catalog_paths: Iterable[Path] = (),
        table_paths: Iterable[Path] = (),
        development_region: Optional[str] = None,
    ):
        self.catalog_paths = [Path(path) for path in catalog_paths]
        self.table_paths = [Path(path) for path in table_paths]
        self.development_region = development_region

        self.catalog_parser = CatalogParser()
        self.table_parser = StringsTableParser(development_region)

    def collect_entries(self) -> Dict[str, List[LocalizedEntry]]:
        """Parse every input file and merge entries by table name."""
        tables: Dict[str, List[LocalizedEntry]] = defaultdict(list)

        for parsed in (
            self.catalog_parser.parse_files(self.catalog_paths),
            self.table_parser.parse_files(self.table_paths),
        ):
            for table, entries in parsed.items():
                tables[table].extend(entries)

        return {
            table: sorted(entries, key=lambda entry: entry.key)
            for table, entries in sorted(tables.items())
        }

    @staticmethod
    def synthesize(table: str, entries: List[LocalizedEntry]) -> List[GeneratedAccessor]:
        """
        Name every entry of one table and check the names are unique.

        Raises:
            DuplicateIdentifierError: If two entries get the same identifier
        """
        accessors = [
            GeneratedAccessor(
                entry=entry,
                identifier=IdentifierSynthesizer.synthesize_name(entry),
                parameter_labels=tuple(IdentifierSynthesizer.synthesize_labels(entry)),
            )
            for entry in entries
        ]

        CollisionDetector.detect(
            (
                (accessor.identifier, f"{accessor.entry.source_location} (key: {accessor.entry.key})")
                for accessor in accessors
            ),
            category=f"strings in table '{table}'",
        )

        return accessors

    def extract(self) -> ExtractionResult:
        """
        Run the pipeline.

        Raises:
            CatalogParseError, StringsFileParseError: For unreadable input files
            DuplicateIdentifierError: For colliding accessor names
        """
        logger = get_logger()
        result = ExtractionResult()

        for table, entries in self.collect_entries().items():
            result.tables[table] = self.synthesize(table, entries)
            functions = sum(1 for entry in entries if entry.requires_callable)
            logger.info(f"  {table}: {len(entries)} strings ({functions} with arguments)")

        return result
