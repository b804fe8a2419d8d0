"""Base interface for localization file parsers."""

from abc import ABC, abstractmethod
from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from ..core import format_parser
from ..core.models import LocalizedEntry
from ..utils.logging import get_logger
from ..utils.validators import UnsafeStringError, validate_localized


class BaseParser(ABC):
    """Turns one kind of localization file into LocalizedEntry lists."""

    @abstractmethod
    def get_file_extensions(self) -> List[str]:
        """Return the file extensions this parser reads (e.g. ['.strings'])."""
        pass

    @abstractmethod
    def parse_file(self, file_path: Path) -> List[LocalizedEntry]:
        """
        Parse a single file.

        Args:
            file_path: Path to the localization file

        Returns:
            Entries sorted by key
        """
        pass

    @staticmethod
    def table_name(file_path: Path) -> str:
        """Table name is the file name without its extension."""
        return Path(file_path).stem

    def parse_files(self, file_paths: Iterable[Path]) -> Dict[str, List[LocalizedEntry]]:
        """
        Parse several files and group the entries by table.

        Files that share a table name are merged and re-sorted by key.
        """
        tables: Dict[str, List[LocalizedEntry]] = defaultdict(list)

        for file_path in file_paths:
            entries = self.parse_file(Path(file_path))
            for entry in entries:
                tables[entry.table].append(entry)

        return {
            table: sorted(entries, key=lambda entry: entry.key)
            for table, entries in tables.items()
        }

    @staticmethod
    def build_entry(
        key: str,
        default_text: str,
        table: str,
        source_location: str,
        comment: Optional[str] = None,
        arguments: Optional[Tuple] = None,
    ) -> Optional[LocalizedEntry]:
        """
        Validate key and text, then build the entry.

        Returns None (and logs why) when either contains characters that
        are unsafe in generated code. Arguments default to the ones parsed
        from default_text.
        """
        try:
            validate_localized(key, context='string key')
            validate_localized(default_text, context='string value')
        except UnsafeStringError as e:
            get_logger().debug(f"Skipping '{key[:50]}' in {source_location}: {e}")
            return None

        if arguments is None:
            arguments = format_parser.parse(default_text)

        return LocalizedEntry(
            key=key,
            table=table,
            default_text=default_text,
            source_location=source_location,
            comment=comment,
            arguments=tuple(arguments),
        )
