"""Legacy .strings table parser."""

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..core.models import LocalizedEntry, RawTableEntry
from ..utils.logging import get_logger
from .base import BaseParser

REGION_DIRECTORY_SUFFIX = '.lproj'

# "key" = "value"; with backslash escapes inside either string
KEY_VALUE_PATTERN = re.compile(r'"((?:[^"\\]|\\.)*)"\s*=\s*"((?:[^"\\]|\\.)*)"\s*;')
BLOCK_COMMENT_PATTERN = re.compile(r'^/\*\s*(.*?)\s*\*/')
LINE_COMMENT_PATTERN = re.compile(r'^//\s*(.*)$')
ESCAPE_PATTERN = re.compile(r'\\(["\\ntr])')

ESCAPES = {'"': '"', '\\': '\\', 'n': '\n', 't': '\t', 'r': '\r'}


class StringsFileParseError(Exception):
    """Base error for .strings files that cannot be read."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(message)


class StringsFileNotFoundError(StringsFileParseError):
    def __init__(self, path: str):
        super().__init__(path, f"Strings file not found: {path}")


class StringsFileReadError(StringsFileParseError):
    """The file is neither UTF-8 nor UTF-16."""

    def __init__(self, path: str, cause: Exception):
        self.cause = cause
        super().__init__(path, f"Failed to read strings file '{path}': {cause}")


class MissingDevelopmentRegionError(StringsFileParseError):
    def __init__(self, path: str):
        super().__init__(
            path,
            f"Cannot determine development region for '{path}'. "
            f"Use --development-region or place file in an {REGION_DIRECTORY_SUFFIX} directory."
        )


def unescape(text: str) -> str:
    r"""Resolve \" \\ \n \t \r escapes; other backslashes are kept."""
    return ESCAPE_PATTERN.sub(lambda match: ESCAPES[match.group(1)], text)


def parse_statements(content: str) -> List[RawTableEntry]:
    """
    Read key/value statements and the comment preceding each.

    A single-line /* */ or // comment becomes the pending comment; it is
    attached to the next statement and then cleared.
    """
    results = []
    pending_comment: Optional[str] = None

    for line in content.splitlines():
        trimmed = line.strip()

        if not trimmed:
            continue

        match = BLOCK_COMMENT_PATTERN.match(trimmed) or LINE_COMMENT_PATTERN.match(trimmed)
        if match:
            pending_comment = match.group(1)
            continue

        match = KEY_VALUE_PATTERN.search(trimmed)
        if match:
            results.append(RawTableEntry(
                key=unescape(match.group(1)),
                value=unescape(match.group(2)),
                preceding_comment=pending_comment,
            ))
            pending_comment = None

    return results


class StringsTableParser(BaseParser):
    """
    Parser for "key" = "value"; tables inside <region>.lproj folders.

    Only files of the development region are read. The region comes from
    the explicit override, or else from the parent .lproj folder name.
    Files in other .lproj folders are skipped so a whole Resources tree
    can be passed in at once.
    """

    def __init__(self, development_region: Optional[str] = None):
        self.development_region = development_region

    def get_file_extensions(self) -> List[str]:
        return ['.strings']

    @staticmethod
    def infer_region(file_path: Path) -> Optional[str]:
        """
        Region code from the parent folder name.

        Example: /path/to/en.lproj/Localizable.strings -> en
        """
        parent = Path(file_path).parent.name
        if parent.endswith(REGION_DIRECTORY_SUFFIX):
            return parent[:-len(REGION_DIRECTORY_SUFFIX)]
        return None

    def resolve_region(self, file_path: Path, override: Optional[str] = None) -> str:
        """
        Development region for a file.

        Raises:
            MissingDevelopmentRegionError: If there is no override and no .lproj parent
        """
        region = override or self.development_region or self.infer_region(file_path)
        if not region:
            raise MissingDevelopmentRegionError(str(file_path))
        return region

    @staticmethod
    def read_text(file_path: Path) -> str:
        """
        Read a table as UTF-8, falling back to UTF-16.

        Raises:
            StringsFileNotFoundError: If the file does not exist
            StringsFileReadError: If it cannot be read or decoded
        """
        path = str(file_path)
        if not file_path.is_file():
            raise StringsFileNotFoundError(path)

        try:
            data = file_path.read_bytes()
        except OSError as e:
            raise StringsFileReadError(path, e) from e

        try:
            return data.decode('utf-8-sig')
        except UnicodeDecodeError:
            pass

        try:
            return data.decode('utf-16')
        except UnicodeError as e:
            raise StringsFileReadError(path, e) from e

    def parse_content(
        self,
        content: str,
        file_path: Path,
        development_region: Optional[str] = None,
    ) -> List[LocalizedEntry]:
        """
        Parse table text that was read from file_path.

        Returns an empty list when the file lives in another region's
        .lproj folder. Unsafe keys or values are dropped.

        Raises:
            MissingDevelopmentRegionError: If the region cannot be determined
        """
        file_path = Path(file_path)
        logger = get_logger()

        region = self.resolve_region(file_path, development_region)
        file_region = self.infer_region(file_path)
        if file_region is not None and file_region != region:
            logger.debug(f"Skipping {file_path}: region '{file_region}' is not '{region}'")
            return []

        table = self.table_name(file_path)
        entries = []

        for statement in parse_statements(content):
            entry = self.build_entry(
                key=statement.key,
                default_text=statement.value,
                table=table,
                source_location=str(file_path),
                comment=statement.preceding_comment,
            )
            if entry is not None:
                entries.append(entry)

        logger.debug(f"Parsed {file_path}: {len(entries)} strings")
        return sorted(entries, key=lambda entry: entry.key)

    def parse_file(
        self,
        file_path: Path,
        development_region: Optional[str] = None,
    ) -> List[LocalizedEntry]:
        file_path = Path(file_path)
        return self.parse_content(self.read_text(file_path), file_path, development_region)

    def parse_files(
        self,
        file_paths: Iterable[Path],
        development_region: Optional[str] = None,
    ) -> Dict[str, List[LocalizedEntry]]:
        if development_region is not None:
            return StringsTableParser(development_region).parse_files(file_paths)
        return super().parse_files(file_paths)
