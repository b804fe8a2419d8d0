"""Detection of generated identifiers that collide within one namespace."""

from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from ..utils.naming import sanitize


class DuplicateIdentifierError(Exception):
    """Raised when two or more sources produce the same identifier."""

    def __init__(self, category: str, identifier: str, conflicting_locations: List[str]):
        self.category = category
        self.identifier = identifier
        self.conflicting_locations = conflicting_locations

        lines = [f"Duplicate identifier '{identifier}' for {category}:"]
        lines.extend(f"  - {location}" for location in conflicting_locations)
        super().__init__('\n'.join(lines))


class CollisionDetector:
    """
    Groups identifiers and reports the first one with several sources.

    Usage:
        CollisionDetector.check_names(
            [('icon-home', 'Assets/icon-home.png'), ('icon_home', 'Assets/icon_home.png')],
            category='images',
        )  # raises DuplicateIdentifierError listing both paths
    """

    @staticmethod
    def group(pairs: Iterable[Tuple[str, str]]) -> Dict[str, List[str]]:
        """Map each identifier to the locations that produced it."""
        locations_by_identifier: Dict[str, List[str]] = defaultdict(list)
        for identifier, location in pairs:
            locations_by_identifier[identifier].append(location)
        return dict(locations_by_identifier)

    @staticmethod
    def find_duplicates(pairs: Iterable[Tuple[str, str]]) -> Dict[str, List[str]]:
        """Return every identifier that has more than one location."""
        return {
            identifier: locations
            for identifier, locations in CollisionDetector.group(pairs).items()
            if len(locations) > 1
        }

    @staticmethod
    def detect(pairs: Iterable[Tuple[str, str]], category: str) -> None:
        """
        Check (identifier, location) pairs for duplicates.

        Args:
            pairs: Synthesized identifiers with their source locations
            category: Namespace name used in the error message

        Raises:
            DuplicateIdentifierError: For the first duplicated identifier,
                listing all of its locations
        """
        duplicates = CollisionDetector.find_duplicates(pairs)
        for identifier, locations in duplicates.items():
            raise DuplicateIdentifierError(category, identifier, locations)

    @staticmethod
    def check_names(items: Iterable[Tuple[str, str]], category: str) -> None:
        """Sanitize raw (name, location) pairs and check them with detect()."""
        CollisionDetector.detect(
            ((sanitize(name), location) for name, location in items),
            category,
        )
