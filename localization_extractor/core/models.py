"""Value types shared by the extraction pipeline."""

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple


@dataclass(frozen=True)
class ArgumentKind:
    """
    Semantic kind of a printf-style format argument.

    The set of kinds is closed: string, signed-integer, unsigned-integer,
    floating-point, character and unknown. Only the unknown kind carries
    the raw specifier text it was classified from.
    """

    STRING: ClassVar['ArgumentKind']
    SIGNED_INTEGER: ClassVar['ArgumentKind']
    UNSIGNED_INTEGER: ClassVar['ArgumentKind']
    FLOATING_POINT: ClassVar['ArgumentKind']
    CHARACTER: ClassVar['ArgumentKind']

    # Kind name -> Swift type the argument binds to
    HOST_TYPES: ClassVar[Dict[str, str]] = {
        'string': 'String',
        'signed-integer': 'Int',
        'unsigned-integer': 'UInt',
        'floating-point': 'Double',
        'character': 'Character',
        'unknown': 'CVarArg',
    }

    name: str
    raw: Optional[str] = None

    @classmethod
    def unknown(cls, raw: str) -> 'ArgumentKind':
        """Build the unknown kind for an unrecognized specifier."""
        return cls('unknown', raw)

    @property
    def is_unknown(self) -> bool:
        return self.name == 'unknown'

    @property
    def host_type(self) -> str:
        return self.HOST_TYPES[self.name]

    def __str__(self) -> str:
        if self.is_unknown:
            return f"unknown({self.raw})"
        return self.name


ArgumentKind.STRING = ArgumentKind('string')
ArgumentKind.SIGNED_INTEGER = ArgumentKind('signed-integer')
ArgumentKind.UNSIGNED_INTEGER = ArgumentKind('unsigned-integer')
ArgumentKind.FLOATING_POINT = ArgumentKind('floating-point')
ArgumentKind.CHARACTER = ArgumentKind('character')


@dataclass(frozen=True)
class FormatArgument:
    """One argument of a format string."""
    position: int  # 1-based
    kind: ArgumentKind
    label: Optional[str] = None  # Only set from catalog substitutions


@dataclass(frozen=True)
class LocalizedEntry:
    """
    A localized string discovered in a catalog or a legacy table.

    Simple entries become properties in generated code, entries with
    format arguments become functions.
    """
    key: str
    table: str
    default_text: str
    source_location: str
    comment: Optional[str] = None
    arguments: Tuple[FormatArgument, ...] = ()

    @property
    def requires_callable(self) -> bool:
        """True when the accessor needs parameters."""
        return len(self.arguments) > 0


@dataclass(frozen=True)
class RawTableEntry:
    """A key/value statement read from a legacy .strings table."""
    key: str
    value: str
    preceding_comment: Optional[str] = None
