"""Typed model of the .xcstrings string catalog format.

A catalog is a JSON document of the shape::

    {
      "sourceLanguage": "en",
      "version": "1.0",
      "strings": {
        "<key>": {
          "comment": "...",
          "shouldTranslate": false,
          "localizations": {
            "<lang>": {
              "stringUnit": {"state": "translated", "value": "..."},
              "substitutions": {"<name>": {"argNum": 1, "formatSpecifier": "lld", "variations": {...}}},
              "variations": {"plural": {"<category>": {...}}, "device": {"<category>": {...}}}
            }
          }
        }
      }
    }

Variation values are themselves either a stringUnit or another
variations tree, so device variations may nest plural ones.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

PLURAL_CATEGORIES = ('zero', 'one', 'two', 'few', 'many', 'other')
DEVICE_CATEGORIES = ('mac', 'iphone', 'ipad', 'applewatch', 'appletv', 'ipod', 'other')


class CatalogStructureError(ValueError):
    """Raised when a catalog document has the wrong shape."""


def _expect_dict(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise CatalogStructureError(f"'{where}' must be an object")
    return value


def _optional_dict(data: Dict[str, Any], name: str, where: str) -> Optional[Dict[str, Any]]:
    value = data.get(name)
    if value is None:
        return None
    return _expect_dict(value, f"{where}.{name}")


@dataclass(frozen=True)
class StringUnit:
    """A single translated value."""
    value: str
    state: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'StringUnit':
        data = _expect_dict(data, where)
        value = data.get('value')
        if not isinstance(value, str):
            raise CatalogStructureError(f"'{where}.value' must be a string")
        return cls(value=value, state=data.get('state'))


@dataclass(frozen=True)
class VariationValue:
    """Leaf of a variation tree: a value or a nested tree."""
    string_unit: Optional[StringUnit] = None
    variations: Optional['Variations'] = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'VariationValue':
        data = _expect_dict(data, where)
        unit = data.get('stringUnit')
        nested = data.get('variations')
        return cls(
            string_unit=StringUnit.from_dict(unit, f"{where}.stringUnit") if unit is not None else None,
            variations=Variations.from_dict(nested, f"{where}.variations") if nested is not None else None,
        )


@dataclass(frozen=True)
class Variations:
    """Variation tree keyed by axis, then by category."""
    plural: Dict[str, VariationValue] = field(default_factory=dict)
    device: Dict[str, VariationValue] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'Variations':
        data = _expect_dict(data, where)
        axes = {}
        for axis in ('plural', 'device'):
            categories = _optional_dict(data, axis, where) or {}
            axes[axis] = {
                category: VariationValue.from_dict(value, f"{where}.{axis}.{category}")
                for category, value in categories.items()
            }
        return cls(**axes)


@dataclass(frozen=True)
class Substitution:
    """Named placeholder (%#@name@) with its own format specifier."""
    arg_num: Optional[int] = None
    format_specifier: Optional[str] = None
    variations: Optional[Variations] = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'Substitution':
        data = _expect_dict(data, where)
        arg_num = data.get('argNum')
        if arg_num is not None and (isinstance(arg_num, bool) or not isinstance(arg_num, int)):
            raise CatalogStructureError(f"'{where}.argNum' must be an integer")
        if arg_num is not None and arg_num < 1:
            raise CatalogStructureError(f"'{where}.argNum' must be 1 or greater")
        specifier = data.get('formatSpecifier')
        if specifier is not None and not isinstance(specifier, str):
            raise CatalogStructureError(f"'{where}.formatSpecifier' must be a string")
        nested = data.get('variations')
        return cls(
            arg_num=arg_num,
            format_specifier=specifier,
            variations=Variations.from_dict(nested, f"{where}.variations") if nested is not None else None,
        )


@dataclass(frozen=True)
class Localization:
    """Per-language content of a catalog entry."""
    string_unit: Optional[StringUnit] = None
    substitutions: Dict[str, Substitution] = field(default_factory=dict)
    variations: Optional[Variations] = None

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'Localization':
        data = _expect_dict(data, where)
        unit = data.get('stringUnit')
        substitutions = _optional_dict(data, 'substitutions', where) or {}
        variations = data.get('variations')
        return cls(
            string_unit=StringUnit.from_dict(unit, f"{where}.stringUnit") if unit is not None else None,
            substitutions={
                name: Substitution.from_dict(value, f"{where}.substitutions.{name}")
                for name, value in substitutions.items()
            },
            variations=Variations.from_dict(variations, f"{where}.variations") if variations is not None else None,
        )


@dataclass(frozen=True)
class CatalogEntry:
    """One key of the catalog with all of its localizations."""
    comment: Optional[str] = None
    extraction_state: Optional[str] = None
    translatable: bool = True
    localizations: Dict[str, Localization] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any, where: str) -> 'CatalogEntry':
        data = _expect_dict(data, where)
        localizations = _optional_dict(data, 'localizations', where) or {}
        should_translate = data.get('shouldTranslate')
        if should_translate is not None and not isinstance(should_translate, bool):
            raise CatalogStructureError(f"'{where}.shouldTranslate' must be a boolean")
        comment = data.get('comment')
        if comment is not None and not isinstance(comment, str):
            raise CatalogStructureError(f"'{where}.comment' must be a string")
        return cls(
            comment=comment,
            extraction_state=data.get('extractionState'),
            translatable=should_translate is not False,
            localizations={
                language: Localization.from_dict(value, f"{where}.localizations.{language}")
                for language, value in localizations.items()
            },
        )


@dataclass(frozen=True)
class CatalogDocument:
    """Root of a string catalog."""
    source_language: str
    version: str
    entries: Dict[str, CatalogEntry] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> 'CatalogDocument':
        """
        Build the model from decoded JSON.

        The caller checks 'sourceLanguage' first so that its absence can be
        reported separately; here it is only type-checked.

        Raises:
            CatalogStructureError: If any part of the document has the wrong shape
        """
        data = _expect_dict(data, 'catalog')

        source_language = data.get('sourceLanguage')
        if not isinstance(source_language, str):
            raise CatalogStructureError("'sourceLanguage' must be a string")

        version = data.get('version')
        if not isinstance(version, str):
            raise CatalogStructureError("'version' must be a string")

        strings = data.get('strings')
        if strings is None:
            raise CatalogStructureError("'strings' is required")
        strings = _expect_dict(strings, 'strings')

        return cls(
            source_language=source_language,
            version=version,
            entries={
                key: CatalogEntry.from_dict(entry, f"strings[{key!r}]")
                for key, entry in strings.items()
            },
        )
