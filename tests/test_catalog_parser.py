"""Tests for the .xcstrings string catalog parser."""

import json
import tempfile
from pathlib import Path

import pytest

from localization_extractor.core.models import ArgumentKind, FormatArgument
from localization_extractor.parsers.catalog import (
    CatalogNotFoundError,
    CatalogParseError,
    CatalogParser,
    InvalidCatalogError,
    MissingSourceLanguageError,
    arguments_from_substitutions,
    resolve_variations,
)
from localization_extractor.parsers.catalog_models import (
    CatalogDocument,
    CatalogEntry,
    CatalogStructureError,
    Substitution,
    Variations,
)


def unit(value):
    return {'stringUnit': {'state': 'translated', 'value': value}}


def write_catalog(directory, strings, name='Localizable', source_language='en'):
    path = Path(directory) / f'{name}.xcstrings'
    path.write_text(json.dumps({
        'sourceLanguage': source_language,
        'version': '1.0',
        'strings': strings,
    }), encoding='utf-8')
    return path


def extract(strings, source_language='en'):
    document = CatalogDocument.from_dict({
        'sourceLanguage': source_language,
        'version': '1.0',
        'strings': strings,
    })
    return CatalogParser.extract(document, 'Localizable', 'Localizable.xcstrings')


class TestSimpleEntries:
    """Entries with a plain stringUnit."""

    def test_simple_value(self):
        entries = extract({'welcome.title': {'localizations': {'en': unit('Welcome')}}})

        assert len(entries) == 1
        entry = entries[0]
        assert entry.key == 'welcome.title'
        assert entry.default_text == 'Welcome'
        assert entry.table == 'Localizable'
        assert entry.source_location == 'Localizable.xcstrings'
        assert entry.arguments == ()
        assert not entry.requires_callable

    def test_value_with_format_arguments(self):
        entries = extract({'greeting': {'localizations': {'en': unit('Hello, %@!')}}})

        assert entries[0].arguments == (FormatArgument(1, ArgumentKind.STRING),)
        assert entries[0].requires_callable

    def test_comment_is_kept(self):
        entries = extract({
            'save': {'comment': 'Save button', 'localizations': {'en': unit('Save')}},
        })
        assert entries[0].comment == 'Save button'

    def test_only_source_language_is_read(self):
        entries = extract({
            'save': {'localizations': {'de': unit('Speichern'), 'en': unit('Save')}},
        })
        assert entries[0].default_text == 'Save'

    def test_output_sorted_by_key(self):
        entries = extract({
            'zeta': {'localizations': {'en': unit('Z')}},
            'alpha': {'localizations': {'en': unit('A')}},
            'mid': {'localizations': {'en': unit('M')}},
        })
        assert [entry.key for entry in entries] == ['alpha', 'mid', 'zeta']


class TestKeyFallback:
    """Entries without a usable source localization use the key as text."""

    def test_no_localizations(self):
        entries = extract({'Hello, %@': {}})

        assert entries[0].default_text == 'Hello, %@'
        assert entries[0].arguments == (FormatArgument(1, ArgumentKind.STRING),)

    def test_missing_source_language(self):
        entries = extract({'Cancel': {'localizations': {'de': unit('Abbrechen')}}})
        assert entries[0].default_text == 'Cancel'

    def test_empty_localization(self):
        entries = extract({'Done': {'localizations': {'en': {}}}})
        assert entries[0].default_text == 'Done'


class TestTranslatable:
    """shouldTranslate handling."""

    def test_non_translatable_entries_are_skipped(self):
        entries = extract({
            'brand': {'shouldTranslate': False, 'localizations': {'en': unit('Acme')}},
            'save': {'localizations': {'en': unit('Save')}},
        })
        assert [entry.key for entry in entries] == ['save']

    def test_should_translate_true(self):
        entries = extract({'save': {'shouldTranslate': True}})
        assert len(entries) == 1


class TestVariations:
    """Plural and device variation resolution."""

    def test_plural_prefers_other(self):
        """one/other with %lld resolves to 'other' with one signed integer."""
        entries = extract({
            'items.count': {'localizations': {'en': {'variations': {'plural': {
                'one': unit('%lld item'),
                'other': unit('%lld items'),
            }}}}},
        })

        entry = entries[0]
        assert entry.default_text == '%lld items'
        assert entry.arguments == (FormatArgument(1, ArgumentKind.SIGNED_INTEGER),)

    def test_plural_falls_back_to_one(self):
        entries = extract({
            'files': {'localizations': {'en': {'variations': {'plural': {
                'zero': unit('No files'),
                'one': unit('One file'),
            }}}}},
        })
        assert entries[0].default_text == 'One file'

    def test_plural_falls_back_to_first_category(self):
        entries = extract({
            'files': {'localizations': {'en': {'variations': {'plural': {
                'few': unit('A few files'),
                'many': unit('Many files'),
            }}}}},
        })
        assert entries[0].default_text == 'A few files'

    def test_plural_wins_over_device(self):
        entries = extract({
            'tap': {'localizations': {'en': {'variations': {
                'device': {'other': unit('Device text')},
                'plural': {'other': unit('Plural text')},
            }}}},
        })
        assert entries[0].default_text == 'Plural text'

    def test_device_prefers_other(self):
        entries = extract({
            'open': {'localizations': {'en': {'variations': {'device': {
                'mac': unit('Click to open'),
                'other': unit('Tap to open'),
            }}}}},
        })
        assert entries[0].default_text == 'Tap to open'

    def test_nested_device_then_plural(self):
        entries = extract({
            'taps': {'localizations': {'en': {'variations': {'device': {
                'iphone': {'variations': {'plural': {
                    'one': unit('Tap %lld time'),
                    'other': unit('Tap %lld times'),
                }}},
                'mac': unit('Click'),
            }}}}},
        })

        assert entries[0].default_text == 'Tap %lld times'
        assert entries[0].arguments == (FormatArgument(1, ArgumentKind.SIGNED_INTEGER),)

    def test_empty_variations_fall_back_to_key(self):
        entries = extract({'Empty': {'localizations': {'en': {'variations': {}}}}})
        assert entries[0].default_text == 'Empty'

    def test_resolve_variations_directly(self):
        variations = Variations.from_dict({'plural': {'other': unit('%d apples')}}, 'test')
        assert resolve_variations(variations) == '%d apples'
        assert resolve_variations(Variations()) is None


class TestSubstitutions:
    """Substitution-based entries."""

    def test_key_is_default_text(self):
        key = 'You have %#@count@ in %#@folders@'
        entries = extract({key: {'localizations': {'en': {'substitutions': {
            'count': {'argNum': 1, 'formatSpecifier': 'lld'},
            'folders': {'formatSpecifier': 'lld'},
        }}}}})

        entry = entries[0]
        assert entry.default_text == key
        assert entry.arguments == (
            FormatArgument(1, ArgumentKind.SIGNED_INTEGER, label='count'),
            FormatArgument(2, ArgumentKind.SIGNED_INTEGER, label='folders'),
        )

    def test_sorted_by_arg_num(self):
        arguments = arguments_from_substitutions({
            'count': Substitution(arg_num=2, format_specifier='lld'),
            'name': Substitution(arg_num=1, format_specifier='@'),
        })

        assert arguments == [
            FormatArgument(1, ArgumentKind.STRING, label='name'),
            FormatArgument(2, ArgumentKind.SIGNED_INTEGER, label='count'),
        ]

    def test_label_is_sanitized_name(self):
        arguments = arguments_from_substitutions({
            'item_count': Substitution(arg_num=1, format_specifier='lld'),
        })
        assert arguments[0].label == 'itemCount'

    def test_missing_format_specifier_is_ignored(self):
        arguments = arguments_from_substitutions({
            'a': Substitution(format_specifier=None),
            'b': Substitution(format_specifier='@'),
        })
        assert arguments == [FormatArgument(1, ArgumentKind.STRING, label='b')]

    def test_positions_independent_of_json_order(self):
        first = arguments_from_substitutions({
            'beta': Substitution(format_specifier='@'),
            'alpha': Substitution(format_specifier='lld'),
        })
        second = arguments_from_substitutions({
            'alpha': Substitution(format_specifier='lld'),
            'beta': Substitution(format_specifier='@'),
        })
        assert first == second
        assert [argument.label for argument in first] == ['alpha', 'beta']

    def test_string_unit_takes_precedence(self):
        """A localization with a stringUnit is read as a simple value."""
        entries = extract({'count': {'localizations': {'en': {
            'stringUnit': {'state': 'new', 'value': '%#@items@'},
            'substitutions': {'items': {'argNum': 1, 'formatSpecifier': 'lld'}},
        }}}})

        assert entries[0].default_text == '%#@items@'


class TestValidation:
    """Unsafe keys and values are dropped."""

    def test_unsafe_entries_are_dropped(self):
        entries = extract({
            'Say "hi"': {'localizations': {'en': unit('Hi')}},
            'multiline': {'localizations': {'en': unit('Line 1\nLine 2')}},
            'grüße': {'localizations': {'en': unit('Greetings')}},
            'save': {'localizations': {'en': unit('Save')}},
        })
        assert [entry.key for entry in entries] == ['save']

    def test_unsafe_key_fallback_is_dropped(self):
        entries = extract({'Tschüss': {}})
        assert entries == []


class TestCatalogParserFiles:
    """File-level parsing and errors."""

    def test_parse_catalog(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_catalog(tmpdir, {
                'welcome.title': {'localizations': {'fr': unit('Bienvenue')}},
            }, name='Onboarding', source_language='fr')

            result = CatalogParser().parse_catalog(path)

            assert result.table_name == 'Onboarding'
            assert result.source_language == 'fr'
            assert result.entries[0].default_text == 'Bienvenue'
            assert result.entries[0].source_location == str(path)

    def test_parse_file_returns_entries(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_catalog(tmpdir, {'save': {'localizations': {'en': unit('Save')}}})
            entries = CatalogParser().parse_file(path)
            assert [entry.key for entry in entries] == ['save']

    def test_parse_files_merges_same_table(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            first = Path(tmpdir) / 'app'
            second = Path(tmpdir) / 'widget'
            first.mkdir()
            second.mkdir()
            write_catalog(first, {'b': {}})
            write_catalog(second, {'a': {}})
            write_catalog(second, {'c': {}}, name='Errors')

            tables = CatalogParser().parse_files([
                first / 'Localizable.xcstrings',
                second / 'Localizable.xcstrings',
                second / 'Errors.xcstrings',
            ])

            assert sorted(tables) == ['Errors', 'Localizable']
            assert [entry.key for entry in tables['Localizable']] == ['a', 'b']

    def test_file_extensions(self):
        assert CatalogParser().get_file_extensions() == ['.xcstrings']

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'Missing.xcstrings'
            with pytest.raises(CatalogNotFoundError) as exc_info:
                CatalogParser().parse_file(path)
            assert exc_info.value.path == str(path)

    def test_malformed_json(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'Broken.xcstrings'
            path.write_text('{"sourceLanguage": "en", ', encoding='utf-8')

            with pytest.raises(InvalidCatalogError) as exc_info:
                CatalogParser().parse_file(path)

            assert exc_info.value.path == str(path)
            assert 'Invalid JSON' in str(exc_info.value)

    def test_missing_source_language(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'NoSource.xcstrings'
            path.write_text(json.dumps({'version': '1.0', 'strings': {}}), encoding='utf-8')

            with pytest.raises(MissingSourceLanguageError) as exc_info:
                CatalogParser().parse_file(path)
            assert exc_info.value.path == str(path)

    def test_missing_strings_object(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'NoStrings.xcstrings'
            path.write_text(json.dumps({'sourceLanguage': 'en', 'version': '1.0'}), encoding='utf-8')

            with pytest.raises(InvalidCatalogError):
                CatalogParser().parse_file(path)

    def test_wrong_shape(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / 'Shape.xcstrings'
            path.write_text(json.dumps({
                'sourceLanguage': 'en',
                'version': '1.0',
                'strings': {'save': {'localizations': {'en': {'stringUnit': {'value': 42}}}}},
            }), encoding='utf-8')

            with pytest.raises(InvalidCatalogError):
                CatalogParser().parse_file(path)

    @pytest.mark.parametrize('substitution', [
        {'argNum': 1, 'formatSpecifier': 5},
        {'argNum': 0, 'formatSpecifier': 'lld'},
    ])
    def test_bad_substitution_is_invalid_catalog(self, substitution):
        """Malformed substitutions surface as InvalidCatalogError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = write_catalog(tmpdir, {
                'items': {'localizations': {'en': {'substitutions': {'count': substitution}}}},
            })

            with pytest.raises(InvalidCatalogError):
                CatalogParser().parse_file(path)

    def test_errors_share_base_class(self):
        for error_class in (CatalogNotFoundError, InvalidCatalogError, MissingSourceLanguageError):
            assert issubclass(error_class, CatalogParseError)


class TestCatalogModels:
    """Test cases for the typed catalog model."""

    def test_entry_defaults(self):
        entry = CatalogEntry.from_dict({}, 'strings')
        assert entry.translatable is True
        assert entry.comment is None
        assert entry.localizations == {}

    def test_extraction_state(self):
        entry = CatalogEntry.from_dict({'extractionState': 'manual'}, 'strings')
        assert entry.extraction_state == 'manual'

    def test_boolean_arg_num_rejected(self):
        with pytest.raises(CatalogStructureError):
            Substitution.from_dict({'argNum': True, 'formatSpecifier': 'lld'}, 'sub')

    @pytest.mark.parametrize('arg_num', [0, -1])
    def test_non_positive_arg_num_rejected(self, arg_num):
        with pytest.raises(CatalogStructureError):
            Substitution.from_dict({'argNum': arg_num, 'formatSpecifier': 'lld'}, 'sub')

    def test_format_specifier_must_be_string(self):
        with pytest.raises(CatalogStructureError):
            Substitution.from_dict({'argNum': 1, 'formatSpecifier': 5}, 'sub')

    def test_should_translate_must_be_boolean(self):
        """A string "false" is a structure error, not a translatable entry."""
        with pytest.raises(CatalogStructureError):
            CatalogEntry.from_dict({'shouldTranslate': 'false'}, 'strings')

    def test_comment_must_be_string(self):
        with pytest.raises(CatalogStructureError):
            CatalogEntry.from_dict({'comment': ['Save button']}, 'strings')

    def test_version_must_be_string(self):
        with pytest.raises(CatalogStructureError):
            CatalogDocument.from_dict({'sourceLanguage': 'en', 'version': 1, 'strings': {}})
