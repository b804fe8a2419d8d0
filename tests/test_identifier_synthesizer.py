"""Tests for accessor name and parameter label synthesis."""

from localization_extractor.core.format_parser import parse
from localization_extractor.core.models import ArgumentKind, FormatArgument, LocalizedEntry
from localization_extractor.features.identifier_synthesizer import IdentifierSynthesizer


def make_entry(key, default_text='', arguments=None):
    if arguments is None:
        arguments = parse(default_text)
    return LocalizedEntry(
        key=key,
        table='Localizable',
        default_text=default_text,
        source_location='Localizable.xcstrings',
        arguments=tuple(arguments),
    )


class TestSynthesizeName:
    """Test cases for synthesize_name()."""

    def test_dotted_key(self):
        assert IdentifierSynthesizer.synthesize_name(make_entry('welcome.title', 'Welcome')) == 'welcomeTitle'

    def test_specifiers_stripped_from_key(self):
        entry = make_entry('%lld items', '%lld items')
        assert IdentifierSynthesizer.synthesize_name(entry) == 'items'

    def test_specifier_only_key_uses_default_text(self):
        entry = make_entry('%@', 'Hello there my friend %@')
        assert IdentifierSynthesizer.synthesize_name(entry) == 'hellotheremy'

    def test_default_text_words_must_start_with_letter(self):
        assert IdentifierSynthesizer.base_name('%d', '42 new %d messages') == 'new messages'

    def test_fallback_name(self):
        assert IdentifierSynthesizer.synthesize_name(make_entry('%@', '%@')) == 'string'
        assert IdentifierSynthesizer.synthesize_name(make_entry('%d %d', '123 %d')) == 'string'

    def test_reserved_word_key(self):
        assert IdentifierSynthesizer.synthesize_name(make_entry('default', 'Default')) == '`default`'

    def test_digit_key(self):
        assert IdentifierSynthesizer.synthesize_name(make_entry('2fa.title', 'Two-factor')) == '_2faTitle'


class TestSynthesizeLabels:
    """Test cases for synthesize_labels()."""

    def test_no_arguments(self):
        assert IdentifierSynthesizer.synthesize_labels(make_entry('save', 'Save')) == []

    def test_inferred_label(self):
        entry = make_entry('greeting', 'Hello, %@!')
        assert IdentifierSynthesizer.synthesize_labels(entry) == ['value']

    def test_position_fallbacks(self):
        entry = make_entry('pair', '%@ and %@')
        assert IdentifierSynthesizer.synthesize_labels(entry) == ['value', 'value2']

    def test_repeated_labels_get_suffixes(self):
        entry = make_entry('name', '%@ %@ %@')
        assert IdentifierSynthesizer.synthesize_labels(entry) == ['name', 'name2', 'name3']

    def test_explicit_label_wins(self):
        entry = make_entry('files', '%#@files@', arguments=[
            FormatArgument(1, ArgumentKind.SIGNED_INTEGER, label='fileCount'),
        ])
        assert IdentifierSynthesizer.synthesize_labels(entry) == ['fileCount']

    def test_explicit_and_inferred_collide(self):
        entry = make_entry('items.count', '%#@count@', arguments=[
            FormatArgument(1, ArgumentKind.SIGNED_INTEGER, label='count'),
            FormatArgument(2, ArgumentKind.SIGNED_INTEGER),
        ])
        assert IdentifierSynthesizer.synthesize_labels(entry) == ['count', 'count2']

    def test_labels_are_unique(self):
        for key, text in [
            ('message', '%@: %@'),
            ('total.count', '%lld of %lld (%lld)'),
            ('value', '%@ %f %@ %f'),
        ]:
            labels = IdentifierSynthesizer.synthesize_labels(make_entry(key, text))
            assert len(labels) == len(set(labels)), key


class TestFunctionSignature:
    """Test cases for function_signature()."""

    def test_single_argument(self):
        entry = make_entry('greeting', 'Hello, %@!')
        assert IdentifierSynthesizer.function_signature(entry) == (
            'internal static func greeting(_ value: String) -> String'
        )

    def test_access_level(self):
        entry = make_entry('progress', '%lld of %lld')
        assert IdentifierSynthesizer.function_signature(entry, access_level='public') == (
            'public static func progress(_ count: Int, _ value2: Int) -> String'
        )

    def test_no_access_level(self):
        entry = make_entry('price', '%.2f')
        assert IdentifierSynthesizer.function_signature(entry, access_level='') == (
            'static func price(_ price: Double) -> String'
        )
