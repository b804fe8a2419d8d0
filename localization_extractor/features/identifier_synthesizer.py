"""Swift identifiers and parameter labels for localized strings."""

from typing import List

from ..core.format_parser import infer_label, strip_specifiers
from ..core.models import LocalizedEntry
from ..utils.naming import sanitize

FALLBACK_BASE_NAME = 'string'
MAX_DEFAULT_TEXT_WORDS = 3


class IdentifierSynthesizer:
    """
    Generates accessor names and parameter labels.

    Examples:
        key 'welcome.title'              -> welcomeTitle
        key '%lld items'                 -> items
        key 'greeting', text 'Hello, %@' -> greeting(_ value: String)
    """

    @staticmethod
    def base_name(key: str, default_text: str) -> str:
        """
        Build the unsanitized base name for an entry.

        Format specifiers are cut out of the key. If no letters remain,
        up to three leading words of the default text are used instead,
        and 'string' when that is empty too.
        """
        working = strip_specifiers(key)

        if not any(char.isalpha() for char in working):
            working = IdentifierSynthesizer._words_from_default_text(default_text)

        return working or FALLBACK_BASE_NAME

    @staticmethod
    def _words_from_default_text(default_text: str) -> str:
        words = [
            word for word in strip_specifiers(default_text).split(' ')
            if word and word[0].isalpha()
        ]
        return ' '.join(words[:MAX_DEFAULT_TEXT_WORDS])

    @staticmethod
    def synthesize_name(entry: LocalizedEntry) -> str:
        """Return the sanitized Swift identifier for an entry."""
        return sanitize(IdentifierSynthesizer.base_name(entry.key, entry.default_text))

    @staticmethod
    def synthesize_labels(entry: LocalizedEntry) -> List[str]:
        """
        Return one unique parameter label per argument, in position order.

        Explicit labels (from catalog substitutions) win over inferred
        ones. Repeats get a numeric suffix: value, value2, value3.
        """
        used = set()
        labels = []

        for index, argument in enumerate(entry.arguments, 1):
            if argument.label:
                label = argument.label
            else:
                label = infer_label(entry.key, entry.default_text, argument.kind, index)

            candidate = label
            counter = 2
            while candidate in used:
                candidate = f"{label}{counter}"
                counter += 1

            used.add(candidate)
            labels.append(candidate)

        return labels

    @staticmethod
    def function_signature(entry: LocalizedEntry, access_level: str = 'internal') -> str:
        """
        Render the Swift function signature for a callable entry.

        Example:
            'internal static func greeting(_ value: String) -> String'
        """
        name = IdentifierSynthesizer.synthesize_name(entry)
        labels = IdentifierSynthesizer.synthesize_labels(entry)

        params = ', '.join(
            f"_ {label}: {argument.kind.host_type}"
            for label, argument in zip(labels, entry.arguments)
        )
        prefix = f"{access_level} " if access_level else ''
        return f"{prefix}static func {name}({params}) -> String"
