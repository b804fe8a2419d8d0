"""Conversion of arbitrary names to Swift identifiers."""

import re
import string

EMPTY_IDENTIFIER = '_'

# Swift keywords that must be escaped with backticks when used as names
RESERVED_WORDS = frozenset([
    # Declarations
    'associatedtype', 'class', 'deinit', 'enum', 'extension', 'fileprivate',
    'func', 'import', 'init', 'inout', 'internal', 'let', 'open', 'operator',
    'private', 'precedencegroup', 'protocol', 'public', 'rethrows', 'static',
    'struct', 'subscript', 'typealias', 'var',
    # Statements
    'break', 'case', 'catch', 'continue', 'default', 'defer', 'do', 'else',
    'fallthrough', 'for', 'guard', 'if', 'in', 'repeat', 'return', 'throw',
    'switch', 'where', 'while',
    # Expressions and types
    'Any', 'as', 'false', 'is', 'nil', 'self', 'Self', 'super', 'throws',
    'true', 'try',
    # Patterns
    '_',
    # Context-sensitive
    'associativity', 'convenience', 'didSet', 'dynamic', 'final', 'get',
    'indirect', 'infix', 'lazy', 'left', 'mutating', 'none', 'nonmutating',
    'optional', 'override', 'postfix', 'prefix', 'Protocol', 'required',
    'right', 'set', 'some', 'any', 'Type', 'unowned', 'weak', 'willSet',
])

# Lowercased forms of the mixed-case keywords, since sanitize lowercases the first segment
_ESCAPED_NAMES = RESERVED_WORDS | frozenset(word.lower() for word in RESERVED_WORDS)

_SEPARATORS = re.compile(r'[-_.]')
_IDENTIFIER_CHARACTERS = frozenset(string.ascii_letters + string.digits + '_')
_LEADING_ACRONYM = re.compile(r'^([A-Z]{2,})(?=[a-z])')


def _lower_first_segment(segment: str) -> str:
    # "URLPath" -> "urlPath"; "HERO", "Inter", "myClass" -> fully lowercased
    match = _LEADING_ACRONYM.match(segment)
    if match:
        run = match.group(1)
        return run[:-1].lower() + segment[len(run) - 1:]
    return segment.lower()


def escape_reserved(name: str) -> str:
    """Wrap a reserved word in backticks, leave anything else alone."""
    if name in _ESCAPED_NAMES:
        return f"`{name}`"
    return name


def sanitize(name: str) -> str:
    """
    Convert a name to a lowerCamelCase Swift identifier.

    Rules:
        1. Split on '-', '_' and '.'
        2. Keep only ASCII letters and digits in each segment
        3. Lowercase the first segment, capitalize the rest
        4. Prefix with '_' if the result starts with a digit
        5. Escape reserved words with backticks

    Examples:
        'hero-background'  -> 'heroBackground'
        'HERO-BACKGROUND'  -> 'heroBackground'
        'icon.home'        -> 'iconHome'
        '2x_logo'          -> '_2xLogo'
        'default'          -> '`default`'
        '---'              -> '_'
    """
    segments = []
    for raw in _SEPARATORS.split(name):
        cleaned = ''.join(char for char in raw if char in _IDENTIFIER_CHARACTERS)
        if cleaned:
            segments.append(cleaned)

    if not segments:
        return EMPTY_IDENTIFIER

    result = _lower_first_segment(segments[0])
    for segment in segments[1:]:
        result += segment[0].upper() + segment[1:].lower()

    if result[0].isdigit():
        result = '_' + result

    return escape_reserved(result)
