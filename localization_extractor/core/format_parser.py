"""Printf-style format string parsing."""

import re
from typing import Dict, FrozenSet, List

from .format_specifier import classify
from .models import ArgumentKind, FormatArgument

# %[position$][flags][width][.precision][length]conversion
FORMAT_PATTERN = re.compile(
    r'%(?:(\d+)\$)?'            # positional argument (1$)
    r'[-+ #0]*'                 # flags
    r'(?:\d+|\*)?'              # width
    r'(?:\.\d+|\.\*)?'          # precision
    r'([hlLzjt]*)'              # length modifiers
    r'([diuoxXeEfFgGaAcspn@%])'  # conversion
)

# Looser grammar used to cut specifiers out of keys when building names
SPECIFIER_TEXT = r'%[\d$]*[\-+\s#0]*[\d.*]*[hlLzjt]*[@diouxXeEfFgGaAcspn%]'
_LEADING_SPECIFIER = re.compile(r'^' + SPECIFIER_TEXT + r'\s*')
_TRAILING_SPECIFIER = re.compile(r'\s*' + SPECIFIER_TEXT + r'$')
_INLINE_SPECIFIER = re.compile(SPECIFIER_TEXT)
_WHITESPACE = re.compile(r'\s+')

# Words that make good parameter labels, per argument kind
COMMON_LABELS: Dict[str, FrozenSet[str]] = {
    'signed-integer': frozenset(['count', 'number', 'total', 'amount', 'quantity', 'index', 'id']),
    'unsigned-integer': frozenset(['count', 'number', 'total', 'amount', 'quantity', 'index', 'id']),
    'string': frozenset(['name', 'title', 'message', 'text', 'value', 'label', 'user']),
    'floating-point': frozenset(['amount', 'price', 'value', 'rate', 'percentage']),
}


def parse(text: str) -> List[FormatArgument]:
    """
    Extract format arguments from a localized string.

    Positions are 1-based. Positional specifiers ('%2$d') use their
    explicit position and do not advance the sequential counter; '%%'
    produces nothing. The result is sorted by position, duplicates from
    mixed sequential/positional strings are kept as-is.

    Examples:
        'Hello, %@!'      -> [FormatArgument(1, string)]
        '%2$lld of %1$@'  -> [FormatArgument(1, string), FormatArgument(2, signed-integer)]
        '100%% complete'  -> []
    """
    arguments = []
    sequential_position = 0

    for match in FORMAT_PATTERN.finditer(text):
        positional, modifier, conversion = match.groups()

        if conversion == '%':
            continue

        if positional is not None:
            position = int(positional)
        else:
            sequential_position += 1
            position = sequential_position

        arguments.append(FormatArgument(
            position=position,
            kind=classify(modifier + conversion),
        ))

    return sorted(arguments, key=lambda argument: argument.position)


def strip_specifiers(text: str) -> str:
    """
    Remove format specifiers from text, keeping the surrounding words.

    Leading and trailing specifiers are dropped, inline ones become a
    space, and whitespace is collapsed.

    Example:
        '%lld items in %@' -> 'items in'
    """
    working = text

    while True:
        stripped = _LEADING_SPECIFIER.sub('', working, count=1)
        if stripped == working:
            break
        working = stripped

    while True:
        stripped = _TRAILING_SPECIFIER.sub('', working, count=1)
        if stripped == working:
            break
        working = stripped

    working = _INLINE_SPECIFIER.sub(' ', working)
    return _WHITESPACE.sub(' ', working).strip()


def infer_label(key: str, default_text: str, kind: ArgumentKind, position: int) -> str:
    """
    Guess a parameter label for an argument without an explicit one.

    Looks for a kind-specific word in the key segments first, then in the
    words of the default text, and finally falls back to a name based on
    the kind and position.

    Examples:
        ('items.count', '%lld items', signed-integer, 1) -> 'count'
        ('greeting', 'Hello, %@!', string, 1)            -> 'value'
        ('pair', '%@ and %@', string, 2)                 -> 'value2'
    """
    vocabulary = COMMON_LABELS.get(kind.name)

    if vocabulary:
        for part in re.split(r'[.\-_]', key):
            lowered = part.lower()
            if lowered in vocabulary:
                return lowered

        for word in re.split(r'[^A-Za-z0-9]+', default_text):
            lowered = word.lower()
            if lowered in vocabulary:
                return lowered

    if kind.name in ('signed-integer', 'unsigned-integer'):
        return 'count' if position == 1 else f"value{position}"
    if kind.name == 'string':
        return 'value' if position == 1 else f"value{position}"
    if kind.name == 'floating-point':
        return 'amount' if position == 1 else f"value{position}"
    if kind.name == 'character':
        return 'char'
    return f"arg{position}"
