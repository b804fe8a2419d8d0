"""Classification of printf conversions into argument kinds."""

import re

from .models import ArgumentKind

INTEGER_LENGTH_MODIFIERS = frozenset(['', 'h', 'hh', 'l', 'll', 'j', 't', 'z'])
FLOAT_LENGTH_MODIFIERS = frozenset(['', 'l'])  # 'L' arrives lowercased
CHARACTER_LENGTH_MODIFIERS = frozenset(['', 'l'])

SIGNED_CONVERSIONS = frozenset('di')
UNSIGNED_CONVERSIONS = frozenset('oux')
FLOAT_CONVERSIONS = frozenset('efga')

_SPECIFIER_PATTERN = re.compile(r'^([hlLzjt]*)(.)$', re.DOTALL)


def classify(specifier: str) -> ArgumentKind:
    """
    Map a length modifier plus conversion letter to an argument kind.

    The leading '%', flags, width and precision must already be stripped.
    Matching is case-insensitive. Pointer ('p') and C-string ('s', 'S',
    'ls') conversions, and anything unrecognized, classify as unknown
    and keep the raw text.

    Examples:
        '@'   -> string
        'lld' -> signed-integer
        'lX'  -> unsigned-integer
        'Lf'  -> floating-point
        'p'   -> unknown('p')
    """
    normalized = specifier.lower()
    match = _SPECIFIER_PATTERN.match(normalized)
    if not match:
        return ArgumentKind.unknown(specifier)

    modifier, conversion = match.groups()

    if conversion == '@' and not modifier:
        return ArgumentKind.STRING
    if conversion in SIGNED_CONVERSIONS and modifier in INTEGER_LENGTH_MODIFIERS:
        return ArgumentKind.SIGNED_INTEGER
    if conversion in UNSIGNED_CONVERSIONS and modifier in INTEGER_LENGTH_MODIFIERS:
        return ArgumentKind.UNSIGNED_INTEGER
    if conversion in FLOAT_CONVERSIONS and modifier in FLOAT_LENGTH_MODIFIERS:
        return ArgumentKind.FLOATING_POINT
    if conversion == 'c' and modifier in CHARACTER_LENGTH_MODIFIERS:
        return ArgumentKind.CHARACTER

    return ArgumentKind.unknown(specifier)
