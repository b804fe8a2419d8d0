"""Validation of text that ends up inside generated Swift source."""

import string

# Names derived from the filesystem: ASCII letters, digits, '-', '_', '.', ' ', '/'
STRICT_CHARACTERS = frozenset(string.ascii_letters + string.digits + '-_. /')

# Keys and values of localized strings also need format punctuation
LOCALIZED_TEXT_CHARACTERS = STRICT_CHARACTERS | frozenset("%@$#!?,;:()[]{}*+<>=&|^~`'")

MAX_REPORTED_LENGTH = 50


class UnsafeStringError(Exception):
    """Raised when a string contains characters that are not allowed."""

    def __init__(self, value: str, reason: str, context: str):
        self.value = value
        self.reason = reason
        self.context = context
        suffix = '...' if len(value) > MAX_REPORTED_LENGTH else ''
        super().__init__(
            f'Unsafe {context}: {reason} in "{value[:MAX_REPORTED_LENGTH]}{suffix}"'
        )


def validate(text: str, allowed: frozenset = STRICT_CHARACTERS, context: str = 'name') -> None:
    """
    Check that every character of text is in the allowed set.

    Quotes, backslashes, control characters and any non-ASCII code point
    are outside both character sets, so look-alike letters from other
    scripts are rejected too.

    Args:
        text: String to check
        allowed: Permitted characters (STRICT_CHARACTERS or LOCALIZED_TEXT_CHARACTERS)
        context: Description used in the error message (e.g. "string key")

    Raises:
        UnsafeStringError: On the first disallowed character
    """
    for char in text:
        if char not in allowed:
            raise UnsafeStringError(
                value=text,
                reason=f"contains disallowed character {char!r}",
                context=context,
            )


def validated(text: str, context: str = 'name') -> str:
    """Validate a filesystem-derived name and return it."""
    validate(text, STRICT_CHARACTERS, context)
    return text


def validate_localized(text: str, context: str = 'string') -> None:
    """Validate a localized string key or value (format punctuation allowed)."""
    validate(text, LOCALIZED_TEXT_CHARACTERS, context)


def is_safe_localized(text: str) -> bool:
    """Return True if text passes validate_localized."""
    try:
        validate_localized(text)
    except UnsafeStringError:
        return False
    return True
