"""Utility modules."""

from .colors import Colors
from .config import Config, create_default_config, ConfigValidationError
from .naming import sanitize, escape_reserved
from .validators import (
    UnsafeStringError,
    validate,
    validated,
    validate_localized,
    is_safe_localized,
)

__all__ = [
    'Colors',
    'Config',
    'create_default_config',
    'ConfigValidationError',
    'sanitize',
    'escape_reserved',
    'UnsafeStringError',
    'validate',
    'validated',
    'validate_localized',
    'is_safe_localized',
]
