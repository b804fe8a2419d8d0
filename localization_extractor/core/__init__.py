"""Core model, format string handling and the extraction pipeline."""

from .models import ArgumentKind, FormatArgument, LocalizedEntry, RawTableEntry
from .format_specifier import classify
from .format_parser import parse, infer_label, strip_specifiers
from .extractor import LocalizationExtractor, ExtractionResult, GeneratedAccessor

__all__ = [
    'ArgumentKind',
    'FormatArgument',
    'LocalizedEntry',
    'RawTableEntry',
    'classify',
    'parse',
    'infer_label',
    'strip_specifiers',
    'LocalizationExtractor',
    'ExtractionResult',
    'GeneratedAccessor',
]
