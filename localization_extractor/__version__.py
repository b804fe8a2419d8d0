"""Version information for localization-extractor."""

__version__ = "0.3.0"
__author__ = "Sezgin Paksoy"
__description__ = "Typed extraction of Apple string catalogs and .strings tables for Swift code generation"

# Changelog:
# 0.3.0 - Legacy .strings tables
#        - StringsTableParser with .lproj region inference
#        - UTF-16 fallback for tables saved by older Xcode versions
#        - --development-region option for tables outside .lproj folders
#        - Catalog and .strings tables with the same name share one namespace
#        - JSON reporter includes the source file of every string
#
# 0.2.0 - Plural and device variations
#        - Variation resolution (plural first, then device; 'other' preferred)
#        - Substitution arguments with labels taken from the substitution name
#        - Non-translatable catalog entries are skipped
#        - Duplicate identifier detection per table
#
# 0.1.0 - Initial release
#        - String catalog (.xcstrings) parser
#        - printf format specifier parsing and classification
#        - Swift identifier and parameter label synthesis
#        - YAML configuration (.localization-extractor.yml)
#        - Structured logging with colored console output
