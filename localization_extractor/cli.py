"""Command-line interface for localization extractor."""

import sys
import argparse
from pathlib import Path

from .__version__ import __version__
from .utils.config import Config, create_default_config, ConfigValidationError, CONFIG_FILE_NAME
from .utils.logging import get_logger, configure_logging
from .core.extractor import LocalizationExtractor
from .parsers.catalog import CatalogParseError
from .parsers.strings_table import StringsFileParseError
from .features.collision_detector import DuplicateIdentifierError
from .reports.json_reporter import JSONReporter
from .reports.console_reporter import ConsoleReporter


def load_and_validate_config(validate: bool = True, verbose: bool = False) -> Config:
    """
    Load configuration and optionally validate it.

    Args:
        validate: Whether to validate the config
        verbose: Whether to log warnings

    Returns:
        Loaded Config object

    Raises:
        ConfigValidationError: If validation fails with errors
    """
    logger = get_logger()
    config = Config.from_file()

    if validate:
        errors, warnings = config.validate()

        if verbose and warnings:
            for warning in warnings:
                logger.warning(f"Config warning: {warning}")

        if errors:
            logger.fail("Configuration errors:")
            for error in errors:
                logger.error(f"   • {error}")
            raise ConfigValidationError(errors)

    return config


def cmd_init(args):
    """Initialize configuration file."""
    logger = get_logger()
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not args.force:
        logger.fail(f"Config already exists: {config_path}")
        logger.hint("Use --force to overwrite")
        return 1

    config = create_default_config()
    config.save(config_path)

    logger.success(f"Created: {config_path}")
    logger.section("Next steps:", char='-')
    logger.info(f"1. Edit {CONFIG_FILE_NAME} to list your catalogs and tables")
    logger.info("2. Run: localization-extractor extract")
    return 0


def cmd_extract(args):
    """Extract localized strings."""
    logger = get_logger()

    try:
        config = load_and_validate_config(validate=True, verbose=args.verbose)
    except ConfigValidationError:
        return 1

    # Command-line inputs replace the configured ones
    if args.catalog or args.strings:
        catalogs = args.catalog or []
        tables = args.strings or []
    else:
        catalogs = config.inputs.catalogs
        tables = config.inputs.tables

    if not catalogs and not tables:
        logger.fail("No input files")
        logger.hint("Pass --catalog/--strings or list inputs in " + CONFIG_FILE_NAME)
        return 1

    if args.development_region is not None and not Config._is_valid_region(args.development_region):
        logger.fail(f"Invalid development region: '{args.development_region}'")
        logger.hint("Use a language code (e.g., 'en', 'pt-BR', 'zh-Hans') or 'Base'")
        return 1

    extractor = LocalizationExtractor(
        catalog_paths=[Path(path) for path in catalogs],
        table_paths=[Path(path) for path in tables],
        development_region=args.development_region or config.inputs.development_region,
    )

    logger.section("Extracting localized strings")

    try:
        result = extractor.extract()
    except (CatalogParseError, StringsFileParseError) as e:
        logger.fail(str(e))
        return 1
    except DuplicateIdentifierError as e:
        logger.fail(str(e))
        logger.hint("Rename one of the keys so the generated names differ")
        return 1

    if 'json' in config.output.formats or args.json:
        output_path = Path(args.json) if args.json else Path(config.output.json_path)
        JSONReporter.generate(result=result, output_path=output_path)

    if not args.quiet and ('console' in config.output.formats or args.verbose):
        ConsoleReporter.print_summary(result, show_details=args.verbose)

    logger.success(f"Extracted {result.total_strings} strings from {len(result.tables)} tables")
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='localization-extractor',
        description='Extract typed localized strings from .xcstrings catalogs and .strings tables',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # init command
    init_parser = subparsers.add_parser('init', help='Initialize configuration file')
    init_parser.add_argument('--force', action='store_true', help='Overwrite existing config')

    # extract command
    extract_parser = subparsers.add_parser('extract', help='Extract localized strings')
    extract_parser.add_argument('--catalog', action='append', metavar='PATH',
                                help='String catalog (.xcstrings); repeatable')
    extract_parser.add_argument('--strings', action='append', metavar='PATH',
                                help='Legacy .strings table; repeatable')
    extract_parser.add_argument('--development-region', metavar='CODE',
                                help='Region of .strings files outside an .lproj folder')
    extract_parser.add_argument('--json', metavar='PATH', help='Write the extracted model as JSON')
    extract_parser.add_argument('--verbose', action='store_true', help='Show detailed output')
    extract_parser.add_argument('--quiet', action='store_true', help='Minimal output')
    extract_parser.add_argument('--log-file', metavar='PATH', help='Also write a debug log to PATH')

    args = parser.parse_args()

    configure_logging(
        verbose=getattr(args, 'verbose', False),
        quiet=getattr(args, 'quiet', False),
        log_file=Path(args.log_file) if getattr(args, 'log_file', None) else None,
        use_colors=sys.stdout.isatty(),
    )

    # Execute command
    if args.command == 'init':
        return cmd_init(args)
    elif args.command == 'extract':
        return cmd_extract(args)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
