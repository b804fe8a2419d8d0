"""Logging for the extractor: colored console output plus an optional debug file."""

import logging
import sys
from typing import Optional
from pathlib import Path
from .colors import Colors

LOGGER_NAME = 'localization_extractor'

CONSOLE_FORMAT = '%(message)s'
FILE_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
FILE_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def console_level(verbose: bool = False, quiet: bool = False) -> int:
    """Console threshold for the CLI flags; quiet wins over verbose."""
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


class ColoredFormatter(logging.Formatter):
    """Wraps each console line in the color of its level."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.OKCYAN,
        logging.INFO: Colors.OKGREEN,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.FAIL,
        logging.CRITICAL: Colors.FAIL + Colors.BOLD,
    }

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True):
        super().__init__(fmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self.use_colors:
            return text
        return f"{self.LEVEL_COLORS.get(record.levelno, '')}{text}{Colors.ENDC}"


class PlainFormatter(logging.Formatter):
    """Formatter for log files; removes colors embedded in messages."""

    def format(self, record: logging.LogRecord) -> str:
        return Colors.strip(super().format(record))


class Logger:
    """
    Process-wide logger shared by parsers, pipeline and CLI.

    Parsers report dropped entries and skipped files at DEBUG, the
    pipeline reports per-table totals at INFO, and the CLI uses the
    styled helpers (success, fail, hint, section). The console shows
    INFO and above unless configured otherwise; a log file, when set,
    records everything.
    """

    _instance: Optional['Logger'] = None
    _initialized: bool = False

    def __new__(cls) -> 'Logger':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Logger._initialized:
            return

        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG)
        for handler in self._logger.handlers[:]:
            self._logger.removeHandler(handler)

        self._console_handler: Optional[logging.Handler] = None
        self._file_handler: Optional[logging.FileHandler] = None
        self._set_console(logging.INFO, use_colors=True)

        Logger._initialized = True

    def _set_console(self, level: int, use_colors: bool) -> None:
        if self._console_handler is not None:
            self._logger.removeHandler(self._console_handler)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)
        handler.setFormatter(ColoredFormatter(fmt=CONSOLE_FORMAT, use_colors=use_colors))

        self._console_handler = handler
        self._logger.addHandler(handler)

    def _set_file(self, file_path: Path) -> None:
        if self._file_handler is not None:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()

        file_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(file_path, encoding='utf-8')
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(PlainFormatter(fmt=FILE_FORMAT, datefmt=FILE_DATE_FORMAT))

        self._file_handler = handler
        self._logger.addHandler(handler)

    def configure(
        self,
        verbose: bool = False,
        quiet: bool = False,
        log_file: Optional[Path] = None,
        use_colors: bool = True
    ) -> None:
        """
        Apply the CLI output options.

        Args:
            verbose: Show DEBUG messages on the console
            quiet: Show only warnings and errors on the console
            log_file: Also write every message to this file
            use_colors: Color console output (off when stdout is not a TTY)
        """
        self._set_console(console_level(verbose, quiet), use_colors)
        if log_file:
            self._set_file(Path(log_file))

    @property
    def log_file(self) -> Optional[Path]:
        if self._file_handler is None:
            return None
        return Path(self._file_handler.baseFilename)

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        """The package logger, or its child for a module name."""
        return self._logger.getChild(name) if name else self._logger

    def debug(self, msg: str, *args, **kwargs) -> None:
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self._logger.error(msg, *args, **kwargs)

    def success(self, msg: str) -> None:
        self.info(f"{Colors.success('✓')} {msg}")

    def fail(self, msg: str) -> None:
        self.error(f"{Colors.error('✗')} {msg}")

    def hint(self, msg: str) -> None:
        self.info(f"{Colors.info('→')} {msg}")

    def section(self, title: str, char: str = '=', width: int = 70) -> None:
        self.info(f"\n{Colors.bold(title)}\n{char * width}")


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Return the shared Logger, creating it on first use."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
    use_colors: bool = True
) -> None:
    """Configure the shared logger. See Logger.configure."""
    get_logger().configure(verbose=verbose, quiet=quiet, log_file=log_file, use_colors=use_colors)


def reset_logger() -> None:
    """Close all handlers and forget the shared logger (used by tests)."""
    global _logger
    if _logger is not None:
        for handler in _logger._logger.handlers[:]:
            handler.close()
            _logger._logger.removeHandler(handler)
    _logger = None
    Logger._instance = None
    Logger._initialized = False
