"""ANSI color codes for terminal output."""


class Colors:
    """ANSI escape sequences used by the logger and console reporter."""

    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    @classmethod
    def success(cls, text: str) -> str:
        return f"{cls.OKGREEN}{text}{cls.ENDC}"

    @classmethod
    def error(cls, text: str) -> str:
        return f"{cls.FAIL}{text}{cls.ENDC}"

    @classmethod
    def info(cls, text: str) -> str:
        return f"{cls.OKCYAN}{text}{cls.ENDC}"

    @classmethod
    def bold(cls, text: str) -> str:
        return f"{cls.BOLD}{text}{cls.ENDC}"

    @classmethod
    def strip(cls, text: str) -> str:
        """Remove the escape sequences defined here (for plain-text output)."""
        for code in (cls.OKCYAN, cls.OKGREEN, cls.WARNING, cls.FAIL, cls.ENDC, cls.BOLD):
            text = text.replace(code, '')
        return text
