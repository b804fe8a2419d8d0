"""Configuration management for the extractor."""

import yaml
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field

CONFIG_FILE_NAME = '.localization-extractor.yml'
VALID_OUTPUT_FORMATS = ['json', 'console']


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """A non-fatal configuration problem."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class ProjectConfig:
    """Project configuration."""
    name: str = "Unnamed Project"


@dataclass
class InputsConfig:
    """Localization files to extract from."""
    catalogs: List[str] = field(default_factory=list)  # .xcstrings files
    tables: List[str] = field(default_factory=list)  # .strings files
    # Required for .strings files outside an .lproj folder
    development_region: Optional[str] = None


@dataclass
class OutputConfig:
    """Output configuration."""
    formats: List[str] = field(default_factory=lambda: ["console"])
    json_path: str = "./localized_strings.json"


@dataclass
class Config:
    """Main configuration class."""
    project: ProjectConfig = field(default_factory=ProjectConfig)
    inputs: InputsConfig = field(default_factory=InputsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """Load configuration from YAML, or defaults if no file is found."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

            if not config_path.exists():
                return cls()

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        return cls(
            project=ProjectConfig(**(data.get('project') or {})),
            inputs=InputsConfig(**(data.get('inputs') or {})),
            output=OutputConfig(**(data.get('output') or {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'project': {
                'name': self.project.name,
            },
            'inputs': {
                'catalogs': self.inputs.catalogs,
                'tables': self.inputs.tables,
                'development_region': self.inputs.development_region,
            },
            'output': {
                'formats': self.output.formats,
                'json_path': self.output.json_path,
            },
        }

    def save(self, config_path: Optional[Path] = None):
        """Save configuration to YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def validate(self, raise_on_error: bool = False) -> tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Args:
            raise_on_error: If True, raise ConfigValidationError on validation errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors = []
        warnings = []

        region = self.inputs.development_region
        if region is not None and not self._is_valid_region(region):
            errors.append(
                f"Invalid development region: '{region}'. "
                f"Use a language code (e.g., 'en', 'pt-BR', 'zh-Hans') or 'Base'"
            )

        for path in self.inputs.catalogs:
            if not path.endswith('.xcstrings'):
                warnings.append(ConfigValidationWarning(
                    f"Catalog does not have a .xcstrings extension: {path}"
                ))
            if not Path(path).exists():
                warnings.append(ConfigValidationWarning(f"Catalog does not exist: {path}"))

        for path in self.inputs.tables:
            if not path.endswith('.strings'):
                warnings.append(ConfigValidationWarning(
                    f"Table does not have a .strings extension: {path}"
                ))
            if not Path(path).exists():
                warnings.append(ConfigValidationWarning(f"Table does not exist: {path}"))

        for fmt in self.output.formats:
            if fmt not in VALID_OUTPUT_FORMATS:
                warnings.append(ConfigValidationWarning(
                    f"Unknown output format: '{fmt}'. Valid options: {', '.join(VALID_OUTPUT_FORMATS)}"
                ))

        if 'json' in self.output.formats and not self.output.json_path:
            errors.append("output.json_path cannot be empty when the json format is enabled")

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings

    @staticmethod
    def _is_valid_region(code: str) -> bool:
        """
        Check a development region code.

        Accepts 'Base', 2-3 letter language codes, and variants with a
        2-4 character region or script (en-US, pt-BR, zh-Hans).
        """
        if not code or not isinstance(code, str):
            return False

        if code == 'Base':
            return True

        parts = code.split('-')
        if len(parts) > 2:
            return False

        base = parts[0]
        if not (2 <= len(base) <= 3 and base.isascii() and base.isalpha()):
            return False

        if len(parts) == 2:
            variant = parts[1]
            return 2 <= len(variant) <= 4 and variant.isascii() and variant.isalnum()

        return True


def create_default_config() -> Config:
    """Create the configuration written by 'init'."""
    config = Config()
    config.inputs.catalogs = ['./Resources/Localizable.xcstrings']
    config.inputs.development_region = 'en'
    return config
