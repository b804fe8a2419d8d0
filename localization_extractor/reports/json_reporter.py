"""JSON output of the extracted model."""

import json
from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Optional

from ..__version__ import __version__
from ..core.extractor import ExtractionResult, GeneratedAccessor
from ..utils.logging import get_logger


class JSONReporter:
    """Write extraction results as JSON for the code emitter."""

    @staticmethod
    def accessor_to_dict(accessor: GeneratedAccessor) -> Dict[str, Any]:
        entry = accessor.entry
        return {
            'key': entry.key,
            'identifier': accessor.identifier,
            'default_text': entry.default_text,
            'comment': entry.comment,
            'callable': entry.requires_callable,
            'arguments': [
                {
                    'position': argument.position,
                    'kind': str(argument.kind),
                    'host_type': argument.kind.host_type,
                    'label': label,
                }
                for argument, label in zip(entry.arguments, accessor.parameter_labels)
            ],
            'source': entry.source_location,
        }

    @staticmethod
    def build_report(result: ExtractionResult, include_timestamp: bool = True) -> Dict[str, Any]:
        """Build the report dictionary; tables and entries keep their sorted order."""
        metadata = {
            'version': __version__,
            'table_count': len(result.tables),
            'string_count': result.total_strings,
        }
        if include_timestamp:
            metadata['generated_at'] = datetime.now().isoformat()

        return {
            'metadata': metadata,
            'tables': {
                table: [JSONReporter.accessor_to_dict(accessor) for accessor in accessors]
                for table, accessors in result.tables.items()
            },
        }

    @staticmethod
    def generate(
        result: ExtractionResult,
        output_path: Optional[Path] = None,
        pretty: bool = True,
        include_timestamp: bool = True,
    ) -> Path:
        """
        Write the JSON report.

        Args:
            result: Extraction result
            output_path: Output file path (default: ./localized_strings.json)
            pretty: Indent the JSON
            include_timestamp: Add 'generated_at' to the metadata

        Returns:
            Path to the written report
        """
        if output_path is None:
            output_path = Path.cwd() / 'localized_strings.json'

        report = JSONReporter.build_report(result, include_timestamp=include_timestamp)

        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            if pretty:
                json.dump(report, f, indent=2, ensure_ascii=False)
            else:
                json.dump(report, f, ensure_ascii=False)

        get_logger().success(f"JSON output: {output_path}")

        return output_path

    @staticmethod
    def load(report_path: Path) -> dict:
        """Load a JSON report from file."""
        with open(report_path, 'r', encoding='utf-8') as f:
            return json.load(f)
