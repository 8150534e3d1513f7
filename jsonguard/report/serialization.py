"""
Report Output — Render validation results as text or JSON, and
persist them.

The text format is one ``<path> : <kind> : <detail>`` line per error
(or ``valid``). The JSON format is the pydantic dump of the result and
is the only one that can be read back.
"""

from enum import Enum
from pathlib import Path
from typing import Union

from jsonguard.report.models import ValidationResult


class ReportFormat(str, Enum):
    """Output format of a report."""
    TEXT = "text"
    JSON = "json"

    @classmethod
    def for_path(cls, path: Path) -> "ReportFormat":
        """JSON for ``.json`` files, text for anything else."""
        return cls.JSON if path.suffix.lower() == ".json" else cls.TEXT


def dump_report(result: ValidationResult, format: Union[ReportFormat, str] = ReportFormat.TEXT) -> str:
    """Render a result in the requested format."""
    if ReportFormat(format) is ReportFormat.JSON:
        return result.to_json()
    return result.render()


def save(result: ValidationResult, path: Union[str, Path]) -> ReportFormat:
    """
    Write a report, choosing the format from the file suffix.

    Returns:
        The format that was written
    """
    path = Path(path)
    format = ReportFormat.for_path(path)
    path.write_text(dump_report(result, format) + "\n", encoding="utf-8")
    return format


def load(path: Union[str, Path]) -> ValidationResult:
    """
    Read back a report saved as JSON.

    Raises:
        ValueError: If the file is not a ``.json`` report
    """
    path = Path(path)
    if ReportFormat.for_path(path) is not ReportFormat.JSON:
        raise ValueError(f"Only JSON reports can be loaded: {path}")
    return ValidationResult.from_json(path.read_text(encoding="utf-8"))
