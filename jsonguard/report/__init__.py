"""
Report — Validation outcomes as data.

A report is the only thing validation produces. Text output is a
rendering of the report.
"""

from jsonguard.report.enums import ValidationErrorKind, ValidationStatus
from jsonguard.report.models import (
    REPORT_VERSION,
    PathSegment,
    ValidationError,
    ValidationResult,
    format_pointer,
)
from jsonguard.report.serialization import ReportFormat, dump_report

__all__ = [
    "REPORT_VERSION",
    "PathSegment",
    "ReportFormat",
    "ValidationError",
    "ValidationErrorKind",
    "ValidationResult",
    "ValidationStatus",
    "dump_report",
    "format_pointer",
]
