"""Export execution domain exports."""

from .export_contracts import ExportOutcome, ExportRequest
from .export_use_case import ExportExecutionError, ProgressReporter, execute_schema_export

__all__ = [
    "ExportRequest",
    "ExportOutcome",
    "ExportExecutionError",
    "ProgressReporter",
    "execute_schema_export",
]
