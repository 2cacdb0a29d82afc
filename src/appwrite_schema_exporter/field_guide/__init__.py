"""Field guide exports."""

from .field_instructions import build_field_instructions, check_schema_marker

__all__ = ["build_field_instructions", "check_schema_marker"]
