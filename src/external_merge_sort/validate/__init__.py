"""Input and output preconditions."""

from external_merge_sort.validate.checks import ValidationReport, validate_input

__all__ = ["ValidationReport", "validate_input"]
