"""
Utility functions and helpers.

Provides logging setup, argument validation and filesystem helpers.
"""

from ghimport.utils.logging_config import setup_logging
from ghimport.utils.validation import (
    ValidationResult,
    validate_source,
    validate_identity,
    validate_destination,
)
from ghimport.utils.fileops import merge_directories

__all__ = [
    "setup_logging",
    "ValidationResult",
    "validate_source",
    "validate_identity",
    "validate_destination",
    "merge_directories",
]
