"""
Validation package for the graph engine.

This package provides runtime type checks for dataclasses and JSON schema
validation for generation requests.
"""

from .base import (
    DataclassRule,
    RangeRule,
    ValidationResult,
    ValidationRule,
    validate_dataclass,
)
from .schema import GENERATOR_SCHEMA, SchemaValidator

__all__ = [
    "ValidationResult",
    "ValidationRule",
    "RangeRule",
    "DataclassRule",
    "validate_dataclass",
    "GENERATOR_SCHEMA",
    "SchemaValidator",
]
