"""Utility functions and helpers for the graph engine."""

from .validation import SchemaValidator, ValidationResult, validate_dataclass

__all__ = ["SchemaValidator", "ValidationResult", "validate_dataclass"]
