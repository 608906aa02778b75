"""
Schema validation for random graph generation requests.

Requests come as JSON documents (from the command line, inline or from a
file). They are validated against a JSON schema before any graph is built,
so that the generators only ever see well formed parameters.
"""

from typing import Any, Dict, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .base import ValidationResult

GENERATOR_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "model": {"type": "string", "enum": ["gnp", "ba", "complete"]},
        "size": {"type": "integer", "minimum": 0},
        "initial_size": {"type": "integer", "minimum": 1},
        "probability": {"type": "number", "minimum": 0, "maximum": 1},
        "directed": {"type": "boolean"},
        "seed": {"type": ["integer", "null"]},
        "output": {"type": ["string", "null"]},
    },
    "required": ["model", "size"],
    "additionalProperties": False,
}


class SchemaValidator:
    """
    JSON Schema-based validator for generation requests.

    Attributes:
        schema (Dict[str, Any]): JSON schema the documents must follow
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        self.schema = schema if schema is not None else GENERATOR_SCHEMA

    def validate_config(self, document: Dict[str, Any]) -> ValidationResult:
        """
        Validate a request document against the schema.

        Args:
            document: Parsed JSON document

        Returns:
            ValidationResult containing validation details and any errors

        Example:
            >>> validator = SchemaValidator()
            >>> validator.validate_config({"model": "gnp", "size": 10}).is_valid
            True
        """
        errors = []
        warnings = []

        try:
            json_validate(instance=document, schema=self.schema)
        except JsonSchemaError as e:
            errors.append(f"Schema validation failed: {e.message}")

        if isinstance(document, dict) and document.get("model") == "gnp":
            if "probability" not in document:
                warnings.append("No probability given, 0.5 is used")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            context={"model": document.get("model") if isinstance(document, dict) else None},
        )
