"""
Base validation components.

This module provides the runtime checks used on the engine dataclasses:

- ValidationResult, to report validation outcomes
- RangeRule, for numeric ranges such as probabilities
- DataclassRule, to check dataclass fields against their type hints
- validate_dataclass, a decorator running DataclassRule after __post_init__
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, Union, get_args, get_origin, get_type_hints


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]
    context: Optional[Dict[str, Any]] = None


class ValidationRule:
    """
    Base class for all validation rules.

    Attributes:
        error_message (str): Message to display when validation fails
    """

    def __init__(self, error_message: str):
        self.error_message = error_message

    def validate(self, value: Any) -> bool:
        """
        Validate a value against the rule.

        Raises:
            NotImplementedError: If the subclass doesn't implement this method
        """
        raise NotImplementedError("Validation rules must implement validate()")


class RangeRule(ValidationRule):
    """
    Rule for validating numeric ranges.

    Either min_value or max_value can be None to create an open-ended range.
    Bounds are inclusive.

    Attributes:
        min_value (Optional[float]): Minimum allowed value
        max_value (Optional[float]): Maximum allowed value
    """

    def __init__(
        self,
        min_value: Optional[float] = None,
        max_value: Optional[float] = None,
        error_message: str = "",
    ):
        super().__init__(error_message)
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        # written so that NaN fails both bounds
        if self.min_value is not None and not self.min_value <= value:
            return False
        if self.max_value is not None and not value <= self.max_value:
            return False
        return True


class DataclassRule(ValidationRule):
    """
    Rule for validating dataclass fields against their type hints.

    Attributes:
        dataclass_type: The dataclass type to validate against
    """

    def __init__(self, dataclass_type: Type, error_message: str = ""):
        super().__init__(error_message or f"Invalid value for {dataclass_type.__name__}")
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _validate_type(self, value: Any, expected_type: Any) -> bool:
        """Validate a value against its expected type."""
        origin = get_origin(expected_type)

        if expected_type is Any:
            return True

        # Handle Optional types
        if origin is Union:
            args = get_args(expected_type)
            if type(None) in args and value is None:
                return True
            return any(self._validate_type(value, t) for t in args if t is not type(None))

        if value is None:
            return False

        if origin is list:
            if not isinstance(value, list):
                return False
            args = get_args(expected_type)
            return not args or all(self._validate_type(item, args[0]) for item in value)
        elif origin is dict:
            if not isinstance(value, dict):
                return False
            args = get_args(expected_type)
            if len(args) != 2:
                return True
            key_type, val_type = args
            return all(
                self._validate_type(k, key_type) and self._validate_type(v, val_type)
                for k, v in value.items()
            )
        elif origin is not None:
            try:
                return isinstance(value, origin)
            except TypeError:
                return True

        # ints are accepted where floats are expected
        if expected_type is float:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        try:
            return isinstance(value, expected_type)
        except TypeError:
            # TypeVars and other special forms do not work with isinstance
            return True

    def validate(self, value: Any) -> bool:
        if not isinstance(value, self.dataclass_type):
            return False

        for field_name, field_type in self.type_hints.items():
            if field_name.startswith("_"):
                continue
            if not self._validate_type(getattr(value, field_name), field_type):
                return False

        return True


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    Field types are checked first, then the original __post_init__, if any,
    runs its value checks on well typed fields.

    Example:
        >>> @validate_dataclass
        ... @dataclass
        ... class Example:
        ...     name: str
        ...     count: int
    """
    original_post_init = getattr(cls, "__post_init__", None)

    def validated_post_init(self):
        """Validate all fields after initialization."""
        validator = DataclassRule(cls)
        if not validator.validate(self):
            raise TypeError(f"Invalid field types in {cls.__name__}")

        if original_post_init:
            original_post_init(self)

    cls.__post_init__ = validated_post_init
    return cls
