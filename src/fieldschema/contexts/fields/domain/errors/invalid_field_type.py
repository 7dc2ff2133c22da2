from __future__ import annotations

from .field_validation_error import FieldValidationError


class InvalidFieldType(FieldValidationError):
    """
    Raised when a field declares an unknown `type` or breaks a type-specific rule.

    Related: ..entities.field_type
    """
