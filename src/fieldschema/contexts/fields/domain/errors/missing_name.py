from __future__ import annotations

from .field_validation_error import FieldValidationError


class MissingName(FieldValidationError):
    """
    Raised when a field node lacks a non-empty `name`.

    Related: ..entities.field
    """
