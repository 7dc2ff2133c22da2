from __future__ import annotations

from .field_validation_error import FieldValidationError


class InvalidFormatter(FieldValidationError):
    """
    Raised when a field `format` is not allowed for its `type`.

    Related: ..entities.field_type
    """
