from __future__ import annotations

from .field_validation_error import FieldValidationError


class DuplicateFieldKey(FieldValidationError):
    """
    Raised when concatenating field trees would define the same key twice.

    Related: ..entities.field_tree
    """

    def __init__(self, keys: tuple[str, ...]) -> None:
        super().__init__(f"fields contain conflicting keys: {', '.join(keys)}")
        self.keys = keys
