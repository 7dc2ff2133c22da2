from __future__ import annotations

from .field_validation_error import FieldValidationError


class InvalidDynamicValue(FieldValidationError):
    """
    Raised when a `dynamic` literal is not a bool, `true`, `false` or `strict`.

    Related: ..entities.dynamic_value
    """

    def __init__(self, literal: object, *, yaml_path: str | None = None) -> None:
        super().__init__(
            f"{literal!r} is invalid dynamic setting, expected one of: true, false, strict",
            yaml_path=yaml_path,
        )
        self.literal = literal
