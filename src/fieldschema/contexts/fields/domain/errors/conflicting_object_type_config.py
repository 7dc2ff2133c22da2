from __future__ import annotations

from .field_validation_error import FieldValidationError


class ConflictingObjectTypeConfig(FieldValidationError):
    """
    Raised when a field mixes a singular object-type attribute with `object_type_params`.

    Related: ..entities.field, ..entities.object_type_config
    """

    def __init__(self, attribute: str, *, yaml_path: str | None = None) -> None:
        super().__init__(
            f"mixing {attribute} and object_type_params is not allowed",
            yaml_path=yaml_path,
        )
        self.attribute = attribute
