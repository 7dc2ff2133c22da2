from .entities import (
    DynamicKind,
    DynamicValue,
    Field,
    FieldTree,
    ObjectTypeConfig,
    allowed_formatters,
    concat_fields,
    is_known_field_type,
)
from .errors import (
    ConflictingObjectTypeConfig,
    DuplicateFieldKey,
    FieldValidationError,
    InvalidDynamicValue,
    InvalidFieldType,
    InvalidFormatter,
    MissingName,
)

__all__ = [
    "allowed_formatters",
    "concat_fields",
    "ConflictingObjectTypeConfig",
    "DuplicateFieldKey",
    "DynamicKind",
    "DynamicValue",
    "Field",
    "FieldTree",
    "FieldValidationError",
    "InvalidDynamicValue",
    "InvalidFieldType",
    "InvalidFormatter",
    "is_known_field_type",
    "MissingName",
    "ObjectTypeConfig",
]
