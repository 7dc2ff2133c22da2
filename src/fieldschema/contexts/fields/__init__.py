from .adapters import (
    decode_field,
    decode_field_tree,
    load_configured_fields,
    load_fields_yaml,
)
from .domain import (
    ConflictingObjectTypeConfig,
    DuplicateFieldKey,
    DynamicKind,
    DynamicValue,
    Field,
    FieldTree,
    FieldValidationError,
    InvalidDynamicValue,
    InvalidFieldType,
    InvalidFormatter,
    MissingName,
    ObjectTypeConfig,
    concat_fields,
)

__all__ = [
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
    "MissingName",
    "ObjectTypeConfig",
    "concat_fields",
    "decode_field",
    "decode_field_tree",
    "load_configured_fields",
    "load_fields_yaml",
]
