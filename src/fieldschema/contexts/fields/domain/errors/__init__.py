from .conflicting_object_type_config import ConflictingObjectTypeConfig
from .duplicate_field_key import DuplicateFieldKey
from .field_validation_error import FieldValidationError
from .invalid_dynamic_value import InvalidDynamicValue
from .invalid_field_type import InvalidFieldType
from .invalid_formatter import InvalidFormatter
from .missing_name import MissingName

__all__ = [
    "ConflictingObjectTypeConfig",
    "DuplicateFieldKey",
    "FieldValidationError",
    "InvalidDynamicValue",
    "InvalidFieldType",
    "InvalidFormatter",
    "MissingName",
]
