from .dynamic_kind import DynamicKind
from .dynamic_value import DynamicValue
from .field import Field
from .field_tree import FieldTree, concat_fields
from .field_type import allowed_formatters, is_known_field_type
from .object_type_config import ObjectTypeConfig

__all__ = [
    "DynamicKind",
    "DynamicValue",
    "Field",
    "FieldTree",
    "ObjectTypeConfig",
    "allowed_formatters",
    "concat_fields",
    "is_known_field_type",
]
