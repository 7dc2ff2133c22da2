from .fieldschema_error import FieldSchemaError

__all__ = [
    "FieldSchemaError",
]
