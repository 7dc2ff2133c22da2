from .fields_config import FieldsConfig, load_fields_config, resolve_fields_path

__all__ = [
    "FieldsConfig",
    "load_fields_config",
    "resolve_fields_path",
]
