"""
Outbound adapters for fields bounded context.
"""

from .config import (
    FIELDS_CONFIG_INVALID,
    decode_field,
    decode_field_tree,
    decode_object_type_config,
    load_configured_fields,
    load_fields_yaml,
    parse_fields_document,
)

__all__ = [
    "FIELDS_CONFIG_INVALID",
    "decode_field",
    "decode_field_tree",
    "decode_object_type_config",
    "load_configured_fields",
    "load_fields_yaml",
    "parse_fields_document",
]
