"""
Catalogue of field types and the display formatters each one accepts.

Related: .field, ..errors.invalid_field_type, ..errors.invalid_formatter
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DEFAULT_FIELD_TYPE = "keyword"
ALIAS_TYPE = "alias"

_STRING_FORMATTERS = ("string", "url")
_NUMBER_FORMATTERS = ("string", "url", "bytes", "duration", "number", "percent", "color")
_DATE_FORMATTERS = ("string", "url", "date")

_TYPE_GROUPS: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("text", "keyword", "wildcard", "constant_keyword", "match_only_text"), _STRING_FORMATTERS),
    (
        (
            "long",
            "integer",
            "short",
            "byte",
            "double",
            "float",
            "half_float",
            "scaled_float",
            "histogram",
        ),
        _NUMBER_FORMATTERS,
    ),
    (("date", "date_nanos"), _DATE_FORMATTERS),
    (("geo_point",), ("geo_point",)),
    (("date_range",), ("date_range",)),
    (
        (
            "boolean",
            "binary",
            "ip",
            "alias",
            "array",
            "ip_range",
            "object",
            "group",
            "nested",
            "flattened",
        ),
        (),
    ),
)

FORMATTERS_BY_TYPE: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {type_name: formatters for type_names, formatters in _TYPE_GROUPS for type_name in type_names}
)


def normalize_field_type(type_name: str | None) -> str:
    """Lower-cased, stripped type name; empty string when unset."""
    if type_name is None:
        return ""
    return type_name.strip().lower()


def is_known_field_type(type_name: str | None) -> bool:
    """
    Check whether a type name is supported.

    Args:
        type_name: Raw type name, possibly unset.
    Returns:
        bool: True for catalogued types and for an unset type.
    Assumptions:
        Comparison is case-insensitive.
    Raises:
        None.
    Side Effects:
        None.
    """
    normalized = normalize_field_type(type_name)
    return normalized == "" or normalized in FORMATTERS_BY_TYPE


def allowed_formatters(type_name: str | None) -> tuple[str, ...]:
    """
    Return formatters accepted by a field type.

    Args:
        type_name: Raw type name, possibly unset.
    Returns:
        tuple[str, ...]: Allowed formatters; empty for unknown types.
    Assumptions:
        Unset type is mapped as `keyword` and shares its formatters.
    Raises:
        None.
    Side Effects:
        None.
    """
    normalized = normalize_field_type(type_name) or DEFAULT_FIELD_TYPE
    return FORMATTERS_BY_TYPE.get(normalized, ())
