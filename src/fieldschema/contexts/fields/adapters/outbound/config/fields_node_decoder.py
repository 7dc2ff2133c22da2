"""
Decoder from parsed configuration nodes to field domain objects.

Nodes are the plain mappings/lists/scalars produced by `yaml.safe_load` (or any
other decoder yielding the same shapes).

Related: fieldschema.contexts.fields.domain.entities.field,
  fieldschema.contexts.fields.adapters.outbound.config.yaml_fields_loader
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from fieldschema.contexts.fields.domain.entities import (
    DynamicValue,
    Field,
    FieldTree,
    ObjectTypeConfig,
)
from fieldschema.contexts.fields.domain.errors import (
    ConflictingObjectTypeConfig,
    FieldValidationError,
    MissingName,
)

log = logging.getLogger(__name__)

_STR_KEYS = (
    "type",
    "description",
    "format",
    "copy_to",
    "path",
    "object_type",
    "object_type_mapping_type",
)
_BOOL_KEYS = ("enabled", "index", "doc_values")
_INT_KEYS = ("ignore_above", "scaling_factor")
_KNOWN_KEYS = frozenset(
    _STR_KEYS
    + _BOOL_KEYS
    + _INT_KEYS
    + ("name", "fields", "multi_fields", "dynamic", "required", "object_type_params")
)
_SINGULAR_OBJECT_TYPE_KEYS = ("object_type", "object_type_mapping_type", "scaling_factor")


def decode_field_tree(nodes: Any, *, yaml_path: str = "fields") -> FieldTree:
    """
    Decode a list of field nodes into a tree.

    Args:
        nodes: Raw list of field mappings; None means an empty tree.
        yaml_path: Dot-path prefix for error messages.
    Returns:
        FieldTree: Validated tree in document order.
    Assumptions:
        Sibling names may repeat.
    Raises:
        FieldValidationError: If any node is invalid; no partial tree is built.
    Side Effects:
        None.
    """
    return FieldTree(fields=_decode_field_list(nodes, yaml_path=yaml_path))


def decode_field(node: Any, *, yaml_path: str = "field") -> Field:
    """
    Decode one field node, recursively decoding its sub-fields.

    Args:
        node: Raw mapping for one field.
        yaml_path: Dot-path of the node for error messages.
    Returns:
        Field: Fully validated field.
    Assumptions:
        Null values and blank strings are treated as unset; unknown keys are
        ignored.
    Raises:
        FieldValidationError: Or one of its subclasses, with `yaml_path` set to
            the innermost failing node.
    Side Effects:
        None.
    """
    try:
        return _decode_field(node, yaml_path=yaml_path)
    except FieldValidationError as error:
        if error.yaml_path is None:
            error.yaml_path = yaml_path
        raise


def decode_object_type_config(node: Any, *, yaml_path: str) -> ObjectTypeConfig:
    """
    Decode one `object_type_params` entry.

    Args:
        node: Raw mapping for one entry.
        yaml_path: Dot-path of the entry for error messages.
    Returns:
        ObjectTypeConfig: Parsed entry.
    Assumptions:
        `object_type`, `object_type_mapping_type` and `scaling_factor` are
        required together.
    Raises:
        FieldValidationError: If the entry shape is invalid or any attribute is missing.
    Side Effects:
        None.
    """
    payload = _require_mapping(node, yaml_path=yaml_path)
    object_type = _optional_str(payload, key="object_type", yaml_path=yaml_path)
    mapping_type = _optional_str(payload, key="object_type_mapping_type", yaml_path=yaml_path)
    scaling_factor = _optional_int(payload, key="scaling_factor", yaml_path=yaml_path)
    if object_type is None:
        raise FieldValidationError(f"missing required key at {yaml_path}.object_type")
    if mapping_type is None:
        raise FieldValidationError(
            f"missing required key at {yaml_path}.object_type_mapping_type"
        )
    if scaling_factor is None:
        raise FieldValidationError(f"missing required key at {yaml_path}.scaling_factor")
    return ObjectTypeConfig(
        object_type=object_type,
        object_type_mapping_type=mapping_type,
        scaling_factor=scaling_factor,
    )


def _decode_field(node: Any, *, yaml_path: str) -> Field:
    payload = _require_mapping(node, yaml_path=yaml_path)

    name = payload.get("name")
    if name is not None and not isinstance(name, str):
        raise FieldValidationError(
            f"expected string at {yaml_path}.name, got {type(name).__name__}"
        )
    if name is None or not name.strip():
        raise MissingName(f"missing required name at {yaml_path}.name")
    field_path = f"{yaml_path}.{name.strip()}"

    for key in payload:
        if key not in _KNOWN_KEYS:
            log.debug("ignoring unknown key %r at %s", key, field_path)

    params_nodes = _optional_list(payload, key="object_type_params", yaml_path=field_path)
    if params_nodes:
        # Shape conflict wins over per-entry errors.
        for key in _SINGULAR_OBJECT_TYPE_KEYS:
            if _is_set(payload.get(key)):
                raise ConflictingObjectTypeConfig(key)
    object_type_params = tuple(
        decode_object_type_config(entry, yaml_path=f"{field_path}.object_type_params[{index}]")
        for index, entry in enumerate(params_nodes)
    )

    dynamic = None
    if payload.get("dynamic") is not None:
        dynamic = DynamicValue.parse(payload["dynamic"])

    strings = {key: _optional_str(payload, key=key, yaml_path=field_path) for key in _STR_KEYS}
    bools = {key: _optional_bool(payload, key=key, yaml_path=field_path) for key in _BOOL_KEYS}
    ints = {key: _optional_int(payload, key=key, yaml_path=field_path) for key in _INT_KEYS}
    required = _optional_bool(payload, key="required", yaml_path=field_path)

    return Field(
        name=name,
        fields=_decode_field_list(payload.get("fields"), yaml_path=f"{field_path}.fields"),
        multi_fields=_decode_field_list(
            payload.get("multi_fields"),
            yaml_path=f"{field_path}.multi_fields",
        ),
        dynamic=dynamic,
        required=bool(required),
        object_type_params=object_type_params,
        **strings,
        **bools,
        **ints,
    )


def _decode_field_list(nodes: Any, *, yaml_path: str) -> tuple[Field, ...]:
    if nodes is None:
        return ()
    if not isinstance(nodes, list):
        raise FieldValidationError(
            f"expected list at {yaml_path}, got {type(nodes).__name__}",
            yaml_path=yaml_path,
        )
    return tuple(
        decode_field(node, yaml_path=f"{yaml_path}[{index}]") for index, node in enumerate(nodes)
    )


def _is_set(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _require_mapping(node: Any, *, yaml_path: str) -> Mapping[str, Any]:
    if not isinstance(node, dict):
        raise FieldValidationError(f"expected mapping at {yaml_path}, got {type(node).__name__}")
    return node


def _optional_list(payload: Mapping[str, Any], *, key: str, yaml_path: str) -> Sequence[Any]:
    value = payload.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise FieldValidationError(
            f"expected list at {yaml_path}.{key}, got {type(value).__name__}"
        )
    return value


def _optional_str(payload: Mapping[str, Any], *, key: str, yaml_path: str) -> str | None:
    """
    Read optional string key.

    Args:
        payload: Parent mapping.
        key: Child key.
        yaml_path: Dot-path of the parent for errors.
    Returns:
        str | None: Stripped string, or None when absent or blank.
    Assumptions:
        YAML scalars are already decoded to Python values.
    Raises:
        FieldValidationError: If present value is not a string.
    Side Effects:
        None.
    """
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise FieldValidationError(
            f"expected string at {yaml_path}.{key}, got {type(value).__name__}"
        )
    normalized = value.strip()
    return normalized or None


def _optional_int(payload: Mapping[str, Any], *, key: str, yaml_path: str) -> int | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        raise FieldValidationError(f"expected int at {yaml_path}.{key}, got {type(value).__name__}")
    return value


def _optional_bool(payload: Mapping[str, Any], *, key: str, yaml_path: str) -> bool | None:
    value = payload.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise FieldValidationError(
            f"expected bool at {yaml_path}.{key}, got {type(value).__name__}"
        )
    return value
