"""
Filesystem YAML loader for field definitions (`fields.yml`).

The document is a list of groups; each group carries a `key`, an optional
`title`/`description` and the `fields` that make up the tree. Group entries are
not fields themselves: the loaded tree is the concatenation of their `fields`
in document order.

Related: fieldschema.contexts.fields.adapters.outbound.config.fields_node_decoder,
  fieldschema.platform.config.fields_config
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

import yaml

from fieldschema.contexts.fields.domain.entities import Field, FieldTree
from fieldschema.contexts.fields.domain.errors import FieldValidationError
from fieldschema.platform.config import load_fields_config
from fieldschema.platform.errors import FieldSchemaError

from .fields_node_decoder import decode_field_tree

log = logging.getLogger(__name__)

FIELDS_CONFIG_INVALID = "fields_config_invalid"


def load_fields_yaml(path: str | Path) -> FieldTree:
    """
    Load field definitions from a YAML file.

    Args:
        path: Path to `fields.yml`.
    Returns:
        FieldTree: Validated tree built from all groups.
    Assumptions:
        YAML top-level value is a list of group mappings; an empty file is an
        empty tree.
    Raises:
        FileNotFoundError: If config path is not an existing regular file.
        FieldSchemaError: If the file is not UTF-8, YAML is malformed or any
            field is invalid.
    Side Effects:
        Reads one UTF-8 file from disk.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise FileNotFoundError(f"fields config not found: {config_path}")

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, yaml.YAMLError) as error:
        raise FieldSchemaError(
            code=FIELDS_CONFIG_INVALID,
            message=f"fields config is not valid UTF-8 YAML: {config_path}",
            details={"path": str(config_path), "error": str(error)},
        ) from error

    try:
        tree = parse_fields_document(raw)
    except FieldValidationError as error:
        raise FieldSchemaError(
            code=FIELDS_CONFIG_INVALID,
            message=str(error),
            details={
                "path": str(config_path),
                "yaml_path": error.yaml_path,
                "error": type(error).__name__,
            },
        ) from error

    log.info(
        "loaded fields config %s: %d top-level fields, %d keys",
        config_path,
        len(tree),
        sum(1 for _ in tree.get_keys()),
    )
    return tree


def load_configured_fields(*, environ: Mapping[str, str]) -> FieldTree:
    """
    Load field definitions from the path resolved by runtime config.

    Args:
        environ: Environment mapping used to resolve the fields path.
    Returns:
        FieldTree: Validated tree.
    Assumptions:
        See `fieldschema.platform.config.fields_config` for path resolution.
    Raises:
        ValueError: If environment values are invalid.
        FileNotFoundError: If resolved path does not exist.
        FieldSchemaError: If the document is invalid.
    Side Effects:
        Reads one YAML file from disk.
    """
    config = load_fields_config(environ=environ)
    return load_fields_yaml(config.fields_path)


def parse_fields_document(raw: Any) -> FieldTree:
    """
    Build a tree from an already parsed `fields.yml` document.

    Args:
        raw: Parsed YAML value; None means an empty document.
    Returns:
        FieldTree: Concatenated fields of all groups.
    Assumptions:
        Duplicate keys across groups are kept as-is.
    Raises:
        FieldValidationError: If the document shape or any field is invalid.
    Side Effects:
        None.
    """
    if raw is None:
        return FieldTree()
    if not isinstance(raw, list):
        raise FieldValidationError(
            f"fields config must be a list at top-level, got {type(raw).__name__}",
            yaml_path="",
        )

    fields: list[Field] = []
    for index, group in enumerate(raw):
        group_path = f"[{index}]"
        if not isinstance(group, dict):
            raise FieldValidationError(
                f"expected mapping at {group_path}, got {type(group).__name__}",
                yaml_path=group_path,
            )
        group_key = group.get("key", group_path)
        group_tree = decode_field_tree(group.get("fields"), yaml_path=f"{group_path}.fields")
        if len(group_tree) == 0:
            log.warning("fields group %r declares no fields", group_key)
        fields.extend(group_tree)

    return FieldTree(fields=tuple(fields))
