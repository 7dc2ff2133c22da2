from __future__ import annotations

import pytest

from fieldschema.platform.errors import FieldSchemaError


def test_fieldschema_error_freezes_details() -> None:
    """
    Verify details are copied into a read-only mapping.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Callers may keep mutating the mapping they passed in.
    Raises:
        AssertionError: If details follow caller mutations or accept writes.
    Side Effects:
        None.
    """
    details = {"path": "fields.yml", "yaml_path": "[0].fields[0]"}
    error = FieldSchemaError(code="fields_config_invalid", message="bad field", details=details)
    details["path"] = "other.yml"

    assert dict(error.details) == {"path": "fields.yml", "yaml_path": "[0].fields[0]"}
    with pytest.raises(TypeError):
        error.details["path"] = "x"  # type: ignore[index]
    assert str(error) == "fields_config_invalid: bad field"


def test_fieldschema_error_without_details() -> None:
    error = FieldSchemaError(code="x", message="y")

    assert dict(error.details) == {}


def test_fieldschema_error_rejects_blank_fields() -> None:
    with pytest.raises(ValueError):
        FieldSchemaError(code=" ", message="y")
    with pytest.raises(ValueError):
        FieldSchemaError(code="x", message="")
