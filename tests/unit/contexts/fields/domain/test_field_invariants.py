import pytest

from fieldschema.contexts.fields.domain.entities import Field, ObjectTypeConfig
from fieldschema.contexts.fields.domain.errors import (
    ConflictingObjectTypeConfig,
    InvalidFieldType,
    InvalidFormatter,
    MissingName,
)

_SCALED_FLOAT = ObjectTypeConfig(
    object_type="scaled_float",
    object_type_mapping_type="float",
    scaling_factor=100,
)


def test_field_accepts_singular_object_type_config() -> None:
    """
    Verify singular object-type attributes are accepted on their own.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        No `object_type_params` are provided.
    Raises:
        AssertionError: If construction fails or values change.
    Side Effects:
        None.
    """
    field = Field(
        name="load",
        object_type="scaled_float",
        object_type_mapping_type="float",
        scaling_factor=10,
    )

    assert field.object_type == "scaled_float"
    assert field.object_type_mapping_type == "float"
    assert field.scaling_factor == 10
    assert field.object_type_params == ()


def test_field_accepts_object_type_params_only() -> None:
    """
    Verify a single `object_type_params` entry round-trips unchanged.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Singular object-type attributes are unset.
    Raises:
        AssertionError: If entry values differ.
    Side Effects:
        None.
    """
    field = Field(name="memory", object_type_params=[_SCALED_FLOAT])  # type: ignore[arg-type]

    assert field.object_type_params == (_SCALED_FLOAT,)
    assert field.object_type_params[0].object_type == "scaled_float"
    assert field.object_type_params[0].object_type_mapping_type == "float"
    assert field.object_type_params[0].scaling_factor == 100


@pytest.mark.parametrize(
    ("singular", "attribute"),
    (
        ({"object_type": "scaled_float"}, "object_type"),
        ({"object_type_mapping_type": "float"}, "object_type_mapping_type"),
        ({"scaling_factor": 100}, "scaling_factor"),
    ),
)
def test_field_rejects_mixing_singular_and_params(singular: dict, attribute: str) -> None:
    """
    Verify every singular attribute conflicts with `object_type_params`.

    Args:
        singular: Singular attribute kwargs.
        attribute: Expected conflicting attribute name.
    Returns:
        None.
    Assumptions:
        The conflicting attribute is reported on the error.
    Raises:
        AssertionError: If ConflictingObjectTypeConfig is not raised.
    Side Effects:
        None.
    """
    with pytest.raises(ConflictingObjectTypeConfig) as error_info:
        Field(name="memory", object_type_params=(_SCALED_FLOAT,), **singular)

    assert error_info.value.attribute == attribute
    assert f"mixing {attribute} and object_type_params" in str(error_info.value)


@pytest.mark.parametrize("name", ("", "   "))
def test_field_requires_non_empty_name(name: str) -> None:
    with pytest.raises(MissingName):
        Field(name=name)


def test_field_strips_name_and_freezes_children() -> None:
    """
    Verify name normalization and tuple ownership of children.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Lists passed by callers are copied into tuples.
    Raises:
        AssertionError: If normalization does not happen.
    Side Effects:
        None.
    """
    children = [Field(name="find")]
    field = Field(name=" test ", fields=children)  # type: ignore[arg-type]
    children.append(Field(name="other"))

    assert field.name == "test"
    assert field.fields == (Field(name="find"),)
    assert not field.is_leaf
    assert field.fields[0].is_leaf


def test_field_rejects_unknown_type() -> None:
    with pytest.raises(InvalidFieldType, match="bogus"):
        Field(name="x", type="bogus")


def test_field_type_is_case_insensitive() -> None:
    assert Field(name="x", type="Keyword", format="url").type == "Keyword"


def test_field_rejects_formatter_not_allowed_for_type() -> None:
    """
    Verify formatter validation follows the type catalogue.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        `bytes` is a numeric formatter; unset type behaves like keyword.
    Raises:
        AssertionError: If invalid formatters are accepted.
    Side Effects:
        None.
    """
    with pytest.raises(InvalidFormatter):
        Field(name="x", type="keyword", format="bytes")
    with pytest.raises(InvalidFormatter):
        Field(name="x", format="bytes")
    with pytest.raises(InvalidFormatter):
        Field(name="x", type="boolean", format="string")

    assert Field(name="x", type="long", format="bytes").format == "bytes"
    assert Field(name="x", type="date", format="date").format == "date"


def test_field_alias_requires_path() -> None:
    with pytest.raises(InvalidFieldType, match="path"):
        Field(name="host", type="alias")

    assert Field(name="host", type="alias", path="agent.hostname").path == "agent.hostname"


def test_field_rejects_non_positive_ignore_above() -> None:
    with pytest.raises(InvalidFieldType, match="ignore_above"):
        Field(name="tags", type="keyword", ignore_above=0)
