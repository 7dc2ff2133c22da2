import pytest

from fieldschema.contexts.fields.domain.entities import DynamicKind, DynamicValue
from fieldschema.contexts.fields.domain.errors import FieldValidationError, InvalidDynamicValue


def test_dynamic_value_parses_native_boolean() -> None:
    """
    Verify native booleans decode to boolean kind.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        YAML `dynamic: true` arrives as Python `True`.
    Raises:
        AssertionError: If kind or payload mismatch.
    Side Effects:
        None.
    """
    value = DynamicValue.parse(True)

    assert value.kind is DynamicKind.BOOLEAN
    assert value.bool_value is True
    assert value.string_value is None
    assert value.value is True


def test_dynamic_value_normalizes_string_booleans_case_insensitively() -> None:
    """
    Verify `"true"`/`"FALSE"` strings decode to booleans, not strings.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Only boolean literals are matched case-insensitively.
    Raises:
        AssertionError: If string booleans are preserved as strings.
    Side Effects:
        None.
    """
    assert DynamicValue.parse("true") == DynamicValue.boolean(True)
    assert DynamicValue.parse("FALSE") == DynamicValue.boolean(False)
    assert DynamicValue.parse("True").kind is DynamicKind.BOOLEAN


def test_dynamic_value_parses_strict_literal() -> None:
    value = DynamicValue.parse("strict")

    assert value.kind is DynamicKind.STRING
    assert value.string_value == "strict"
    assert value.bool_value is None
    assert value == DynamicValue.strict()
    assert str(value) == "strict"


@pytest.mark.parametrize("raw", ("blue", "Strict", "", 1, 0.5, None, ["strict"], {"a": 1}))
def test_dynamic_value_rejects_unknown_literals(raw: object) -> None:
    """
    Verify unsupported literals and types fail with InvalidDynamicValue.

    Args:
        raw: Unsupported raw value.
    Returns:
        None.
    Assumptions:
        `strict` is matched exactly; non-string non-bool types are rejected.
    Raises:
        AssertionError: If decoding unexpectedly succeeds.
    Side Effects:
        None.
    """
    with pytest.raises(InvalidDynamicValue) as error_info:
        DynamicValue.parse(raw)

    assert error_info.value.literal == raw
    assert isinstance(error_info.value, FieldValidationError)
    assert isinstance(error_info.value, ValueError)


def test_dynamic_value_error_cites_offending_literal() -> None:
    with pytest.raises(InvalidDynamicValue, match="'blue' is invalid dynamic setting"):
        DynamicValue.parse("blue")


def test_dynamic_value_rejects_mismatched_payload() -> None:
    """
    Verify direct construction enforces one payload per kind.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Boolean kind carries only `bool_value`; string kind only `strict`.
    Raises:
        AssertionError: If inconsistent values are accepted.
    Side Effects:
        None.
    """
    with pytest.raises(ValueError):
        DynamicValue(kind=DynamicKind.BOOLEAN, bool_value=True, string_value="strict")
    with pytest.raises(ValueError):
        DynamicValue(kind=DynamicKind.BOOLEAN)
    with pytest.raises(ValueError):
        DynamicValue(kind=DynamicKind.STRING, bool_value=False, string_value="strict")
    with pytest.raises(InvalidDynamicValue):
        DynamicValue(kind=DynamicKind.STRING, string_value="loose")


def test_dynamic_value_accepts_raw_kind_string() -> None:
    value = DynamicValue(kind="boolean", bool_value=False)  # type: ignore[arg-type]

    assert value.kind is DynamicKind.BOOLEAN
    assert str(value) == "false"
