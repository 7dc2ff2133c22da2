from __future__ import annotations

from dataclasses import dataclass

from ..errors import (
    ConflictingObjectTypeConfig,
    InvalidFieldType,
    InvalidFormatter,
    MissingName,
)
from .dynamic_value import DynamicValue
from .field_type import ALIAS_TYPE, allowed_formatters, is_known_field_type, normalize_field_type
from .object_type_config import ObjectTypeConfig


@dataclass(frozen=True, slots=True)
class Field:
    """
    Domain declaration of one schema node and its nested sub-fields.

    A field owns its `fields` (children), `multi_fields` and
    `object_type_params` as immutable tuples, so a tree of fields never shares
    nodes between parents.

    Related: .field_tree, .dynamic_value, .object_type_config, .field_type
    """

    name: str
    type: str | None = None
    description: str | None = None
    format: str | None = None
    fields: tuple[Field, ...] = ()
    multi_fields: tuple[Field, ...] = ()
    dynamic: DynamicValue | None = None
    enabled: bool | None = None
    index: bool | None = None
    doc_values: bool | None = None
    copy_to: str | None = None
    path: str | None = None
    ignore_above: int | None = None
    required: bool = False
    object_type: str | None = None
    object_type_mapping_type: str | None = None
    scaling_factor: int | None = None
    object_type_params: tuple[ObjectTypeConfig, ...] = ()

    def __post_init__(self) -> None:
        """
        Validate field definition invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Singular object-type attributes and `object_type_params` are mutually
            exclusive as a group.
        Raises:
            MissingName: If name is blank.
            InvalidFieldType: If type is unknown or type-specific rules are violated.
            InvalidFormatter: If format is not allowed for the type.
            ConflictingObjectTypeConfig: If both object-type shapes are present.
        Side Effects:
            Normalizes `name` by stripping spaces and sequences to tuples.
        """
        normalized_name = self.name.strip() if isinstance(self.name, str) else ""
        if not normalized_name:
            raise MissingName("Field requires a non-empty name")
        object.__setattr__(self, "name", normalized_name)

        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "multi_fields", tuple(self.multi_fields))
        object.__setattr__(self, "object_type_params", tuple(self.object_type_params))

        self._validate_type()
        self._validate_object_type_params()

    @property
    def is_leaf(self) -> bool:
        """True when the field has no nested sub-fields."""
        return len(self.fields) == 0

    def _validate_type(self) -> None:
        """
        Validate type, formatter and type-specific attributes.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Type names are matched case-insensitively; unset type means keyword.
        Raises:
            InvalidFieldType: If type is unknown, alias lacks path, or
                ignore_above is not positive.
            InvalidFormatter: If format is not allowed for the type.
        Side Effects:
            None.
        """
        if not is_known_field_type(self.type):
            raise InvalidFieldType(f"unexpected type {self.type!r} for field {self.name!r}")

        if self.format:
            formatters = allowed_formatters(self.type)
            if self.format not in formatters:
                raise InvalidFormatter(
                    f"field {self.name!r}: unexpected formatter {self.format!r}, "
                    f"expected one of: {list(formatters)}"
                )

        if normalize_field_type(self.type) == ALIAS_TYPE and not (self.path or "").strip():
            raise InvalidFieldType(f"alias field {self.name!r} requires a non-empty path")

        if self.ignore_above is not None and self.ignore_above <= 0:
            raise InvalidFieldType(
                f"field {self.name!r}: ignore_above must be > 0, got {self.ignore_above}"
            )

    def _validate_object_type_params(self) -> None:
        """
        Reject mixing singular object-type attributes with `object_type_params`.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Blank strings count as unset.
        Raises:
            ConflictingObjectTypeConfig: Naming the first conflicting attribute.
        Side Effects:
            None.
        """
        if len(self.object_type_params) == 0:
            return

        if self.object_type:
            raise ConflictingObjectTypeConfig("object_type")
        if self.object_type_mapping_type:
            raise ConflictingObjectTypeConfig("object_type_mapping_type")
        if self.scaling_factor is not None:
            raise ConflictingObjectTypeConfig("scaling_factor")
