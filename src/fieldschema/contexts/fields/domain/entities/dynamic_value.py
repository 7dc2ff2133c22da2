from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidDynamicValue
from .dynamic_kind import DynamicKind

_STRICT = "strict"
_BOOLEAN_LITERALS = {"true": True, "false": False}


@dataclass(frozen=True, slots=True)
class DynamicValue:
    """
    Value of the `dynamic` field attribute: a boolean or the `strict` literal.

    Exactly one payload is populated, selected by `kind`.

    Related: .dynamic_kind, .field
    """

    kind: DynamicKind
    bool_value: bool | None = None
    string_value: str | None = None

    def __post_init__(self) -> None:
        """
        Validate payload/discriminant consistency.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            `kind` may be passed as its raw string value.
        Raises:
            ValueError: If the payload does not match `kind`.
            InvalidDynamicValue: If the string payload is not `strict`.
        Side Effects:
            Normalizes `kind` to `DynamicKind`.
        """
        kind = DynamicKind(self.kind)
        object.__setattr__(self, "kind", kind)

        if kind is DynamicKind.BOOLEAN:
            if not isinstance(self.bool_value, bool) or self.string_value is not None:
                raise ValueError("boolean DynamicValue requires only bool_value")
            return

        if self.bool_value is not None:
            raise ValueError("string DynamicValue must not define bool_value")
        if self.string_value != _STRICT:
            raise InvalidDynamicValue(self.string_value)

    @classmethod
    def boolean(cls, value: bool) -> DynamicValue:
        return cls(kind=DynamicKind.BOOLEAN, bool_value=value)

    @classmethod
    def strict(cls) -> DynamicValue:
        return cls(kind=DynamicKind.STRING, string_value=_STRICT)

    @classmethod
    def parse(cls, raw: object) -> DynamicValue:
        """
        Decode a raw `dynamic` scalar coming from a parsed config document.

        Args:
            raw: Native bool or string literal.
        Returns:
            DynamicValue: Decoded value; string booleans become boolean kind.
        Assumptions:
            Only `true`/`false` are matched case-insensitively, `strict` is exact.
        Raises:
            InvalidDynamicValue: If `raw` is any other literal or type.
        Side Effects:
            None.
        """
        if isinstance(raw, bool):
            return cls.boolean(raw)
        if not isinstance(raw, str):
            raise InvalidDynamicValue(raw)

        lowered = raw.lower()
        if lowered in _BOOLEAN_LITERALS:
            return cls.boolean(_BOOLEAN_LITERALS[lowered])
        if raw == _STRICT:
            return cls.strict()
        raise InvalidDynamicValue(raw)

    @property
    def value(self) -> bool | str:
        """Active payload selected by `kind`."""
        if self.kind is DynamicKind.BOOLEAN:
            return bool(self.bool_value)
        return str(self.string_value)

    def __str__(self) -> str:
        if self.kind is DynamicKind.BOOLEAN:
            return "true" if self.bool_value else "false"
        return str(self.string_value)
