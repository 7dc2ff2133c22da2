from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class FieldSchemaError(Exception):
    """
    Boundary error raised when a fields document cannot be loaded.

    Domain errors stay typed inside the model; loaders translate them into this
    contract so callers get one stable `code` plus diagnostic `details`
    (config path, yaml path of the failing node, domain error name).

    Related:
      - src/fieldschema/contexts/fields/adapters/outbound/config/yaml_fields_loader.py
      - src/fieldschema/contexts/fields/domain/errors
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        """
        Validate error fields and freeze details.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            `code` is a stable machine-readable token.
        Raises:
            ValueError: If `code` or `message` are blank.
        Side Effects:
            Replaces `details` with a read-only copy; missing details become empty.
        """
        if not self.code.strip():
            raise ValueError("FieldSchemaError.code must be non-empty")
        if not self.message.strip():
            raise ValueError("FieldSchemaError.message must be non-empty")
        object.__setattr__(self, "details", MappingProxyType(dict(self.details or {})))

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"
