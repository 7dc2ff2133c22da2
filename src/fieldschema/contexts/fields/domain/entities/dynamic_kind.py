from __future__ import annotations

from enum import Enum


class DynamicKind(str, Enum):
    """
    Discriminant of the `dynamic` field attribute payload.

    Related: .dynamic_value
    """

    BOOLEAN = "boolean"
    STRING = "string"
