from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ObjectTypeConfig:
    """
    One `object_type_params` entry: object type, its mapping type and scaling factor.

    All three attributes are required together. Entries are not validated
    against each other; the owning field decides whether they may be present
    at all.

    Related: .field
    """

    object_type: str
    object_type_mapping_type: str
    scaling_factor: int
