from __future__ import annotations


class FieldValidationError(ValueError):
    """
    Raised when a field definition violates domain invariants.

    `yaml_path` is filled by the node decoder with the dotted location of the
    node that failed, so boundary code can report it without re-walking the
    document.

    Related: ..entities.field, ...adapters.outbound.config.fields_node_decoder
    """

    def __init__(self, message: str, *, yaml_path: str | None = None) -> None:
        super().__init__(message)
        self.yaml_path = yaml_path
