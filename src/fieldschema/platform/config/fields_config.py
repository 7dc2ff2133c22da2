"""
Runtime config for locating the fields definition document.

Related: fieldschema.contexts.fields.adapters.outbound.config.yaml_fields_loader
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

_ENV_NAME_KEY = "FIELDSCHEMA_ENV"
_FIELDS_PATH_KEY = "FIELDSCHEMA_FIELDS_PATH"
_ALLOWED_ENVS = ("dev", "prod", "test")
_DEFAULT_ENV = "dev"
_FIELDS_FILENAME = "fields.yml"


@dataclass(frozen=True, slots=True)
class FieldsConfig:
    """
    Immutable runtime config for the fields loader.

    Related: fieldschema.contexts.fields.adapters.outbound.config.yaml_fields_loader
    """

    env_name: str
    fields_path: Path

    def __post_init__(self) -> None:
        """
        Validate config invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            `env_name` was resolved against the allowed environments.
        Raises:
            ValueError: If env name is unsupported or path is blank.
        Side Effects:
            Normalizes `fields_path` to `Path`.
        """
        if self.env_name not in _ALLOWED_ENVS:
            raise ValueError(f"env_name must be one of {_ALLOWED_ENVS}, got {self.env_name!r}")
        if not str(self.fields_path).strip():
            raise ValueError("fields_path must be a non-empty path")
        object.__setattr__(self, "fields_path", Path(self.fields_path))


def load_fields_config(*, environ: Mapping[str, str]) -> FieldsConfig:
    """
    Build fields loader config from environment values.

    Args:
        environ: Environment mapping, usually `os.environ`.
    Returns:
        FieldsConfig: Validated settings.
    Assumptions:
        `FIELDSCHEMA_FIELDS_PATH` has priority over the env-derived path.
    Raises:
        ValueError: If environment values are invalid.
    Side Effects:
        None.
    """
    return FieldsConfig(
        env_name=_resolve_env_name(environ=environ),
        fields_path=resolve_fields_path(environ=environ),
    )


def resolve_fields_path(*, environ: Mapping[str, str]) -> Path:
    """
    Resolve fields YAML path using explicit override or `FIELDSCHEMA_ENV`.

    Args:
        environ: Environment mapping.
    Returns:
        Path: Fields YAML path.
    Assumptions:
        Without override the path is `configs/<env>/fields.yml`.
    Raises:
        ValueError: If env value is invalid.
    Side Effects:
        None.
    """
    override = environ.get(_FIELDS_PATH_KEY, "").strip()
    if override:
        return Path(override)

    env_name = _resolve_env_name(environ=environ)
    return Path("configs") / env_name / _FIELDS_FILENAME


def _resolve_env_name(*, environ: Mapping[str, str]) -> str:
    raw_env = environ.get(_ENV_NAME_KEY, _DEFAULT_ENV).strip().lower()
    if raw_env not in _ALLOWED_ENVS:
        raise ValueError(f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env!r}")
    return raw_env
