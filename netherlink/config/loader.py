"""Load planner YAML into a PlannerConfig."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from netherlink.portal import ENTITY_PRESETS, Entity

from .errors import ConfigLoaderError
from .planner_config import PlannerConfig
from .yaml_schema import EntityYaml, PlannerYamlSchema


def _format_loader_exception(path: Path, error: Exception) -> str:
    """Return a concise, actionable error message."""
    detail = str(error)

    if isinstance(error, ValidationError):
        first = error.errors()[0] if error.errors() else {}
        detail = first.get("msg", detail)
        location = ".".join(str(part) for part in first.get("loc", []))
        error_type = first.get("type", "")

        if "missing" in error_type or "Field required" in detail:
            guidance = "Add the missing required YAML field shown in the error location."
        elif "extra_forbidden" in error_type or "Extra inputs are not permitted" in detail:
            guidance = (
                "Remove unknown YAML fields; only 'entity', 'nether_scale', "
                "and 'log_level' are allowed at root."
            )
        elif location.split(".")[0] == "entity":
            guidance = (
                "Use either `preset: player|ender_pearl` or explicit "
                "`width`/`height`/`is_projectile` under 'entity', not both."
            )
        else:
            guidance = "Review the YAML values against the planner schema."

        prefix = f" at `{location}`" if location else ""
        return f"Planner YAML error{prefix}: {detail}\nHow to fix: {guidance}"

    if isinstance(error, yaml.YAMLError):
        return (
            f"Planner YAML parse error in `{path}`.\n"
            "How to fix: Check YAML indentation, colons, and structure."
        )

    if isinstance(error, FileNotFoundError):
        return (
            f"Planner config file not found: `{path}`.\n"
            "How to fix: Verify the file path exists."
        )

    return (
        f"Planner loader error in `{path}`: {detail}\n"
        "How to fix: Verify the file path and planner YAML contents."
    )


def _entity_from_schema(schema: EntityYaml) -> Entity:
    if schema.preset is not None:
        return ENTITY_PRESETS[schema.preset]
    return Entity(
        width=schema.width,
        height=schema.height,
        is_projectile=bool(schema.is_projectile),
    )


def load_config_from_yaml(path: str | Path) -> PlannerConfig:
    """Load a planner YAML file and return a PlannerConfig.

    An empty file yields the default configuration.

    Raises:
        FileNotFoundError: If the YAML file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValidationError: If the YAML does not match the schema.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raw = {}

    schema = PlannerYamlSchema.model_validate(raw)
    return PlannerConfig(
        entity=_entity_from_schema(schema.entity),
        nether_scale=schema.nether_scale,
        log_level=schema.log_level,
    )


def load_config_from_yaml_safe(path: str | Path) -> PlannerConfig:
    """Load planner YAML with user-friendly exception formatting.

    Raises:
        ConfigLoaderError: Concise, actionable message intended for CLI output.
    """
    resolved = Path(path)
    try:
        return load_config_from_yaml(resolved)
    except Exception as exc:
        raise ConfigLoaderError(_format_loader_exception(resolved, exc)) from exc
