"""Planner configuration loaded from YAML."""

from .errors import ConfigLoaderError
from .loader import load_config_from_yaml, load_config_from_yaml_safe
from .planner_config import PlannerConfig
from .yaml_schema import EntityYaml, PlannerYamlSchema

__all__ = [
    "ConfigLoaderError",
    "EntityYaml",
    "PlannerConfig",
    "PlannerYamlSchema",
    "load_config_from_yaml",
    "load_config_from_yaml_safe",
]
