"""Tests for the planner YAML loader."""

from __future__ import annotations

import logging
import os
import tempfile

import pytest
from pydantic import ValidationError

from netherlink.config import (
    ConfigLoaderError,
    PlannerConfig,
    load_config_from_yaml,
    load_config_from_yaml_safe,
)
from netherlink.portal import ENDER_PEARL, PLAYER, Entity


VALID_PLANNER_YAML = """\
entity:
  preset: ender_pearl
nether_scale: 8
log_level: DEBUG
"""


def _write_temp_yaml(content: str) -> str:
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    f.write(content)
    f.close()
    return f.name


class TestLoadConfigFromYaml:

    def test_load_valid_config(self):
        path = _write_temp_yaml(VALID_PLANNER_YAML)
        try:
            config = load_config_from_yaml(path)
            assert isinstance(config, PlannerConfig)
            assert config.entity == ENDER_PEARL
            assert config.nether_scale == 8.0
            assert config.log_level == "DEBUG"
        finally:
            os.unlink(path)

    def test_empty_file_gives_defaults(self):
        path = _write_temp_yaml("")
        try:
            config = load_config_from_yaml(path)
            assert config == PlannerConfig()
            assert config.entity == PLAYER
        finally:
            os.unlink(path)

    def test_explicit_entity(self):
        path = _write_temp_yaml("""\
entity:
  width: 0.98
  height: 0.7
""")
        try:
            config = load_config_from_yaml(path)
            assert config.entity == Entity(width=0.98, height=0.7)
        finally:
            os.unlink(path)

    def test_preset_and_explicit_rejected(self):
        path = _write_temp_yaml("""\
entity:
  preset: player
  width: 1.0
""")
        try:
            with pytest.raises(ValidationError, match="cannot be combined"):
                load_config_from_yaml(path)
        finally:
            os.unlink(path)

    def test_explicit_entity_needs_height(self):
        path = _write_temp_yaml("""\
entity:
  width: 1.0
""")
        try:
            with pytest.raises(ValidationError):
                load_config_from_yaml(path)
        finally:
            os.unlink(path)

    def test_unknown_preset_rejected(self):
        path = _write_temp_yaml("entity:\n  preset: ghast\n")
        try:
            with pytest.raises(ValidationError):
                load_config_from_yaml(path)
        finally:
            os.unlink(path)

    def test_non_positive_scale_rejected(self):
        path = _write_temp_yaml("nether_scale: 0\n")
        try:
            with pytest.raises(ValidationError):
                load_config_from_yaml(path)
        finally:
            os.unlink(path)

    def test_unknown_root_field_rejected(self):
        path = _write_temp_yaml("seed: 42\n")
        try:
            with pytest.raises(ValidationError):
                load_config_from_yaml(path)
        finally:
            os.unlink(path)

    def test_missing_file_raises_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_config_from_yaml("/nonexistent/planner.yaml")


class TestLoadConfigFromYamlSafe:

    def test_extra_field_has_guidance(self):
        path = _write_temp_yaml("seed: 42\n")
        try:
            with pytest.raises(ConfigLoaderError, match="How to fix") as exc_info:
                load_config_from_yaml_safe(path)
            assert "`seed`" in str(exc_info.value)
            assert "Remove unknown YAML fields" in str(exc_info.value)
        finally:
            os.unlink(path)

    def test_entity_error_has_entity_guidance(self):
        path = _write_temp_yaml("entity:\n  preset: player\n  height: 2\n")
        try:
            with pytest.raises(ConfigLoaderError, match="preset: player"):
                load_config_from_yaml_safe(path)
        finally:
            os.unlink(path)

    def test_root_value_error_has_generic_guidance(self):
        path = _write_temp_yaml("nether_scale: 0\n")
        try:
            with pytest.raises(ConfigLoaderError, match="`nether_scale`") as exc_info:
                load_config_from_yaml_safe(path)
            message = str(exc_info.value)
            assert "Review the YAML values against the planner schema." in message
            assert "preset" not in message
        finally:
            os.unlink(path)

    def test_log_level_error_is_not_entity_guidance(self):
        path = _write_temp_yaml("log_level: entity\n")
        try:
            with pytest.raises(ConfigLoaderError) as exc_info:
                load_config_from_yaml_safe(path)
            message = str(exc_info.value)
            assert "`log_level`" in message
            assert "under 'entity'" not in message
        finally:
            os.unlink(path)

    def test_parse_error(self):
        path = _write_temp_yaml("{{invalid yaml: [")
        try:
            with pytest.raises(ConfigLoaderError, match="parse error"):
                load_config_from_yaml_safe(path)
        finally:
            os.unlink(path)

    def test_missing_file(self):
        with pytest.raises(ConfigLoaderError, match="not found"):
            load_config_from_yaml_safe("/nonexistent/planner.yaml")


class TestPlannerConfig:

    def test_rejects_non_positive_scale(self):
        with pytest.raises(ValueError, match="nether_scale"):
            PlannerConfig(nether_scale=0)

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValueError, match="log level"):
            PlannerConfig(log_level="LOUD")

    def test_build_world_uses_scale(self):
        world = PlannerConfig(nether_scale=3.0).build_world()
        assert world.nether_scale == 3.0
        assert len(world.portals) == 0

    def test_configure_logging_sets_package_level(self):
        package_logger = logging.getLogger("netherlink")
        previous = package_logger.level
        try:
            PlannerConfig(log_level="DEBUG").configure_logging()
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)
