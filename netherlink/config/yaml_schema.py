"""Strict Pydantic schemas for planner YAML."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EntityYaml(BaseModel):
    """Entity used for link queries: a named preset or explicit dimensions."""

    model_config = ConfigDict(extra="forbid")

    preset: Optional[Literal["player", "ender_pearl"]] = None
    width: Optional[float] = Field(None, ge=0)
    height: Optional[float] = Field(None, ge=0)
    is_projectile: Optional[bool] = None

    @model_validator(mode="after")
    def _validate_preset_or_explicit(self) -> "EntityYaml":
        explicit = [
            name for name in ("width", "height", "is_projectile")
            if getattr(self, name) is not None
        ]
        if self.preset is not None:
            if explicit:
                raise ValueError(
                    f"entity.preset cannot be combined with {', '.join(explicit)}"
                )
            return self
        if self.width is None or self.height is None:
            raise ValueError("entity needs either 'preset' or both 'width' and 'height'")
        return self


class PlannerYamlSchema(BaseModel):
    """Root planner YAML schema."""

    model_config = ConfigDict(extra="forbid")

    entity: EntityYaml = Field(default_factory=lambda: EntityYaml(preset="player"))
    nether_scale: float = Field(8.0, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
