"""Validation error types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

ViolationKind = Literal["width", "height", "y_min", "y_max", "swapped_bounds", "depth"]


@dataclass(frozen=True)
class PortalViolation:
    """One legality rule a portal breaks."""

    portal_id: int
    portal_name: str
    dimension: str
    kind: ViolationKind
    value: int
    limit: int

    def describe(self) -> str:
        return (
            f"  {self.dimension} portal '{self.portal_name}' (#{self.portal_id}) "
            f"violates {self.kind}: got {self.value}, limit {self.limit}"
        )


class PortalValidationError(Exception):
    """Raised when portal validation detects illegal portals."""

    def __init__(self, violations: list[PortalViolation]) -> None:
        self.violations: Tuple[PortalViolation, ...] = tuple(violations)
        super().__init__(
            f"Portal validation failed with {len(self.violations)} violation(s):\n"
            + "\n".join(v.describe() for v in self.violations)
        )
