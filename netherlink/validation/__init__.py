"""Portal legality validation."""

from .errors import PortalValidationError, PortalViolation
from .portals import validate_portal, validate_world

__all__ = [
    "PortalValidationError",
    "PortalViolation",
    "validate_portal",
    "validate_world",
]
