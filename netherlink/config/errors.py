"""Configuration exception types."""

from __future__ import annotations


class ConfigLoaderError(Exception):
    """Human-friendly config loader error intended for CLI output."""
