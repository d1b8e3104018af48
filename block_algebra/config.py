"""
Centralized configuration for block_algebra.

Module-level defaults can be overridden via environment variables where
marked. Named availability profiles (padding around busy blocks, minimum
useful free length) live in an optional YAML file.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)


def _env_number(name: str, default: str) -> int | float:
    raw = os.environ.get(name, default)
    try:
        return int(raw)
    except ValueError:
        return float(raw)


# ============================================================
# Logging
# ============================================================

LOG_LEVEL: str = os.environ.get("BLOCK_ALGEBRA_LOG_LEVEL", "WARNING")
"""Root log level used by the command line."""

LOG_JSON: bool | None = (
    None
    if "BLOCK_ALGEBRA_LOG_JSON" not in os.environ
    else os.environ["BLOCK_ALGEBRA_LOG_JSON"].lower() in ("1", "true", "yes")
)
"""Force JSON (true) or human (false) log output. Unset = auto-detect."""

# ============================================================
# Availability
# ============================================================

PAD_BEFORE: int | float = _env_number("BLOCK_ALGEBRA_PAD_BEFORE", "0")
"""Padding added before each busy block when computing free time."""

PAD_AFTER: int | float = _env_number("BLOCK_ALGEBRA_PAD_AFTER", "0")
"""Padding added after each busy block when computing free time."""

MIN_FREE_LENGTH: int | float = _env_number("BLOCK_ALGEBRA_MIN_FREE_LENGTH", "0")
"""Free blocks shorter than this are dropped."""

DEFAULT_PROFILE = "default"


class AvailabilityProfile(BaseModel):
    """Padding and minimum free length applied by free_blocks()."""

    pad_before: float = Field(default=PAD_BEFORE, ge=0)
    pad_after: float = Field(default=PAD_AFTER, ge=0)
    min_length: float = Field(default=MIN_FREE_LENGTH, ge=0)


def load_profiles(config_path: Path | str) -> dict[str, AvailabilityProfile]:
    """
    Load availability profiles from YAML.

    Expected layout:

        profiles:
          default:
            pad_before: 10
            pad_after: 10
            min_length: 30

    A missing file falls back to a single default profile.

    Raises:
        ConfigError: If the file is unreadable, not valid YAML, or a profile
            fails validation.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        logger.warning("Availability config not found at %s, using defaults", config_path)
        return {DEFAULT_PROFILE: AvailabilityProfile()}

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to load availability config {config_path}: {exc}") from exc

    raw_profiles = data.get("profiles", {}) if isinstance(data, dict) else None
    if not isinstance(raw_profiles, dict):
        raise ConfigError(f"'profiles' in {config_path} must be a mapping")

    profiles = {DEFAULT_PROFILE: AvailabilityProfile()}
    for name, values in raw_profiles.items():
        try:
            profiles[str(name)] = AvailabilityProfile(**(values or {}))
        except (TypeError, ValidationError) as exc:
            raise ConfigError(f"Invalid availability profile '{name}': {exc}") from exc

    logger.debug("Loaded %d availability profiles from %s", len(profiles), config_path)
    return profiles


def get_profile(name: str = DEFAULT_PROFILE, config_path: Path | str | None = None) -> AvailabilityProfile:
    """Look up one profile, from ``config_path`` when given."""
    if config_path is None:
        profiles = {DEFAULT_PROFILE: AvailabilityProfile()}
    else:
        profiles = load_profiles(config_path)

    if name not in profiles:
        raise ConfigError(f"Unknown availability profile '{name}' (have: {', '.join(sorted(profiles))})")
    return profiles[name]
