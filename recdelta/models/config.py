"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DeltaConfig:
    """Delta engine configuration."""

    log_changes: bool = False
    max_logged_value_chars: int = 200


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass
class RecDeltaConfig:
    """Top-level recdelta configuration."""

    delta: DeltaConfig = field(default_factory=DeltaConfig)
    log: LogConfig = field(default_factory=LogConfig)
