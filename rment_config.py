#!/usr/bin/env python3
"""
rment Configuration Manager

Stores rment settings and cumulative run statistics in a .rment directory
under the user's home.
"""

import json
import pathlib
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Optional

from entry_remover import COUNTER_NAMES, RemovalReport
from rment_errors import ConfigError


def _empty_stats() -> dict:
    stats = {"total_runs": 0}
    stats.update({name: 0 for name in COUNTER_NAMES})
    return stats


def _load_stats(value) -> dict:
    """Merge stored counters over empty stats, dropping anything that is not a count"""
    stats = _empty_stats()
    if isinstance(value, dict):
        for name, count in value.items():
            if isinstance(count, int) and not isinstance(count, bool) and count >= 0:
                stats[name] = count
    return stats


def _load_bool(value, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "yes", "on", "1"):
            return True
        if text in ("false", "no", "off", "0"):
            return False
    return default


@dataclass
class RmentConfig:
    """Configuration and statistics for rment"""

    version: str = "1.0"
    show_progress: bool = True
    log_level: str = "INFO"
    last_run: Optional[str] = None
    stats: dict = field(default_factory=_empty_stats)

    def record_run(self, report: RemovalReport):
        """Add a finished run to the cumulative statistics"""
        self.stats["total_runs"] = self.stats.get("total_runs", 0) + 1
        for name, count in report.to_dict().items():
            self.stats[name] = self.stats.get(name, 0) + count
        self.last_run = datetime.now(timezone.utc).isoformat()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "RmentConfig":
        """Create from dictionary"""
        return cls(
            version=data.get("version", "1.0"),
            show_progress=_load_bool(data.get("show_progress"), True),
            log_level=str(data.get("log_level", "INFO")).upper(),
            last_run=data.get("last_run"),
            stats=_load_stats(data.get("stats")),
        )


class ConfigManager:
    """Manages loading and saving the rment configuration"""

    def __init__(self, rment_dir: Optional[pathlib.Path] = None):
        """Initialize configuration manager

        Args:
            rment_dir: Override default .rment directory location
        """
        if rment_dir:
            self.rment_dir = rment_dir
        else:
            self.rment_dir = pathlib.Path.home() / ".rment"

        self.config_file = self.rment_dir / "config.json"
        self.log_file = self.rment_dir / "rment.log"

        try:
            self.rment_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"Could not create {self.rment_dir}. {e}") from e

    def load(self) -> RmentConfig:
        """Load configuration from file"""
        if self.config_file.exists():
            try:
                with self.config_file.open() as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return RmentConfig.from_dict(data)
            except (json.JSONDecodeError, UnicodeDecodeError):
                # If config is corrupted, return default
                pass
        return RmentConfig()

    def save(self, config: RmentConfig):
        """Save configuration to file"""
        with self.config_file.open("w") as f:
            json.dump(config.to_dict(), f, indent=2)
