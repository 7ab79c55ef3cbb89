"""Fusion dashboard configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class Config:
    """Fusion dashboard configuration."""

    workspace_path: Path = field(default_factory=lambda: Path.home() / ".fusiondash")
    data_path: Path | None = None
    log_level: str = "INFO"

    # Priority tier thresholds (score out of 100)
    priority_high_threshold: float = 80.0
    priority_medium_threshold: float = 60.0

    # Team and account views
    team_top_n: int = 6
    recent_activity_limit: int = 3
    unknown_user_name: str = "Unknown"

    @classmethod
    def load(cls, workspace_path: Path | None = None) -> Config:
        """Load config from YAML file, env vars, then defaults."""
        config = cls()

        if workspace_path:
            config.workspace_path = workspace_path

        # Override from env
        env_path = os.environ.get("FUSIONDASH_WORKSPACE")
        if env_path:
            config.workspace_path = Path(env_path)

        env_log = os.environ.get("FUSIONDASH_LOG_LEVEL")
        if env_log:
            config.log_level = env_log

        env_data = os.environ.get("FUSIONDASH_DATA")
        if env_data:
            config.data_path = Path(env_data)

        # Load YAML config if exists
        config_file = config.workspace_path / "config.yaml"
        if config_file.exists():
            with open(config_file) as f:
                data = yaml.safe_load(f) or {}
            for key, value in data.items():
                if key == "data_path":
                    config.data_path = Path(value) if value else None
                elif hasattr(config, key):
                    current = getattr(config, key)
                    expected_type = type(current)
                    if isinstance(current, Path):
                        setattr(config, key, Path(value))
                    else:
                        setattr(config, key, expected_type(value))

        return config

    @property
    def default_data_path(self) -> Path:
        return self.data_path or self.workspace_path / "fusion.db"

    def save(self) -> None:
        """Save current config to YAML."""
        self.workspace_path.mkdir(parents=True, exist_ok=True)
        config_file = self.workspace_path / "config.yaml"
        data = {
            "data_path": str(self.data_path) if self.data_path else None,
            "log_level": self.log_level,
            "priority_high_threshold": self.priority_high_threshold,
            "priority_medium_threshold": self.priority_medium_threshold,
            "team_top_n": self.team_top_n,
            "recent_activity_limit": self.recent_activity_limit,
            "unknown_user_name": self.unknown_user_name,
        }
        with open(config_file, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
