"""Solver configuration loaded from YAML and command-line overrides."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from . import rules
from .exceptions import ConfigError
from .tree import BuildOptions

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_STR_FIELDS = ("tree_file", "log_level")
_BOOL_FIELDS = ("log_json", "allow_multiple_roots", "reject_duplicates", "show_tree")


@dataclass
class SolverConfig:
    """Settings for one solver run.

    Attributes:
        tree_file: Path of the tree file to read.
        log_level: Logging level name.
        log_json: Emit log lines as JSON.
        allow_multiple_roots: Use the first root instead of failing.
        reject_duplicates: Fail on repeated node ids instead of last-write-wins.
        show_tree: Print the tree outline to stderr before searching.
    """

    tree_file: str = rules.DEFAULT_TREE_FILE
    log_level: str = "WARNING"
    log_json: bool = False
    allow_multiple_roots: bool = False
    reject_duplicates: bool = False
    show_tree: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SolverConfig:
        """Create config from a dictionary, ignoring unknown keys."""
        known_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}
        return cls(**filtered_data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> SolverConfig:
        """Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigError: If the file does not hold a mapping.
            yaml.YAMLError: If the file is not valid YAML.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping, got {type(data).__name__}")
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    def validate(self) -> None:
        """Validate configuration parameters."""
        for name in _STR_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"{name} must be a string, got {type(value).__name__}")
        for name in _BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(f"{name} must be true or false, got {value!r}")

        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        if not self.tree_file:
            raise ConfigError("tree_file must not be empty")

    def build_options(self) -> BuildOptions:
        return BuildOptions(
            allow_multiple_roots=self.allow_multiple_roots,
            reject_duplicates=self.reject_duplicates,
        )


__all__ = ["LOG_LEVELS", "SolverConfig"]
