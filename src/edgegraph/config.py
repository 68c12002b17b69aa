from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator, ValidationError

from .graph import MAX_VERTICES, GraphError, TraversalStrategy

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "directed": {"type": "boolean"},
        "max_vertices": {"type": "integer", "minimum": 0},
        "start": {"type": ["integer", "null"]},
        "strategy": {"enum": [s.value for s in TraversalStrategy]},
        "weak_components": {"type": "boolean"},
        "strict_input": {"type": "boolean"},
        "log_level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
    },
}


class ConfigError(GraphError):
    """Raised when a configuration file cannot be read or fails validation."""


@dataclass(frozen=True)
class GraphConfig:
    """Settings for a single driver run."""

    directed: bool = True
    max_vertices: int = MAX_VERTICES
    start: int | None = None  # None means n // 2
    strategy: TraversalStrategy = TraversalStrategy.DFS
    weak_components: bool = False
    strict_input: bool = False
    log_level: str = "WARNING"

    @staticmethod
    def from_dict(raw: dict[str, Any]) -> GraphConfig:
        try:
            Draft202012Validator(CONFIG_SCHEMA).validate(raw)
        except ValidationError as e:
            path = ".".join(str(p) for p in e.absolute_path) or "<root>"
            raise ConfigError(f"Invalid config at {path}: {e.message}") from e
        data = dict(raw)
        if "strategy" in data:
            data["strategy"] = TraversalStrategy(data["strategy"])
        return GraphConfig(**data)

    @staticmethod
    def from_file(path: Path) -> GraphConfig:
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot load config {path}: {e}") from e
        return GraphConfig.from_dict(raw or {})

    def merged(self, **overrides: Any) -> GraphConfig:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def start_vertex(self, n: int) -> int:
        return n // 2 if self.start is None else self.start
