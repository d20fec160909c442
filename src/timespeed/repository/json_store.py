"""JSON-based repository for the time configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter

from timespeed.domain.time_config import DEFAULT_CONFIG, TimeConfig

logger = logging.getLogger(__name__)


class JsonConfigRepository:
    """Persist a :class:`TimeConfig` as a JSON file on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._adapter: TypeAdapter[TimeConfig] = TypeAdapter(TimeConfig)

    def save(self, config: TimeConfig) -> Path:
        """Serialize the configuration and return the file path."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(self._adapter.dump_json(config, indent=2))
        return self.path

    def load(self) -> TimeConfig:
        """Read the configuration, falling back to defaults when none is saved."""

        if not self.path.exists():
            logger.info("no config at %s; using defaults", self.path)
            return DEFAULT_CONFIG
        return self._adapter.validate_json(self.path.read_bytes())
