"""
Tuning loader - discovers and loads tuning presets.

Presets can come from:
1. Built-in library (shipped with package)
2. Project presets (./tunings, or the directory named by $CLEF_TUNINGS_DIR)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from clef.constants import DEFAULT_TUNINGS_DIR, TUNINGS_DIR_ENV, ErrorMessages
from clef.models.tuning import TuningConfig, TuningMetadata
from clef.tuning.base import TuningSystem

logger = logging.getLogger(__name__)


def project_tunings_dir(override: Path | None = None) -> Path:
    """
    Resolve the project preset directory.

    An explicit override wins, then $CLEF_TUNINGS_DIR, then ./tunings.
    """
    if override is not None:
        return override
    env = os.environ.get(TUNINGS_DIR_ENV)
    if env:
        return Path(env)
    return Path.cwd() / DEFAULT_TUNINGS_DIR


class TuningLoader:
    """
    Discovers and loads tuning presets.

    Presets are loaded from YAML files in the library and project directories.
    Project presets override library presets with the same name.
    A preset's name is its file stem, so "baroque-a415" lives in
    baroque-a415.yaml.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tuning loader.

        Args:
            library_path: Path to built-in preset library
            project_path: Path to project presets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, TuningConfig] = {}

    def list_tunings(self) -> list[TuningMetadata]:
        """
        List all available presets.

        Returns presets from both library and project, with project
        presets taking precedence.
        """
        configs: dict[str, TuningMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                config = self._load_file(path)
                if config:
                    configs[config.name] = TuningMetadata.from_config(config)

        return sorted(configs.values(), key=lambda m: m.name)

    def get_config(self, name: str) -> TuningConfig | None:
        """
        Get a preset by name.

        Project presets take precedence over library presets.

        Returns:
            TuningConfig if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                config = self._load_file(path)
                if config:
                    self._cache[name] = config
                    return config

        return None

    def get_tuning(self, name: str) -> TuningSystem | None:
        """
        Build the tuning system for a preset.

        Returns:
            TuningSystem if the preset exists, None otherwise
        """
        config = self.get_config(name)
        return config.build() if config else None

    def _load_file(self, path: Path) -> TuningConfig | None:
        """
        Load a preset from a YAML file, skipping invalid ones.

        A preset is looked up by file name, so its name must match the
        file stem exactly.
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            config = TuningConfig.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Skipping tuning preset {path}: {e}")
            return None

        if config.name != path.stem:
            message = ErrorMessages.PRESET_NAME_MISMATCH.format(name=config.name, stem=path.stem)
            logger.warning(f"Skipping tuning preset {path}: {message}")
            return None

        logger.debug(f"Loaded tuning preset '{config.name}' from {path}")
        return config

    def clear_cache(self) -> None:
        """Clear the preset cache."""
        self._cache.clear()
