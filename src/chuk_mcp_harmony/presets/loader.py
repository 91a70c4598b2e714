"""
Preset loader - discovers, loads and saves chord presets.

Presets can come from:
1. Built-in library (shipped with package)
2. Project presets (user's project/presets directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from chuk_mcp_harmony.models.chord import ChordPreset, is_valid_preset_name

logger = logging.getLogger(__name__)


class PresetLoader:
    """
    Discovers and loads chord presets.

    Presets are loaded from YAML files in the library and project directories.
    Project presets override library presets with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the preset loader.

        Args:
            library_path: Path to built-in preset library
            project_path: Path to project presets directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, ChordPreset] = {}

    def list_presets(self, tag: str | None = None) -> list[ChordPreset]:
        """
        List all available presets, sorted by name.

        Args:
            tag: Only return presets carrying this tag
        """
        presets: dict[str, ChordPreset] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                preset = self._load_preset_file(path)
                if preset:
                    presets[preset.name] = preset

        result = sorted(presets.values(), key=lambda p: p.name)
        if tag is not None:
            result = [p for p in result if tag in p.tags]
        return result

    def get_preset(self, name: str) -> ChordPreset | None:
        """
        Get a preset by name.

        Project presets take precedence over library presets.

        Returns:
            ChordPreset if found, None otherwise
        """
        if not is_valid_preset_name(name):
            logger.warning("Rejecting preset name %r", name)
            return None

        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                preset = self._load_preset_file(path)
                if preset:
                    self._cache[name] = preset
                    return preset

        return None

    def save_preset(self, preset: ChordPreset, overwrite: bool = False) -> Path:
        """
        Write a preset to the project directory.

        Raises:
            ValueError: If no project path is configured, or the preset
                exists and overwrite is False
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / f"{preset.name}.yaml"
        if path.exists() and not overwrite:
            raise ValueError(f"Preset already exists in project: {preset.name}")

        with open(path, "w") as f:
            yaml.safe_dump(preset.to_yaml_dict(), f, default_flow_style=False, sort_keys=False)

        self._cache.pop(preset.name, None)
        logger.info("Saved preset %s to %s", preset.name, path)
        return path

    def _load_preset_file(self, path: Path) -> ChordPreset | None:
        """Load a preset from a YAML file, skipping unreadable ones."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            if not isinstance(data, dict):
                raise ValueError("preset file must contain a mapping")
            data.setdefault("name", path.stem)
            return ChordPreset.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
            logger.warning("Skipping preset %s: %s", path, e)
            return None

    def clear_cache(self) -> None:
        """Clear the preset cache."""
        self._cache.clear()
