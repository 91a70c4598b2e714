"""
Tests for the preset loader.
"""

from pathlib import Path

import pytest
import yaml

from chuk_mcp_harmony.models import ChordPreset, ChordSpec
from chuk_mcp_harmony.presets import PresetLoader

LIBRARY_NAMES = [
    "dominant-ninth",
    "dominant-sus",
    "half-diminished",
    "lydian-tonic",
    "major-seventh",
    "mu-major",
]


class TestLibrary:
    """Tests for the built-in preset library."""

    def test_list(self, library_path: Path) -> None:
        loader = PresetLoader(library_path=library_path)
        assert [p.name for p in loader.list_presets()] == LIBRARY_NAMES

    def test_default_library_path(self) -> None:
        loader = PresetLoader()
        assert [p.name for p in loader.list_presets()] == LIBRARY_NAMES

    def test_tag_filter(self, library_path: Path) -> None:
        loader = PresetLoader(library_path=library_path)
        names = [p.name for p in loader.list_presets(tag="jazz")]
        assert names == ["half-diminished", "lydian-tonic", "major-seventh"]
        assert loader.list_presets(tag="polka") == []

    @pytest.mark.parametrize(
        "name,symbol,lengths",
        [
            ("dominant-sus", "G7sus4/D", [0, 5, 7, 10]),
            ("half-diminished", "Dm7b5", [0, 3, 6, 10]),
            ("dominant-ninth", "E9", [0, 2, 4, 7, 10]),
            ("lydian-tonic", "Fmaj11#4", [0, 2, 4, 6, 7, 11]),
            ("major-seventh", "Cmaj7", [0, 4, 7, 11]),
            ("mu-major", "Gadd2", [0, 2, 4, 7]),
        ],
    )
    def test_library_chords(
        self, library_path: Path, name: str, symbol: str, lengths: list[int]
    ) -> None:
        preset = PresetLoader(library_path=library_path).get_preset(name)
        assert preset is not None
        chord = preset.chord.to_chord()
        assert chord.symbol() == symbol
        assert [i.length for i in chord.intervals()] == lengths

    def test_missing(self, library_path: Path) -> None:
        assert PresetLoader(library_path=library_path).get_preset("nope") is None


class TestProjectPresets:
    """Tests for project presets."""

    def test_save_and_load(self, library_path: Path, temp_dir: Path) -> None:
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)
        preset = ChordPreset(
            name="sad",
            description="Minor seventh",
            tags=["minor"],
            chord=ChordSpec(root="A", chord_type="min", extension=7),
        )
        path = loader.save_preset(preset)
        assert path == temp_dir / "sad.yaml"

        with open(path) as f:
            data = yaml.safe_load(f)
        assert data["schema"] == "chord-preset/v1"
        assert data["chord"]["root"] == "A"

        loaded = PresetLoader(library_path=library_path, project_path=temp_dir).get_preset("sad")
        assert loaded == preset
        assert "sad" in [p.name for p in loader.list_presets()]

    def test_save_creates_directory(self, library_path: Path, temp_dir: Path) -> None:
        project = temp_dir / "nested" / "presets"
        loader = PresetLoader(library_path=library_path, project_path=project)
        loader.save_preset(ChordPreset(name="x", chord=ChordSpec()))
        assert (project / "x.yaml").exists()

    def test_save_existing(self, library_path: Path, temp_dir: Path) -> None:
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)
        loader.save_preset(ChordPreset(name="x", chord=ChordSpec()))
        with pytest.raises(ValueError, match="already exists"):
            loader.save_preset(ChordPreset(name="x", chord=ChordSpec(chord_type="min")))

        loader.save_preset(ChordPreset(name="x", chord=ChordSpec(chord_type="min")), overwrite=True)
        preset = loader.get_preset("x")
        assert preset is not None
        assert preset.chord.chord_type == "min"

    def test_save_without_project(self, library_path: Path) -> None:
        loader = PresetLoader(library_path=library_path)
        with pytest.raises(ValueError, match="No project path"):
            loader.save_preset(ChordPreset(name="x", chord=ChordSpec()))

    def test_project_overrides_library(self, library_path: Path, temp_dir: Path) -> None:
        loader = PresetLoader(library_path=library_path, project_path=temp_dir)
        loader.save_preset(
            ChordPreset(name="mu-major", chord=ChordSpec(root="A", chord_type="min"))
        )

        preset = loader.get_preset("mu-major")
        assert preset is not None
        assert preset.chord.root == "A"

        listed = {p.name: p for p in loader.list_presets()}
        assert listed["mu-major"].chord.root == "A"
        assert len(listed) == len(LIBRARY_NAMES)

    def test_name_from_file_stem(self, temp_dir: Path) -> None:
        (temp_dir / "bare.yaml").write_text("chord:\n  root: D\n  type: min\n")
        loader = PresetLoader(library_path=temp_dir)
        preset = loader.get_preset("bare")
        assert preset is not None
        assert preset.name == "bare"
        assert preset.chord.to_chord().symbol() == "Dm"

    def test_bad_files_skipped(self, temp_dir: Path) -> None:
        (temp_dir / "broken.yaml").write_text("chord: [unclosed\n")
        (temp_dir / "list.yaml").write_text("- a\n- b\n")
        (temp_dir / "wrong.yaml").write_text("chord:\n  type: minor\n")
        (temp_dir / "good.yaml").write_text("chord:\n  root: E\n")

        loader = PresetLoader(library_path=temp_dir)
        assert [p.name for p in loader.list_presets()] == ["good"]
        assert loader.get_preset("wrong") is None

    def test_cache(self, temp_dir: Path) -> None:
        (temp_dir / "c.yaml").write_text("chord:\n  root: C\n")
        loader = PresetLoader(library_path=temp_dir)
        first = loader.get_preset("c")
        (temp_dir / "c.yaml").write_text("chord:\n  root: D\n")
        assert loader.get_preset("c") is first

        loader.clear_cache()
        preset = loader.get_preset("c")
        assert preset is not None
        assert preset.chord.root == "D"

    @pytest.mark.parametrize("name", ["../outside", "..", ".", "sub/inner", ".hidden"])
    def test_get_rejects_path_names(self, temp_dir: Path, name: str) -> None:
        """Lookups never leave the preset directories."""
        library = temp_dir / "library"
        library.mkdir()
        (temp_dir / "outside.yaml").write_text("chord:\n  root: D\n")
        (temp_dir / ".yaml").write_text("chord:\n  root: D\n")

        loader = PresetLoader(library_path=library, project_path=library)
        assert loader.get_preset(name) is None
