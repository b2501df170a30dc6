"""
test_config_and_difficulty.py
-----------------------------
Unit tests for JSON config loading and the difficulty table.
"""

import json

import pytest

from skyguard.core.runtime.difficulty import (
    DIFFICULTY_PRESETS,
    DifficultyLevel,
    DifficultySettings,
    load_difficulty_table,
)
from skyguard.core.services.config_manager import load_config


# ===========================================================
# Config Manager
# ===========================================================

class TestLoadConfig:

    def test_merges_file_onto_defaults(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps({
            "_notes": "ignored",
            "audio": {"volume": 50},
        }), encoding="utf-8")

        cfg = load_config(str(path), {"audio": {"volume": 100, "muted": False}, "fps": 60})

        assert cfg == {"audio": {"volume": 50, "muted": False}, "fps": 60}

    def test_missing_file_returns_defaults(self):
        defaults = {"a": {"b": 1}}
        cfg = load_config("does_not_exist.json", defaults)

        assert cfg == defaults
        cfg["a"]["b"] = 2
        assert defaults["a"]["b"] == 1

    def test_missing_file_strict_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("does_not_exist.json", strict=True)

    def test_non_object_json_falls_back(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert load_config(str(path), {"x": 1}) == {"x": 1}

    def test_packaged_difficulty_file_is_found(self):
        cfg = load_config("difficulty.json", strict=True)
        assert set(cfg) == {"easy", "medium", "hard"}


# ===========================================================
# Difficulty
# ===========================================================

class TestDifficulty:

    def test_presets(self):
        assert DIFFICULTY_PRESETS[DifficultyLevel.EASY] == DifficultySettings(2, 1500)
        assert DIFFICULTY_PRESETS[DifficultyLevel.MEDIUM] == DifficultySettings(4, 1000)
        assert DIFFICULTY_PRESETS[DifficultyLevel.HARD] == DifficultySettings(6, 600)

    @pytest.mark.parametrize("value, expected", [
        ("easy", DifficultyLevel.EASY),
        (" HARD ", DifficultyLevel.HARD),
        (DifficultyLevel.MEDIUM, DifficultyLevel.MEDIUM),
    ])
    def test_parse(self, value, expected):
        assert DifficultyLevel.parse(value) is expected

    @pytest.mark.parametrize("value", ["insane", "", None, 3])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(ValueError):
            DifficultyLevel.parse(value)

    def test_settings_must_be_positive(self):
        with pytest.raises(ValueError):
            DifficultySettings(enemy_speed=0, spawn_rate_ms=1000)
        with pytest.raises(ValueError):
            DifficultySettings(enemy_speed=2, spawn_rate_ms=-1)

    def test_packaged_table_matches_presets(self):
        assert load_difficulty_table() == DIFFICULTY_PRESETS

    def test_presets_only(self):
        assert load_difficulty_table(None) == DIFFICULTY_PRESETS

    def test_file_overrides_single_value(self, tmp_path):
        path = tmp_path / "difficulty.json"
        path.write_text(json.dumps({"hard": {"spawn_rate_ms": 400}, "extreme": {}}), encoding="utf-8")

        table = load_difficulty_table(str(path))

        assert table[DifficultyLevel.HARD] == DifficultySettings(6, 400)
        assert table[DifficultyLevel.EASY] == DIFFICULTY_PRESETS[DifficultyLevel.EASY]

    def test_invalid_file_values_raise(self, tmp_path):
        path = tmp_path / "difficulty.json"
        path.write_text(json.dumps({"easy": {"enemy_speed": -2}}), encoding="utf-8")

        with pytest.raises(ValueError):
            load_difficulty_table(str(path))

    @pytest.mark.parametrize("override", [
        {"easy": 5},
        {"medium": {"enemy_speed": "fast"}},
        {"hard": {"spawn_rate_ms": None}},
    ])
    def test_malformed_entries_raise_value_error(self, tmp_path, override):
        path = tmp_path / "difficulty.json"
        path.write_text(json.dumps(override), encoding="utf-8")

        with pytest.raises(ValueError):
            load_difficulty_table(str(path))
