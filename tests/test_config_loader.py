"""
Testy ładowania konfiguracji YAML.

Testuje:
- Pakietowe pliki data/
- Merge variant_defaults z wariantem
- Własny folder danych (tmp_path)
- Błędy konfiguracji
"""

import sys

import pytest
import yaml

import main
from hexduel.core.config_loader import ConfigLoader
from hexduel.core.errors import ConfigurationError
from hexduel.collectibles.collectible import load_catalog, CollectibleType
from hexduel.match import MatchController
from hexduel.units import Player


# ═══════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════

def write_data(path, defaults=None, variants=None, collectibles=None):
    """Zapisuje zestaw plików YAML do folderu testowego."""
    files = {
        "defaults.yaml": defaults or {},
        "variants.yaml": variants or {"variants": {}},
        "collectibles.yaml": collectibles if collectibles is not None else {"collectibles": []},
    }
    for name, content in files.items():
        (path / name).write_text(yaml.safe_dump(content), encoding="utf-8")
    return ConfigLoader(path)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: DANE PAKIETOWE
# ═══════════════════════════════════════════════════════════════════════════

def test_packaged_defaults():
    loader = ConfigLoader()
    assert loader.get_board_config() == {"width": 7, "height": 7, "orientation": "pointy_top"}

    rules = loader.get_match_rules()
    assert rules["wins_to_win_match"] == 2
    assert rules["battle_knockback"] == 2


def test_match_config_dict_prefixes_board_keys():
    flat = ConfigLoader().get_match_config_dict()
    assert flat["board_width"] == 7
    assert flat["board_height"] == 7
    assert flat["orientation"] == "pointy_top"
    assert flat["tier_weights"]["large"] == 15


def test_packaged_variants():
    loader = ConfigLoader()
    assert set(loader.get_variant_ids()) == {
        "default", "fast_movement", "strong_attack", "high_health",
    }

    default = loader.load_variant("default")
    assert (default["movement"], default["power"], default["max_health"]) == (3, 10, 50)
    assert default["id"] == "default"

    strong = loader.load_variant("STRONG_ATTACK")
    assert strong["power"] == 15


def test_unknown_variant_raises():
    with pytest.raises(ConfigurationError):
        ConfigLoader().load_variant("invisible")


def test_packaged_catalog():
    catalog = load_catalog(ConfigLoader().load_collectible_catalog())
    assert {d.type for d in catalog} == set(CollectibleType)


def test_catalog_returns_copies():
    loader = ConfigLoader()
    entries = loader.load_collectible_catalog()
    entries[0]["base_value"] = 999
    assert loader.load_collectible_catalog()[0]["base_value"] != 999


# ═══════════════════════════════════════════════════════════════════════════
# TEST: WŁASNY FOLDER
# ═══════════════════════════════════════════════════════════════════════════

def test_partial_variant_merges_defaults(tmp_path):
    loader = write_data(
        tmp_path,
        defaults={"variant_defaults": {"movement": 4, "power": 6, "max_health": 30}},
        variants={"variants": {"glass": {"power": 25}}},
    )
    glass = loader.load_variant("glass")
    assert glass == {"movement": 4, "power": 25, "max_health": 30, "id": "glass"}


def test_empty_catalog_raises(tmp_path):
    loader = write_data(tmp_path)
    with pytest.raises(ConfigurationError):
        loader.load_collectible_catalog()


def test_non_mapping_file_raises(tmp_path):
    write_data(tmp_path)
    (tmp_path / "defaults.yaml").write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ConfigLoader(tmp_path).get_defaults()


def test_reload_picks_up_changes(tmp_path):
    loader = write_data(tmp_path, defaults={"board": {"width": 4, "height": 4}})
    assert loader.get_board_config()["width"] == 4

    (tmp_path / "defaults.yaml").write_text(
        yaml.safe_dump({"board": {"width": 9, "height": 4}}), encoding="utf-8"
    )
    assert loader.get_board_config()["width"] == 4
    loader.reload()
    assert loader.get_board_config()["width"] == 9


def test_deep_merge_nested():
    merged = ConfigLoader._deep_merge(
        {"a": {"x": 1, "y": 2}, "b": 1},
        {"a": {"y": 3}, "c": 4},
    )
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}


def test_load_all_variants_merges_each_profile():
    profiles = ConfigLoader().load_all_variants()
    assert set(profiles) == {"default", "fast_movement", "strong_attack", "high_health"}
    assert profiles["high_health"]["max_health"] == 80
    assert all(p["id"] == vid for vid, p in profiles.items())


# ═══════════════════════════════════════════════════════════════════════════
# TEST: BRAKUJĄCE I USZKODZONE PLIKI
# ═══════════════════════════════════════════════════════════════════════════

def test_missing_catalog_file_raises(tmp_path):
    write_data(tmp_path)
    (tmp_path / "collectibles.yaml").unlink()
    loader = ConfigLoader(tmp_path)

    with pytest.raises(ConfigurationError, match="collectibles.yaml"):
        loader.load_collectible_catalog()


def test_missing_catalog_file_fails_match_setup(tmp_path):
    write_data(tmp_path, collectibles={"collectibles": [{"type": "health", "base_value": 20}]})
    (tmp_path / "collectibles.yaml").unlink()

    with pytest.raises(ConfigurationError):
        MatchController.from_config(
            [Player("A"), Player("B")],
            loader=ConfigLoader(tmp_path),
        )


def test_malformed_yaml_raises(tmp_path):
    write_data(tmp_path)
    (tmp_path / "variants.yaml").write_text("variants: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="variants.yaml"):
        ConfigLoader(tmp_path).get_variant_ids()


def test_cli_reports_missing_data_folder(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["main.py", "--data", str(tmp_path / "nowhere")])
    assert main.main() == 2
    assert "Błąd konfiguracji" in capsys.readouterr().err


def test_cli_lists_variants(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["main.py", "--list-variants"])
    assert main.main() == 0
    out = capsys.readouterr().out
    assert "strong_attack" in out
    assert "hp=80" in out
