"""
Loader konfiguracji z automatycznym uzupełnianiem wartości domyślnych.

Reguły gry są data-driven - wszystko, co da się stroić bez zmiany kodu,
leży w plikach YAML:
- defaults.yaml: plansza, zasady meczu, domyślny profil wariantu
- variants.yaml: profile wariantów postaci (movement, power, max_health)
- collectibles.yaml: katalog znajdziek (typ, wartość bazowa, opis)

Logika merge (uzupełniania defaults):
    1. Wczytaj defaults.yaml
    2. Wczytaj konkretną definicję (np. wariant "strong_attack")
    3. Klucze, których brak w definicji, biorą wartość z defaults
    4. Definicja może nadpisać defaults

Przykład:
    defaults.yaml:
        variant_defaults:
            movement: 3
            power: 10
            max_health: 50

    variants.yaml:
        variants:
            fast_movement:
                movement: 5     # nadpisuje default
                power: 8
                max_health: 40

Użycie:
    >>> loader = ConfigLoader()             # pakietowy folder data/
    >>> loader.load_variant("strong_attack")["power"]
    15
"""

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import copy

import yaml

from .errors import ConfigurationError


# Folder z YAML-ami dołączony do pakietu
DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data"


class ConfigLoader:
    """
    Ładuje konfigurację z plików YAML z automatycznym merge defaults.

    Attributes:
        data_path (Path): Ścieżka do folderu z YAML-ami
        _defaults (Dict): Cache defaults.yaml
        _variants (Dict): Cache surowych wariantów
        _collectibles (List): Cache surowego katalogu znajdziek
    """

    def __init__(self, data_path: Optional[Union[str, Path]] = None):
        """
        Args:
            data_path: Folder z plikami YAML (domyślnie hexduel/data)
        """
        self.data_path = Path(data_path) if data_path is not None else DEFAULT_DATA_PATH
        self._defaults: Optional[Dict] = None
        self._variants: Optional[Dict] = None
        self._collectibles: Optional[List[Dict]] = None

    # ─────────────────────────────────────────────────────────────────────────
    # WCZYTYWANIE PLIKÓW
    # ─────────────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> Dict:
        """
        Wczytuje plik YAML.

        Raises:
            ConfigurationError: Brak pliku, błędny YAML albo korzeń nie jest mapą
        """
        filepath = self.data_path / filename
        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"{filename}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"{filename}: expected a mapping at top level")
        return data

    def get_defaults(self) -> Dict:
        """Zawartość defaults.yaml (cache)."""
        if self._defaults is None:
            self._defaults = self._load_yaml("defaults.yaml")
        return self._defaults

    def _section(self, name: str) -> Dict:
        section = self.get_defaults().get(name, {}) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"defaults.yaml: section '{name}' must be a mapping")
        return section

    def get_board_config(self) -> Dict:
        """Sekcja `board` (width, height, orientation)."""
        return copy.deepcopy(self._section("board"))

    def get_match_rules(self) -> Dict:
        """Sekcja `match_rules` (wins_to_win_match, knockback, refill...)."""
        return copy.deepcopy(self._section("match_rules"))

    def get_variant_defaults(self) -> Dict:
        """Sekcja `variant_defaults`."""
        return self._section("variant_defaults")

    def get_match_config_dict(self) -> Dict:
        """
        Płaski słownik dla MatchConfig.from_dict.

        Klucze planszy dostają prefiks `board_` (width -> board_width).
        """
        result: Dict[str, Any] = {}
        for key, value in self.get_board_config().items():
            result[key if key == "orientation" else f"board_{key}"] = value
        result.update(self.get_match_rules())
        return result

    # ─────────────────────────────────────────────────────────────────────────
    # WARIANTY
    # ─────────────────────────────────────────────────────────────────────────

    def _get_all_variants_raw(self) -> Dict:
        if self._variants is None:
            data = self._load_yaml("variants.yaml")
            self._variants = data.get("variants", {}) or {}
        return self._variants

    def load_variant(self, variant_id: str) -> Dict:
        """
        Profil wariantu z uzupełnionymi defaults.

        Args:
            variant_id: Klucz w variants.yaml (np. "high_health")

        Raises:
            ConfigurationError: Jeśli wariant nie istnieje
        """
        variants = self._get_all_variants_raw()
        key = variant_id.lower()

        if key not in variants:
            raise ConfigurationError(f"Variant '{variant_id}' not found in variants.yaml")

        result = self._deep_merge(self.get_variant_defaults(), variants[key] or {})
        result["id"] = key
        return result

    def load_all_variants(self) -> Dict[str, Dict]:
        """Mapa variant_id -> profil."""
        return {vid: self.load_variant(vid) for vid in self._get_all_variants_raw()}

    def get_variant_ids(self) -> List[str]:
        return list(self._get_all_variants_raw().keys())

    # ─────────────────────────────────────────────────────────────────────────
    # ZNAJDŹKI
    # ─────────────────────────────────────────────────────────────────────────

    def load_collectible_catalog(self) -> List[Dict]:
        """
        Surowe wpisy katalogu znajdziek.

        Raises:
            ConfigurationError: Jeśli katalog jest pusty albo nie jest listą
        """
        if self._collectibles is None:
            data = self._load_yaml("collectibles.yaml")
            entries = data.get("collectibles")
            if not entries or not isinstance(entries, list):
                raise ConfigurationError("collectibles.yaml: catalog is missing or empty")
            self._collectibles = entries
        return copy.deepcopy(self._collectibles)

    # ─────────────────────────────────────────────────────────────────────────
    # HELPERY
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _deep_merge(base: Dict, override: Dict) -> Dict:
        """
        Głęboko łączy dwa słowniki.

        Override nadpisuje wartości w base, zagnieżdżone dicty
        są łączone rekurencyjnie.
        """
        result = copy.deepcopy(base)

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = ConfigLoader._deep_merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)

        return result

    def reload(self) -> None:
        """Czyści cache i wymusza ponowne wczytanie plików."""
        self._defaults = None
        self._variants = None
        self._collectibles = None
