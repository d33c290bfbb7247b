"""
Collectible - znajdźki leżące na planszy.

Każda znajdźka to definicja z katalogu (typ + wartość bazowa) oraz
tier wylosowany przy spawnie.

TYPY:
═══════════════════════════════════════════════════════════════════════════

    EXTRA_MOVE    - dodatkowe kroki w tej turze
    EXTRA_ATTACK  - premia do ataku do końca własnej tury
    HEALTH        - leczenie (nie ponad max_health)
    EXTRA_DICE    - dodatkowe kości w bitwie do końca własnej tury

TIERY:
═══════════════════════════════════════════════════════════════════════════

    SMALL   = base // 2
    MEDIUM  = base
    LARGE   = base * 2

Katalog jest data-driven (collectibles.yaml):

    collectibles:
      - type: extra_attack
        base_value: 10
        name: "Ostrze"
        description: "..."
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List

from ..core.errors import ConfigurationError


class CollectibleType(Enum):
    """Rodzaj efektu znajdźki."""
    EXTRA_MOVE = "extra_move"
    EXTRA_ATTACK = "extra_attack"
    HEALTH = "health"
    EXTRA_DICE = "extra_dice"

    @classmethod
    def from_string(cls, value: str) -> "CollectibleType":
        """
        Raises:
            ConfigurationError: Dla nieznanego typu
        """
        normalized = value.strip().lower().replace("-", "_")
        for kind in cls:
            if normalized in (kind.value, kind.value.replace("_", "")):
                return kind
        raise ConfigurationError(f"Unknown collectible type: '{value}'")


class Tier(Enum):
    """Rozmiar znajdźki - skaluje wartość bazową."""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"

    @classmethod
    def from_string(cls, value: str) -> "Tier":
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise ConfigurationError(f"Unknown tier: '{value}'") from e

    def scale(self, base_value: int) -> int:
        """Wartość dla tego tieru."""
        if self is Tier.SMALL:
            return base_value // 2
        if self is Tier.LARGE:
            return base_value * 2
        return base_value


@dataclass(frozen=True)
class CollectibleDefinition:
    """
    Wpis katalogu.

    Attributes:
        type (CollectibleType): Rodzaj efektu
        base_value (int): Wartość dla tieru MEDIUM
        name (str): Nazwa wyświetlana
        description (str): Opis dla UI
    """
    type: CollectibleType
    base_value: int
    name: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CollectibleDefinition":
        """Tworzy definicję z danych YAML."""
        if "type" not in data or "base_value" not in data:
            raise ConfigurationError(f"Collectible entry needs 'type' and 'base_value': {data}")
        kind = CollectibleType.from_string(str(data["type"]))
        base_value = int(data["base_value"])
        if base_value < 0:
            raise ConfigurationError(f"Collectible base_value must be >= 0, got {base_value}")
        return cls(
            type=kind,
            base_value=base_value,
            name=str(data.get("name", kind.value)),
            description=str(data.get("description", "")),
        )


@dataclass(frozen=True)
class Collectible:
    """
    Znajdźka położona na polu.

    Example:
        >>> blade = CollectibleDefinition(CollectibleType.EXTRA_ATTACK, 10)
        >>> Collectible(blade, Tier.LARGE).value
        20
    """
    definition: CollectibleDefinition
    tier: Tier = Tier.MEDIUM

    @property
    def type(self) -> CollectibleType:
        return self.definition.type

    @property
    def value(self) -> int:
        return self.tier.scale(self.definition.base_value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "tier": self.tier.value,
            "value": self.value,
            "name": self.definition.name,
        }


def load_catalog(entries: Iterable[Dict[str, Any]]) -> List[CollectibleDefinition]:
    """
    Buduje katalog z wpisów YAML.

    Raises:
        ConfigurationError: Jeśli katalog jest pusty
    """
    catalog = [CollectibleDefinition.from_dict(entry) for entry in (entries or [])]
    if not catalog:
        raise ConfigurationError("Collectible catalog is empty")
    return catalog
