"""
Warianty postaci - profil statystyk wybierany przed meczem.

Każdy gracz wybiera jeden wariant. Wariant wyznacza trzy liczby:

─────────────────────────────────────────────────────────────────
Wariant          | movement | power | max_health
─────────────────────────────────────────────────────────────────
DEFAULT          | 3        | 10    | 50
FAST_MOVEMENT    | 5        | 8     | 40
STRONG_ATTACK    | 2        | 15    | 35
HIGH_HEALTH      | 2        | 8     | 80
─────────────────────────────────────────────────────────────────

movement    - ile kroków na turę
power       - bazowe obrażenia zadawane po wygranej bitwie
max_health  - zdrowie na starcie każdej rundy

Tabela powyżej to wbudowany fallback. variants.yaml może nadpisać
wartości (ConfigLoader.load_variant + VariantProfile.from_dict).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, TYPE_CHECKING

from ..core.errors import ConfigurationError

if TYPE_CHECKING:
    from ..core.config_loader import ConfigLoader


class Variant(Enum):
    """Wariant postaci."""
    DEFAULT = "default"
    FAST_MOVEMENT = "fast_movement"
    STRONG_ATTACK = "strong_attack"
    HIGH_HEALTH = "high_health"

    @classmethod
    def from_string(cls, value: str) -> "Variant":
        """
        Konwertuje string ("strong_attack", "StrongAttack", ...) na enum.

        Raises:
            ConfigurationError: Dla nieznanego wariantu
        """
        normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
        for variant in cls:
            if normalized in (variant.value, variant.value.replace("_", "")):
                return variant
        raise ConfigurationError(f"Unknown variant: '{value}'")


@dataclass(frozen=True)
class VariantProfile:
    """
    Niemutowalny profil statystyk wariantu.

    Attributes:
        movement (int): Kroki na turę
        power (int): Bazowy atak
        max_health (int): Zdrowie startowe rundy
    """
    movement: int
    power: int
    max_health: int

    def __post_init__(self):
        if self.movement <= 0 or self.max_health <= 0 or self.power < 0:
            raise ConfigurationError(f"Invalid variant profile: {self}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VariantProfile":
        """Tworzy profil z danych YAML."""
        try:
            return cls(
                movement=int(data["movement"]),
                power=int(data["power"]),
                max_health=int(data["max_health"]),
            )
        except KeyError as e:
            raise ConfigurationError(f"Variant profile missing key {e}") from e


BUILTIN_PROFILES: Dict[Variant, VariantProfile] = {
    Variant.DEFAULT: VariantProfile(movement=3, power=10, max_health=50),
    Variant.FAST_MOVEMENT: VariantProfile(movement=5, power=8, max_health=40),
    Variant.STRONG_ATTACK: VariantProfile(movement=2, power=15, max_health=35),
    Variant.HIGH_HEALTH: VariantProfile(movement=2, power=8, max_health=80),
}


def get_profile(
    variant: Variant,
    loader: Optional["ConfigLoader"] = None,
) -> VariantProfile:
    """
    Profil wariantu: z YAML jeśli podano loader, inaczej wbudowany.

    Example:
        >>> get_profile(Variant.STRONG_ATTACK)
        VariantProfile(movement=2, power=15, max_health=35)
    """
    if loader is None:
        return BUILTIN_PROFILES[variant]
    return VariantProfile.from_dict(loader.load_variant(variant.value))
