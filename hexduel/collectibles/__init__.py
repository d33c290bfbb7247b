"""
Collectibles module - znajdźki na planszy.

Zawiera:
- CollectibleType / Tier: Rodzaj efektu i skalowanie wartości
- CollectibleDefinition / Collectible: Wpis katalogu i znajdźka na polu
- load_catalog: Katalog z danych YAML
- CollectibleManager: Spawn, podnoszenie i uzupełnianie
"""

from .collectible import (
    CollectibleType,
    Tier,
    CollectibleDefinition,
    Collectible,
    load_catalog,
)
from .collectible_manager import CollectibleManager, DEFAULT_TIER_WEIGHTS

__all__ = [
    "CollectibleType", "Tier", "CollectibleDefinition", "Collectible",
    "load_catalog", "CollectibleManager", "DEFAULT_TIER_WEIGHTS",
]
