"""
hexduel - silnik reguł taktycznej gry dwóch graczy na planszy hex.

Podpakiety:
- core: Współrzędne, plansza, RNG, konfiguracja, błędy
- units: Warianty, gracze, pionki
- collectibles: Znajdźki i ich spawn
- combat: Bitwa kośćmi
- events: Log zdarzeń meczu
- match: MatchController i auto-gracz
"""

__version__ = "0.1.0"
