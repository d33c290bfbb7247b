"""
Wyjątki silnika gry.

TAKSONOMIA BŁĘDÓW:
═══════════════════════════════════════════════════════════════════

    Odrzucony ruch gracza (nielegalne pole, ruch poza kolejką)
    ─────────────────────────────────────────────────────────────
    NIE jest wyjątkiem. MatchController zwraca MoveOutcome z
    kind=REJECTED i niczego nie zmienia. To normalne wejście.

    ConfigurationError
    ─────────────────────────────────────────────────────────────
    Mecz nie może wystartować: plansza o wymiarze <= 0, brak
    katalogu znajdziek, nieznany wariant postaci, zła liczba graczy.
    Rzucany w konstruktorach - nigdy nie jest połykany.

    InvariantViolation
    ─────────────────────────────────────────────────────────────
    Błąd programisty: lookup pola, które musi istnieć, asymetria
    sąsiedztwa, dwie jednostki na jednym polu.
"""

from __future__ import annotations


class HexDuelError(Exception):
    """Bazowy wyjątek pakietu."""


class ConfigurationError(HexDuelError, ValueError):
    """Nieprawidłowa konfiguracja - mecz nie może wystartować."""


class InvariantViolation(HexDuelError, AssertionError):
    """Złamany niezmiennik stanu planszy lub meczu."""
