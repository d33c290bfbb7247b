#!/usr/bin/env python3
"""
Hex Duel - Entry Point
═══════════════════════════════════════════════════════════════════════════

Rozgrywa przykładowy mecz dwóch auto-graczy na planszy z defaults.yaml.

Użycie:
    python main.py                              # Domyślny seed
    python main.py --seed 12345                 # Konkretny seed
    python main.py --p1 fast_movement --p2 high_health
    python main.py --verbose                    # Plansza po każdej rundzie
    python main.py --json                       # Log zdarzeń jako JSON
    python main.py --list-variants              # Profile wariantów z YAML

Wynik:
    - Przebieg rund i wynik meczu na konsoli
"""

import argparse
import sys

from hexduel.core.config_loader import ConfigLoader
from hexduel.core.errors import ConfigurationError
from hexduel.events.event_logger import EventType
from hexduel.match import MatchController, play_match
from hexduel.units import Player, Variant


def main():
    """Główna funkcja."""
    parser = argparse.ArgumentParser(
        description="Hex Duel - demo meczu auto-graczy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=12345,
        help="Ziarno losowości (domyślnie: 12345)"
    )
    parser.add_argument(
        "--p1",
        default="default",
        help="Wariant gracza 1 (default, fast_movement, strong_attack, high_health)"
    )
    parser.add_argument(
        "--p2",
        default="strong_attack",
        help="Wariant gracza 2"
    )
    parser.add_argument(
        "--data",
        default=None,
        help="Folder z plikami YAML (domyślnie pakietowy)"
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=500,
        help="Limit tur (domyślnie: 500)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Szczegółowy output"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Wypisz pełny log zdarzeń jako JSON"
    )
    parser.add_argument(
        "--list-variants",
        action="store_true",
        help="Wypisz profile wariantów i zakończ"
    )

    args = parser.parse_args()

    try:
        loader = ConfigLoader(args.data)
        if args.list_variants:
            for variant_id, profile in loader.load_all_variants().items():
                print(
                    f"{variant_id:<14} ruch={profile['movement']} "
                    f"moc={profile['power']} hp={profile['max_health']}"
                )
            return 0
        players = [
            Player.with_variant("Gracz 1", Variant.from_string(args.p1), loader),
            Player.with_variant("Gracz 2", Variant.from_string(args.p2), loader),
        ]
        controller = MatchController.from_config(players, loader=loader, seed=args.seed)
    except ConfigurationError as e:
        print(f"Błąd konfiguracji: {e}", file=sys.stderr)
        return 2

    if args.json:
        play_match(controller, max_turns=args.max_turns)
        print(controller.logger.to_json())
        return 0

    print("=" * 60)
    print("HEX DUEL")
    print("=" * 60)
    print(f"Seed: {args.seed}")
    print(f"Plansza: {controller.board!r}")
    for player in players:
        profile = player.profile
        print(
            f"  {player.name}: {player.variant.name:<14} "
            f"ruch={profile.movement} moc={profile.power} hp={profile.max_health}"
        )
    print()

    if args.verbose:
        print(controller.debug_print())
        print()

    winner = play_match(controller, max_turns=args.max_turns)

    # ─────────────────────────────────────────────────────────────────────────
    # PODSUMOWANIE
    # ─────────────────────────────────────────────────────────────────────────
    logger = controller.logger
    for event in logger.get_events_by_type(EventType.ROUND_END):
        data = event.data
        print(
            f"Runda {data['round']}: wygrywa {event.unit_id} "
            f"({data['reason']}) -> {data['scores'][0]}:{data['scores'][1]}"
        )

    print()
    print(f"Bitwy:     {len(logger.get_events_by_type(EventType.BATTLE))}")
    print(f"Ring-outy: {len(logger.get_events_by_type(EventType.RING_OUT))}")
    print(f"Znajdźki:  {len(logger.get_events_by_type(EventType.COLLECTIBLE_PICKUP))}")
    print(f"Tury:      {controller.state.turn_number}")
    print()

    if winner is None:
        print(f"Brak rozstrzygnięcia po {args.max_turns} turach. Wynik {controller.get_scores()}")
    else:
        print(f"ZWYCIĘZCA: {controller.player_of(winner).name}  {controller.get_scores()}")

    if args.verbose:
        print()
        print(controller.debug_print())

    return 0


if __name__ == "__main__":
    sys.exit(main())
