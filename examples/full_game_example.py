"""Complete game example playing Triominos to completion.

This example shows:
- Starting a seeded game for several players
- Subscribing to engine notifications
- Random decision making: play a fitting rack piece, else take from the pool
- Concise output focusing on placements and the final standings
"""

import os
import random
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from triominos.engine.event_system import GameEvent
from triominos.engine.game_engine import GameEngine
from triominos.engine.rules_config import RuleConfig
from triominos.models.game_state import GamePhase


def on_piece_placed(event):
    who = event.player.name if event.player else "Dealer"
    print(f"   🔺 {who}: {event.message} at {event.placed_piece.position}")


def on_game_ended(event):
    print(f"\n🏁 Game over ({event.reason.value})")
    for rank, player in enumerate(event.standings, 1):
        print(f"   {rank}. {player}")


def take_turn(engine: GameEngine, rng: random.Random) -> None:
    """Play the first rack piece that fits, otherwise draw from the pool."""
    player = engine.current_player

    pieces = list(player.rack)
    rng.shuffle(pieces)
    for piece in pieces:
        engine.select_from_rack(piece)
        target = next(engine.get_valid_placements(), None)
        if target is not None:
            engine.place(*target)
            return
        engine.deselect()

    if engine.draw_pile.has_pieces:
        drawn = engine.draw_pile.pieces[-1]
        engine.select_from_pool(drawn)
        target = next(engine.get_valid_placements(), None)
        if target is not None:
            engine.place(*target)
        else:
            result = engine.add_selected_to_rack()
            print(f"   📥 {result.message}")
        return

    print(f"   ⏭️  {player.name} passes")
    engine.end_turn()


def main(seed: int = 7, number_of_players: int = 3, max_turns: int = 500):
    rng = random.Random(seed)
    engine = GameEngine(RuleConfig(end_when_blocked=True), rng=rng)
    engine.subscribe(GameEvent.PIECE_PLACED, on_piece_placed)
    engine.subscribe(GameEvent.GAME_ENDED, on_game_ended)

    result = engine.start_game(number_of_players)
    print(f"🎲 {result.message} ({engine.draw_pile.count} pieces in the pool)")

    turns = 0
    while engine.phase == GamePhase.PLAYING and turns < max_turns:
        take_turn(engine, rng)
        turns += 1

    print(f"\n📊 {engine.board.pieces_placed} pieces on the board, "
          f"{engine.total_score} points scored in {turns} turns")


if __name__ == "__main__":
    main()
