"""Game management layer: turn-by-turn state machine.

Quick start::

    from chessrules.game import GameState

    game = GameState()
    game.setup()
    game.attempt_move("e2", "e4")
    print(game.status.name, game.side_to_move)  # NORMAL black
"""

from chessrules.game.state import GameState

__all__ = ["GameState"]
