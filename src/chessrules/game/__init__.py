"""Game management layer — applies moves and keeps turn/castling bookkeeping.

Quick start::

    from chessrules.game import GameState

    gs = GameState()
    gs.setup()
    gs.apply_move((6, 4), (4, 4))
"""

from chessrules.game.interfaces import GameConfig, GamePhase
from chessrules.game.state import GameState, IllegalMoveError, MoveRecord

__all__ = [
    "GameConfig",
    "GamePhase",
    "GameState",
    "IllegalMoveError",
    "MoveRecord",
]
