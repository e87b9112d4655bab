"""Game-facing layer: player interface and the engine-backed player.

Quick start::

    from ataxie.core import PieceColor, position_from_fen, STARTING_FEN
    from ataxie.game import AIPlayer

    pos = position_from_fen(STARTING_FEN)
    move = AIPlayer(PieceColor.RED).get_move(pos)
"""

from ataxie.game.interfaces import IPlayer
from ataxie.game.player import AIPlayer

__all__ = [
    "AIPlayer",
    "IPlayer",
]
