"""Game management layer: controller, players, state machine.

Quick start::

    from chessmaster.game import AIPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=AIPlayer(Color.BLACK),
    )
"""

from chessmaster.game.controller import GameController, GameEvents
from chessmaster.game.interfaces import GameMode, GamePhase, IPlayer
from chessmaster.game.player import AIPlayer, HumanPlayer
from chessmaster.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GameMode",
    "GamePhase",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
