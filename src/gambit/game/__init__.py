"""Game management layer — controller, players, state machine.

Quick start::

    from gambit.core import Color
    from gambit.game import AIPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(HumanPlayer(Color.WHITE, "Alice"), AIPlayer(Color.BLACK))
    ctrl.submit_move(move)       # the human's move
    ctrl.run_automated_turns()   # the engine answers
"""

from gambit.game.controller import GameController, GameEvents
from gambit.game.interfaces import GamePhase, Participant
from gambit.game.player import AIPlayer, HumanPlayer
from gambit.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "Participant",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
