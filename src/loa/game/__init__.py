"""Game management layer - controller, players, clock.

Quick start::

    from loa.core import Side
    from loa.game import GameController, MachinePlayer, TimeControl

    ctrl = GameController()
    ctrl.new_game(
        black=MachinePlayer(Side.BLACK),
        white=MachinePlayer(Side.WHITE),
        time_control=TimeControl(60),
    )
    result = ctrl.play()
"""

from loa.game.clock import Clock
from loa.game.controller import GameController, GameEvents
from loa.game.interfaces import GamePhase, IClock, IPlayer, TimeControl
from loa.game.player import HumanPlayer, MachinePlayer, MoveSource

__all__ = [
    # Interfaces
    "GamePhase",
    "IClock",
    "IPlayer",
    "TimeControl",
    # Concrete
    "Clock",
    "GameController",
    "GameEvents",
    "HumanPlayer",
    "MachinePlayer",
    "MoveSource",
]
