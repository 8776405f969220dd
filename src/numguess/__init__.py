"""
numguess package root.

Core logic for the "High or Low" number-guessing game. Rendering concerns
stay outside the domain modules; UIs read :class:`GameState` snapshots and the
view model in :mod:`numguess.ui.view_model`.
"""

from .controller import GameController
from .state import GameState, GuessRange

__version__ = "0.1.0"

__all__ = [
    "GameController",
    "GameState",
    "GuessRange",
    "__version__",
]
