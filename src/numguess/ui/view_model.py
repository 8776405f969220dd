from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..controller import GameController

TITLE = "High or Low"
INVALID_GUESS_TEXT = "Invalid guess"
INVALID_RANGE_TEXT = (
    "Make sure the values are positive and the lower bound is less than or equal to the upper bound."
)


@dataclass(frozen=True)
class GameScreenModel:
    """Everything a renderer needs to draw the game screen."""

    title: str
    guess_label: str
    guess_text: str
    guess_error: Optional[str]
    guess_input_read_only: bool
    guess_button_enabled: bool
    feedback_text: str
    play_again_visible: bool
    play_again_enabled: bool
    range_editor_visible: bool
    lower_bound_text: str
    upper_bound_text: str
    range_error: Optional[str]


class GameScreenModelBuilder:
    """Builds a :class:`GameScreenModel` from a controller.

    Renderer-agnostic: the guess field is always shown, while the Play Again
    button and the range editor only appear once the round is won.
    """

    title: str = TITLE

    def build(self, controller: GameController) -> GameScreenModel:
        state = controller.state
        guess_valid = controller.is_valid_number(controller.user_guess)
        range_valid = controller.is_valid_range()
        return GameScreenModel(
            title=self.title,
            guess_label=f"Enter Guess From {state.guess_range}",
            guess_text=controller.user_guess,
            guess_error=None if guess_valid else INVALID_GUESS_TEXT,
            guess_input_read_only=state.is_correct_guess,
            guess_button_enabled=guess_valid and not state.is_correct_guess,
            feedback_text=state.feedback_text,
            play_again_visible=state.is_correct_guess,
            play_again_enabled=state.can_play_again,
            range_editor_visible=state.is_correct_guess,
            lower_bound_text=controller.lower_bound,
            upper_bound_text=controller.upper_bound,
            range_error=None if range_valid else INVALID_RANGE_TEXT,
        )
