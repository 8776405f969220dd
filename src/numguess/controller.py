from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional

from . import validation
from .config import GameConfig
from .observable import StateHolder
from .rng import RandomSource
from .state import GameState, GuessRange

logger = logging.getLogger(__name__)

DEFAULT_LOWER: int = 0
DEFAULT_UPPER: int = 100


class GameController:
    """Owns a guessing session and publishes a :class:`GameState` after every change.

    Raw input text (the current guess and both bound fields) lives here rather
    than on the snapshot because it may be transiently invalid while the user
    types. Invalid input never raises: validity is reported through
    :meth:`is_valid_number` / :meth:`is_valid_range` and invalid guesses are
    ignored by :meth:`make_guess`.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        *,
        lower: int = DEFAULT_LOWER,
        upper: int = DEFAULT_UPPER,
        target: Optional[int] = None,
    ) -> None:
        """Start a session whose first round draws from ``lower``..``upper``.

        ``lower <= upper`` is a precondition; an inverted pair raises
        ``ValueError``. ``target`` fixes the first round's number instead of
        drawing it.
        """
        self._rng = rng or RandomSource()
        initial_range = GuessRange(lower, upper)
        self._lower_bound = str(lower)
        self._upper_bound = str(upper)
        self._user_guess = ""
        self._guess_count = 0
        self._target = target if target is not None else self._rng.draw(initial_range)
        self._state: StateHolder[GameState] = StateHolder(
            GameState(self._count_text(), False, initial_range, True)
        )
        logger.debug("Controller initialized with range %s", initial_range)

    @classmethod
    def from_config(cls, config: GameConfig, rng: Optional[RandomSource] = None) -> "GameController":
        """Create a controller using the default bounds and seed from ``config``."""
        return cls(
            rng or RandomSource(config.seed),
            lower=config.default_lower,
            upper=config.default_upper,
        )

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def state(self) -> GameState:
        return self._state.value

    @property
    def user_guess(self) -> str:
        return self._user_guess

    @property
    def lower_bound(self) -> str:
        return self._lower_bound

    @property
    def upper_bound(self) -> str:
        return self._upper_bound

    @property
    def guess_count(self) -> int:
        return self._guess_count

    def subscribe(self, callback: Callable[[GameState], None]) -> Callable[[GameState], None]:
        return self._state.subscribe(callback)

    def unsubscribe(self, callback: Callable[[GameState], None]) -> None:
        self._state.unsubscribe(callback)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    @staticmethod
    def is_valid_number(text: str) -> bool:
        """Return True if ``text`` is a non-negative integer fitting in 64 bits."""
        return validation.is_valid_number(text)

    def is_valid_range(self) -> bool:
        """Check the bounds currently entered by the user.

        Returns:
            True if both bounds are valid numbers and lower <= upper.
        """
        return validation.is_valid_range(self._lower_bound, self._upper_bound)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def update_guess(self, text: str) -> None:
        self._user_guess = text
        self._publish(feedback_text=self._count_text(), is_correct_guess=False)

    def update_lower_bound(self, text: str) -> None:
        self._lower_bound = text
        self._refresh_can_play_again()

    def update_upper_bound(self, text: str) -> None:
        self._upper_bound = text
        self._refresh_can_play_again()

    def make_guess(self) -> None:
        """Submit the current guess text. Invalid text is silently ignored."""
        if not self.is_valid_number(self._user_guess):
            logger.debug("Ignoring invalid guess %r", self._user_guess)
            return

        self._guess_count += 1
        guess = validation.parse_long(self._user_guess)
        correct = False
        if guess < self._target:
            feedback = f"Your guess of {self._user_guess} is too low!"
        elif guess > self._target:
            feedback = f"Your guess of {self._user_guess} is too high!"
        else:
            noun = "guess" if self._guess_count == 1 else "guesses"
            feedback = (
                f"Your guess of {self._user_guess} is correct! "
                f"It took you {self._guess_count} {noun}."
            )
            correct = True
            logger.info("Target guessed after %d guess(es)", self._guess_count)

        self._publish(feedback_text=feedback, is_correct_guess=correct)

    def restart(self) -> None:
        """Start a new round using the entered bounds.

        Callers should only restart while ``state.can_play_again`` is true. A
        restart with invalid bounds is ignored and logged. ``can_play_again`` is
        carried over since every bound edit already recomputes it.
        """
        if not self.is_valid_range():
            logger.warning(
                "Ignoring restart with invalid range lower=%r upper=%r",
                self._lower_bound,
                self._upper_bound,
            )
            return

        new_range = GuessRange(
            validation.parse_long(self._lower_bound),  # type: ignore[arg-type]
            validation.parse_long(self._upper_bound),  # type: ignore[arg-type]
        )
        self._target = self._rng.draw(new_range)
        self._guess_count = 0
        self._user_guess = ""
        self._publish(feedback_text=self._count_text(), is_correct_guess=False, guess_range=new_range)
        logger.info("Restarted round with range %s", new_range)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _count_text(self) -> str:
        return f"Current guesses = {self._guess_count}"

    def _refresh_can_play_again(self) -> None:
        self._publish(can_play_again=self.is_valid_range())

    def _publish(self, **changes) -> None:
        self._state.set(replace(self._state.value, **changes))
