from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GuessRange:
    """Inclusive range of values the target may be drawn from."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"GuessRange low ({self.low}) must be <= high ({self.high})")

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return self.low <= value <= self.high

    @property
    def size(self) -> int:
        return self.high - self.low + 1

    def __str__(self) -> str:
        return f"{self.low}-{self.high}"


@dataclass(frozen=True)
class GameState:
    """Snapshot of the current round as seen by the UI.

    Attributes:
        feedback_text: Status line ("Current guesses = N", hint or win message).
        is_correct_guess: True once the round's target has been guessed.
        guess_range: Inclusive bounds shown to the user for this round.
        can_play_again: True iff the currently entered bounds form a valid range.
    """

    feedback_text: str
    is_correct_guess: bool
    guess_range: GuessRange
    can_play_again: bool = True
