from __future__ import annotations

import logging
from typing import Iterable, TextIO

from .controller import GameController
from .ui.view_model import GameScreenModel, GameScreenModelBuilder

logger = logging.getLogger(__name__)

HELP_TEXT = (
    "Commands: <number> | g <number> | lower <number> | upper <number> | again | show | help | quit"
)


class ConsoleGame:
    """Line-oriented front end that drives a :class:`GameController`.

    Each input line maps onto one controller operation; output goes to the
    given stream so the loop can be exercised without a terminal.
    """

    def __init__(self, controller: GameController, out: TextIO) -> None:
        self.controller = controller
        self.out = out
        self._builder = GameScreenModelBuilder()

    def _print(self, text: str) -> None:
        self.out.write(text + "\n")

    def model(self) -> GameScreenModel:
        return self._builder.build(self.controller)

    def render(self) -> None:
        m = self.model()
        self._print(f"== {m.title} ==")
        self._print(m.guess_label)
        self._print(m.feedback_text)
        if m.range_editor_visible:
            self._print(f"Range: lower={m.lower_bound_text!r} upper={m.upper_bound_text!r}")
            if m.range_error:
                self._print(m.range_error)
            if m.play_again_visible:
                self._print("Type 'again' to play again." if m.play_again_enabled else "Fix the range to play again.")

    def _guess(self, text: str) -> None:
        # The guess field is read-only once the round is won
        if self.model().guess_input_read_only:
            self._print("Round is over. Type 'again' to play again.")
            return
        self.controller.update_guess(text)
        m = self.model()
        if m.guess_error:
            self._print(m.guess_error)
            return
        self.controller.make_guess()
        self._print(self.controller.state.feedback_text)

    def _again(self) -> None:
        state = self.controller.state
        if not state.is_correct_guess:
            self._print("Finish the current round first.")
            return
        if not state.can_play_again:
            self._print(self.model().range_error or "Invalid range.")
            return
        self.controller.restart()
        self.render()

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False when the loop should stop."""
        parts = line.split()
        if not parts:
            return True
        cmd, args = parts[0].lower(), parts[1:]
        logger.debug("Console command %r args=%r", cmd, args)

        if cmd in ("quit", "exit", "q"):
            return False
        if cmd in ("help", "?"):
            self._print(HELP_TEXT)
        elif cmd == "show":
            self.render()
        elif cmd == "again":
            self._again()
        elif cmd in ("lower", "upper"):
            if not self.controller.state.is_correct_guess:
                self._print("The range can be changed once the round is won.")
                return True
            value = args[0] if args else ""
            if cmd == "lower":
                self.controller.update_lower_bound(value)
            else:
                self.controller.update_upper_bound(value)
            error = self.model().range_error
            if error:
                self._print(error)
        elif cmd == "g":
            self._guess(args[0] if args else "")
        elif len(parts) == 1:
            self._guess(parts[0])
        else:
            self._print(HELP_TEXT)
        return True

    def run(self, lines: Iterable[str]) -> int:
        self.render()
        for line in lines:
            if not self.handle(line.rstrip("\n")):
                break
        self._print("Bye!")
        return 0
