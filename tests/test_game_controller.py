from __future__ import annotations

import logging

import pytest

from numguess.controller import GameController
from numguess.rng import RandomSource
from numguess.state import GameState, GuessRange


@pytest.fixture()
def controller() -> GameController:
    return GameController(RandomSource(0), target=50)


def guess(ctrl: GameController, text: str) -> GameState:
    ctrl.update_guess(text)
    ctrl.make_guess()
    return ctrl.state


def test_initial_state():
    ctrl = GameController(RandomSource(3))
    assert ctrl.state == GameState("Current guesses = 0", False, GuessRange(0, 100), True)
    assert ctrl.guess_count == 0
    assert ctrl.user_guess == ""
    assert ctrl.lower_bound == "0"
    assert ctrl.upper_bound == "100"
    assert 0 <= ctrl._target <= 100


def test_too_low_too_high_and_correct(controller):
    s = guess(controller, "30")
    assert s.feedback_text == "Your guess of 30 is too low!"
    assert s.is_correct_guess is False

    s = guess(controller, "70")
    assert s.feedback_text == "Your guess of 70 is too high!"
    assert s.is_correct_guess is False
    assert s.guess_range == GuessRange(0, 100)


def test_correct_on_first_guess_is_singular(controller):
    s = guess(controller, "50")
    assert s.feedback_text == "Your guess of 50 is correct! It took you 1 guess."
    assert s.is_correct_guess is True


def test_correct_after_misses_is_plural(controller):
    guess(controller, "10")
    guess(controller, "90")
    s = guess(controller, "50")
    assert s.feedback_text.endswith("It took you 3 guesses.")
    assert controller.guess_count == 3


def test_invalid_guess_is_a_no_op(controller):
    guess(controller, "30")
    controller.update_guess("abc")
    before = controller.state
    controller.make_guess()
    assert controller.state is before
    assert controller.state.feedback_text == "Current guesses = 1"
    assert controller.state.is_correct_guess is False
    assert controller.guess_count == 1


def test_update_guess_resets_feedback_and_keeps_range(controller):
    guess(controller, "20")
    controller.update_guess("4")
    assert controller.user_guess == "4"
    assert controller.state == GameState("Current guesses = 1", False, GuessRange(0, 100), True)


def test_bound_updates_recompute_can_play_again(controller):
    controller.update_lower_bound("-5")
    assert controller.state.can_play_again is False
    assert controller.is_valid_range() is False
    controller.update_lower_bound("0")
    assert controller.state.can_play_again is True

    controller.update_upper_bound("abc")
    assert controller.state.can_play_again is False
    controller.update_upper_bound("100")
    controller.update_lower_bound("101")
    assert controller.state.can_play_again is False


def test_bound_updates_keep_feedback_and_range(controller):
    guess(controller, "50")
    won = controller.state
    controller.update_lower_bound("10")
    controller.update_upper_bound("20")
    assert controller.state.feedback_text == won.feedback_text
    assert controller.state.is_correct_guess is True
    assert controller.state.guess_range == GuessRange(0, 100)


def test_restart_uses_entered_bounds(controller):
    guess(controller, "50")
    controller.update_lower_bound("10")
    controller.update_upper_bound("20")
    controller.restart()
    assert controller.state == GameState("Current guesses = 0", False, GuessRange(10, 20), True)
    assert controller.guess_count == 0
    assert controller.user_guess == ""
    assert 10 <= controller._target <= 20


def test_restart_target_always_within_bounds_and_reaches_all_values():
    seen = set()
    for seed in range(400):
        ctrl = GameController(RandomSource(seed))
        ctrl.update_lower_bound("10")
        ctrl.update_upper_bound("20")
        ctrl.restart()
        assert ctrl.state.guess_range == GuessRange(10, 20)
        assert 10 <= ctrl._target <= 20
        seen.add(ctrl._target)
    assert seen == set(range(10, 21))


def test_restart_with_invalid_range_is_ignored(controller, caplog):
    guess(controller, "30")
    controller.update_lower_bound("50")
    controller.update_upper_bound("40")
    before = controller.state
    with caplog.at_level(logging.WARNING):
        controller.restart()
    assert controller.state is before
    assert controller.guess_count == 1
    assert controller._target == 50
    assert "Ignoring restart" in caplog.text


def test_restart_with_equal_bounds_fixes_target(controller):
    controller.update_lower_bound("7")
    controller.update_upper_bound("7")
    controller.restart()
    s = guess(controller, "7")
    assert s.is_correct_guess is True


def test_subscribers_see_every_published_state(controller):
    seen = []
    controller.subscribe(seen.append)
    controller.update_guess("60")
    controller.make_guess()
    controller.update_guess("x")
    controller.make_guess()  # ignored, nothing published
    assert [s.feedback_text for s in seen] == [
        "Current guesses = 0",
        "Your guess of 60 is too high!",
        "Current guesses = 1",
    ]
    controller.unsubscribe(seen.append)


def test_is_valid_number_is_exposed_on_controller():
    assert GameController.is_valid_number("12")
    assert not GameController.is_valid_number("-12")


def test_huge_guess_is_ignored(controller):
    controller.update_guess("9" * 5000)
    before = controller.state
    controller.make_guess()
    assert controller.state is before
    assert controller.guess_count == 0


def test_guess_with_many_leading_zeros_is_accepted(controller):
    s = guess(controller, "0" * 5000 + "50")
    assert s.is_correct_guess is True


def test_huge_bound_disables_play_again(controller):
    controller.update_upper_bound("1" * 5000)
    assert controller.state.can_play_again is False
    controller.restart()
    assert controller.state.guess_range == GuessRange(0, 100)


def test_inverted_constructor_bounds_raise():
    with pytest.raises(ValueError):
        GameController(RandomSource(0), lower=10, upper=5)
