from numguess.rng import RandomSource
from numguess.state import GuessRange


def test_random_source_determinism_same_seed():
    r1 = RandomSource(12345)
    r2 = RandomSource(12345)
    assert [r1.randint(0, 1000) for _ in range(10)] == [r2.randint(0, 1000) for _ in range(10)]


def test_draw_is_inclusive_and_covers_range():
    rng = RandomSource(7)
    r = GuessRange(3, 6)
    values = {rng.draw(r) for _ in range(500)}
    assert values == {3, 4, 5, 6}


def test_draw_single_value_range():
    assert RandomSource(1).draw(GuessRange(9, 9)) == 9
