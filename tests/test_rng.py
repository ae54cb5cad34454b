import pytest

from sentiment.core.rng import RNG


def test_rng_determinism_same_seed() -> None:
    rng_a = RNG(12345)
    rng_b = RNG(12345)

    rolls_a = [rng_a.roll_die(20) for _ in range(5)]
    rolls_b = [rng_b.roll_die(20) for _ in range(5)]

    assert rolls_a == rolls_b


def test_rng_different_seed() -> None:
    rng_a = RNG(11111)
    rng_b = RNG(22222)

    draws_a = [rng_a.randint(1, 100) for _ in range(5)]
    draws_b = [rng_b.randint(1, 100) for _ in range(5)]

    assert draws_a != draws_b


def test_roll_die_stays_within_faces() -> None:
    rng = RNG(7)
    rolls = {rng.roll_die(6) for _ in range(200)}

    assert rolls <= {1, 2, 3, 4, 5, 6}
    assert len(rolls) == 6


def test_roll_die_rejects_faceless_die() -> None:
    with pytest.raises(ValueError):
        RNG(1).roll_die(0)
