"""Tests for the seeded generator."""

import numpy as np
import pytest
from scipy import stats

from py_seedrand import Algorithm, Rounding, SeededRandom, generate_seed

SEED_12345_WORDS = [4207900869, 1317490944, 2079646450, 3513001552, 2187978186]


class TestConstruction:
    """Test seeding."""

    def test_integer_seed(self):
        rng = SeededRandom(12345)
        assert rng.seed == 12345
        assert rng.state == 12345

    def test_seed_masked_to_32_bits(self):
        rng = SeededRandom(2**32 + 7)
        assert rng.seed == 7

        rng = SeededRandom(-1)
        assert rng.seed == 0xFFFFFFFF

    def test_string_seed_is_hashed(self):
        rng = SeededRandom("seed")
        assert rng.seed == generate_seed("seed") == 246123560

    def test_random_seed(self):
        rng = SeededRandom()
        assert 0 <= rng.seed < 2**32
        assert rng.state == rng.seed

    def test_static_helpers(self):
        assert SeededRandom.generate_seed("seed") == 246123560
        assert len(SeededRandom.generate_string(8)) == 8

    def test_defaults(self):
        rng = SeededRandom(1)
        assert rng.rounding is Rounding.TRUNCATE
        assert rng.algorithm is Algorithm.MULBERRY32

    def test_names_accepted(self):
        rng = SeededRandom(1, rounding="floor", algorithm="splitmix32")
        assert rng.rounding is Rounding.FLOOR
        assert rng.algorithm is Algorithm.SPLITMIX32

    def test_seed_is_read_only(self):
        rng = SeededRandom(1)
        with pytest.raises(AttributeError):
            rng.seed = 2


class TestNext:
    """Test uniform draws."""

    def test_golden_sequence(self):
        rng = SeededRandom(12345)
        values = [rng.next() for _ in range(5)]
        assert values == [w / 2**32 for w in SEED_12345_WORDS]

    def test_seed_zero_first_value(self):
        assert SeededRandom(0).next() == 1144304738 / 2**32

    def test_determinism(self):
        """Test two generators with the same seed give identical streams."""
        a = SeededRandom(2024)
        b = SeededRandom(2024)
        assert [a.next() for _ in range(1000)] == [b.next() for _ in range(1000)]

    def test_different_seeds_differ(self):
        a = SeededRandom(1)
        b = SeededRandom(2)
        assert [a.next() for _ in range(10)] != [b.next() for _ in range(10)]

    def test_range(self):
        rng = SeededRandom(7)
        values = [rng.next(5, 10) for _ in range(10000)]
        assert min(values) >= 5
        assert max(values) < 10

    def test_inverted_range(self):
        """Test that min > max yields a decreasing range without error."""
        rng = SeededRandom(7)
        values = [rng.next(10, 5) for _ in range(1000)]
        assert all(5 < v <= 10 for v in values)

    def test_equal_bounds(self):
        rng = SeededRandom(7)
        assert all(rng.next(3, 3) == 3 for _ in range(100))

    def test_one_step_per_draw(self):
        rng = SeededRandom(12345)
        rng.next()
        rng.next()
        assert rng.state == 3663143971
        assert rng.call_count == 2

    def test_uniformity(self):
        """Test sample mean and chi-square uniformity over 100,000 draws."""
        rng = SeededRandom(12345)
        values = rng.next_array(100_000)

        assert abs(values.mean() - 0.5) < 0.01

        counts, _ = np.histogram(values, bins=20, range=(0.0, 1.0))
        _, p_value = stats.chisquare(counts)
        assert p_value > 0.001


class TestState:
    """Test reading and writing the stream position."""

    def test_set_state_round_trip(self):
        """Test that transitions depend only on state and the call made."""
        a = SeededRandom(1)
        a.next()
        a.set_state(555)
        value_a = a.next()

        b = SeededRandom(999)
        b.set_state(555)
        value_b = b.next()

        assert value_a == value_b
        assert a.get_state() == b.get_state()

    def test_state_property(self):
        rng = SeededRandom(1)
        rng.state = 12345
        assert rng.next() == SEED_12345_WORDS[0] / 2**32
        assert rng.seed == 1

    def test_state_masked(self):
        rng = SeededRandom(1)
        rng.state = 2**32 + 5
        assert rng.state == 5

    def test_replay_from_saved_state(self):
        rng = SeededRandom(31337)
        for _ in range(10):
            rng.next()
        saved = rng.state
        first = [rng.next() for _ in range(5)]

        rng.state = saved
        assert [rng.next() for _ in range(5)] == first

    def test_clone_is_independent(self):
        rng = SeededRandom(5, rounding="ceil")
        rng.next()
        twin = rng.clone()

        assert twin.seed == rng.seed
        assert twin.rounding is Rounding.CEIL
        assert twin.next() == rng.next()

        twin.next()
        assert twin.state != rng.state

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_jump(self, algorithm):
        stepped = SeededRandom(8, algorithm=algorithm)
        for _ in range(25):
            stepped.next()

        jumped = SeededRandom(8, algorithm=algorithm)
        jumped.jump(25)
        assert jumped.state == stepped.state

        jumped.jump(-25)
        assert jumped.state == 8


class TestNextArray:
    """Test vectorised draws."""

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_matches_sequential_draws(self, algorithm):
        sequential = SeededRandom(42, algorithm=algorithm)
        expected = [sequential.next(-3.0, 8.5) for _ in range(1000)]

        vectorised = SeededRandom(42, algorithm=algorithm)
        values = vectorised.next_array(1000, -3.0, 8.5)

        np.testing.assert_array_equal(values, np.array(expected))
        assert vectorised.state == sequential.state
        assert vectorised.call_count == 1000

    def test_golden_prefix(self):
        values = SeededRandom(12345).next_array(5)
        np.testing.assert_array_equal(values, np.array(SEED_12345_WORDS) / 2**32)

    def test_empty(self):
        rng = SeededRandom(3)
        assert rng.next_array(0).shape == (0,)
        assert rng.state == 3

    def test_wraps_around_state_space(self):
        sequential = SeededRandom(0xFFFFFFF0)
        expected = [sequential.next() for _ in range(10)]

        values = SeededRandom(0xFFFFFFF0).next_array(10)
        np.testing.assert_array_equal(values, np.array(expected))


class TestSplitMix32Engine:
    """Test the alternate algorithm through the engine."""

    def test_golden_sequence(self):
        rng = SeededRandom(12345, algorithm=Algorithm.SPLITMIX32)
        values = [rng.next() for _ in range(3)]
        assert values == [w / 2**32 for w in [3283241497, 613117429, 2940958500]]
