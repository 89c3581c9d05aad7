"""Tests for the injectable random source."""

from dungen.random_source import RandomSource


class TestRandomSource:
    def test_range_excludes_high(self):
        rng = RandomSource(1)
        values = {rng.range(0, 3) for _ in range(500)}
        assert values == {0, 1, 2}

    def test_range_inclusive_includes_high(self):
        rng = RandomSource(1)
        values = {rng.range_inclusive(1, 3) for _ in range(500)}
        assert values == {1, 2, 3}

    def test_seed_reproduces_sequence(self):
        first = RandomSource(1234)
        second = RandomSource(1234)
        assert [first.range(0, 1000) for _ in range(20)] == [second.range(0, 1000) for _ in range(20)]

    def test_random_seed_is_recorded(self):
        rng = RandomSource()
        replay = RandomSource(rng.seed)
        assert [rng.range(0, 1000) for _ in range(20)] == [replay.range(0, 1000) for _ in range(20)]

    def test_zero_is_a_valid_seed(self):
        assert RandomSource(0).seed == 0
