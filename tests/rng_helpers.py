"""Helpers for driving generation with hand-picked random draws."""

from typing import List


class ScriptedSampler:
    """
    Sampler that hands out a fixed list of values in order.

    Each value is checked against the range it is drawn for, so a test fails
    loudly if the code under test draws in a different order than expected.
    """

    def __init__(self, *values: int) -> None:
        self.values: List[int] = list(values)
        self.calls: List[tuple] = []

    def _next(self) -> int:
        assert self.values, "ran out of scripted random values"
        return self.values.pop(0)

    def range(self, low: int, high: int) -> int:
        value = self._next()
        self.calls.append(("range", low, high, value))
        assert low <= value < high, f"{value} not in [{low}, {high})"
        return value

    def range_inclusive(self, low: int, high: int) -> int:
        value = self._next()
        self.calls.append(("range_inclusive", low, high, value))
        assert low <= value <= high, f"{value} not in [{low}, {high}]"
        return value
