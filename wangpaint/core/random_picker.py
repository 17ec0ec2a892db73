"""
Random pickers - Choose between values that each have a probability
"""
from typing import Generic, List, Optional, Tuple, TypeVar
import bisect
import random


T = TypeVar('T')


class RandomPicker(Generic[T]):
    """
    Picks one of the added values, weighted by probability.

    Values with a probability of 0 or less are never picked.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._sum = 0.0
        self._thresholds: List[float] = []
        self._values: List[T] = []

    def add(self, value: T, probability: float = 1.0) -> None:
        if probability > 0:
            self._sum += probability
            self._thresholds.append(self._sum)
            self._values.append(value)

    def is_empty(self) -> bool:
        return not self._values

    def pick(self) -> T:
        assert not self.is_empty()

        if len(self._values) == 1:
            return self._values[0]

        threshold = self._rng.uniform(0, self._sum)
        index = bisect.bisect_left(self._thresholds, threshold)
        return self._values[min(index, len(self._values) - 1)]

    def clear(self) -> None:
        self._sum = 0.0
        self._thresholds.clear()
        self._values.clear()


class RandomTaker(Generic[T]):
    """Like RandomPicker, except each added value can only be taken once"""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self._sum = 0.0
        self._entries: List[Tuple[T, float]] = []

    def add(self, value: T, probability: float = 1.0) -> None:
        if probability > 0:
            self._sum += probability
            self._entries.append((value, probability))

    def is_empty(self) -> bool:
        return not self._entries

    def take(self) -> T:
        assert not self.is_empty()

        threshold = self._rng.uniform(0, self._sum)

        total = 0.0
        i = len(self._entries) - 1
        while i > 0:
            total += self._entries[i][1]
            if total > threshold:
                break
            i -= 1

        value, probability = self._entries.pop(i)
        self._sum -= probability
        return value

    def clear(self) -> None:
        self._sum = 0.0
        self._entries.clear()
