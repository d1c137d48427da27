"""Running statistics over a stream of values."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Stats(Generic[T]):
    """Count, sum, mean, min, max and last of added values.

    Works with any values that add together and divide by an int, such as
    numbers or ``datetime.timedelta``. Before any value is added, every
    statistic but ``count`` is None.
    """

    def __init__(self) -> None:
        self._count = 0
        self._sum: Any = None
        self._min: Any = None
        self._max: Any = None
        self._last: Any = None

    def add(self, value: T) -> None:
        self._last = value
        if self._count == 0:
            self._sum = self._min = self._max = value
        else:
            self._sum = self._sum + value
            if value < self._min:
                self._min = value
            if self._max < value:
                self._max = value
        self._count += 1

    def reset(self) -> None:
        """Forget the accumulated values; ``last`` is kept."""
        self._count = 0
        self._sum = self._min = self._max = None

    @property
    def count(self) -> int:
        return self._count

    @property
    def sum(self) -> T | None:
        return self._sum

    @property
    def mean(self) -> T | None:
        if self._count == 0:
            return None
        return self._sum / self._count

    @property
    def min(self) -> T | None:
        return self._min

    @property
    def max(self) -> T | None:
        return self._max

    @property
    def last(self) -> T | None:
        return self._last

    def summary(self) -> dict[str, T | None]:
        return {
            "mean": self.mean,
            "last": self.last,
            "sum": self.sum,
            "min": self.min,
            "max": self.max,
        }

    def __str__(self) -> str:
        parts = [f"n: {self.count:<6}| "]
        parts.extend(f"{key}: {str(value):<14}| " for key, value in self.summary().items())
        return "".join(parts)