"""Direct (Horner) evaluation along an arithmetic progression."""

from __future__ import annotations

from typing import Any, Iterator

from tabkit.polynomial import Polynomial
from tabkit.utils.validate import validate_count, validate_step

__all__ = ["DirectEvaluator"]


class DirectEvaluator:
    """Iterator evaluating ``polynomial`` at ``x0 + i * h`` from scratch.

    Each value costs ``d`` multiply-adds and carries no error from earlier
    points. This is the path taken when there are too few points for
    tabulation to pay off, and the reference the tabulator is tested against.
    """

    def __init__(
        self,
        polynomial: Polynomial,
        x0: Any,
        step: Any,
        count: int | None = None,
        *,
        allow_zero_step: bool = False,
    ) -> None:
        self.polynomial = polynomial
        self.x0 = x0
        self.step = step
        self.count = validate_count(count, allow_none=True)
        validate_step(step, self.count, allow_zero_step=allow_zero_step)
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    @property
    def remaining(self) -> int | None:
        if self.count is None:
            return None
        return self.count - self._index

    @property
    def position(self) -> Any:
        return self.x0 + self._index * self.step

    def __iter__(self) -> DirectEvaluator:
        return self

    def __next__(self) -> Any:
        if self.count is not None and self._index >= self.count:
            raise StopIteration
        value = self.polynomial.evaluate(self.position)
        self._index += 1
        return value

    def points(self) -> Iterator[tuple[Any, Any]]:
        """Yields ``(x, p(x))`` pairs for the remaining values."""
        while self.count is None or self._index < self.count:
            x = self.position
            yield x, next(self)
