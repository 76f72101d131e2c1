# revad/core/result.py
from __future__ import annotations

from typing import Iterable

import numpy as np


class Result:
    """
    Function value together with its partial derivatives, one per argument.

    Produced once per evaluation and immutable afterwards: the derivative
    array is a read-only copy.
    """

    __slots__ = ("_value", "_derivatives")

    def __init__(self, value: float, derivatives: Iterable[float] = ()):
        d = np.array(derivatives, dtype=np.float64).reshape(-1)
        d.setflags(write=False)
        object.__setattr__(self, "_value", np.float64(value))
        object.__setattr__(self, "_derivatives", d)

    def __setattr__(self, name, value):
        raise AttributeError("Result is immutable")

    @property
    def value(self) -> np.float64:
        return self._value

    @property
    def magnitude(self) -> np.float64:
        return self._value

    @property
    def derivatives(self) -> np.ndarray:
        return self._derivatives

    @property
    def count(self) -> int:
        return len(self._derivatives)

    def __len__(self) -> int:
        return len(self._derivatives)

    def derivative(self, i: int = 0) -> np.float64:
        """Partial derivative with respect to argument `i`."""
        if not 0 <= i < len(self._derivatives):
            raise IndexError(
                f"derivative index {i} out of range for {len(self._derivatives)} arguments"
            )
        return self._derivatives[i]

    def __iter__(self):
        # Allows `value, derivatives = result`
        yield self._value
        yield self._derivatives

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return bool(self._value == other._value) and np.array_equal(
            self._derivatives, other._derivatives
        )

    def __hash__(self):
        return hash((float(self._value), tuple(float(d) for d in self._derivatives)))

    def __lt__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        return self._value >= other._value

    def __repr__(self):
        return f"Result(value={self._value!r}, derivatives={self._derivatives.tolist()!r})"

    def __str__(self):
        parts = [str(self._value)]
        parts.extend(f"{d}ϵ{i}" for i, d in enumerate(self._derivatives))
        return " + ".join(parts)
