# revad/core/var.py
from __future__ import annotations

import numbers

import numpy as np

from .tape import Tape


class Codual:
    """
    Recording number for reverse-mode AD.

    A Codual is an immutable pair (magnitude, node index) plus the tape that
    owns the node. Arithmetic on Coduals computes the new magnitude, pushes
    one node onto that tape and returns a fresh Codual for it; nothing is
    ever modified in place.

    Attributes
    ----------
    val : np.float64
        Forward (primal) value.
    idx : int
        Index of the node that produced this value.
    tape : Tape
        The tape this value was recorded on.
    """

    __slots__ = ("val", "idx", "tape")
    __array_priority__ = 1000  # numpy scalars defer to our reflected operators

    def __init__(self, val, tape: Tape, idx: int):
        if not isinstance(val, numbers.Real):
            raise TypeError(f"Codual only accepts real numbers, but got {type(val)}")
        object.__setattr__(self, "val", np.float64(val))
        object.__setattr__(self, "tape", tape)
        object.__setattr__(self, "idx", idx)

    def __setattr__(self, name, value):
        raise AttributeError("Codual is immutable")

    @property
    def magnitude(self) -> float:
        return float(self.val)

    def __repr__(self):
        return f"Codual({self.val!r}, idx={self.idx})"

    def __str__(self):
        return f"{self.val} + Xϵ"

    # Identity is the node, ordering is the magnitude
    def __eq__(self, other):
        if not isinstance(other, Codual):
            return NotImplemented
        return self.tape is other.tape and self.idx == other.idx

    def __ne__(self, other):
        if not isinstance(other, Codual):
            return NotImplemented
        return not self == other

    def __hash__(self):
        return hash((id(self.tape), self.idx))

    def _magnitude_of(self, other):
        if isinstance(other, Codual):
            return other.val
        if isinstance(other, numbers.Real):
            return other
        return None

    def __lt__(self, other):
        m = self._magnitude_of(other)
        return NotImplemented if m is None else self.val < m

    def __le__(self, other):
        m = self._magnitude_of(other)
        return NotImplemented if m is None else self.val <= m

    def __gt__(self, other):
        m = self._magnitude_of(other)
        return NotImplemented if m is None else self.val > m

    def __ge__(self, other):
        m = self._magnitude_of(other)
        return NotImplemented if m is None else self.val >= m

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pos__(self):
        return self

    def __pow__(self, k):
        from ..ops.arithmetic import pow
        return pow(self, k)

    def __abs__(self):
        return self.abs()

    # Named elementary functions
    def pow(self, k: int) -> "Codual":
        return self ** k

    def exp(self) -> "Codual":
        from ..ops.transcendental import exp
        return exp(self)

    def log(self) -> "Codual":
        from ..ops.transcendental import log
        return log(self)

    def abs(self) -> "Codual":
        from ..ops.transcendental import absolute
        return absolute(self)

    def sin(self) -> "Codual":
        from ..ops.trig import sin
        return sin(self)

    def cos(self) -> "Codual":
        from ..ops.trig import cos
        return cos(self)

    def sin_deg(self) -> "Codual":
        from ..ops.trig import sin_deg
        return sin_deg(self)

    def cos_deg(self) -> "Codual":
        from ..ops.trig import cos_deg
        return cos_deg(self)
