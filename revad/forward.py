# revad/forward.py
# Forward-mode numbers (independent from the tape and the reverse engine)

import numbers
from typing import Callable, List, Sequence

import numpy as np

from .config import config
from .core.result import Result


def _check_exponent(k):
    if not isinstance(k, numbers.Integral):
        raise TypeError(f"Exponent must be a constant integer, got {type(k).__name__}")
    return int(k)


def _magnitude_of(x, cls):
    # Ordering compares values against a number of the same kind or a real
    if isinstance(x, cls):
        return x.val
    if isinstance(x, numbers.Real):
        return x
    return None


class Dual:
    """
    Forward-mode number carrying one directional derivative:
    v = val + dot * ϵ  with  ϵ² = 0
    """
    __slots__ = ("val", "dot")
    __array_priority__ = 1000

    def __init__(self, val, dot=0.0):
        self.val = np.float64(val)
        self.dot = np.float64(dot)

    def __repr__(self):
        return f"Dual({self.val!r}, {self.dot!r})"

    def __str__(self):
        return f"{self.val} + {self.dot}ϵ"

    def __eq__(a, b):
        if not isinstance(b, Dual):
            return NotImplemented
        return bool(a.val == b.val and a.dot == b.dot)

    def __hash__(self):
        return hash((float(self.val), float(self.dot)))

    def __lt__(a, b):
        m = _magnitude_of(b, Dual)
        return NotImplemented if m is None else a.val < m

    def __le__(a, b):
        m = _magnitude_of(b, Dual)
        return NotImplemented if m is None else a.val <= m

    def __gt__(a, b):
        m = _magnitude_of(b, Dual)
        return NotImplemented if m is None else a.val > m

    def __ge__(a, b):
        m = _magnitude_of(b, Dual)
        return NotImplemented if m is None else a.val >= m

    def __add__(a, b):
        if not isinstance(b, Dual): b = Dual(b)
        return Dual(a.val + b.val, a.dot + b.dot)
    __radd__ = __add__

    def __sub__(a, b):
        if not isinstance(b, Dual): b = Dual(b)
        return Dual(a.val - b.val, a.dot - b.dot)

    def __rsub__(b, a):
        if not isinstance(a, Dual): a = Dual(a)
        return Dual(a.val - b.val, a.dot - b.dot)

    def __mul__(a, b):
        if not isinstance(b, Dual): b = Dual(b)
        return Dual(a.val * b.val, a.dot * b.val + a.val * b.dot)
    __rmul__ = __mul__

    def __truediv__(a, b):
        if not isinstance(b, Dual): b = Dual(b)
        return Dual(a.val / b.val, (a.dot * b.val - a.val * b.dot) / (b.val * b.val))

    def __rtruediv__(b, a):
        if not isinstance(a, Dual): a = Dual(a)
        return a / b

    def __neg__(a):
        return Dual(-a.val, -a.dot)

    def __pos__(a):
        return a

    def __pow__(a, k):
        return a.pow(k)

    def __abs__(a):
        return a.abs()

    def pow(a, k):
        k = _check_exponent(k)
        d = 0.0 if k == 0 else k * a.val ** (k - 1) * a.dot
        return Dual(a.val ** k, d)

    def exp(a):
        e = np.exp(a.val)
        return Dual(e, e * a.dot)

    def log(a):
        return Dual(np.log(a.val), a.dot / a.val)

    def abs(a):
        return Dual(np.abs(a.val), -a.dot if a.val < 0 else a.dot)

    def sin(a):
        return Dual(np.sin(a.val), a.dot * np.cos(a.val))

    def cos(a):
        return Dual(np.cos(a.val), a.dot * -np.sin(a.val))

    def sin_deg(a):
        r = a.val * np.pi / 180.0
        return Dual(np.sin(r), a.dot * np.cos(r))

    def cos_deg(a):
        r = a.val * np.pi / 180.0
        return Dual(np.cos(r), a.dot * -np.sin(r))


class Number:
    """
    Forward-mode number carrying the full vector of partials:
    v = val + Σ grad[i] ϵ_i

    `grad` is a read-only float64 array; every operation builds a new one
    elementwise, so one evaluation yields all N partials at once at the cost
    of N-wide arithmetic per operation.
    """
    __slots__ = ("val", "grad")
    __array_priority__ = 1000

    def __init__(self, val, grad=()):
        g = np.array(grad, dtype=np.float64).reshape(-1)
        g.setflags(write=False)
        self.val = np.float64(val)
        self.grad = g

    @classmethod
    def _lift(cls, x, like: "Number") -> "Number":
        if isinstance(x, Number):
            return x
        return cls(x, np.zeros_like(like.grad))

    def __repr__(self):
        return f"Number({self.val!r}, {self.grad.tolist()!r})"

    def __str__(self):
        parts = [str(self.val)]
        parts.extend(f"{d}ϵ{i}" for i, d in enumerate(self.grad))
        return " + ".join(parts)

    def __eq__(a, b):
        if not isinstance(b, Number):
            return NotImplemented
        return bool(a.val == b.val) and np.array_equal(a.grad, b.grad)

    def __hash__(self):
        return hash((float(self.val), tuple(float(d) for d in self.grad)))

    def __lt__(a, b):
        m = _magnitude_of(b, Number)
        return NotImplemented if m is None else a.val < m

    def __le__(a, b):
        m = _magnitude_of(b, Number)
        return NotImplemented if m is None else a.val <= m

    def __gt__(a, b):
        m = _magnitude_of(b, Number)
        return NotImplemented if m is None else a.val > m

    def __ge__(a, b):
        m = _magnitude_of(b, Number)
        return NotImplemented if m is None else a.val >= m

    def __add__(a, b):
        b = Number._lift(b, a)
        return Number(a.val + b.val, a.grad + b.grad)
    __radd__ = __add__

    def __sub__(a, b):
        b = Number._lift(b, a)
        return Number(a.val - b.val, a.grad - b.grad)

    def __rsub__(b, a):
        a = Number._lift(a, b)
        return Number(a.val - b.val, a.grad - b.grad)

    def __mul__(a, b):
        b = Number._lift(b, a)
        return Number(a.val * b.val, a.grad * b.val + b.grad * a.val)
    __rmul__ = __mul__

    def __truediv__(a, b):
        b = Number._lift(b, a)
        return Number(a.val / b.val, (a.grad * b.val - a.val * b.grad) / (b.val * b.val))

    def __rtruediv__(b, a):
        a = Number._lift(a, b)
        return a / b

    def __neg__(a):
        return Number(-a.val, -a.grad)

    def __pos__(a):
        return a

    def __pow__(a, k):
        return a.pow(k)

    def __abs__(a):
        return a.abs()

    def pow(a, k):
        k = _check_exponent(k)
        if k == 0:
            return Number(1.0, np.zeros_like(a.grad))
        return Number(a.val ** k, k * a.val ** (k - 1) * a.grad)

    def exp(a):
        e = np.exp(a.val)
        return Number(e, e * a.grad)

    def log(a):
        return Number(np.log(a.val), a.grad * (1.0 / a.val))

    def abs(a):
        return Number(np.abs(a.val), a.grad * (-1.0 if a.val < 0 else 1.0))

    def sin(a):
        return Number(np.sin(a.val), a.grad * np.cos(a.val))

    def cos(a):
        return Number(np.cos(a.val), a.grad * -np.sin(a.val))

    def sin_deg(a):
        r = a.val * np.pi / 180.0
        return Number(np.sin(r), a.grad * np.cos(r))

    def cos_deg(a):
        r = a.val * np.pi / 180.0
        return Number(np.cos(r), a.grad * -np.sin(r))


# ----- Drivers -----
def _unit_numbers(xs: Sequence[float]) -> List[Number]:
    n = len(xs)
    return [Number(x, np.eye(n)[i]) for i, x in enumerate(xs)]


def _as_result(y, n: int) -> Result:
    if isinstance(y, Number):
        return Result(y.val, y.grad)
    # Constant output
    return Result(y, np.zeros(n))


def apply(f: Callable, *xs: float) -> np.float64:
    """Evaluate f at the given point without differentiating."""
    with np.errstate(all=config.fp_errors):
        y = f(*[Dual(x) for x in xs])
    return y.val if isinstance(y, Dual) else np.float64(y)


def dual_derivative_at(f: Callable[[Dual], Dual], x: float) -> Result:
    """Value and derivative of a single-input function in one forward pass."""
    with np.errstate(all=config.fp_errors):
        y = f(Dual(x, 1.0))
    if isinstance(y, Dual):
        return Result(y.val, [y.dot])
    return Result(y, [0.0])


def forward_derivative_at(f: Callable[..., Number], *xs: float) -> Result:
    """
    Value and gradient of f(x0, x1, ...) via vector forward mode.

    Each input is seeded with the i-th unit vector; the result has the same
    shape as the reverse-mode derivative_at().
    """
    with np.errstate(all=config.fp_errors):
        y = f(*_unit_numbers(xs))
    return _as_result(y, len(xs))


def forward_derivative_at_list(f: Callable[[List[Number]], Number], xs: Sequence[float]) -> Result:
    """Same as forward_derivative_at(), for f taking a single list."""
    xs = list(xs)
    with np.errstate(all=config.fp_errors):
        y = f(_unit_numbers(xs))
    return _as_result(y, len(xs))
