# revad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the tape. Each call owns a private tape that never
# outlives it.
#-----------------------------------------------------------------------------
from __future__ import annotations

import functools
import logging
import numbers
from typing import Any, Callable, List, Sequence, Tuple

import numpy as np

from ..config import config
from .engine import reverse
from .result import Result
from .tape import Tape
from .var import Codual

logger = logging.getLogger(__name__)


def value(x: Any) -> Any:
    """Return the magnitude of a Codual; pass through plain numbers unchanged."""
    return x.val if isinstance(x, Codual) else x


def _seed_inputs(xs: Sequence[float]) -> Tuple[Tape, List[Codual]]:
    tape = Tape(len(xs))
    args = []
    for i, x in enumerate(xs):
        if not isinstance(x, numbers.Real):
            raise TypeError(f"argument {i} must be a real number, got {type(x).__name__}")
        args.append(Codual(x, tape, i))
    return tape, args


def _record(f: Callable[[List[Codual]], Any], xs: Sequence[float]) -> Tuple[Tape, Any]:
    tape, args = _seed_inputs(xs)
    y = f(args)
    if isinstance(y, Codual) and y.tape is not tape:
        raise ValueError("Function returned a Codual recorded on a different tape")
    return tape, y


def _evaluate(f: Callable[[List[Codual]], Any], xs: Sequence[float]) -> Result:
    """One forward pass, one reverse pass, on a fresh tape."""
    with np.errstate(all=config.fp_errors):
        tape, y = _record(f, xs)
        if not isinstance(y, Codual):
            # Output does not depend on any input
            return Result(y, np.zeros(tape.seed_count))
        grads = reverse(tape, output=y.idx)
    logger.debug("recorded %d nodes for %d inputs", len(tape), tape.seed_count)
    return Result(y.val, grads)


# ----------------------------- positional form ----------------------------- #
def derivative_at(f: Callable[..., Codual], *xs: float) -> Result:
    """
    Value and gradient of y = f(x0, x1, ...) at the given point.

    `f` receives one Codual per argument, in order, and must return a Codual
    (or a plain number for a constant function). All partials come out of a
    single reverse pass.

    Example
    -------
    r = derivative_at(lambda x, y: 3 * x**2 - 2 * y**3, 5, 2)
    r.value, r.derivatives -> 59.0, [30.0, -24.0]
    """
    return _evaluate(lambda args: f(*args), xs)


# ------------------------------- array form -------------------------------- #
def derivative_at_list(f: Callable[[List[Codual]], Codual], xs: Sequence[float]) -> Result:
    """
    Same as derivative_at(), but `f` takes a single list of Coduals.

    Example
    -------
    derivative_at_list(lambda xs: xs[0] * xs[1], [2.0, 4.0]).derivatives -> [4.0, 2.0]
    """
    return _evaluate(f, list(xs))


def differentiate(f: Callable[..., Codual]) -> Callable[..., Result]:
    """Curried derivative_at(): returns x -> derivative_at(f, *x)."""
    @functools.wraps(f)
    def df(*xs: float) -> Result:
        return derivative_at(f, *xs)
    return df


def differentiate_list(f: Callable[[List[Codual]], Codual]) -> Callable[[Sequence[float]], Result]:
    """Curried derivative_at_list()."""
    @functools.wraps(f)
    def df(xs: Sequence[float]) -> Result:
        return derivative_at_list(f, xs)
    return df


def grad(f: Callable[[Codual], Codual], x0: float) -> np.float64:
    """Derivative of a single-input function at x0."""
    return derivative_at(f, x0).derivative(0)


def record(f: Callable[..., Codual], *xs: float) -> Tuple[Tape, Any]:
    """
    Run only the forward pass and hand back the tape with the output.

    Meant for inspection (see graph_utils) and for running reverse() on the
    same tape more than once.
    """
    with np.errstate(all=config.fp_errors):
        return _record(lambda args: f(*args), xs)
