# revad/core/engine.py
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from ..config import config
from .node import IGNORE
from .rules import contributions
from .tape import Tape

logger = logging.getLogger(__name__)


def adjoints(tape: Tape, output: Optional[int] = None, seed: float = 1.0) -> np.ndarray:
    """
    Run a single reverse pass over `tape` and return the adjoint of every node.

    Args:
        tape   : a fully recorded tape.
        output : index of the node being differentiated; defaults to the last
                 node on the tape.
        seed   : adjoint planted at the output (d output / d output).

    Notes:
        - Nodes are visited from `output` down to the first non-seed node,
          exactly once each. Every operand has a smaller index than its
          consumer, so a node's adjoint is complete by the time it is visited.
        - For each operand p of node i: adj[p] += rule(adj[i]). Contributions
          are summed, which is what makes fan-out (x + x) come out right.
        - Nodes with a zero adjoint are skipped: they contribute nothing.
          A branch scaled by zero is therefore never propagated, so an output
          whose value is NaN (say x + (1/x) * 0 at x = 0) can still have a
          finite gradient.
        - Rules run under numpy.errstate(all=config.fp_errors), like the
          forward pass.
    """
    m = len(tape)
    adj = np.zeros(m, dtype=np.float64)
    if m == 0:
        return adj
    out = m - 1 if output is None else output
    if not 0 <= out < m:
        raise IndexError(f"output index {out} out of range for tape of {m} nodes")

    adj[out] = seed

    # Backward sweep
    n = tape.seed_count
    nodes = tape.nodes
    with np.errstate(all=config.fp_errors):
        for i in range(out, n - 1, -1):
            dy = adj[i]
            if dy == 0.0:
                continue  # nothing to propagate
            node = nodes[i]
            g1, g2 = contributions(node, dy)
            if node.idx1 != IGNORE:
                adj[node.idx1] += g1
            if node.idx2 != IGNORE:
                adj[node.idx2] += g2

    logger.debug("reverse pass over nodes %d..%d", out, n)
    return adj


def reverse(tape: Tape, output: Optional[int] = None, seed: float = 1.0) -> np.ndarray:
    """
    Gradient of the output node with respect to the tape's seed nodes.

    Returns a new array of length `tape.seed_count`, in seed order.
    """
    return adjoints(tape, output, seed)[:tape.seed_count].copy()
