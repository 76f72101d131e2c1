# revad/core/tape.py
from __future__ import annotations

from typing import Callable, List, Tuple

import numpy as np

from ..config import config
from .node import IGNORE, Node, Op

PushNode = Callable[[int, float, int, float, Op], int]


class Tape:
    """
    Append-only record of the primitives executed during one forward pass.

    The first `seed_count` nodes are `Op.VAR` placeholders standing for the
    function inputs. Every other node refers only to strictly earlier nodes,
    so walking the list backwards is a reverse topological order.
    """

    def __init__(self, seed_count: int = 0):
        if seed_count < 0:
            raise ValueError(f"seed_count must be non-negative, got {seed_count}")
        self.seed_count = seed_count
        self.nodes: List[Node] = [Node.var() for _ in range(seed_count)]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, idx: int) -> Node:
        return self.nodes[idx]

    def __repr__(self) -> str:
        return f"Tape(seed_count={self.seed_count}, nodes={len(self.nodes)})"

    def push_node(self, idx1: int, val1: float, idx2: int, val2: float, op: Op) -> int:
        """
        Append Node(op, idx1, val1, idx2, val2) and return its index.
        Pass `IGNORE` for operand slots without a tape node. Operand values
        are stored as float64 so the rules follow IEEE arithmetic.
        """
        if config.debug:
            self._check_operands(idx1, idx2, op)
        self.nodes.append(Node(op=op, idx1=idx1, val1=np.float64(val1),
                               idx2=idx2, val2=np.float64(val2)))
        return len(self.nodes) - 1

    def _check_operands(self, idx1: int, idx2: int, op: Op) -> None:
        if op is Op.VAR:
            raise ValueError("Seed nodes can only be created with the tape")
        n = len(self.nodes)
        for idx in (idx1, idx2):
            if idx != IGNORE and not 0 <= idx < n:
                raise ValueError(
                    f"Operand index {idx} of {op.value!r} does not refer to an "
                    f"earlier node (tape has {n} nodes)"
                )


def create(seed_count: int) -> Tuple[Tape, PushNode]:
    """Return a fresh tape with `seed_count` seed nodes and its node constructor."""
    tape = Tape(seed_count)
    return tape, tape.push_node
