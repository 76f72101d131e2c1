# revad/core/node.py
from dataclasses import dataclass
from enum import Enum


class Op(str, Enum):
    """
    Closed set of primitives the tape can record.

    The value doubles as the method name on the numeric types, so the free
    functions in `revad.ops` can dispatch on it.
    """
    VAR = "var"          # seed/input node, nothing to propagate
    NEG = "neg"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"
    EXP = "exp"
    LOG = "log"
    ABS = "abs"
    SIN = "sin"
    SIN_DEG = "sin_deg"
    COS = "cos"
    COS_DEG = "cos_deg"


# Operand slot that does not refer to a tape node (constant or unused)
IGNORE = -1
NONE = 0.0


@dataclass(frozen=True)
class Node:
    """
    One record on the tape.

    Attributes
    ----------
    op   : Op
        Primitive that produced this node (`Op.VAR` for seeds).
    idx1, idx2 : int
        Tape indices of the operands, or `IGNORE`. Always smaller than the
        index of this node.
    val1, val2 : float
        Operand magnitudes at recording time. A scalar constant operand keeps
        its value here with `IGNORE` as index; `pow` keeps the integer
        exponent in `val2`.
    """
    op: Op
    idx1: int = IGNORE
    val1: float = NONE
    idx2: int = IGNORE
    val2: float = NONE

    @classmethod
    def var(cls) -> "Node":
        return cls(Op.VAR)

    @property
    def operands(self):
        """Indices of the tape nodes this node depends on."""
        return tuple(i for i in (self.idx1, self.idx2) if i != IGNORE)
