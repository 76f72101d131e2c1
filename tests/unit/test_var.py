from __future__ import annotations

import math

import numpy as np
import pytest

from revad import ops
from revad.core.node import IGNORE, Op
from revad.core.tape import Tape
from revad.core.var import Codual


@pytest.fixture
def xy():
    tape = Tape(2)
    return tape, Codual(2.0, tape, 0), Codual(5.0, tape, 1)


def test_binary_op_appends_one_node(xy) -> None:
    tape, x, y = xy
    z = x * y
    assert z.val == 10.0
    assert z.idx == 2
    assert z.tape is tape
    node = tape[z.idx]
    assert (node.op, node.idx1, node.val1, node.idx2, node.val2) == (Op.MUL, 0, 2.0, 1, 5.0)


def test_scalar_operand_is_a_constant(xy) -> None:
    tape, x, _ = xy
    a = x * 3
    b = 3 - x
    c = 1 / x
    assert (a.val, b.val, c.val) == (6.0, 1.0, 0.5)
    assert tape[a.idx].idx2 == IGNORE and tape[a.idx].val2 == 3.0
    assert tape[b.idx].idx1 == IGNORE and tape[b.idx].idx2 == x.idx
    assert tape[c.idx].op is Op.DIV and tape[c.idx].val1 == 1.0
    assert len(tape) == 5


def test_numpy_scalar_on_the_left(xy) -> None:
    _, x, _ = xy
    z = np.float64(4.0) * x
    assert isinstance(z, Codual)
    assert z.val == 8.0


def test_unary_functions(xy) -> None:
    tape, x, _ = xy
    assert x.sin().val == pytest.approx(math.sin(2.0))
    assert x.cos().val == pytest.approx(math.cos(2.0))
    assert x.sin_deg().val == pytest.approx(math.sin(math.radians(2.0)))
    assert x.cos_deg().val == pytest.approx(math.cos(math.radians(2.0)))
    assert x.log().val == pytest.approx(math.log(2.0))
    assert x.exp().val == pytest.approx(math.exp(2.0))
    assert (-x).abs().val == 2.0
    assert abs(-x).val == 2.0
    assert (x ** 3).val == 8.0
    assert x.pow(-1).val == 0.5
    ops_recorded = [n.op for n in tape.nodes[2:]]
    assert ops_recorded == [
        Op.SIN, Op.COS, Op.SIN_DEG, Op.COS_DEG, Op.LOG, Op.EXP,
        Op.NEG, Op.ABS, Op.NEG, Op.ABS, Op.POW, Op.POW,
    ]


def test_pow_stores_base_and_exponent(xy) -> None:
    tape, x, _ = xy
    z = x ** 4
    node = tape[z.idx]
    assert (node.idx1, node.val1, node.idx2, node.val2) == (0, 2.0, IGNORE, 4.0)


@pytest.mark.parametrize("k", [2.0, 0.5])
def test_non_integer_exponent_rejected(xy, k) -> None:
    _, x, _ = xy
    with pytest.raises(TypeError):
        x ** k


def test_traced_exponent_rejected(xy) -> None:
    _, x, y = xy
    with pytest.raises(TypeError):
        x ** y
    with pytest.raises(TypeError):
        2 ** x


def test_mixing_tapes_rejected(xy) -> None:
    _, x, _ = xy
    other = Codual(1.0, Tape(1), 0)
    with pytest.raises(ValueError):
        x + other


def test_unsupported_operand_type(xy) -> None:
    _, x, _ = xy
    with pytest.raises(TypeError):
        x + "1"


def test_handles_are_immutable(xy) -> None:
    _, x, _ = xy
    with pytest.raises(AttributeError):
        x.val = 3.0


def test_equality_is_node_identity(xy) -> None:
    tape, x, y = xy
    same = Codual(123.0, tape, 0)
    assert x == same
    assert hash(x) == hash(same)
    assert x != y
    assert x + 0 != x
    assert len({x, same, y}) == 2


def test_ordering_is_by_magnitude(xy) -> None:
    _, x, y = xy
    assert x < y
    assert y > x
    assert x <= 2.0
    assert x >= 2
    assert sorted([y, x]) == [x, y]


def test_free_functions_accept_plain_numbers() -> None:
    assert ops.sin(0.0) == 0.0
    assert ops.exp(0) == 1.0
    assert ops.absolute(-3) == 3.0
    assert ops.cos_deg(180) == pytest.approx(-1.0)
    assert ops.add(1, 2) == 3.0
    assert ops.pow(3, 2) == 9.0
    with np.errstate(all="ignore"):
        assert math.isinf(ops.div(1, 0))
        assert math.isinf(ops.log(0.0))


def test_free_functions_record_on_coduals(xy) -> None:
    tape, x, y = xy
    z = ops.sub(ops.mul(x, y), ops.sin_deg(y))
    assert z.tape is tape
    assert [n.op for n in tape.nodes[2:]] == [Op.MUL, Op.SIN_DEG, Op.SUB]


def test_str_and_repr(xy) -> None:
    _, x, _ = xy
    assert str(x) == "2.0 + Xϵ"
    assert "idx=0" in repr(x)
    assert x.magnitude == 2.0
