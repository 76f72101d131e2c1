from __future__ import annotations

import math

import numpy as np
import pytest

from revad.core.node import IGNORE, Node, Op
from revad.core.rules import GRADIENT_RULES, contributions


def test_every_recorded_op_has_a_rule() -> None:
    assert set(GRADIENT_RULES) == set(Op) - {Op.VAR}


@pytest.mark.parametrize(
    "op, v1, v2, expected",
    [
        (Op.NEG, 0.0, 0.0, (-2.0, 0.0)),
        (Op.ADD, 0.0, 0.0, (2.0, 2.0)),
        (Op.SUB, 0.0, 0.0, (2.0, -2.0)),
        (Op.MUL, 3.0, 5.0, (10.0, 6.0)),
        (Op.DIV, 3.0, 4.0, (0.5, -3.0 * 2.0 / 16.0)),
        (Op.POW, 3.0, 2.0, (12.0, 0.0)),
        (Op.POW, 3.0, 0.0, (0.0, 0.0)),
        (Op.LOG, 4.0, 0.0, (0.5, 0.0)),
        (Op.ABS, -2.0, 0.0, (-2.0, 0.0)),
        (Op.ABS, 2.0, 0.0, (2.0, 0.0)),
        (Op.ABS, 0.0, 0.0, (2.0, 0.0)),
    ],
)
def test_rule_contributions(op, v1, v2, expected) -> None:
    g = contributions(Node(op, 0, np.float64(v1), 1, np.float64(v2)), np.float64(2.0))
    assert g == pytest.approx(expected)


def test_transcendental_rules() -> None:
    dy = np.float64(1.5)
    assert contributions(Node(Op.EXP, 0, 0.7), dy)[0] == pytest.approx(1.5 * math.exp(0.7))
    assert contributions(Node(Op.SIN, 0, 0.7), dy)[0] == pytest.approx(1.5 * math.cos(0.7))
    assert contributions(Node(Op.COS, 0, 0.7), dy)[0] == pytest.approx(-1.5 * math.sin(0.7))
    assert contributions(Node(Op.SIN_DEG, 0, 30.0), dy)[0] == pytest.approx(
        1.5 * math.cos(math.radians(30.0))
    )
    assert contributions(Node(Op.COS_DEG, 0, 30.0), dy)[0] == pytest.approx(-0.75)


def test_division_by_zero_follows_ieee() -> None:
    with np.errstate(all="ignore"):
        g1, g2 = contributions(Node(Op.DIV, 0, np.float64(1.0), 1, np.float64(0.0)), np.float64(1.0))
    assert math.isinf(g1)
    assert math.isinf(g2) and g2 < 0


def test_seed_nodes_have_no_rule() -> None:
    with pytest.raises(ValueError):
        contributions(Node.var(), 1.0)


def test_node_operands_skip_ignored_slots() -> None:
    assert Node(Op.MUL, 3, 1.0, IGNORE, 2.0).operands == (3,)
    assert Node(Op.SUB, IGNORE, 1.0, 4, 2.0).operands == (4,)
    assert Node(Op.ADD, 2, 1.0, 2, 1.0).operands == (2, 2)
    assert Node.var().operands == ()
