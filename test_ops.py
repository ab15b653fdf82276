"""
Arithmetic surface: forward values, backward rules, scalar lifting and the
eager operand / division guards.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))

from scalargrad import (
    Node,
    InvalidOperandError,
    DivisionByZeroError,
    get_backward_rule,
)
from scalargrad import ops

TANH_5 = 0.9999092042625951
EXP_5 = 148.4131591025766


# ---------------------------- forward values ---------------------------- #
def test_add_forward():
    assert (Node(5.0) + Node(3.0)).value == 8.0
    assert (Node(5.0) + Node(-3.0)).value == 2.0


def test_mul_forward():
    assert (Node(5.0) * Node(3.0)).value == 15.0


def test_pow_forward():
    r = Node(5.0) ** 3.0
    assert r.value == pytest.approx(125.0)
    assert r.op_kind == "pow"
    assert r.exponent == 3.0


def test_tanh_and_exp_match_double_precision():
    assert Node(5.0).tanh().value == TANH_5
    assert Node(5.0).exp().value == EXP_5
    assert ops.tanh(5.0).value == TANH_5
    assert ops.exp(5.0).value == EXP_5


def test_exp_overflow_gives_inf_with_warning():
    with pytest.warns(RuntimeWarning):
        r = Node(1000.0).exp()
    assert r.value == float("inf")


# ---------------------------- backward rules ---------------------------- #
def test_add_rule_accumulates_into_operands():
    a = Node(5.0)
    a.grad = 3.0
    b = Node(3.0)
    b.grad = 4.0
    r = a + b
    r.grad = 1.0
    get_backward_rule(r.op_kind)(r)
    assert a.grad == 4.0
    assert b.grad == 5.0


def test_mul_rule_accumulates_into_operands():
    a = Node(5.0)
    a.grad = 2.0
    b = Node(3.0)
    b.grad = 4.0
    r = a * b
    r.grad = 1.0
    get_backward_rule(r.op_kind)(r)
    assert a.grad == 2.0 + 3.0
    assert b.grad == 4.0 + 5.0


def test_pow_rule():
    a = Node(5.0)
    a.grad = 2.0
    r = a ** 2.0
    r.grad = 1.0
    get_backward_rule(r.op_kind)(r)
    assert a.grad == pytest.approx(2.0 * 5.0 * 1.0 + 2.0)


def test_tanh_rule():
    a = Node(5.0)
    a.grad = 2.0
    r = a.tanh()
    r.grad = 1.0
    get_backward_rule(r.op_kind)(r)
    assert a.grad == (1.0 - TANH_5 ** 2) * 1.0 + 2.0


def test_exp_rule():
    a = Node(5.0)
    a.grad = 2.0
    r = a.exp()
    r.grad = 1.0
    get_backward_rule(r.op_kind)(r)
    assert a.grad == EXP_5 * 1.0 + 2.0


def test_self_operand_receives_both_contributions():
    x = Node(3.0)
    (x * x).backward()
    assert x.grad == 6.0

    y = Node(3.0)
    (y + y).backward()
    assert y.grad == 2.0


# ---------------------------- lifting ---------------------------- #
def test_plain_numbers_are_lifted_to_fresh_leaves():
    a = Node(2.0)
    r = a + 1
    lifted = r.operands[1]
    assert isinstance(lifted, Node)
    assert lifted.is_leaf
    assert lifted.value == 1.0
    assert lifted.grad == 0.0


def test_reflected_operators():
    a = Node(2.0)
    assert (1 + a).value == 3.0
    assert (3 * a).value == 6.0
    assert (1 - a).value == -1.0
    assert (1 / a).value == pytest.approx(0.5)


# ---------------------------- derived ops ---------------------------- #
def test_neg_is_multiplication_by_minus_one():
    a = Node(4.0)
    r = -a
    assert r.value == -4.0
    assert r.op_kind == "mul"
    assert r.operands[0] is a
    assert r.operands[1].value == -1.0


def test_sub_is_add_of_negation():
    a, b = Node(5.0), Node(3.0)
    r = a - b
    assert r.value == 2.0
    assert r.op_kind == "add"
    r.backward()
    assert a.grad == 1.0
    assert b.grad == -1.0


def test_div_is_mul_by_reciprocal():
    a, b = Node(6.0), Node(3.0)
    r = a / b
    assert r.value == pytest.approx(2.0)
    assert r.op_kind == "mul"
    assert r.operands[1].op_kind == "pow"
    assert r.operands[1].exponent == -1.0
    r.backward()
    assert a.grad == pytest.approx(1.0 / 3.0)
    assert b.grad == pytest.approx(-6.0 / 9.0)


# ---------------------------- guards ---------------------------- #
@pytest.fixture
def node_counter(monkeypatch):
    created = []
    original_init = Node.__init__

    def counting_init(self, *args, **kwargs):
        created.append(self)
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(Node, "__init__", counting_init)
    return created


def test_division_by_zero_node_fails_before_building(node_counter):
    a, b = Node(1.0), Node(0.0)
    node_counter.clear()
    with pytest.raises(DivisionByZeroError):
        a / b
    assert node_counter == []


def test_division_by_zero_scalar_fails_before_lifting(node_counter):
    a = Node(1.0)
    node_counter.clear()
    with pytest.raises(DivisionByZeroError):
        a / 0
    with pytest.raises(DivisionByZeroError):
        ops.div(3.0, 0.0)
    assert node_counter == []


def test_division_by_zero_is_a_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        Node(1.0) / Node(-0.0)


def test_node_exponent_is_rejected(node_counter):
    a, b = Node(2.0), Node(3.0)
    node_counter.clear()
    with pytest.raises(InvalidOperandError):
        a ** b
    with pytest.raises(InvalidOperandError):
        2 ** a
    assert node_counter == []


@pytest.mark.parametrize("bad", ["2", None, True, [2.0]])
def test_non_scalar_exponent_is_rejected(bad):
    with pytest.raises(InvalidOperandError):
        ops.pow(Node(2.0), bad)


def test_int_exponent_beyond_float_range_is_rejected(node_counter):
    a = Node(2.0)
    node_counter.clear()
    with pytest.raises(InvalidOperandError):
        a ** (10 ** 400)
    assert node_counter == []


def test_invalid_operand_is_a_type_error():
    with pytest.raises(TypeError):
        Node(2.0) ** Node(2.0)


def test_fractional_power_of_negative_base_is_nan():
    with pytest.warns(RuntimeWarning):
        r = Node(-8.0) ** 0.5
    assert r.value != r.value  # nan
