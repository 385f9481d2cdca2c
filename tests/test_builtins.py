import math
import re
from functools import reduce

import pytest
from lang.builtins import BUILTINS, add, div, mul, sub, to_number
from lang.errors import ArgumentTypeError, ArityError
from lang.types import List, Number, Symbol


def nums(*xs):
    return tuple(Number(float(x)) for x in xs)


def value(expr):
    assert isinstance(expr, Number)
    return expr.value


# --- to_number ---

def test_to_number_accepts_number():
    assert to_number(Number(2.5)) == 2.5


@pytest.mark.parametrize("arg, printed", [
    (Symbol("foo"), "foo"),
    (List(()), "()"),
    (List((Number(1.0), Symbol("a"))), "(1,a)"),
])
def test_to_number_rejects_non_numbers(arg, printed):
    with pytest.raises(ArgumentTypeError, match="expected number, got " + re.escape(printed)):
        to_number(arg)


# --- + ---

def test_add_no_args_is_zero():
    assert add(()) == Number(0.0)


def test_add_single():
    assert add(nums(4)) == Number(4.0)


def test_add_many():
    assert add(nums(1, 2, 3, 4)) == Number(10.0)


def test_add_is_left_fold():
    xs = [0.1, 0.2, 0.3, 1e16, -1e16]
    assert value(add(nums(*xs))) == reduce(lambda a, b: a + b, xs)


def test_add_keeps_negative_zero():
    assert math.copysign(1.0, value(add(nums(-0.0)))) == -1.0


def test_add_overflow_is_inf():
    assert value(add(nums(1e308, 1e308))) == math.inf


def test_add_inf_and_neg_inf_is_nan():
    assert math.isnan(value(add(nums(math.inf, -math.inf))))


def test_add_rejects_symbol():
    with pytest.raises(ArgumentTypeError, match="expected number, got x"):
        add((Number(1.0), Symbol("x")))


# --- - ---

def test_sub_no_args():
    with pytest.raises(ArityError, match="missing required argument"):
        sub(())


def test_sub_negates_single():
    assert sub(nums(7)) == Number(-7.0)


def test_sub_negates_zero():
    assert math.copysign(1.0, value(sub(nums(0)))) == -1.0


def test_sub_two():
    assert sub(nums(10, 3)) == Number(7.0)


def test_sub_is_left_associative():
    assert sub(nums(10, 3, 2)) == Number(5.0)


def test_sub_type_checked_before_arity():
    with pytest.raises(ArgumentTypeError):
        sub((Symbol("a"),))


# --- * ---

def test_mul_no_args_is_one():
    assert mul(()) == Number(1.0)


def test_mul_many():
    assert mul(nums(2, 3, 4)) == Number(24.0)


def test_mul_overflow_is_inf():
    assert value(mul(nums(1e200, 1e200))) == math.inf


# --- / ---

def test_div_no_args():
    with pytest.raises(ArityError, match="missing required argument"):
        div(())


def test_div_reciprocal():
    assert div(nums(4)) == Number(0.25)


def test_div_is_left_associative():
    assert div(nums(100, 5, 2)) == Number(10.0)


@pytest.mark.parametrize("a, b, expected", [
    (1, 0.0, math.inf),
    (-1, 0.0, -math.inf),
    (1, -0.0, -math.inf),
    (-1, -0.0, math.inf),
])
def test_div_by_zero_is_signed_inf(a, b, expected):
    assert value(div(nums(a, b))) == expected


def test_zero_div_zero_is_nan():
    assert math.isnan(value(div(nums(0, 0))))


def test_reciprocal_of_zero():
    assert value(div(nums(0))) == math.inf


# --- Registry ---

def test_builtin_names():
    assert [p.name for p in BUILTINS] == ["+", "-", "*", "/"]
