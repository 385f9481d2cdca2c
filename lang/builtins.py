"""Built-in arithmetic procedures seeded into the default environment.

Every primitive takes the evaluated argument tuple. Arguments must be
Numbers; arithmetic follows IEEE-754 and never raises on overflow, inf or nan.
"""

import math
import operator
from functools import reduce
from typing import Sequence

from .errors import ArgumentTypeError, ArityError
from .types import Expression, Number, Procedure, display


def to_number(x: Expression) -> float:
    if isinstance(x, Number):
        return x.value
    raise ArgumentTypeError(f"expected number, got {display(x)}")


def to_numbers(args: Sequence[Expression]) -> list[float]:
    return [to_number(a) for a in args]


def _require_one(name: str, nums: list[float]) -> None:
    if not nums:
        raise ArityError(f"missing required argument: {name} expects at least 1 argument")


def _divide(a: float, b: float) -> float:
    if b == 0.0:
        # Python raises on float division by zero; IEEE gives inf or nan
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def add(args: Sequence[Expression]) -> Expression:
    nums = to_numbers(args)
    return Number(reduce(operator.add, nums) if nums else 0.0)


def sub(args: Sequence[Expression]) -> Expression:
    nums = to_numbers(args)
    _require_one("-", nums)
    if len(nums) == 1:
        return Number(-nums[0])
    return Number(reduce(operator.sub, nums[1:], nums[0]))


def mul(args: Sequence[Expression]) -> Expression:
    nums = to_numbers(args)
    return Number(reduce(operator.mul, nums) if nums else 1.0)


def div(args: Sequence[Expression]) -> Expression:
    nums = to_numbers(args)
    _require_one("/", nums)
    if len(nums) == 1:
        return Number(_divide(1.0, nums[0]))
    return Number(reduce(_divide, nums[1:], nums[0]))


BUILTINS = (
    Procedure("+", add),
    Procedure("-", sub),
    Procedure("*", mul),
    Procedure("/", div),
)
