"""Value model: every syntax tree node and runtime value is an Expression."""

import math
from dataclasses import dataclass, field
from typing import Callable, Sequence, Union


@dataclass(frozen=True)
class Symbol:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class List:
    items: tuple = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __str__(self) -> str:
        return "(" + ",".join(str(x) for x in self.items) + ")"


@dataclass(frozen=True)
class Procedure:
    """A built-in primitive. `fn` takes the evaluated argument tuple and
    returns an Expression or raises LangError."""
    name: str
    fn: Callable[[Sequence["Expression"]], "Expression"] = field(repr=False)

    def __call__(self, args: Sequence["Expression"]) -> "Expression":
        return self.fn(args)

    def __str__(self) -> str:
        return f"Function {{{self.name}}}"


Expression = Union[Symbol, Number, List, Procedure]


def format_number(x: float) -> str:
    """Canonical decimal form: integral values print without a fraction."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if x.is_integer():
        if x == 0 and math.copysign(1.0, x) < 0:
            return "-0"
        return str(int(x))
    return repr(x)


def display(expr: Expression) -> str:
    """Human-facing print form. Lists are comma separated and do not re-parse."""
    return str(expr)


def to_source(expr: Expression) -> str:
    """Space separated print form that `read` accepts back.

    Procedures have no source syntax and are rendered by name.
    """
    if isinstance(expr, List):
        return "(" + " ".join(to_source(x) for x in expr.items) + ")"
    if isinstance(expr, Number):
        return format_number(expr.value)
    if isinstance(expr, Symbol):
        return expr.name
    return expr.name
