"""Tree-walk evaluator for lang expressions, with nesting-depth metering."""

from .env import Environment
from .errors import DepthExceeded, EvalError
from .parser import DEFAULT_MAX_DEPTH
from .types import Expression, List, Number, Procedure, Symbol


class _EvalState:
    __slots__ = ("depth", "max_depth")

    def __init__(self, max_depth: int):
        self.depth = 0
        self.max_depth = max_depth


def eval_expr(
    expr: Expression, env: Environment, max_depth: int = DEFAULT_MAX_DEPTH
) -> Expression:
    """Evaluate `expr` against `env`.

    Numbers evaluate to themselves, Symbols are looked up and Lists are
    calls: the head is evaluated first, then each argument left to right.
    The first error raised anywhere aborts the whole evaluation.
    """
    return _eval(expr, env, _EvalState(max_depth))


def _eval(expr: Expression, env: Environment, st: _EvalState) -> Expression:
    st.depth += 1
    if st.depth > st.max_depth:
        st.depth -= 1
        raise DepthExceeded("max nesting depth exceeded")
    try:
        return _eval_inner(expr, env, st)
    finally:
        st.depth -= 1


def _eval_inner(expr: Expression, env: Environment, st: _EvalState) -> Expression:
    if isinstance(expr, Number):
        return expr
    if isinstance(expr, Symbol):
        return env.lookup(expr.name)
    if isinstance(expr, Procedure):
        raise EvalError("unexpected raw procedure form")
    if isinstance(expr, List):
        return _apply(expr, env, st)
    raise EvalError(f"unknown expression type: {type(expr).__name__}")


def _apply(form: List, env: Environment, st: _EvalState) -> Expression:
    if len(form) == 0:
        raise EvalError("empty application")
    head, *arg_forms = form.items
    proc = _eval(head, env, st)
    if not isinstance(proc, Procedure):
        raise EvalError("head is not callable")
    args = []
    for a in arg_forms:
        args.append(_eval(a, env, st))
    return proc(tuple(args))
