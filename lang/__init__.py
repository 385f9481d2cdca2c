from .parser import tokenize, parse, read
from .evaluator import eval_expr
from .env import Environment, default_env
from .repl import Settings, parse_eval, repl
from .errors import LangError, ParseError, EvalError, ArityError, ArgumentTypeError, DepthExceeded
from .types import Symbol, Number, List, Procedure, Expression, display, to_source

__all__ = [
    "tokenize", "parse", "read", "eval_expr", "Environment", "default_env",
    "Settings", "parse_eval", "repl",
    "LangError", "ParseError", "EvalError", "ArityError", "ArgumentTypeError", "DepthExceeded",
    "Symbol", "Number", "List", "Procedure", "Expression", "display", "to_source",
]
