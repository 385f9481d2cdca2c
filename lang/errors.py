"""Error types. Every failure is a LangError carrying a human-readable message."""


class LangError(Exception):
    pass


class ParseError(LangError):
    pass


class EvalError(LangError):
    pass


class ArityError(EvalError):
    pass


class ArgumentTypeError(EvalError):
    pass


class DepthExceeded(LangError):
    pass
