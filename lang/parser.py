"""Tokenizer and recursive-descent reader for lang S-expressions."""

import logging
import re
from typing import Sequence

from .errors import DepthExceeded, ParseError
from .types import Expression, List, Number, Symbol

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 5_000

# Locale independent: a dot is always the decimal separator.
_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def tokenize(src: str) -> list[str]:
    return src.replace("(", " ( ").replace(")", " ) ").split()


def _atom(tok: str) -> Expression:
    if _NUMBER.fullmatch(tok):
        return Number(float(tok))
    return Symbol(tok)


def parse(
    tokens: Sequence[str], max_depth: int = DEFAULT_MAX_DEPTH
) -> tuple[Expression, list[str]]:
    """Parse one expression from the front of `tokens`.

    Returns the expression and the tokens left after it.
    """
    pos = [0]  # mutable index

    def _parse(depth: int) -> Expression:
        if pos[0] >= len(tokens):
            raise ParseError("unexpected end of input")
        tok = tokens[pos[0]]
        pos[0] += 1
        if tok == "(":
            if depth >= max_depth:
                raise DepthExceeded("max nesting depth exceeded")
            arr: list[Expression] = []
            while True:
                if pos[0] >= len(tokens):
                    raise ParseError("unexpected end of input")
                if tokens[pos[0]] == ")":
                    pos[0] += 1
                    break
                arr.append(_parse(depth + 1))
            return List(tuple(arr))
        if tok == ")":
            raise ParseError("unexpected closing parenthesis")
        return _atom(tok)

    result = _parse(0)
    return result, list(tokens[pos[0]:])


def read(src: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Expression:
    """Read the first expression in `src`; anything after it is ignored."""
    expr, rest = parse(tokenize(src), max_depth)
    if rest:
        logger.debug("ignoring %d trailing token(s): %s", len(rest), " ".join(rest))
    return expr
