"""Line-oriented read-eval-print loop over text streams."""

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from .env import Environment, default_env
from .errors import LangError
from .evaluator import eval_expr
from .parser import DEFAULT_MAX_DEPTH, read
from .types import Expression, display

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    prompt: str = "lang >"
    result_prefix: str = "// => "
    max_depth: int = DEFAULT_MAX_DEPTH
    recursion_limit: int = 20_000


def parse_eval(src: str, env: Environment, max_depth: int = DEFAULT_MAX_DEPTH) -> Expression:
    """Read one expression from `src` and evaluate it against `env`."""
    return eval_expr(read(src, max_depth), env, max_depth)


def respond(src: str, env: Environment, settings: Optional[Settings] = None) -> str:
    """The output line for one input line: the printed value or the error message."""
    s = settings or Settings()
    try:
        text = display(parse_eval(src, env, s.max_depth))
    except LangError as e:
        logger.debug("error for %r: %s", src, e)
        text = str(e)
    except RecursionError:
        logger.warning("recursion limit hit for %r", src)
        text = "max nesting depth exceeded"
    return s.result_prefix + text


def repl(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    env: Optional[Environment] = None,
    settings: Optional[Settings] = None,
) -> None:
    """Run until end of input. OSError from the streams propagates."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    env = env if env is not None else default_env()
    s = settings or Settings()

    while True:
        print(s.prompt, file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            logger.debug("end of input")
            return
        logger.debug("read %r", line)
        print(respond(line, env, s), file=stdout, flush=True)
