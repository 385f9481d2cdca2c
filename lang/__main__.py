"""CLI: python -m lang"""

import logging
import sys

from .repl import Settings, repl


def main():
    if len(sys.argv) > 1:
        print("Usage: python -m lang", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(level=logging.WARNING, format="%(name)s: %(levelname)s: %(message)s")
    settings = Settings()
    sys.setrecursionlimit(max(sys.getrecursionlimit(), settings.recursion_limit))

    try:
        repl(settings=settings)
    except KeyboardInterrupt:
        pass
    except OSError as e:
        logging.getLogger("lang").error("input error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
