#!/usr/bin/env python3
"""
Fibonacci benchmark runner

Usage: fibbench <repeat_count> <fibonacci_input>

Computes fib(fibonacci_input) repeat_count times and prints every result on
its own line. Timing is left to the caller, e.g. `time fibbench 10 30`.
"""

import sys
import logging
from typing import Optional, Sequence, TextIO

from fibbench.args import to_int
from fibbench.fibonacci import fib

# ============================================================================
# Configuration
# ============================================================================

VERSION = "1.0.0"

# Value of a missing positional argument (repeat count or input)
DEFAULT_ARG = 0

# stdout carries the benchmark output, so logging stays on stderr
LOG_LEVEL = logging.WARNING
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)

# ============================================================================
# Runner
# ============================================================================


def _arg(args: Sequence[str], index: int) -> int:
    if index < len(args):
        return to_int(args[index])
    return DEFAULT_ARG


def run(args: Sequence[str], out: Optional[TextIO] = None):
    """Print fib(m) n times, where n and m are the first two arguments"""
    if out is None:
        out = sys.stdout

    n = _arg(args, 0)
    m = _arg(args, 1)
    logger.debug(f"Running fib({m}) x {n}")

    for _ in range(n):
        out.write(f"{fib(m)}\n")
        out.flush()

# ============================================================================
# CLI
# ============================================================================


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    logging.basicConfig(stream=sys.stderr, level=LOG_LEVEL, format=LOG_FORMAT)
    logger.debug(f"fibbench {VERSION} args={list(argv)}")

    try:
        run(argv)
    except RecursionError as e:
        logger.debug("Recursion limit reached", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nAborted", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
