#!/usr/bin/env python

"""
Command-line calculator for intpoly polynomials. Run with --help for options.

Example:

    intpoly 3x^2+2x^1 times 1x^1-1x^0 --eval 2
"""

import sys
import argparse

from intpoly import opts
from intpoly import logging
from intpoly.polynomials import Polynomial
from intpoly.term import DomainError

OPERATORS = {
    "plus":  Polynomial.add,
    "minus": Polynomial.subtract,
    "times": Polynomial.multiply,
}

def read_polynomial(text):
    with logging.task("parsing", text=text):
        p = Polynomial.parse(text)
        logging.event("read {}".format(p))
    return p

def combine(words):
    """Fold `EXPR [OP EXPR]...` from left to right."""
    if len(words) % 2 == 0:
        raise ValueError("expected EXPR [OP EXPR]..., got {} words".format(len(words)))
    result = read_polynomial(words[0])
    for i in range(1, len(words), 2):
        op, text = words[i], words[i+1]
        if op not in OPERATORS:
            raise ValueError("unknown operator {!r}; use one of {}".format(op, ", ".join(sorted(OPERATORS))))
        rhs = read_polynomial(text)
        with logging.task(op, lhs=result, rhs=rhs):
            result = OPERATORS[op](result, rhs)
    return result

def run(argv=None, out=None):
    """Entry point for the intpoly executable.

    Returns the process exit status.
    """
    if out is None:
        out = sys.stdout

    parser = argparse.ArgumentParser(description="Integer polynomial calculator.",
        epilog="Put -- before the first WORD if it starts with a minus sign.")
    parser.add_argument("words", metavar="WORD", nargs="+", help="EXPR [OP EXPR]..., where OP is one of " + ", ".join(sorted(OPERATORS)))
    parser.add_argument("-n", "--negate", action="store_true", help="Negate the final result")
    parser.add_argument("-e", "--eval", metavar="X", type=float, action="append", default=[], help="Evaluate the result at X (may be repeated)")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    args = parser.parse_args(argv)
    saved = opts.snapshot()
    opts.read(args)
    try:
        return calculate(args, out)
    finally:
        opts.restore(saved)

def calculate(args, out):
    try:
        result = combine(args.words)
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 2
    if args.negate:
        result = -result
    print(result, file=out)

    for x in args.eval:
        with logging.task("evaluating", x=x):
            try:
                value = result.evaluate(x)
            except DomainError as e:
                print("Error: {}".format(e), file=sys.stderr)
                return 1
        print("p({}) = {}".format(x, value), file=out)
    return 0

if __name__ == "__main__":
    sys.exit(run())
