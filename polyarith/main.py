#!/usr/bin/env python

"""
Main entry point for the polyarith command. Run with --help for options.
"""

import argparse
import operator
import sys

from polyarith import common
from polyarith import opts
from polyarith.logging import task, report_times, verbose
from polyarith.numeric import parse_coefficient
from polyarith.parse import parse_polynomial
from polyarith.streams import PolynomialReader

show_term_count = opts.Option("show-term-count", bool, False, description="Print the number of terms before each polynomial")

_OPERATORS = {
    "add":      operator.iadd,
    "subtract": operator.isub,
    "multiply": operator.imul }

def read_inputs(f, format):
    """Read every polynomial in the open file f."""
    if format == "stream":
        return list(PolynomialReader(f).read_all())
    return [parse_polynomial(line) for line in f if line.strip()]

def write_polynomial(out, p, points):
    if show_term_count.value:
        p.print(out)
    else:
        out.write("{}\n".format(p))
    for x in points:
        out.write("p({}) = {}\n".format(x, p.evaluate(x)))

def run(argv=None):
    """Entry point for the polyarith executable.

    This procedure reads sys.argv (or argv, if given) and executes the
    requested tasks.
    """

    parser = argparse.ArgumentParser(description='Single-variable polynomial arithmetic.')
    parser.add_argument("--format", choices=("stream", "expr"), default="stream",
                        help="Input format: zero-terminated coefficient/exponent pairs (stream) " +
                             "or one polynomial in algebraic notation per line (expr); default=stream")
    parser.add_argument("--op", choices=("print",) + tuple(sorted(_OPERATORS)), default="print",
                        help="Print each polynomial, or combine all of them left to right; default=print")
    parser.add_argument("--at", metavar="X", action="append", default=[],
                        help="Evaluate the result at X (may be given more than once)")
    parser.add_argument("-o", "--output", metavar="FILE", default="-", help="Output file, use '-' for stdout")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    parser.add_argument("file", nargs="?", default=None, help="Input file (omit to use stdin)")
    args = parser.parse_args(argv)
    opts.read(args)

    try:
        points = [parse_coefficient(x) for x in args.at]
        with common.open_maybe_stdin(args.file or "-") as f:
            with task("reading input", format=args.format):
                polys = read_inputs(f, args.format)
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    if args.op == "print":
        results = polys
    else:
        if not polys:
            print("Error: no polynomials to {}".format(args.op), file=sys.stderr)
            sys.exit(1)
        result = polys[0].copy()
        with task(args.op, count=len(polys)):
            for p in polys[1:]:
                result = _OPERATORS[args.op](result, p)
        results = [result]

    with common.open_maybe_stdout(args.output) as out:
        for p in results:
            write_polynomial(out, p, points)

    if verbose.value:
        report_times()

if __name__ == "__main__":
    run()
