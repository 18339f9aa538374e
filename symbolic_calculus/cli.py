#!/usr/bin/env python3
"""
Command line front end

Reads a formula (argument or file), prints it, its derivative and,
on request, its value, Taylor polynomial, LaTeX and a DOT graph.
"""
import argparse
import sys
from typing import List, Optional

from .differentiator import differentiate
from .errors import CalculusError
from .evaluator import evaluate
from .logging_system import LogLevel, configure_logging, log_critical
from .parser import parse
from .printer import to_infix, to_infix_minimal, to_latex, to_dot, log_tree
from .simplifier import simplify, simplify_fully
from .taylor import expand_taylor


def _parse_assignments(assignments: List[str]) -> dict:
    values = {}
    for item in assignments:
        name, sep, value = item.partition('=')
        if not sep:
            raise ValueError(f"expected NAME=VALUE, got '{item}'")
        values[name.strip()] = float(value)
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="symbolic_calculus",
                                     description="Differentiate and simplify formulas")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("formula", nargs="?", help="Formula text, e.g. 'x^3 + sin(x)'")
    source.add_argument("-i", "--input", help="Read the formula from a file")
    parser.add_argument("--var", default=None, help="Variable to differentiate by (default: first)")
    parser.add_argument("--full", action="store_true", help="Simplify to a fixed point")
    parser.add_argument("--eval", nargs="*", default=None, metavar="NAME=VALUE",
                        help="Evaluate the formula and its derivative")
    parser.add_argument("--taylor", type=int, default=None, metavar="N",
                        help="Print the Taylor polynomial of order N")
    parser.add_argument("--point", type=float, default=0.0, help="Taylor expansion point")
    parser.add_argument("--latex", action="store_true", help="Print LaTeX as well")
    parser.add_argument("--dot", default=None, metavar="FILE", help="Write the tree as Graphviz DOT")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="More logging (repeat for tree dumps)")
    return parser


def run(args: argparse.Namespace) -> int:
    if args.input:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = args.formula

    equation = parse(text)
    log_tree(equation, "input")
    simplify_fn = simplify_fully if args.full else simplify

    var_index = equation.variable_index(args.var) if args.var else 0
    derivative = differentiate(equation, var_index)
    simplify_fn(derivative)
    log_tree(derivative, "derivative")

    print(f"f      = {to_infix_minimal(equation)}")
    print(f"f'     = {to_infix_minimal(derivative)}")
    print(f"tree   = {to_infix(equation)}")

    if args.eval is not None:
        assignments = _parse_assignments(args.eval)
        values = [assignments.get(name, 0.0) for name in equation.variable_names]
        print(f"f(...) = {evaluate(equation, values)}")
        print(f"f'(..) = {evaluate(derivative, values)}")

    if args.taylor is not None:
        polynomial = expand_taylor(equation, args.taylor, args.point)
        simplify_fn(polynomial)
        print(f"taylor = {to_infix_minimal(polynomial)}")

    if args.latex:
        print(f"latex  = {to_latex(equation)}")
        print(f"latex' = {to_latex(derivative)}")

    if args.dot:
        with open(args.dot, "w", encoding="utf-8") as handle:
            handle.write(to_dot(equation))

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = {0: LogLevel.MINIMAL, 1: LogLevel.DETAILED}.get(args.verbose, LogLevel.VERBOSE)
    configure_logging(log_level=level)
    try:
        return run(args)
    except (CalculusError, OSError, ValueError, KeyError) as error:
        log_critical(str(error))
        return 1


if __name__ == "__main__":
    sys.exit(main())
