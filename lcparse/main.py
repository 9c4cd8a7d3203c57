"""Command-line entry points. Called from the lcparse and slash-to-lambda executable scripts.

lcparse reads one λ-term (from its argument, or else from stdin) and prints its syntax tree, or its tokens with
--tokens. slash-to-lambda copies stdin to stdout with every '\\' alias replaced by 'λ'.

Python version must be >=3.7, because error handling requires that dicts are insertion-ordered and the syntax tree is
made of dataclasses.
"""

import argparse
import sys

from lcparse.grammar.pure import normalize
from lcparse.lang.error import ErrorHandler
from lcparse.pure.lexical import lex
from lcparse.pure.parser import Parser, parse

STDIN_FILE = "<stdin>"
ARG_FILE = "<arg>"


def main(argv=None):
    """Runs lcparse. Called from lcparse executable script."""
    assert sys.version_info >= (3, 7), "lcparse cannot be run with python < 3.7"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="lcparse", description="Parse a λ-term and print its syntax tree.")
        parser.add_argument("expr", help="λ-term to parse (if empty, reads it from stdin)", nargs="?")
        parser.add_argument("--max-depth", type=int, default=Parser.MAX_DEPTH,
                            help="maximum nesting of parentheses and abstractions (default: %(default)s)")
        parser.add_argument("--tokens", action="store_true", help="print the tokens instead of the syntax tree")
        args = parser.parse_args(argv)
        if args.max_depth < 0:
            parser.error(f"--max-depth must be at least 0, got {args.max_depth}")

        max_depth = args.max_depth
        if max_depth > Parser.safe_depth():
            max_depth = Parser.safe_depth()
            error_handler.warn("--max-depth {} exceeds the recursion limit, using {}", (args.max_depth, max_depth),
                               diagnosis=False)

        if args.expr is not None:
            path, text = ARG_FILE, args.expr
        else:
            path, text = STDIN_FILE, sys.stdin.read().rstrip("\r\n")

        error_handler.register_file(path)
        error_handler.register_line(path, text, 1)  # in case error is raised

        if args.tokens:
            for token in lex(text):
                print(repr(token))
        else:
            print(parse(text, max_depth).display())

        error_handler.remove_line(path)  # error was not raised


def slash_to_lambda():
    """Rewrites stdin with the canonical lambda glyph. Called from slash-to-lambda executable script."""
    with ErrorHandler(prog="slash-to-lambda"):
        sys.stdout.write(normalize(sys.stdin.read()))
