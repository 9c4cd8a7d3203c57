"""Recursive-descent parser for pure lambda calculus. See lcparse/grammar/pure.py for the grammar.

There is one method per production: parse_term (applications), parse_atom, parse_abstraction and parse_group. The
parser keeps one token of lookahead, pulled lazily from a Lexer, and fails fast on the first error.

Two rules resolve the ambiguity of juxtaposition:
- applications associate by left: `a b c` = `(a b) c`
- abstraction bodies are greedy: `λx.x y` = `λx.(x y)` != `(λx.x) y`

Nesting (groups and abstractions) is bounded by max_depth, so that adversarial input such as thousands of
parentheses is reported as NestingTooDeep instead of exhausting the interpreter's stack.
"""

import sys
from contextlib import contextmanager

from lcparse.lang.error import (NestingTooDeep, TrailingTokens, UnexpectedEndOfInput, UnexpectedToken,
                                UnmatchedParenthesis)
from lcparse.pure.lexical import Lexer, TokenType
from lcparse.term import Abstraction, Application, Variable


class Parser:
    """Parses the tokens of a single Lexer into a LambdaTerm."""
    MAX_DEPTH = 200
    FRAMES_PER_LEVEL = 3  # parse_term -> parse_atom -> parse_abstraction/parse_group
    ATOM_START = (TokenType.IDENTIFIER, TokenType.LAMBDA, TokenType.LPAREN)

    def __init__(self, lexer, max_depth=None):
        self.source = lexer.text
        self.max_depth = Parser.MAX_DEPTH if max_depth is None else max_depth

        self._tokens = iter(lexer)
        self.current_token = next(self._tokens)

        self.paren_index = 0  # number of currently open parentheses
        self.depth = 0

    @staticmethod
    def safe_depth(headroom=100):
        """Deepest max_depth the current recursion limit can support, keeping headroom frames for callers."""
        return max(0, (sys.getrecursionlimit() - headroom) // Parser.FRAMES_PER_LEVEL)

    def advance(self):
        """Consumes and returns current_token. EOF is never consumed."""
        token = self.current_token
        if token.type is not TokenType.EOF:
            self.current_token = next(self._tokens)
        return token

    def expect(self, token_type, expected):
        """Consumes current_token if it is of token_type, otherwise raises the appropriate ParseError."""
        token = self.current_token
        if token.type is token_type:
            return self.advance()
        if token.type is TokenType.EOF:
            raise UnexpectedEndOfInput(self.source, expected, token.start)
        raise UnexpectedToken(self.source, expected, token)

    @contextmanager
    def nested(self, token):
        """Tracks one level of nesting opened by token."""
        if self.depth >= self.max_depth:
            raise NestingTooDeep(self.source, self.max_depth, token.start)
        self.depth += 1
        try:
            yield
        finally:
            self.depth -= 1

    def parse(self):
        """Parses the whole input. Every token up to EOF must belong to the term."""
        term = self.parse_term()

        token = self.current_token
        if token.type is TokenType.RPAREN:
            raise UnmatchedParenthesis(self.source, token)
        elif token.type is not TokenType.EOF:
            raise TrailingTokens(self.source, token)

        return term

    def parse_term(self):
        """term := atom atom*, folded to the left."""
        term = self.parse_atom()
        while self.current_token.type in Parser.ATOM_START:
            term = Application(term, self.parse_atom())
        return term

    def parse_atom(self):
        token = self.current_token

        if token.type is TokenType.IDENTIFIER:
            self.advance()
            return Variable(token.value)
        elif token.type is TokenType.LAMBDA:
            return self.parse_abstraction()
        elif token.type is TokenType.LPAREN:
            return self.parse_group()
        elif token.type is TokenType.EOF:
            raise UnexpectedEndOfInput(self.source, "a λ-term", token.start)
        elif token.type is TokenType.RPAREN and self.paren_index == 0:
            raise UnmatchedParenthesis(self.source, token)
        raise UnexpectedToken(self.source, "a λ-term", token)

    def parse_abstraction(self):
        """atom := λ <identifier> . <term>, where <term> extends as far right as possible."""
        lambda_token = self.advance()
        with self.nested(lambda_token):
            bound_variable = self.expect(TokenType.IDENTIFIER, "a bound variable").value
            self.expect(TokenType.DOT, "'.'")
            return Abstraction(bound_variable, self.parse_term())

    def parse_group(self):
        """atom := ( <term> )"""
        lparen = self.advance()
        with self.nested(lparen):
            self.paren_index += 1
            term = self.parse_term()

            token = self.current_token
            if token.type is TokenType.EOF:
                raise UnmatchedParenthesis(self.source, lparen)
            elif token.type is not TokenType.RPAREN:
                raise UnexpectedToken(self.source, "')'", token)

            self.advance()
            self.paren_index -= 1
            return term


def parse(text, max_depth=None):
    """Converts text to a LambdaTerm. Raises a LexError or ParseError if text is not a valid λ-term."""
    return Parser(Lexer(text), max_depth).parse()
