"""Pure lambda calculus tokenizer.

The lexer is a small stateful scanner over one input string. It skips whitespace, classifies the four builtin
glyphs ('λ' or its alias '\\', '.', '(', ')') and greedily consumes identifiers, so that `xy` is a single identifier
and never an application of `x` to `y`. Tokens are produced lazily by iterating over a Lexer, which always ends the
stream with exactly one EOF token.

Examples:
    Input:  "(λx. x) y"
    Tokens: [LPAREN, LAMBDA, IDENTIFIER('x'), DOT, IDENTIFIER('x'), RPAREN, IDENTIFIER('y'), EOF]

Any other character raises UnexpectedCharacter with its offset in the input.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from lcparse.grammar import pure as grammar
from lcparse.lang.error import UnexpectedCharacter


class TokenType(Enum):
    LAMBDA = auto()
    DOT = auto()
    LPAREN = auto()
    RPAREN = auto()
    IDENTIFIER = auto()
    EOF = auto()

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str] = None
    start: int = 0  # offset of the first character in the input
    end: int = 0    # offset one past the last character

    def __repr__(self):
        if self.value is None:
            return f"Token({self.type})"
        return f"Token({self.type}, {self.value!r})"

    @property
    def lexeme(self):
        if self.type is TokenType.EOF:
            return "end of input"
        return self.value


class Lexer:
    """Iterable over the tokens of text. Each Lexer lexes exactly one input."""
    BUILTINS = {
        grammar.DOT: TokenType.DOT,
        grammar.LPAREN: TokenType.LPAREN,
        grammar.RPAREN: TokenType.RPAREN,
    }

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self):
        """Advance to next character."""
        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self):
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def identifier(self):
        """Consumes a maximal run of identifier characters. Assumes current_char can start an identifier."""
        start = self.pos
        self.advance()
        while self.current_char is not None and grammar.is_identifier_char(self.current_char):
            self.advance()
        return Token(TokenType.IDENTIFIER, self.text[start:self.pos], start, self.pos)

    def get_next_token(self):
        """Lexical analyzer that returns tokens one at a time. Returns EOF once text is exhausted."""
        self.skip_whitespace()

        char = self.current_char
        start = self.pos

        if char is None:
            return Token(TokenType.EOF, None, start, start)

        if grammar.is_lambda(char):
            self.advance()
            return Token(TokenType.LAMBDA, char, start, self.pos)

        if char in Lexer.BUILTINS:
            self.advance()
            return Token(Lexer.BUILTINS[char], char, start, self.pos)

        if grammar.is_identifier_start(char):
            return self.identifier()

        raise UnexpectedCharacter(self.text, char, start)

    def __iter__(self):
        while True:
            token = self.get_next_token()
            yield token
            if token.type is TokenType.EOF:
                return


def lex(text):
    """Returns every token of text, ending with EOF. Raises UnexpectedCharacter on the first unrecognized character."""
    return list(Lexer(text))
