import unittest

from lcparse.grammar import pure as grammar
from lcparse.lang.error import LexError, UnexpectedCharacter
from lcparse.pure.lexical import Lexer, Token, TokenType, lex


def types(text):
    return [token.type for token in lex(text)]


class LexerTestCase(unittest.TestCase):

    def test_builtins(self):
        cases = {
            "λ": [TokenType.LAMBDA, TokenType.EOF],
            "\\": [TokenType.LAMBDA, TokenType.EOF],
            ".": [TokenType.DOT, TokenType.EOF],
            "(": [TokenType.LPAREN, TokenType.EOF],
            ")": [TokenType.RPAREN, TokenType.EOF],
            "(λ.)": [TokenType.LPAREN, TokenType.LAMBDA, TokenType.DOT, TokenType.RPAREN, TokenType.EOF],
        }
        for case, expected in cases.items():
            self.assertEqual(expected, types(case), case)

    def test_grammar_glyphs(self):
        glyphs = [grammar.LAMBDA, grammar.DOT, grammar.LPAREN, grammar.RPAREN] + list(grammar.ALIASES)
        for glyph in glyphs:
            token, eof = lex(glyph)
            self.assertIsNot(TokenType.IDENTIFIER, token.type, glyph)
            self.assertEqual(glyph, token.value, glyph)
            self.assertIs(TokenType.EOF, eof.type, glyph)

    def test_alias_is_same_token_kind(self):
        self.assertEqual(types("λx.x"), types("\\x.x"))

    def test_empty(self):
        for case in ["", " ", "\t\n  "]:
            tokens = lex(case)
            self.assertEqual(1, len(tokens), repr(case))
            self.assertIs(TokenType.EOF, tokens[0].type)
            self.assertEqual(len(case), tokens[0].start)

    def test_identifiers(self):
        cases = {
            "x": ["x"],
            "xy": ["xy"],
            "x y": ["x", "y"],
            "foo_bar2 baz": ["foo_bar2", "baz"],
            "_x": ["_x"],
            "x1(y2)": ["x1", "y2"],
            "xλy.z": ["x", "y", "z"],
            "αβ": ["αβ"],
        }
        for case, expected in cases.items():
            names = [token.value for token in lex(case) if token.type is TokenType.IDENTIFIER]
            self.assertEqual(expected, names, case)

    def test_identifier_runs_are_maximal(self):
        self.assertEqual([Token(TokenType.IDENTIFIER, "xy", 0, 2), Token(TokenType.EOF, None, 2, 2)], lex("xy"))

    def test_spans(self):
        tokens = lex(" (λx. xy)")
        spans = [(token.start, token.end) for token in tokens]
        self.assertEqual([(1, 2), (2, 3), (3, 4), (4, 5), (6, 8), (8, 9), (9, 9)], spans)

        source = "(λx. xy) z"
        rebuilt = "".join(source[token.start:token.end] for token in lex(source))
        self.assertEqual(source.replace(" ", ""), rebuilt)

    def test_worked_example(self):
        expected = [
            TokenType.LPAREN, TokenType.LAMBDA, TokenType.IDENTIFIER, TokenType.DOT,
            TokenType.IDENTIFIER, TokenType.IDENTIFIER, TokenType.RPAREN, TokenType.IDENTIFIER, TokenType.EOF,
        ]
        self.assertEqual(expected, types("(λx. f x) y"))

    def test_unexpected_character(self):
        cases = {"x # y": ("#", 2), "1x": ("1", 0), "λx.x+y": ("+", 4), "x,": (",", 1), "x 2": ("2", 2)}
        for case, (char, position) in cases.items():
            with self.assertRaises(UnexpectedCharacter, msg=case) as context:
                lex(case)
            self.assertEqual(char, context.exception.char, case)
            self.assertEqual(position, context.exception.position, case)
            self.assertIsInstance(context.exception, LexError)

    def test_lazy(self):
        tokens = iter(Lexer("x y #"))
        self.assertEqual("x", next(tokens).value)
        self.assertEqual("y", next(tokens).value)
        self.assertRaises(UnexpectedCharacter, next, tokens)

    def test_eof_only_at_end(self):
        tokens = lex("λx. (x y) z")
        self.assertIs(TokenType.EOF, tokens[-1].type)
        self.assertNotIn(TokenType.EOF, [token.type for token in tokens[:-1]])

    def test_lexeme(self):
        self.assertEqual("λ", Token(TokenType.LAMBDA, "λ").lexeme)
        self.assertEqual("end of input", Token(TokenType.EOF).lexeme)


if __name__ == '__main__':
    unittest.main()
