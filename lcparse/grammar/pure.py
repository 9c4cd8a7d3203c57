"""Pure lambda calculus surface grammar: reserved glyphs and the identifier charset.

Formally, the grammar accepted by lcparse can be succinctly defined as

```
<term>        ::= <application>
<application> ::= <atom> <atom>*                    ; associating by left: a b c d = (((a b) c) d)
<atom>        ::= <identifier>                      ; "variable"
                | "λ" <identifier> "." <term>       ; "abstraction", body is greedy: λx.x y = λx.(x y)
                | "(" <term> ")"                    ; grouping, the only way to limit an abstraction body
```

Identifiers are maximal runs of letters, digits and underscores that do not start with a digit. Whitespace only
separates tokens. The ASCII backslash is accepted as an alias for "λ".

Source: https://opendsa-server.cs.vt.edu/ODSA/Books/PL/html/Syntax.html
"""

LAMBDA = "λ"
DOT = "."
LPAREN = "("
RPAREN = ")"

ALIASES = {"\\": LAMBDA}  # alias: canonical glyph


def is_lambda(char):
    return char == LAMBDA or char in ALIASES


def is_identifier_start(char):
    """Whether or not char can begin an identifier. Note that Python considers 'λ' a letter."""
    return (char.isalpha() or char == "_") and char != LAMBDA


def is_identifier_char(char):
    """Whether or not char can continue an identifier."""
    return (char.isalnum() or char == "_") and char != LAMBDA


def normalize(expr):
    """Replaces every alias in expr with its canonical glyph."""
    for alias, glyph in ALIASES.items():
        expr = expr.replace(alias, glyph)
    return expr
