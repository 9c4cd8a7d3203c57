"""Lambda calculus abstract syntax tree.

For reference:
- Variable: a name, free or bound (the parser does not resolve scopes)
- Abstraction: λ<bound_variable>.<body>
- Application: <function> <argument>

Nodes are frozen dataclasses: a tree is built bottom-up by the parser and never mutated afterwards. Equality is
structural, so two parses of the same text compare equal.

The parser folds `x x x ...` into a left-leaning chain without recursing, so such a tree can be far deeper than the
interpreter's recursion limit. Every traversal here (equality, hashing, repr and display) walks an explicit stack.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


class LambdaTerm(ABC):
    """Represents a valid λ-term: variable, abstraction, or application."""
    INDENT = "    "

    @property
    @abstractmethod
    def fields(self):
        """(name, value) pairs in source order. Values are either strings or child LambdaTerms."""

    @property
    def nodes(self):
        """Child terms, in source order. Lambda calculus ASTs are binary, so there are at most two."""
        return tuple(value for __, value in self.fields if isinstance(value, LambdaTerm))

    @property
    def label(self):
        """Non-term field values, which together with the type identify a node apart from its children."""
        return tuple(value for __, value in self.fields if not isinstance(value, LambdaTerm))

    def preorder(self):
        """Yields every term in the tree, parents before children, left to right."""
        stack = [self]
        while stack:
            term = stack.pop()
            yield term
            stack.extend(reversed(term.nodes))

    def display(self, indents=0):
        """Displays the tree in a readable, structural format.

        Format:
        <LambdaTerm>(
            <field>=<LambdaTerm>(
                ...
                <field>=Variable('<name>'),
            ),
        )
        """
        lines = []
        stack = [(self, indents, "", "")]  # str items are finished lines
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                lines.append(item)
                continue

            term, level, prefix, suffix = item
            pad = self.INDENT * level
            cls = type(term).__name__

            if not term.nodes:
                args = ", ".join(repr(value) for __, value in term.fields)
                lines.append(f"{pad}{prefix}{cls}({args}){suffix}")
                continue

            todo = [f"{pad}{prefix}{cls}("]
            for name, value in term.fields:
                if isinstance(value, LambdaTerm):
                    todo.append((value, level + 1, f"{name}=", ","))
                else:
                    todo.append(f"{pad}{self.INDENT}{name}={value!r},")
            todo.append(f"{pad}){suffix}")
            stack.extend(reversed(todo))

        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, LambdaTerm):
            return NotImplemented

        stack = [(self, other)]
        while stack:
            left, right = stack.pop()
            if left is right:
                continue
            if type(left) is not type(right) or left.label != right.label:
                return False
            stack.extend(zip(left.nodes, right.nodes))
        return True

    def __hash__(self):
        # preorder is unambiguous because every type has a fixed number of children
        return hash(tuple((type(term).__name__, term.label) for term in self.preorder()))

    def __repr__(self):
        chunks = []
        stack = [self]  # str items are emitted as-is
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                chunks.append(item)
                continue

            todo = [f"{type(item).__name__}("]
            for idx, (name, value) in enumerate(item.fields):
                prefix = f"{', ' if idx else ''}{name}="
                if isinstance(value, LambdaTerm):
                    todo += [prefix, value]
                else:
                    todo.append(f"{prefix}{value!r}")
            todo.append(")")
            stack.extend(reversed(todo))

        return "".join(chunks)

    def __str__(self):
        return self.display()


@dataclass(frozen=True, eq=False, repr=False)
class Variable(LambdaTerm):
    name: str

    @property
    def fields(self):
        return (("name", self.name),)


@dataclass(frozen=True, eq=False, repr=False)
class Abstraction(LambdaTerm):
    bound_variable: str
    body: LambdaTerm

    @property
    def fields(self):
        return (("bound_variable", self.bound_variable), ("body", self.body))


@dataclass(frozen=True, eq=False, repr=False)
class Application(LambdaTerm):
    function: LambdaTerm
    argument: LambdaTerm

    @property
    def fields(self):
        return (("function", self.function), ("argument", self.argument))
