"""Error handling for lcparse. Only GenericExceptions should be encountered while parsing: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Lexing and parsing errors are GenericExceptions that know which span of the source text caused them, so that
ErrorHandler can point at the offending characters.
"""

import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error/warning message so that it can be used to throw a lcparse error/warning. Essentially just a
    wrapper around parse_args.
    """

    def __init__(self, msg, exprs=None, start=0, end=-1, diagnosis=True, internal=False):
        """Parses args for GenericException or warning."""
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]
        exprs = [str(expr) for expr in exprs]

        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.plain_msg = msg.format(*exprs)
        self.expr = exprs[0]  # exprs[0] should be the offending expr that caused the error
        self.end = end if end != -1 else len(self.expr)  # needed for error display

        self.start = start
        self.diagnosis = diagnosis
        self.internal = internal

        super().__init__(self.plain_msg)


class LexError(GenericException):
    """Raised by the lexer. The only lexical error is a character that cannot start any token."""


class UnexpectedCharacter(LexError):

    def __init__(self, source, char, position):
        self.char = char
        self.position = position
        super().__init__("unexpected character '{1}'", (source, char), start=position, end=position + len(char))


class ParseError(GenericException):
    """Raised by the parser on the first grammar violation. No partial tree is ever returned."""


class UnexpectedToken(ParseError):

    def __init__(self, source, expected, found):
        self.expected = expected
        self.found = found
        self.position = found.start
        msg = "expected {1}, got '{2}'"
        super().__init__(msg, (source, expected, found.lexeme), start=found.start, end=found.end)


class UnmatchedParenthesis(ParseError):
    """Either an '(' that is never closed or a ')' that closes nothing. position points at the lonely parenthesis."""

    def __init__(self, source, paren):
        self.paren = paren
        self.position = paren.start
        if paren.lexeme == "(":
            msg = "'{1}' is never closed"
        else:
            msg = "'{1}' does not close anything"
        super().__init__(msg, (source, paren.lexeme), start=paren.start, end=paren.end)


class UnexpectedEndOfInput(ParseError):

    def __init__(self, source, expected, position):
        self.expected = expected
        self.position = position
        super().__init__("expected {1}, got end of input", (source, expected), start=position, end=position + 1)


class TrailingTokens(ParseError):

    def __init__(self, source, found):
        self.found = found
        self.position = found.start
        msg = "unexpected '{1}' after complete λ-term"
        super().__init__(msg, (source, found.lexeme), start=found.start, end=len(source.rstrip()))


class NestingTooDeep(ParseError):

    def __init__(self, source, limit, position):
        self.limit = limit
        self.position = position
        msg = "λ-term nests deeper than {1} groups/abstractions"
        super().__init__(msg, (source, limit), start=position, end=position + 1)


class ErrorHandler:
    """Context manager that will silently suppress Python errors and raise custom lcparse errors/warnings."""
    ERROR = "red"
    WARNING = "magenta"

    def __init__(self, fatal=True, prog="lcparse"):
        self.fatal = fatal
        self.prog = prog
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to lexing/parsing line."""
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful parse."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(error, warning=False):
        """Returns offending part of error.expr highlighted and bolded."""
        color = ErrorHandler.WARNING if warning else ErrorHandler.ERROR

        diagnosis = "  " + error.expr[:error.start]

        end = max(error.end, error.start + 1)
        diagnosis += colored(error.expr[error.start:end], color, attrs=["bold"])
        diagnosis += error.expr[end:] + "\n"

        diagnosis += "  " + " " * error.start
        diagnosis += colored("^" + "~" * (end - error.start - 1), color, attrs=["bold"])

        return diagnosis

    def _location(self, error):
        """Returns 'file:line:col: ' for the most recently registered line, or the program name if there is none."""
        for file, (line, line_num) in reversed(self.traceback.items()):
            if line is not None:
                col = error.start + 1
                if error.expr and error.expr in line:
                    col += line.index(error.expr)
                return colored(f"{file}:{line_num}:{col}: ", attrs=["bold"])
        return colored(f"{self.prog}: ", attrs=["bold"])

    def warn(self, *args, **kwargs):
        """Generates and prints runtime warning message based on args."""
        error = GenericException(*args, **kwargs)

        error_msg = self._location(error)
        error_msg += colored("warning: ", ErrorHandler.WARNING, attrs=["bold"]) + error.msg

        print(error_msg, file=sys.stderr)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error, warning=True), file=sys.stderr)

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        lines = 0
        for file, (line, line_num) in self.traceback.items():  # assumes dict is insertion-ordered
            if line:
                error_msg += f"  File '{file}', line {line_num}:\n"
                error_msg += f"    {line}\n"
                lines += 1

        if lines > 1:
            error_msg = "Traceback:\n" + error_msg
        else:
            error_msg = ""

        error_msg += self._location(error)
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg, file=sys.stderr)

        if not error.internal and error.expr and error.diagnosis:
            print(ErrorHandler.diagnose(error), file=sys.stderr)

        if self.fatal:
            sys.exit(1)
        self.traceback = {}  # if error occurred, reset traceback (no need if error is fatal)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt", diagnosis=False))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("λ-term nests too deeply, maximum recursion depth exceeded", diagnosis=False))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
