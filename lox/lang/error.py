"""Error handling for the Lox interpreter. Only LoxErrors should be raised deliberately: if another type of error is
raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Syntax errors (LexError, ParseError) are reported and then swallowed by the scanner/parser so that a single pass can
surface many of them. Runtime errors (LoxRuntimeError and subclasses) unwind the whole interpret call and are reported
exactly once.
"""

import sys

from termcolor import colored

from lox.core.tokens import TokenType


class ExitCode:
    """Process exit statuses, following the sysexits convention."""
    OK = 0
    USAGE = 64
    DATAERR = 65   # script had syntax errors
    NOINPUT = 66   # script could not be read
    SOFTWARE = 70  # runtime or internal error


class LoxError(Exception):
    """Base of every error the interpreter raises on purpose."""

    def __init__(self, msg, internal=False, exit_code=ExitCode.SOFTWARE):
        super().__init__(msg)
        self.msg = msg
        self.internal = internal
        self.exit_code = exit_code


class LexError(LoxError):
    """Unterminated string/comment or unrecognized character. Only the line is known."""

    def __init__(self, line, msg):
        super().__init__(msg, exit_code=ExitCode.DATAERR)
        self.line = line


class ParseError(LoxError):
    """Expected token missing or invalid assignment target, located at the offending token."""

    def __init__(self, token, msg):
        super().__init__(msg, exit_code=ExitCode.DATAERR)
        self.token = token


class LoxRuntimeError(LoxError):
    """Error raised while evaluating; carries the token that gives its position."""

    def __init__(self, token, msg):
        super().__init__(msg)
        self.token = token


class TypeMismatch(LoxRuntimeError):
    pass


class DivisionByZero(LoxRuntimeError):
    pass


class UndefinedVariable(LoxRuntimeError):

    def __init__(self, token):
        super().__init__(token, f"Undefined variable '{token.lexeme}'.")


class ErrorHandler:
    """Collects and prints syntax/runtime errors. Also a context manager that will suppress Python errors and print
    them as Lox errors instead.
    """
    ERROR = "red"

    def __init__(self, fatal=True, stream=None):
        self.fatal = fatal
        self.stream = stream  # None means sys.stderr at the time of writing

        self.had_error = False
        self.had_runtime_error = False

        self.reports = []         # (line, where, msg) for every syntax error since the last reset
        self.runtime_errors = []  # every LoxRuntimeError reported since the last reset

    def _print(self, msg):
        print(msg, file=self.stream if self.stream is not None else sys.stderr)

    def report(self, error):
        """Reports a LexError or ParseError, working out where in the source it happened."""
        if isinstance(error, ParseError):
            if error.token.type is TokenType.EOF:
                where = " at end"
            else:
                where = f" at '{error.token.lexeme}'"
            line = error.token.line
        else:
            where = ""
            line = error.line

        self.syntax_error(line, where, error.msg)

    def syntax_error(self, line, where, msg):
        """Prints a syntax error. Does not stop the scanner/parser from continuing."""
        prefix = colored(f"[line {line}]", attrs=["bold"])
        label = colored("Error", ErrorHandler.ERROR, attrs=["bold"])
        self._print(f"{prefix} {label}{where}: {msg}")

        self.reports.append((line, where, msg))
        self.had_error = True

    def runtime_error(self, error):
        """Prints the runtime error that aborted an interpret call."""
        label = colored("Runtime error", ErrorHandler.ERROR, attrs=["bold"])
        self._print(f"{label}: {error.msg}\n[line {error.token.line}]")

        self.runtime_errors.append(error)
        self.had_runtime_error = True

    def reset(self):
        """Forgets that errors happened, so the next batch of input gets a clean slate."""
        self.had_error = False
        self.had_runtime_error = False
        self.reports = []
        self.runtime_errors = []

    def throw(self, error):
        """Prints a LoxError that escaped the pipeline. Exits with error.exit_code if self.fatal."""
        error_msg = ""
        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        self._print(error_msg)

        if self.fatal:
            sys.exit(error.exit_code)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(LoxError("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(LoxError("maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, LoxError):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(LoxError(f"unknown error: '{exc_type.__name__}: {exc_val}'", internal=True))
            do_exit = True

        return not do_exit
