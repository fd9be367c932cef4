"""Session control for Lox: runs source text through scanner, parser and interpreter, either from a script file or
line by line from the shell.
"""

from lox.core.interpreter import Interpreter
from lox.core.parser import Parser
from lox.core.scanner import Scanner
from lox.core.syntax import Expression, Print
from lox.lang.error import ExitCode, LoxError


class Session:
    """Governs a Lox session. The interpreter, and so the global scope, is shared by every run of the session."""

    def __init__(self, error_handler, out=None):
        self.error_handler = error_handler

        self.scanner = Scanner(error_handler)
        self.parser = Parser(error_handler)
        self.interpreter = Interpreter(error_handler, out)

    @staticmethod
    def read(path):
        """Returns the contents of the script at path."""
        try:
            with open(path, "r", encoding="utf-8") as file:
                return file.read()
        except OSError:
            raise LoxError(f"'{path}' could not be opened", exit_code=ExitCode.NOINPUT)

    def scan(self, source):
        return self.scanner.scan(source)

    def parse(self, source):
        return self.parser.parse(self.scan(source))

    def run(self, source, echo=False):
        """Runs source. Nothing is executed if it has any syntax error. If echo, source made of a single expression
        statement prints its value, as the shell does.
        """
        statements = self.parse(source)
        if self.error_handler.had_error:
            return

        if echo and len(statements) == 1 and isinstance(statements[0], Expression):
            statements = [Print(statements[0].expression)]

        self.interpreter.interpret(statements)

    def run_file(self, path):
        self.run(Session.read(path))
