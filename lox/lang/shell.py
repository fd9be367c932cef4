"""Handles interactive mode for the Lox interpreter. Uses cmd as backend."""

import cmd
import io

from lox.core.scanner import Scanner
from lox.core.tokens import TokenType
from lox.lang.error import ErrorHandler


class Shell(cmd.Cmd):
    """Lox interpreter shell."""
    intro = "Lox interpreter :: Python backend\nType 'help' for more information, 'exit' to leave."
    prompt = "> "
    secondary_prompt = ". "  # used for line continuations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess
        self._tmp_line = ""

        # only counts braces, so it reports nowhere: the session reports errors when the line runs
        self._brace_scanner = Scanner(ErrorHandler(fatal=False, stream=io.StringIO()))

    def is_block_open(self, source):
        """Whether source has more "{" than "}" tokens. Braces inside strings and comments do not count."""
        types = [token.type for token in self._brace_scanner.scan(source)]
        return types.count(TokenType.LEFT_BRACE) > types.count(TokenType.RIGHT_BRACE)

    def default(self, line):
        """Runs arbitrary Lox source. Lines are joined while a block is left open."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            line = self._tmp_line + line

            if self.is_block_open(line):
                self._tmp_line = line + "\n"
                self.prompt = self.secondary_prompt
                return

            self._tmp_line = ""
            self.prompt = self._tmp_prompt

            try:
                self.sess.run(line, echo=True)
            finally:
                self.sess.error_handler.reset()  # errors on one line do not affect the next

    def do_help(self, arg):
        """Prints a short intro rather than command docs."""
        if arg:
            return self.default(f"help {arg}")  # "help" used as a variable name

        print("Welcome to the Lox interpreter!\n\n"
              "Statements end with ';'. Try 'var a = 1 + 2;' and then 'print a;'. A line\n"
              "holding a single expression, like 'a * 2;', prints its value. Blocks '{ ... }'\n"
              "may span several lines.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line, but keep an open block going."""
        if self._tmp_line:
            return self.default("")
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        if arg:
            return self.default(f"EOF {arg}")  # "EOF" used as a variable name

        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        if arg:
            return self.default(f"exit {arg}")  # "exit" used as a variable name
        return True
