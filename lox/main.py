"""Runs Lox scripts or the interactive shell, using the error handling context manager. Called from the lox console
script and from `python -m lox`.
"""

import argparse

from lox.lang.error import ErrorHandler, ExitCode
from lox.lang.printer import AstPrinter
from lox.lang.session import Session
from lox.lang.shell import Shell


def main(argv=None):
    """Runs the Lox interpreter and returns the process exit status."""
    parser = argparse.ArgumentParser(prog="lox", description="Tree-walking interpreter for the Lox language.")
    parser.add_argument("script", help="script to run (if empty, goes to interactive mode)", nargs="?")
    parser.add_argument("--tokens", action="store_true", help="print the script's tokens instead of running it")
    parser.add_argument("--ast", action="store_true", help="print the script's syntax tree instead of running it")
    args = parser.parse_args(argv)

    with ErrorHandler() as error_handler:
        sess = Session(error_handler)

        if args.script is None:
            error_handler.fatal = False
            Shell(sess).cmdloop()
            return ExitCode.OK

        source = Session.read(args.script)

        if args.tokens:
            for token in sess.scan(source):
                print(token)
        elif args.ast:
            printer = AstPrinter()
            for statement in sess.parse(source):
                print(printer.print(statement))
        else:
            sess.run(source)

    if error_handler.had_error:
        return ExitCode.DATAERR
    if error_handler.had_runtime_error:
        return ExitCode.SOFTWARE
    return ExitCode.OK
