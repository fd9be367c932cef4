"""Lox interpreter.

Basic program flow, one straight pass per stage:
    1. Scanner (lox.core.scanner): source text to a list of tokens ending with EOF
        - lexical errors are reported and skipped, scanning carries on
    2. Parser (lox.core.parser): tokens to a list of statements, by recursive descent
        - for the grammar, see lox.core.syntax
        - syntax errors are reported, then the parser resynchronizes at the next statement
    3. Interpreter (lox.core.interpreter): walks the statements directly, no bytecode
        - variables live in a chain of environments, one per block (lox.core.environment)
        - the first runtime error aborts the run

lox.lang holds what surrounds the pipeline: error reporting, the session driving it, the shell and a debug printer.
"""
