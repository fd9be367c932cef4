"""Recursive-descent parser for Lox. Each precedence level of the grammar (see lox.core.syntax) is one method, calling
the method of the next-higher level for its operands.

Errors are handled in panic mode: a ParseError is reported as soon as it is raised, then the parser discards tokens
until it reaches a statement boundary and carries on with the next declaration. One pass can therefore report several
independent syntax errors.
"""

from lox.core.syntax import Assign, Binary, Block, Expression, Grouping, Literal, Print, Unary, Var, Variable
from lox.core.tokens import Token, TokenType
from lox.lang.error import ParseError


class Parser:
    """Turns a list of Tokens into a list of statements."""
    # tokens that begin a statement, used to resynchronize after an error
    STATEMENT_START = {
        TokenType.CLASS, TokenType.FUN, TokenType.VAR, TokenType.FOR,
        TokenType.IF, TokenType.WHILE, TokenType.PRINT, TokenType.RETURN,
    }

    EQUALITY = (TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)
    COMPARISON = (TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL)
    TERM = (TokenType.MINUS, TokenType.PLUS)
    FACTOR = (TokenType.SLASH, TokenType.STAR)
    UNARY = (TokenType.BANG, TokenType.MINUS)

    def __init__(self, error_handler):
        self.error_handler = error_handler
        self.tokens = []
        self.current = 0

    def parse(self, tokens):
        """Returns the statements in tokens. Declarations with syntax errors are reported and left out."""
        self.tokens = list(tokens)
        self.current = 0

        if not self.tokens or self.tokens[-1].type is not TokenType.EOF:
            line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token(TokenType.EOF, "", None, line))

        statements = []
        while not self.is_at_end():
            declaration = self.declaration()
            if declaration is not None:
                statements.append(declaration)
        return statements

    # ---------- declarations and statements ----------

    def declaration(self):
        try:
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError:
            self.synchronize()
            return None

    def var_declaration(self):
        name = self.consume(TokenType.IDENTIFIER, "Expect variable name.")

        initializer = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()

        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return Var(name, initializer)

    def statement(self):
        if self.match(TokenType.PRINT):
            return self.print_statement()
        if self.match(TokenType.LEFT_BRACE):
            return Block(self.block())
        return self.expression_statement()

    def print_statement(self):
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Print(value)

    def block(self):
        statements = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.is_at_end():
            declaration = self.declaration()
            if declaration is not None:
                statements.append(declaration)

        self.consume(TokenType.RIGHT_BRACE, "Expect '}' after block.")
        return tuple(statements)

    def expression_statement(self):
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return Expression(expr)

    # ---------- expressions ----------

    def expression(self):
        return self.assignment()

    def assignment(self):
        expr = self.equality()

        if self.match(TokenType.EQUAL):
            equals = self.previous()
            value = self.assignment()

            if isinstance(expr, Variable):
                return Assign(expr.name, value)

            # reported but not raised: the parser knows where it is, no need to synchronize
            self.error(equals, "Invalid assignment target.")

        return expr

    def _left_assoc(self, operand, operators):
        """Parses operand (operator operand)* and folds it to the left: a - b - c is (a - b) - c."""
        expr = operand()

        while self.match(*operators):
            operator = self.previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def equality(self):
        return self._left_assoc(self.comparison, Parser.EQUALITY)

    def comparison(self):
        return self._left_assoc(self.term, Parser.COMPARISON)

    def term(self):
        return self._left_assoc(self.factor, Parser.TERM)

    def factor(self):
        return self._left_assoc(self.unary, Parser.FACTOR)

    def unary(self):
        if self.match(*Parser.UNARY):
            operator = self.previous()
            right = self.unary()
            return Unary(operator, right)
        return self.primary()

    def primary(self):
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.NIL):
            return Literal(None)
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal)

        if self.match(TokenType.IDENTIFIER):
            return Variable(self.previous())

        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise self.error(self.peek(), "Expect expression.")

    # ---------- token helpers ----------

    def match(self, *types):
        """Consumes the next token if it is any of types."""
        for token_type in types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type, msg):
        if self.check(token_type):
            return self.advance()
        raise self.error(self.peek(), msg)

    def check(self, token_type):
        if self.is_at_end():
            return False
        return self.peek().type is token_type

    def advance(self):
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self):
        return self.peek().type is TokenType.EOF

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]

    def error(self, token, msg):
        """Reports a ParseError at token and returns it so the caller can decide whether to raise it."""
        error = ParseError(token, msg)
        self.error_handler.report(error)
        return error

    def synchronize(self):
        """Discards tokens until just past a ';' or just before a token that starts a statement."""
        self.advance()

        while not self.is_at_end():
            if self.previous().type is TokenType.SEMICOLON:
                return
            if self.peek().type in Parser.STATEMENT_START:
                return
            self.advance()
