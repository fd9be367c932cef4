"""Tree-walking evaluator for Lox.

Runtime values are plain Python objects: None (nil), bool, float (every number) and str. Since bool is a subclass of
int but never of float, kind checks below use isinstance(value, float) for numbers and never confuse the two.
"""

import operator

from lox.core.environment import Environment
from lox.core.syntax import Assign, Binary, Block, Expression, Grouping, Literal, Print, Unary, Var, Variable
from lox.core.tokens import TokenType
from lox.lang.error import DivisionByZero, LoxError, LoxRuntimeError, TypeMismatch

# binary operators that need two numbers
NUMERIC = {
    TokenType.MINUS: operator.sub,
    TokenType.STAR: operator.mul,
    TokenType.SLASH: operator.truediv,
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
}


def is_truthy(value):
    """nil and false are falsy, everything else (0 and "" included) is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left, right):
    """Value equality without coercion between kinds: true != 1 and 1 != "1"."""
    if left is None:
        return right is None
    return type(left) is type(right) and left == right


def stringify(value):
    """Display form of a runtime value."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def expect_number(token, *operands):
    """Raises TypeMismatch at token unless every operand is a number."""
    if all(isinstance(operand, float) for operand in operands):
        return
    if len(operands) == 1:
        raise TypeMismatch(token, "Operand must be a number.")
    raise TypeMismatch(token, "Operands must be numbers.")


class Interpreter:
    """Executes statements against a root environment that lives as long as the interpreter, so state accumulates
    across interpret calls (one per line in the shell).
    """

    def __init__(self, error_handler, out=None):
        self.error_handler = error_handler
        self.out = out  # None means sys.stdout at the time of printing

        self.globals = Environment()
        self.environment = self.globals

        self._evaluators = {
            Assign: self._assign,
            Binary: self._binary,
            Grouping: self._grouping,
            Literal: self._literal,
            Unary: self._unary,
            Variable: self._variable,
        }
        self._executors = {
            Block: self._block,
            Expression: self._expression,
            Print: self._print,
            Var: self._var,
        }

    def interpret(self, statements):
        """Executes statements in order. The first runtime error stops the whole batch and is reported once."""
        try:
            for statement in statements:
                self.execute(statement)
        except LoxRuntimeError as error:
            self.error_handler.runtime_error(error)

    def execute(self, stmt):
        try:
            executor = self._executors[type(stmt)]
        except KeyError:
            raise LoxError(f"cannot execute '{type(stmt).__name__}'", internal=True)
        executor(stmt)

    def evaluate(self, expr):
        try:
            evaluator = self._evaluators[type(expr)]
        except KeyError:
            raise LoxError(f"cannot evaluate '{type(expr).__name__}'", internal=True)
        return evaluator(expr)

    def execute_block(self, statements, environment):
        """Executes statements in environment, restoring the current environment however the block exits."""
        previous = self.environment
        try:
            self.environment = environment
            for statement in statements:
                self.execute(statement)
        finally:
            self.environment = previous

    # ---------- statements ----------

    def _block(self, stmt):
        self.execute_block(stmt.statements, Environment(self.environment))

    def _expression(self, stmt):
        self.evaluate(stmt.expression)

    def _print(self, stmt):
        value = self.evaluate(stmt.expression)
        print(stringify(value), file=self.out)

    def _var(self, stmt):
        value = None
        if stmt.initializer is not None:
            value = self.evaluate(stmt.initializer)
        self.environment.define(stmt.name.lexeme, value)

    # ---------- expressions ----------

    def _assign(self, expr):
        value = self.evaluate(expr.value)
        self.environment.assign(expr.name, value)
        return value

    def _binary(self, expr):
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.operator

        if op.type is TokenType.PLUS:
            return self._plus(op, left, right)
        if op.type is TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if op.type is TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        expect_number(op, left, right)
        if op.type is TokenType.SLASH and right == 0:
            raise DivisionByZero(op, "Division by zero.")
        return NUMERIC[op.type](left, right)

    @staticmethod
    def _plus(op, left, right):
        """number + number adds. string + string concatenates, and so does a string with a number on either side."""
        if isinstance(left, float) and isinstance(right, float):
            return left + right
        if isinstance(left, str) and isinstance(right, str):
            return left + right
        if isinstance(left, str) and isinstance(right, float):
            return left + stringify(right)
        if isinstance(left, float) and isinstance(right, str):
            return stringify(left) + right
        raise TypeMismatch(op, "Operands must be two numbers or two strings.")

    def _grouping(self, expr):
        return self.evaluate(expr.expression)

    def _literal(self, expr):
        return expr.value

    def _unary(self, expr):
        right = self.evaluate(expr.right)

        if expr.operator.type is TokenType.BANG:
            return not is_truthy(right)

        expect_number(expr.operator, right)
        return -right

    def _variable(self, expr):
        return self.environment.get(expr.name)
