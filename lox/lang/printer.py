"""Debug rendering of syntax trees as parenthesized prefix text, e.g. `1 + 2 * 3` becomes `(+ 1 (* 2 3))`."""

from lox.core.interpreter import stringify
from lox.core.syntax import Assign, Binary, Block, Expression, Grouping, Literal, Print, Unary, Var, Variable
from lox.lang.error import LoxError


class AstPrinter:

    def __init__(self):
        self._printers = {
            Assign: lambda node: self.parenthesize("=", node.name.lexeme, node.value),
            Binary: lambda node: self.parenthesize(node.operator.lexeme, node.left, node.right),
            Grouping: lambda node: self.parenthesize("group", node.expression),
            Literal: lambda node: stringify(node.value),
            Unary: lambda node: self.parenthesize(node.operator.lexeme, node.right),
            Variable: lambda node: node.name.lexeme,
            Block: lambda node: self.parenthesize("block", *node.statements),
            Expression: lambda node: self.parenthesize(";", node.expression),
            Print: lambda node: self.parenthesize("print", node.expression),
            Var: self._var,
        }

    def print(self, node):
        try:
            printer = self._printers[type(node)]
        except KeyError:
            raise LoxError(f"cannot print '{type(node).__name__}'", internal=True)
        return printer(node)

    def _var(self, node):
        if node.initializer is None:
            return self.parenthesize("var", node.name.lexeme)
        return self.parenthesize("var", node.name.lexeme, node.initializer)

    def parenthesize(self, name, *parts):
        """Wraps name and parts in parentheses. Parts are nodes, or plain strings that are copied as they are."""
        result = f"({name}"
        for part in parts:
            result += " " + (part if isinstance(part, str) else self.print(part))
        return result + ")"
