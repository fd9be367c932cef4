"""Lexical scopes: variable bindings chained to the scope enclosing them."""

from lox.lang.error import UndefinedVariable


class Environment:
    """Variable bindings of one scope, linked to the scope enclosing it. The root environment has no enclosing scope.
    Lookup and assignment walk outwards and stop at the first scope that binds the name.
    """

    def __init__(self, enclosing=None):
        self.values = {}
        self.enclosing = enclosing

    def define(self, name, value):
        """Binds name in this scope, replacing any previous binding of it here."""
        self.values[name] = value

    def get(self, name):
        """Returns the value bound to token name, raising UndefinedVariable if no scope binds it."""
        environment = self
        while environment is not None:
            if name.lexeme in environment.values:
                return environment.values[name.lexeme]
            environment = environment.enclosing

        raise UndefinedVariable(name)

    def assign(self, name, value):
        """Rebinds token name in the nearest scope that binds it. Never declares."""
        environment = self
        while environment is not None:
            if name.lexeme in environment.values:
                environment.values[name.lexeme] = value
                return
            environment = environment.enclosing

        raise UndefinedVariable(name)

    def __repr__(self):
        return f"Environment({self.values!r}, enclosing={self.enclosing!r})"
