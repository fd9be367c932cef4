import unittest

from lox.core.environment import Environment
from lox.core.tokens import Token, TokenType
from lox.lang.error import LoxRuntimeError, UndefinedVariable


def name(lexeme, line=1):
    return Token(TokenType.IDENTIFIER, lexeme, None, line)


class EnvironmentTestCase(unittest.TestCase):

    def test_define_and_get(self):
        env = Environment()
        env.define("a", 1.0)
        env.define("b", None)

        self.assertEqual(1.0, env.get(name("a")))
        self.assertIsNone(env.get(name("b")))

    def test_redefine(self):
        env = Environment()
        env.define("a", 1.0)
        env.define("a", "again")
        self.assertEqual("again", env.get(name("a")))

    def test_undefined(self):
        env = Environment(Environment())
        with self.assertRaises(UndefinedVariable) as context:
            env.get(name("missing", line=4))

        self.assertIsInstance(context.exception, LoxRuntimeError)
        self.assertEqual("Undefined variable 'missing'.", context.exception.msg)
        self.assertEqual(4, context.exception.token.line)

    def test_chain_lookup(self):
        root = Environment()
        middle = Environment(root)
        inner = Environment(middle)

        root.define("a", "root")
        middle.define("b", "middle")
        inner.define("a", "inner")

        self.assertEqual("inner", inner.get(name("a")))
        self.assertEqual("middle", inner.get(name("b")))
        self.assertEqual("root", middle.get(name("a")))
        self.assertRaises(UndefinedVariable, root.get, name("b"))

    def test_assign(self):
        root = Environment()
        inner = Environment(root)
        root.define("a", 1.0)

        inner.assign(name("a"), 2.0)

        self.assertEqual(2.0, root.get(name("a")))
        self.assertNotIn("a", inner.values)

    def test_assign_stops_at_first_match(self):
        root = Environment()
        inner = Environment(root)
        root.define("a", "outer")
        inner.define("a", "shadow")

        inner.assign(name("a"), "changed")

        self.assertEqual("changed", inner.get(name("a")))
        self.assertEqual("outer", root.get(name("a")))

    def test_assign_never_declares(self):
        env = Environment(Environment())
        self.assertRaises(UndefinedVariable, env.assign, name("a"), 1.0)
        self.assertRaises(UndefinedVariable, env.get, name("a"))


if __name__ == '__main__':
    unittest.main()
