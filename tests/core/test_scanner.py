import io
import unittest

from lox.core.scanner import Scanner
from lox.core.tokens import Token, TokenType
from lox.lang.error import ErrorHandler


def scan(source):
    error_handler = ErrorHandler(stream=io.StringIO())
    return Scanner(error_handler).scan(source), error_handler


def types(tokens):
    return [token.type for token in tokens]


class ScannerTestCase(unittest.TestCase):

    def test_number(self):
        should_pass = {"0": 0.0, "7": 7.0, "123": 123.0, "1.5": 1.5, "3.14159": 3.14159, "10.0": 10.0}
        for case, result in should_pass.items():
            tokens, error_handler = scan(case)
            self.assertEqual([TokenType.NUMBER, TokenType.EOF], types(tokens), case)
            self.assertEqual(result, tokens[0].literal, case)
            self.assertEqual(case, tokens[0].lexeme, case)
            self.assertFalse(error_handler.had_error, case)

    def test_number_edges(self):
        cases = {
            "1.": [TokenType.NUMBER, TokenType.DOT],
            ".5": [TokenType.DOT, TokenType.NUMBER],
            "1.2.3": [TokenType.NUMBER, TokenType.DOT, TokenType.NUMBER],
            "-4": [TokenType.MINUS, TokenType.NUMBER],
        }
        for case, expected in cases.items():
            tokens, __ = scan(case)
            self.assertEqual(expected + [TokenType.EOF], types(tokens), case)

    def test_string(self):
        should_pass = ["", "hello", "two words", "back\\slash \\n kept", "line\nbreak", "λ unicode"]
        for case in should_pass:
            tokens, error_handler = scan(f'"{case}"')
            self.assertEqual([TokenType.STRING, TokenType.EOF], types(tokens), case)
            self.assertEqual(case, tokens[0].literal, case)
            self.assertEqual(f'"{case}"', tokens[0].lexeme, case)
            self.assertFalse(error_handler.had_error, case)

    def test_unterminated_string(self):
        tokens, error_handler = scan('print "oops;\n\n')
        self.assertEqual([TokenType.PRINT, TokenType.EOF], types(tokens))
        self.assertEqual([(3, "", "Unterminated string.")], error_handler.reports)

    def test_operators(self):
        cases = {
            "(){},.-+;*/": [
                TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
                TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS, TokenType.SEMICOLON,
                TokenType.STAR, TokenType.SLASH,
            ],
            "! != = == < <= > >=": [
                TokenType.BANG, TokenType.BANG_EQUAL, TokenType.EQUAL, TokenType.EQUAL_EQUAL,
                TokenType.LESS, TokenType.LESS_EQUAL, TokenType.GREATER, TokenType.GREATER_EQUAL,
            ],
            "!==": [TokenType.BANG_EQUAL, TokenType.EQUAL],
            "===": [TokenType.EQUAL_EQUAL, TokenType.EQUAL],
        }
        for case, expected in cases.items():
            tokens, __ = scan(case)
            self.assertEqual(expected + [TokenType.EOF], types(tokens), case)

    def test_identifiers_and_keywords(self):
        cases = {
            "var": TokenType.VAR,
            "print": TokenType.PRINT,
            "nil": TokenType.NIL,
            "true": TokenType.TRUE,
            "while": TokenType.WHILE,
            "Var": TokenType.IDENTIFIER,
            "variable": TokenType.IDENTIFIER,
            "_private": TokenType.IDENTIFIER,
            "a1_b2": TokenType.IDENTIFIER,
            "orchid": TokenType.IDENTIFIER,
        }
        for case, expected in cases.items():
            tokens, __ = scan(case)
            self.assertEqual([expected, TokenType.EOF], types(tokens), case)
            self.assertEqual(case, tokens[0].lexeme, case)
            self.assertIsNone(tokens[0].literal, case)

    def test_comments(self):
        cases = {
            "// nothing here": [],
            "1 // trailing\n2": [TokenType.NUMBER, TokenType.NUMBER],
            "1 /* inline */ + 2": [TokenType.NUMBER, TokenType.PLUS, TokenType.NUMBER],
            "/* spans\nseveral\nlines */ a": [TokenType.IDENTIFIER],
            "/***/ a": [TokenType.IDENTIFIER],
            "a / b": [TokenType.IDENTIFIER, TokenType.SLASH, TokenType.IDENTIFIER],
        }
        for case, expected in cases.items():
            tokens, error_handler = scan(case)
            self.assertEqual(expected + [TokenType.EOF], types(tokens), case)
            self.assertFalse(error_handler.had_error, case)

    def test_unterminated_block_comment(self):
        tokens, error_handler = scan("a /* never\nclosed")
        self.assertEqual([TokenType.IDENTIFIER, TokenType.EOF], types(tokens))
        self.assertEqual([(2, "", "Unterminated block comment.")], error_handler.reports)

    def test_lines(self):
        tokens, __ = scan('a\n/* one\ntwo */ b\n"multi\nline" c\n\n')
        lines = {token.lexeme: token.line for token in tokens}
        self.assertEqual(1, lines["a"])
        self.assertEqual(3, lines["b"])
        self.assertEqual(4, lines['"multi\nline"'])
        self.assertEqual(5, lines["c"])
        self.assertEqual(Token(TokenType.EOF, "", None, 7), tokens[-1])

    def test_unexpected_character(self):
        tokens, error_handler = scan("a @ b\n# c")
        self.assertEqual([TokenType.IDENTIFIER] * 3 + [TokenType.EOF], types(tokens))
        self.assertEqual([(1, "", "Unexpected character."), (2, "", "Unexpected character.")], error_handler.reports)

    def test_rescan(self):
        error_handler = ErrorHandler(stream=io.StringIO())
        scanner = Scanner(error_handler)
        scanner.scan("var a = 1;\n")
        tokens = scanner.scan("b")
        self.assertEqual([TokenType.IDENTIFIER, TokenType.EOF], types(tokens))
        self.assertEqual(1, tokens[-1].line)

    def test_token_str(self):
        cases = {
            Token(TokenType.NUMBER, "1.5", 1.5, 1): "NUMBER 1.5 1.5",
            Token(TokenType.STRING, '"hi"', "hi", 1): 'STRING "hi" hi',
            Token(TokenType.VAR, "var", None, 1): "VAR var",
            Token(TokenType.EOF, "", None, 1): "EOF",
        }
        for case, expected in cases.items():
            self.assertEqual(expected, str(case), case)


if __name__ == '__main__':
    unittest.main()
