"""Lexical analysis for Lox: turns source text into a list of Tokens ending with an EOF token.

Lexical grammar, loosely:

```
<number>     ::= <digit>+ ( "." <digit>+ )?     ; no exponents, no leading or trailing "."
<string>     ::= '"' <any char but '"'>* '"'    ; may span lines, no escape sequences
<identifier> ::= <alpha> ( <alpha> | <digit> )*  ; <alpha> is a letter or "_", keywords are case-sensitive
<comment>    ::= "//" <any char but newline>*
               | "/*" <any char>* "*/"          ; may span lines, does not nest
```
"""

from lox.core.tokens import KEYWORDS, Token, TokenType
from lox.lang.error import LexError


class Scanner:
    """Single left-to-right pass over the source with a two-cursor window: start is the first character of the lexeme
    being scanned and current is the character about to be consumed.
    """
    SINGLE = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }
    # char: (type if followed by "=", type otherwise)
    WITH_EQUAL = {
        "!": (TokenType.BANG_EQUAL, TokenType.BANG),
        "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
        "<": (TokenType.LESS_EQUAL, TokenType.LESS),
        ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    }
    WHITESPACE = " \r\t"

    def __init__(self, error_handler):
        self.error_handler = error_handler
        self._reset("")

    def _reset(self, source):
        self.source = source
        self.tokens = []
        self.start = 0
        self.current = 0
        self.line = 1
        self.start_line = 1

    def scan(self, source):
        """Returns the tokens of source. Never raises: bad input is reported to the error handler and skipped."""
        self._reset(source)

        while not self.is_at_end():
            self.start = self.current
            self.start_line = self.line
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def scan_token(self):
        char = self.advance()

        if char in Scanner.SINGLE:
            self.add_token(Scanner.SINGLE[char])
        elif char in Scanner.WITH_EQUAL:
            two_char, one_char = Scanner.WITH_EQUAL[char]
            self.add_token(two_char if self.match("=") else one_char)
        elif char == "/":
            if self.match("/"):
                while self.peek() != "\n" and not self.is_at_end():
                    self.advance()
            elif self.match("*"):
                self.block_comment()
            else:
                self.add_token(TokenType.SLASH)
        elif char in Scanner.WHITESPACE:
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self.string()
        elif self.is_digit(char):
            self.number()
        elif self.is_alpha(char):
            self.identifier()
        else:
            self.error_handler.report(LexError(self.line, "Unexpected character."))

    def block_comment(self):
        while not (self.peek() == "*" and self.peek_next() == "/"):
            if self.is_at_end():
                self.error_handler.report(LexError(self.line, "Unterminated block comment."))
                return
            if self.advance() == "\n":
                self.line += 1

        self.current += 2  # closing */

    def string(self):
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == "\n":
                self.line += 1
            self.advance()

        if self.is_at_end():
            self.error_handler.report(LexError(self.line, "Unterminated string."))
            return

        self.advance()  # closing "
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def number(self):
        while self.is_digit(self.peek()):
            self.advance()

        if self.peek() == "." and self.is_digit(self.peek_next()):
            self.advance()
            while self.is_digit(self.peek()):
                self.advance()

        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def identifier(self):
        while self.is_alpha(self.peek()) or self.is_digit(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def add_token(self, token_type, literal=None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.start_line))

    def advance(self):
        char = self.source[self.current]
        self.current += 1
        return char

    def match(self, expected):
        """Consumes the next character only if it is expected."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self):
        if self.is_at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self):
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def is_at_end(self):
        return self.current >= len(self.source)

    @staticmethod
    def is_digit(char):
        return "0" <= char <= "9"

    @staticmethod
    def is_alpha(char):
        return char.isalpha() or char == "_"
