"""Abstract syntax tree for Lox. Nodes are built once by the parser and only read afterwards.

The set of node types is closed: EXPRESSIONS and STATEMENTS list every variant, and anything walking the tree keeps a
dispatch table keyed on them instead of relying on methods of the nodes themselves.

Formally (lowest precedence first):

```
<program>     ::= <declaration>* EOF
<declaration> ::= "var" IDENTIFIER ( "=" <expression> )? ";"
                | <statement>
<statement>   ::= "print" <expression> ";"
                | "{" <declaration>* "}"
                | <expression> ";"

<expression>  ::= <assignment>
<assignment>  ::= IDENTIFIER "=" <assignment> | <equality>      ; right-associative
<equality>    ::= <comparison> ( ( "!=" | "==" ) <comparison> )* ; binary levels are left-associative
<comparison>  ::= <term> ( ( ">" | ">=" | "<" | "<=" ) <term> )*
<term>        ::= <factor> ( ( "-" | "+" ) <factor> )*
<factor>      ::= <unary> ( ( "/" | "*" ) <unary> )*
<unary>       ::= ( "!" | "-" ) <unary> | <primary>
<primary>     ::= "true" | "false" | "nil" | NUMBER | STRING | IDENTIFIER | "(" <expression> ")"
```
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from lox.core.tokens import Token


class Expr:
    """Any expression node."""


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr


@dataclass(frozen=True)
class Literal(Expr):
    value: object  # float, str, bool or None


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass(frozen=True)
class Variable(Expr):
    name: Token


class Stmt:
    """Any statement node."""


@dataclass(frozen=True)
class Block(Stmt):
    statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr] = None


EXPRESSIONS = (Assign, Binary, Grouping, Literal, Unary, Variable)
STATEMENTS = (Block, Expression, Print, Var)
