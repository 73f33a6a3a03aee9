"""
cringe-lang Expression Parser

Turns the token sequence produced by the lexer into a single expression tree.

Grammar
-------
Precedence from lowest to highest; every binary layer is left-associative::

    expression -> equality
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "-" | "+" ) factor )*
    factor     -> unary ( ( "/" | "*" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | "sahi" | "ghalat" | "khali"
                | "(" expression ")"

Parser Behavior
---------------
- One forward-only cursor; the parser inspects the current token and never
  rewinds.
- Fail-fast: the first token that cannot satisfy a rule raises `ParseError`
  and the whole parse is abandoned. There is no synchronization.
- `parse()` consumes exactly one expression followed by EOF.
- Parentheses nest at most `max_nesting` deep; deeper input raises
  `ParseError` rather than exhausting the call stack. Unary prefixes and
  binary chains are folded in loops and have no depth limit.

Entry Points
------------
- `Parser(tokens).parse()`: Parse a full token sequence.
- `parse_source(source)`: Lex and parse a source string.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from cringe.cringe_ast import (
    Binary,
    BooleanValue,
    Expr,
    Grouping,
    Literal,
    NilValue,
    NumberValue,
    StringValue,
    Unary,
)
from cringe.cringe_constants import TokenKind
from cringe.cringe_errors import ParseError
from cringe.cringe_lexer import Token, scan_tokens

LOG = logging.getLogger(__name__)


class Parser:
    """
    Recursive-descent parser for cringe-lang expressions.

    Each precedence layer is one method that parses an operand at the next
    tighter layer and then folds Binary nodes while its own operators follow.

    Attributes
    ----------
    tokens : list[Token]
        Token sequence to parse; must end with an EOF token.
    position : int
        Index of the current token.

    Raises
    ------
    ParseError
        When a token cannot satisfy the grammar rule being parsed.
    """

    equality_ops = (TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL)
    comparison_ops = (
        TokenKind.GREATER,
        TokenKind.GREATER_EQUAL,
        TokenKind.LESS,
        TokenKind.LESS_EQUAL,
    )
    term_ops = (TokenKind.MINUS, TokenKind.PLUS)
    factor_ops = (TokenKind.SLASH, TokenKind.STAR)
    unary_ops = (TokenKind.BANG, TokenKind.MINUS)

    # each level of parentheses costs about a dozen interpreter frames
    max_nesting = 50

    def __init__(self, tokens: list[Token]) -> None:
        if not tokens or tokens[-1].kind != TokenKind.EOF:
            raise ValueError("Token sequence must end with an EOF token")
        self.tokens: list[Token] = tokens
        self.position: int = 0
        self.depth: int = 0

    def current(self) -> Token:
        return self.tokens[self.position]

    def at_end(self) -> bool:
        return self.current().kind == TokenKind.EOF

    def advance(self) -> Token:
        """Consumes the current token and returns it; never moves past EOF."""
        tok = self.current()
        if not self.at_end():
            self.position += 1
        return tok

    def check(self, *kinds: TokenKind) -> bool:
        return self.current().kind in kinds

    def match(self, *kinds: TokenKind) -> Token | None:
        if self.check(*kinds):
            return self.advance()
        return None

    def consume(self, kind: TokenKind, message: str) -> Token:
        if self.check(kind):
            return self.advance()
        raise ParseError(self.current(), message)

    def parse(self) -> Expr:
        """Parse one expression spanning the whole token sequence."""
        try:
            expr = self.expression()
        except RecursionError:
            raise ParseError(self.current(), "Expression nests too deeply.") from None
        if not self.at_end():
            raise ParseError(self.current(), "Expect end of expression.")
        LOG.debug("parsed %d tokens into a %s node", len(self.tokens), expr.kind)
        return expr

    def expression(self) -> Expr:
        return self.equality()

    def _binary_layer(
        self, operand: Callable[[], Expr], kinds: tuple[TokenKind, ...]
    ) -> Expr:
        expr = operand()
        while self.check(*kinds):
            operator = self.advance()
            right = operand()
            expr = Binary(expr, operator, right)
        return expr

    def equality(self) -> Expr:
        return self._binary_layer(self.comparison, self.equality_ops)

    def comparison(self) -> Expr:
        return self._binary_layer(self.term, self.comparison_ops)

    def term(self) -> Expr:
        return self._binary_layer(self.factor, self.term_ops)

    def factor(self) -> Expr:
        return self._binary_layer(self.unary, self.factor_ops)

    def unary(self) -> Expr:
        operators: list[Token] = []
        while self.check(*self.unary_ops):
            operators.append(self.advance())

        # innermost operator applies first: "- ! x" is Unary(-, Unary(!, x))
        expr = self.primary()
        for operator in reversed(operators):
            expr = Unary(operator, expr)
        return expr

    def primary(self) -> Expr:
        tok = self.current()

        if tok.kind == TokenKind.NUMBER:
            self.advance()
            assert isinstance(tok.literal, float)  # for mypy
            return Literal(NumberValue(tok.literal))

        if tok.kind == TokenKind.STRING:
            self.advance()
            assert isinstance(tok.literal, str)  # for mypy
            return Literal(StringValue(tok.literal))

        if tok.kind == TokenKind.SAHI:
            self.advance()
            return Literal(BooleanValue(True))

        if tok.kind == TokenKind.GHALAT:
            self.advance()
            return Literal(BooleanValue(False))

        if tok.kind == TokenKind.KHALI:
            self.advance()
            return Literal(NilValue())

        if tok.kind == TokenKind.LEFT_PAREN:
            self.advance()
            self.depth += 1
            if self.depth > self.max_nesting:
                raise ParseError(tok, "Expression nests too deeply.")
            inner = self.expression()
            self.consume(TokenKind.RIGHT_PAREN, "Expect ')' after expression.")
            self.depth -= 1
            return Grouping(inner)

        raise ParseError(tok, "Expect expression.")


def parse_source(source: str) -> Expr:
    """Lex and parse a complete source string into one expression tree.

    Raises:
        LexError: If the source cannot be tokenized.
        ParseError: If the tokens do not form a single expression.
    """
    return Parser(scan_tokens(source)).parse()


__all__ = ["Parser", "parse_source"]
