"""
Error types raised by the cringe-lang lexer and parser.

Both errors are fail-fast: the pass that raises them is abandoned and no
partial token sequence or tree is returned.

Classes:
    CringeError: Common base for every front-end error.
    LexError: Unrecognized character or unterminated string literal.
    ParseError: Token that cannot satisfy the current grammar rule.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cringe.cringe_constants import TokenKind

if TYPE_CHECKING:  # pragma: no cover
    from cringe.cringe_lexer import Token


class CringeError(SyntaxError):
    """Base class for malformed-source errors reported by the front end.

    Attributes:
        message (str): Human-readable description without location prefix.
        line (int): 1-based source line the error refers to.
    """

    def __init__(self, message: str, line: int) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class LexError(CringeError):
    """Raised by the lexer at the first character it cannot tokenize.

    Example:
        raise LexError(3, "Unterminated string.")
    """

    def __init__(self, line: int, message: str) -> None:
        super().__init__(message, line)


class ParseError(CringeError):
    """Raised by the parser at the first token that breaks the grammar.

    Attributes:
        token (Token): The offending token; its line is copied to `line`.
    """

    def __init__(self, token: Token, message: str) -> None:
        super().__init__(message, token.line)
        self.token = token

    def __str__(self) -> str:
        where = "end" if self.token.kind == TokenKind.EOF else f"'{self.token.lexeme}'"
        return f"[line {self.line}] Error at {where}: {self.message}"


__all__ = ["CringeError", "LexError", "ParseError"]
