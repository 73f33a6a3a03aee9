"""
Lexical analyzer for the cringe-lang scripting language.

This module converts raw source text into an ordered token sequence:

Classes:
    CharacterStream: Character reader with line tracking and one-character lookahead.
    Token: Immutable lexical unit with kind, lexeme, literal payload, and line.
    Lexer: Pulls tokens out of a CharacterStream one at a time.

Features:
    - Skips spaces, tabs, carriage returns, newlines, and `//` line comments
    - Maximal munch for `!=`, `==`, `<=`, `>=`
    - Recognizes:
        * Identifiers and reserved keywords (exact spelling)
        * Numbers (always stored as float)
        * Double-quoted strings (may span lines)
        * Single-character punctuation

Raises:
    LexError: On an unrecognized character or an unterminated string.

Example:
    >>> [str(tok.kind) for tok in scan_tokens("1 + 2")]
    ['NUMBER', 'PLUS', 'NUMBER', 'EOF']

Exports:
    - CharacterStream
    - Token
    - Lexer
    - scan_tokens
"""

import logging
from dataclasses import dataclass

from cringe.cringe_constants import (
    TokenKind,
    compound_operator_tokens,
    keyword_hashmap,
    single_char_tokens,
)
from cringe.cringe_errors import LexError

LOG = logging.getLogger(__name__)

DIGITS = "0123456789"


def is_digit(ch: str) -> bool:
    return ch != "" and ch in DIGITS


def is_alpha(ch: str) -> bool:
    return ch.isalpha() or ch == "_"


def is_alphanumeric(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)


class CharacterStream:
    """
    Reads characters from a source string while tracking the current line.

    Attributes:
        source (str): The input source string.
        position (int): Index of the next unread character.
        line (int): Current line number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1):
        self.source = source
        self.position = position
        self.line = line

    def next(self) -> str:
        """
        Consumes and returns the next character, counting newlines.

        Raises:
            IndexError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise IndexError(
                f"Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character `offset` places ahead, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def match(self, expected: str) -> bool:
        """Consumes the next character only if it equals `expected`."""
        if self.peek() != expected:
            return False
        self.next()
        return True

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        kind (TokenKind): The token's kind.
        lexeme (str): Exact source text of the token.
        literal (float | str | None): Parsed payload for NUMBER and STRING tokens.
        line (int): 1-based line on which the token starts.
    """

    kind: TokenKind
    lexeme: str
    literal: float | str | None = None
    line: int = 1

    def __repr__(self) -> str:
        if self.literal is None:
            return f"Token({self.kind}, {self.lexeme!r})"
        return f"Token({self.kind}, {self.lexeme!r}, {self.literal!r})"

    def __str__(self) -> str:
        literal = "" if self.literal is None else self.literal
        return f"{self.kind} {self.lexeme} {literal}".rstrip()


class Lexer:
    """Lexical analyzer for cringe-lang.

    Every call to `next_token` skips insignificant input and returns the next
    token; once the stream is exhausted it keeps returning EOF tokens.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream
        self.start = stream.position
        self.start_line = stream.line

    def peek(self) -> str:
        return self.stream.peek()

    def peek_next(self) -> str:
        return self.stream.peek(1)

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        """Skips whitespace, newlines, and `//` comments."""
        while not self.stream.end_of_file():
            ch = self.peek()
            if ch in " \t\r\n":
                self.advance()
            elif ch == "/" and self.peek_next() == "/":
                self.skip_comment()
            else:
                break

    def skip_comment(self) -> None:
        """Advances up to, but not over, the newline that ends a comment."""
        while not self.stream.end_of_file() and self.peek() != "\n":
            self.advance()

    def make_token(self, kind: TokenKind, literal: float | str | None = None) -> Token:
        lexeme = self.stream.source[self.start : self.stream.position]
        return Token(kind, lexeme, literal, self.start_line)

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Raises:
            LexError: On an unrecognized character or an unterminated string.
        """
        self.skip_whitespace()

        self.start = self.stream.position
        self.start_line = self.stream.line

        if self.stream.end_of_file():
            return Token(TokenKind.EOF, "", None, self.stream.line)

        ch = self.advance()

        if ch in single_char_tokens:
            return self.make_token(single_char_tokens[ch])

        if ch in compound_operator_tokens:
            single, double = compound_operator_tokens[ch]
            return self.make_token(double if self.stream.match("=") else single)

        if ch == "/":
            return self.make_token(TokenKind.SLASH)

        if ch == '"':
            return self.string()

        if is_digit(ch):
            return self.number()

        if is_alpha(ch):
            return self.identifier()

        raise LexError(self.stream.line, f"Unexpected character {ch!r}.")

    def string(self) -> Token:
        while not self.stream.end_of_file() and self.peek() != '"':
            self.advance()

        if self.stream.end_of_file():
            raise LexError(self.stream.line, "Unterminated string.")

        self.advance()  # closing quote
        value = self.stream.source[self.start + 1 : self.stream.position - 1]
        return self.make_token(TokenKind.STRING, value)

    def number(self) -> Token:
        while is_digit(self.peek()):
            self.advance()

        # A "." only belongs to the number when a digit follows it.
        if self.peek() == "." and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()

        text = self.stream.source[self.start : self.stream.position]
        return self.make_token(TokenKind.NUMBER, float(text))

    def identifier(self) -> Token:
        while is_alphanumeric(self.peek()):
            self.advance()

        text = self.stream.source[self.start : self.stream.position]
        return self.make_token(keyword_hashmap.get(text, TokenKind.IDENTIFIER))

    def scan_tokens(self) -> list[Token]:
        """Scans the remaining input into a list ending with exactly one EOF token.

        Raises:
            LexError: At the first malformed token; no partial result is returned.
        """
        tokens: list[Token] = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.kind == TokenKind.EOF:
                break
        LOG.debug("scanned %d tokens over %d lines", len(tokens), tokens[-1].line)
        return tokens


def scan_tokens(source: str) -> list[Token]:
    """Tokenizes a complete source string."""
    return Lexer(CharacterStream(source)).scan_tokens()


__all__ = ["CharacterStream", "Lexer", "Token", "scan_tokens"]
