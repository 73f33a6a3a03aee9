"""
Token vocabulary for the cringe-lang front end.

Defines the closed set of token kinds produced by the lexer together with the
fixed lookup tables the lexer consults while scanning.

Exports:
    - TokenKind: Enumeration of every token kind.
    - single_char_tokens: Punctuation that is always exactly one character.
    - compound_operator_tokens: Operators that may absorb a trailing `=`.
    - keyword_hashmap: Reserved word spelling to keyword TokenKind.
"""

from enum import Enum
from types import MappingProxyType


class TokenKind(str, Enum):
    """Every kind of token the lexer can emit."""

    # Single-character tokens
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    LEFT_BRACE = "LEFT_BRACE"
    RIGHT_BRACE = "RIGHT_BRACE"
    COMMA = "COMMA"
    DOT = "DOT"
    MINUS = "MINUS"
    PLUS = "PLUS"
    STAR = "STAR"
    SEMICOLON = "SEMICOLON"
    SLASH = "SLASH"

    # One or two character tokens
    BANG = "BANG"
    BANG_EQUAL = "BANG_EQUAL"
    EQUAL = "EQUAL"
    EQUAL_EQUAL = "EQUAL_EQUAL"
    GREATER = "GREATER"
    GREATER_EQUAL = "GREATER_EQUAL"
    LESS = "LESS"
    LESS_EQUAL = "LESS_EQUAL"

    # Literals
    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Keywords
    WAPIS = "WAPIS"  # return
    LIKHO = "LIKHO"  # print
    KHALI = "KHALI"  # nil
    RAKHO = "RAKHO"  # var
    JABTAK = "JABTAK"  # while
    KAAM = "KAAM"  # function
    GHALAT = "GHALAT"  # false
    SAHI = "SAHI"  # true
    AGAR = "AGAR"  # if
    WARNA = "WARNA"  # else
    YA = "YA"  # or
    AUR = "AUR"  # and

    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


single_char_tokens: MappingProxyType[str, TokenKind] = MappingProxyType(
    {
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "{": TokenKind.LEFT_BRACE,
        "}": TokenKind.RIGHT_BRACE,
        ",": TokenKind.COMMA,
        ".": TokenKind.DOT,
        "-": TokenKind.MINUS,
        "+": TokenKind.PLUS,
        "*": TokenKind.STAR,
        ";": TokenKind.SEMICOLON,
    }
)

# first character -> (kind alone, kind when followed by "=")
compound_operator_tokens: MappingProxyType[str, tuple[TokenKind, TokenKind]] = (
    MappingProxyType(
        {
            "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
            "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
            "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
            ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
        }
    )
)

keyword_hashmap: MappingProxyType[str, TokenKind] = MappingProxyType(
    {
        "wapis": TokenKind.WAPIS,
        "likho": TokenKind.LIKHO,
        "khali": TokenKind.KHALI,
        "rakho": TokenKind.RAKHO,
        "jabtak": TokenKind.JABTAK,
        "kaam": TokenKind.KAAM,
        "ghalat": TokenKind.GHALAT,
        "sahi": TokenKind.SAHI,
        "agar": TokenKind.AGAR,
        "warna": TokenKind.WARNA,
        "ya": TokenKind.YA,
        "aur": TokenKind.AUR,
    }
)


__all__ = [
    "TokenKind",
    "compound_operator_tokens",
    "keyword_hashmap",
    "single_char_tokens",
]
