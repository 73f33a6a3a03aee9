import os
from collections.abc import Callable

import pytest

from cringe.cringe_constants import TokenKind
from cringe.cringe_lexer import Token

# Subprocess-based CLI tests report into the same coverage data
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()


@pytest.fixture  # type: ignore[misc]
def make_token() -> Callable[..., Token]:
    """Builds operator tokens the way the lexer would for a one-line source."""

    def _make(kind: TokenKind, lexeme: str, line: int = 1) -> Token:
        return Token(kind, lexeme, None, line)

    return _make
