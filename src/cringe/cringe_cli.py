"""
cringe-lang CLI Entrypoint.

Runs the front end over a `.cringe` file, an inline string, or an interactive
prompt, and prints what the front end produced.

Features:
    - Read source from `.cringe` files or inline strings.
    - Print the token sequence, the parenthesized AST, or the AST as JSON.
    - Launch an interactive REPL when no source is given.

Configuration:
    Command-line flags override the environment.
    CRINGE_MODE       default output mode ("ast", "tokens", or "json"), default "ast"
    CRINGE_LOG_LEVEL  logging level name, default "WARNING"

Example usage:
    cringe hello.cringe
    cringe -s "1 + 2 * 3"
    cringe -s "1 + 2" -m tokens
    cringe --repl --verbose
"""

import argparse
import json
import logging
import os
import sys

from cringe.cringe_errors import CringeError
from cringe.cringe_lexer import scan_tokens
from cringe.cringe_parser import Parser
from cringe.cringe_printer import print_ast

LOG = logging.getLogger(__name__)

MODES = ("ast", "tokens", "json")
DEFAULT_MODE = "ast"
DEFAULT_LOG_LEVEL = "WARNING"
SOURCE_SUFFIX = ".cringe"


def default_mode() -> str:
    """Output mode from CRINGE_MODE, falling back to "ast" for unknown values."""
    mode = os.getenv("CRINGE_MODE", DEFAULT_MODE).strip().lower()
    if mode not in MODES:
        LOG.warning("Ignoring unknown CRINGE_MODE=%r", mode)
        return DEFAULT_MODE
    return mode


def log_level(verbose: bool = False) -> int:
    """Logging level from CRINGE_LOG_LEVEL, or DEBUG when verbose."""
    level_name = "DEBUG" if verbose else os.getenv("CRINGE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        return logging.WARNING
    return level


def configure_logging(verbose: bool = False) -> None:
    level = log_level(verbose)
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s"
    )
    logging.getLogger("cringe").setLevel(level)


def render(source: str, mode: str = DEFAULT_MODE) -> str:
    """
    Run the front end over `source` and render its output as text.

    Args:
        source (str): Complete source text.
        mode (str): "tokens" for one line per token, "ast" for the
            parenthesized tree, "json" for the tree as indented JSON.

    Raises:
        LexError: If the source cannot be tokenized.
        ParseError: If the tokens do not form a single expression.
        ValueError: If the mode is unknown, or the tree is too deep to encode
            as JSON.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown output mode: {mode!r}")

    tokens = scan_tokens(source)
    if mode == "tokens":
        return "\n".join(str(tok) for tok in tokens)

    expr = Parser(tokens).parse()
    if mode == "json":
        try:
            return json.dumps(expr.to_dict(), indent=2)
        except RecursionError:
            raise ValueError("Expression too deep to encode as JSON.") from None
    return print_ast(expr)


def run_cringe(source: str, is_string: bool = False, mode: str = DEFAULT_MODE) -> None:
    """
    Read the source, run the front end, and print the result.

    Args:
        source (str): Path to a `.cringe` file, or raw code when `is_string` is True.
        is_string (bool): Treat `source` as code instead of a path. Defaults to False.
        mode (str): Output mode, see `render`.

    Raises:
        ValueError: If `is_string` is False and the path does not end with `.cringe`.
        OSError: If the file cannot be read.
        CringeError: If lexing or parsing fails.
    """
    if not is_string and not source.endswith(SOURCE_SUFFIX):
        raise ValueError(f"Only {SOURCE_SUFFIX} files are supported.")

    if not is_string:
        LOG.debug("reading %s", source)
        with open(source, encoding="utf-8") as f:
            source = f.read()

    print(render(source, mode))


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `cringe` command.

    Launches the REPL when no source is given or `--repl` is passed; otherwise
    runs the front end once. Front-end, file, and encoding errors are reported
    on stderr with exit status 1; a path without the `.cringe` suffix is a
    usage error (exit status 2).
    """
    parser = argparse.ArgumentParser(prog="cringe")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-m",
        "--mode",
        choices=MODES,
        default=None,
        help="Output: ast, tokens, or json (default: $CRINGE_MODE or ast)",
    )
    parser.add_argument(
        "--repl",
        action="store_true",
        help="Launch interactive REPL",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    mode = args.mode or default_mode()

    if args.repl or args.source is None:
        from cringe.cringe_repl import start_repl

        start_repl(mode=mode, verbose=args.verbose)
        return 0

    if not args.string and not args.source.endswith(SOURCE_SUFFIX):
        parser.error(f"Only {SOURCE_SUFFIX} files are supported.")

    try:
        run_cringe(args.source, is_string=args.string, mode=mode)
    except (CringeError, OSError, ValueError) as e:
        LOG.debug("run failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
