"""
SimpleLang CLI Entrypoint.

This module provides the command-line interface for syntax-checking SimpleLang
programs, either from source text or from a pre-classified token file.

Features:
    - Read source from `.sl` files or inline strings.
    - Read tokens from a JSON file of `[kind, line]` pairs.
    - Lex (when needed) and parse, printing `OK` or the first syntax error.
    - Optional strict block/operand checks and verbose debug logging.

Example usage:
    simplelang program.sl
    simplelang -s "int x; x = 1 + 2;"
    simplelang -j tokens.json --strict-blocks
    simplelang program.sl --verbose

Functions:
    load_tokens(path: str) -> list[Token]:
        Reads a JSON token file.

    run_simplelang(source: str | None, is_string: bool = False, tokens_file: str | None = None,
                   strict_blocks: bool = False, strict_operands: bool = False) -> ParseResult:
        Executes the pipeline (read → lex → parse → report).

    main() -> None:
        Parses CLI arguments, runs the pipeline and exits with its status.
"""

import argparse
import json
import logging
import sys
from typing import Any

from simplelang.simplelang_lexer import Token, tokenize
from simplelang.simplelang_parser import ParseResult, check

logger = logging.getLogger(__name__)


def _token_from_entry(entry: Any, index: int) -> Token:
    if isinstance(entry, dict):
        kind, line = entry.get("kind"), entry.get("line")
    elif isinstance(entry, (list, tuple)) and len(entry) == 2:
        kind, line = entry
    else:
        raise ValueError(f"Token entry {index} must be [kind, line] or an object")
    if not isinstance(kind, str) or not isinstance(line, int) or isinstance(line, bool):
        raise ValueError(f"Token entry {index} has invalid kind or line: {entry!r}")
    if line < 1:
        raise ValueError(f"Token entry {index} has line {line}; lines start at 1")
    return Token(kind.upper(), line)


def load_tokens(path: str) -> list[Token]:
    """
    Load a token sequence from a JSON file.

    The file holds a list whose entries are either `[kind, line]` pairs or
    objects with `kind` and `line` keys. Kinds are canonical names such as
    `"INT"` or `"SEMICOLON"`, case-insensitive. Lines must be integers
    of at least 1.

    Raises:
        ValueError: If the JSON shape is wrong or a kind is unknown.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError("Token file must contain a JSON list")
    return [_token_from_entry(entry, i) for i, entry in enumerate(data)]


def run_simplelang(
    source: str | None = None,
    is_string: bool = False,
    tokens_file: str | None = None,
    strict_blocks: bool = False,
    strict_operands: bool = False,
) -> ParseResult:
    """
    Run the SimpleLang checker and print its verdict.

    Args:
        source (str | None): SimpleLang source code or path to a `.sl` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        tokens_file (str | None): Path to a JSON token file; takes precedence over `source`.
        strict_blocks (bool): Report unterminated if/for bodies as "Expected '}'".
        strict_operands (bool): Require identifiers, numbers or booleans as operands.

    Returns:
        ParseResult: The outcome, also printed as `OK` or the syntax error.

    Raises:
        ValueError: If neither input is given, or a source path does not end with '.sl'.
        SyntaxError: If the lexer meets a character it cannot classify.
    """
    if tokens_file is not None:
        tokens = load_tokens(tokens_file)
    elif source is None:
        raise ValueError("No source or token file given.")
    else:
        if not is_string:
            if not source.endswith(".sl"):
                raise ValueError("Only .sl files are supported.")
            with open(source, encoding="utf-8") as f:
                source = f.read()
        tokens = tokenize(source)

    logger.debug("checking %d tokens", len(tokens))
    result = check(tokens, strict_blocks=strict_blocks, strict_operands=strict_operands)

    if result.ok:
        print(result)
    else:
        print(result, file=sys.stderr)
    return result


def main() -> None:
    """
    Entry point for the SimpleLang CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-j`, `--tokens`: Read a JSON token file instead of source text.
        - `--strict-blocks`: Reject if/for bodies that run into EOF with "Expected '}'".
        - `--strict-operands`: Reject non-operand tokens inside expressions.
        - `--verbose`: Enable debug logging.

    Exits with 0 when the program is accepted and 1 when it is rejected or
    cannot be read.
    """
    parser = argparse.ArgumentParser(prog="simplelang")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-j", "--tokens", metavar="TOKENFILE", help="Read tokens from a JSON file"
    )
    parser.add_argument(
        "--strict-blocks",
        action="store_true",
        help="Report bodies that reach EOF as a missing '}'",
    )
    parser.add_argument(
        "--strict-operands",
        action="store_true",
        help="Only accept identifiers, numbers and booleans as operands",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    if args.source is None and args.tokens is None:
        parser.error("a source or --tokens file is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        result = run_simplelang(
            source=args.source,
            is_string=args.string,
            tokens_file=args.tokens,
            strict_blocks=args.strict_blocks,
            strict_operands=args.strict_operands,
        )
    except (OSError, ValueError, SyntaxError) as e:
        print(f"simplelang: error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(0 if result.ok else 1)


if __name__ == "__main__":
    main()
