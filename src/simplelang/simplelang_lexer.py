"""
Tokens, token cursor and lexer for the SimpleLang syntax checker.

This module provides the components that sit in front of the parser:

Classes:
    Token: An immutable (kind, line) pair, optionally with spelling and column.
    TokenCursor: Forward-only reader over a token sequence with an EOF tail.
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Lexer: Converts a CharacterStream into a sequence of tokens.

Functions:
    tokenize(source): Lex a whole source string into a token list ending in EOF.

Features:
    - Skips whitespace and single-line comments (`//`)
    - Supports longest-match recognition of operators (`&&` and `||`)
    - Recognizes identifiers, keywords, numbers, booleans and punctuation

Raises:
    SyntaxError: If a character cannot start any token.

Example:
    >>> cursor = TokenCursor(tokenize("int x;"))
    >>> cursor.advance()
    Token(INT, 1)
"""

import string
from collections.abc import Iterable
from typing import Any

from simplelang.simplelang_constants import EOF, IDENT, NUMBER, TOKEN_KINDS, token_hashmap

# Sentinel line carried by the synthetic EOF token of an exhausted cursor.
EOF_LINE = 0

IDENT_START = string.ascii_letters + "_"
IDENT_CHARS = IDENT_START + string.digits


class Token:
    """Represents a single lexical token in SimpleLang.

    Tokens are immutable once built. Line numbers are carried for
    diagnostics only.

    Attributes:
        type (str): The canonical token kind (e.g. 'IDENT', 'SEMICOLON', 'EOF').
        line (int): The 1-based line number where the token appears.
        value (str): The source spelling, empty when the token was supplied pre-classified.
        col (int): The 1-based column number, 0 when unknown.
    """

    __slots__ = ("type", "line", "value", "col")

    def __init__(self, type_: str, line: int = 0, value: str = "", col: int = 0):
        """Initializes a new Token instance.

        Args:
            type_ (str): The token kind, one of `TOKEN_KINDS`.
            line (int, optional): The line number (default is 0).
            value (str, optional): The source spelling (default is empty).
            col (int, optional): The column number (default is 0).

        Raises:
            ValueError: If `type_` is not a known token kind.
        """
        if type_ not in TOKEN_KINDS:
            raise ValueError(f"Unknown token kind: {type_!r}")
        object.__setattr__(self, "type", type_)
        object.__setattr__(self, "line", line)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "col", col)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Token is immutable; cannot set {name!r}")

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.line})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.line == other.line
            and self.value == other.value
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.line, self.value, self.col))


class TokenCursor:
    """Forward-only reader over a finite token sequence.

    The cursor owns its own copy of the sequence. Reading past the end is a
    normal, repeatable state: every further call yields a synthetic EOF token
    whose line is `EOF_LINE`.

    Attributes:
        tokens (tuple[Token, ...]): The token sequence, read-only.
        position (int): Index of the next token to hand out.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens: tuple[Token, ...] = tuple(tokens)
        self.position: int = 0

    def advance(self) -> Token:
        """Returns the next token, or a synthetic EOF once the sequence is exhausted."""
        if self.position < len(self.tokens):
            tok = self.tokens[self.position]
            self.position += 1
            return tok
        return Token(EOF, EOF_LINE)

    def exhausted(self) -> bool:
        return self.position >= len(self.tokens)


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` without advancing, or '' if out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Lexer:
    """Lexical analyzer for SimpleLang.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def peek(self, offset: int = 0) -> str:
        return self.stream.peek(offset)

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        """Skips all whitespace and `//` comments in the stream."""
        while not self.stream.end_of_file():
            if self.peek() in " \t\r\n":
                self.advance()
            elif self.peek() == "/" and self.peek(1) == "/":
                self.skip_comment()
            else:
                break

    def skip_comment(self) -> None:
        while not self.stream.end_of_file() and self.peek() != "\n":
            self.advance()

    def match_operator(self) -> Token | None:
        """Attempts to match the longest operator or punctuation at the current position.

        Returns:
            Token | None: A Token if a match is found, otherwise None.
        """
        line, col = self.stream.line, self.stream.column
        for length in (2, 1):
            candidate = "".join(self.peek(i) for i in range(length))
            if len(candidate) == length and candidate in token_hashmap:
                for _ in range(length):
                    self.advance()
                return Token(token_hashmap[candidate], line, candidate, col)
        return None

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Raises:
            SyntaxError: If a character cannot start any token.
        """
        self.skip_whitespace()

        if self.stream.end_of_file():
            return Token(EOF, self.stream.line, "", self.stream.column)

        ch = self.peek()
        line, col = self.stream.line, self.stream.column

        # 1. Identifier or keyword
        if ch in IDENT_START:
            ident = ""
            while not self.stream.end_of_file() and self.peek() in IDENT_CHARS:
                ident += self.advance()
            return Token(token_hashmap.get(ident, IDENT), line, ident, col)

        # 2. Number
        if ch in string.digits:
            num = ""
            while not self.stream.end_of_file() and self.peek() in string.digits:
                num += self.advance()
            return Token(NUMBER, line, num, col)

        # 3. Operator or punctuation
        token = self.match_operator()
        if token:
            return token

        raise SyntaxError(f"Unexpected character {ch!r} at line {line}, col {col}")


def tokenize(source: str) -> list[Token]:
    """Lex `source` completely, returning every token including the final EOF."""
    lexer = Lexer(CharacterStream(source))
    tokens = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.type == EOF:
            break
    return tokens


__all__ = ["CharacterStream", "Lexer", "Token", "TokenCursor", "tokenize"]
