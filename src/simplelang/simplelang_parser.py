"""
SimpleLang Syntax Checker

Recognizes SimpleLang token sequences without building a tree.

This module implements a single-token-lookahead recursive-descent recognizer
over a flat list of lexer-produced `Token` objects. It accepts a program
silently or rejects it at the first grammar violation, reporting a fixed
message and the line of the offending token.

Grammar
-------
    program      := { declaration | statement } EOF
    declaration  := type IDENT ';'
    statement    := assignment | if | for
    assignment   := IDENT '=' expression ';'
    if           := 'if' '(' expression ')' '{' { statement } '}'
    for          := 'for' '(' declaration expression ';' assignment ')' '{' { statement } '}'
    expression   := operand { binop operand }

    type         := 'int' | 'bool' | 'string'
    binop        := '+' | '-' | '>' | '<' | '&&' | '||'

Parser Behavior
---------------
- Fail-fast: the first violation raises `ParseError`, which no production
  catches. The entry points turn it into a `ParseResult`.
- No backtracking and no lookahead beyond the current token.
- Operand kinds inside expressions are unchecked unless `strict_operands`
  is set.
- Tokens following the first EOF are never read.
- Nesting deeper than the interpreter stack allows is rejected with
  "Nesting too deep" rather than escaping as `RecursionError`.

Entry Points
------------
- `Parser.parse()`: Recognize a full program and return a `ParseResult`.
- `check(tokens, **options)`: Same, on a fresh parser.

Raises
------
ParseError
    Only from the individual `parse_*` productions when called directly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from simplelang.simplelang_constants import (
    ASSIGN,
    BINARY_OPERATORS,
    EOF,
    FOR,
    IDENT,
    IF,
    LBRACE,
    LPAREN,
    MSG_ASSIGN_EQUALS,
    MSG_ASSIGN_SEMICOLON,
    MSG_DECL_IDENT,
    MSG_DECL_SEMICOLON,
    MSG_FOR_LPAREN,
    MSG_FOR_SEMICOLON,
    MSG_IF_LPAREN,
    MSG_INVALID_STATEMENT,
    MSG_LBRACE,
    MSG_NESTING,
    MSG_OPERAND,
    MSG_RBRACE,
    MSG_RPAREN,
    OPERAND_KINDS,
    RBRACE,
    RPAREN,
    SEMICOLON,
    TYPE_KEYWORDS,
)
from simplelang.simplelang_lexer import Token, TokenCursor

logger = logging.getLogger(__name__)


class ParseError(SyntaxError):
    """Raised at the first grammar violation.

    Attributes:
        message (str): The fixed diagnostic of the failure site.
        line (int): Line of the token that was current when the violation was found.

    Example:
        raise ParseError("Invalid statement", 3)
    """

    def __init__(self, message: str, line: int):
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        return f"Syntax Error at line {self.line}: {self.message}"


class ParseResult:
    """Outcome of one parse: accepted, or rejected with message and line."""

    def __init__(self, error: ParseError | None = None) -> None:
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    @property
    def line(self) -> int | None:
        return self.error.line if self.error else None

    def raise_for_error(self) -> None:
        """Re-raises the carried ParseError, if any."""
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.ok

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ParseResult)
            and self.ok == other.ok
            and self.message == other.message
            and self.line == other.line
        )

    def __repr__(self) -> str:
        if self.ok:
            return "ParseResult(ok)"
        return f"ParseResult(line={self.line}, message={self.message!r})"

    def __str__(self) -> str:
        return "OK" if self.error is None else str(self.error)


class Parser:
    """
    SimpleLang Parser Class

    Walks the token stream one token at a time, enforcing the grammar in the
    module docstring. One instance serves exactly one parse.

    Attributes
    ----------
    cursor : TokenCursor
        Source of tokens; owned exclusively by this parser.
    current : Token
        The lookahead token.
    line : int
        Line number of `current`.
    strict_blocks : bool
        Report "Expected '}'" when a body runs into EOF.
    strict_operands : bool
        Require expression operands to be identifiers, numbers or booleans.
    """

    def __init__(
        self,
        tokens: Iterable[Token],
        strict_blocks: bool = False,
        strict_operands: bool = False,
    ) -> None:
        self.cursor = TokenCursor(tokens)
        self.strict_blocks = strict_blocks
        self.strict_operands = strict_operands
        self.current: Token = self.cursor.advance()
        self.line: int = self.current.line

    def advance(self) -> None:
        self.current = self.cursor.advance()
        self.line = self.current.line

    def fail(self, message: str) -> None:
        logger.debug("rejecting at line %d: %s", self.line, message)
        raise ParseError(message, self.line)

    def expect(self, type_: str, message: str) -> None:
        """Consume `current` if it is of kind `type_`, otherwise fail with `message`."""
        if self.current.type != type_:
            self.fail(message)
        self.advance()

    def parse(self) -> ParseResult:
        """Recognize a full program and report the outcome."""
        try:
            self.parse_program()
        except ParseError as e:
            return ParseResult(e)
        except RecursionError:
            # if/for bodies recurse once per nesting level
            logger.debug("rejecting at line %d: %s", self.line, MSG_NESTING)
            return ParseResult(ParseError(MSG_NESTING, self.line))
        logger.debug("accepted %d tokens", self.cursor.position)
        return ParseResult()

    def parse_program(self) -> None:
        while self.current.type != EOF:
            if self.current.type in TYPE_KEYWORDS:
                self.parse_declaration()
            else:
                self.parse_statement()

    def parse_declaration(self) -> None:
        """Parse `type IDENT ;`. The caller has already seen the type keyword."""
        logger.debug("declaration at line %d", self.line)
        self.advance()
        self.expect(IDENT, MSG_DECL_IDENT)
        self.expect(SEMICOLON, MSG_DECL_SEMICOLON)

    def parse_statement(self) -> None:
        tok_type = self.current.type
        if tok_type == IDENT:
            self.parse_assignment()
        elif tok_type == IF:
            self.parse_if()
        elif tok_type == FOR:
            self.parse_for()
        else:
            self.fail(MSG_INVALID_STATEMENT)

    def parse_assignment(self) -> None:
        """Parse `IDENT = expression ;`. The caller has already seen the identifier."""
        logger.debug("assignment at line %d", self.line)
        self.advance()
        self.expect(ASSIGN, MSG_ASSIGN_EQUALS)
        self.parse_expression()
        self.expect(SEMICOLON, MSG_ASSIGN_SEMICOLON)

    def parse_if(self) -> None:
        logger.debug("if at line %d", self.line)
        self.advance()
        self.expect(LPAREN, MSG_IF_LPAREN)
        self.parse_expression()
        self.expect(RPAREN, MSG_RPAREN)
        self.expect(LBRACE, MSG_LBRACE)
        self.parse_body()

    def parse_for(self) -> None:
        """Parse a for header and body.

        The init clause is always a full declaration, and the increment
        clause is an assignment that carries its own `;` before the `)`:

            for ( int i ; i < 10 ; i = i + 1 ; ) { ... }
        """
        logger.debug("for at line %d", self.line)
        self.advance()
        self.expect(LPAREN, MSG_FOR_LPAREN)
        self.parse_declaration()
        self.parse_expression()
        self.expect(SEMICOLON, MSG_FOR_SEMICOLON)
        self.parse_assignment()
        self.expect(RPAREN, MSG_RPAREN)
        self.expect(LBRACE, MSG_LBRACE)
        self.parse_body()

    def parse_body(self) -> None:
        """Parse statements up to and including the closing `}` of an if/for body."""
        while self.current.type != RBRACE:
            if self.strict_blocks and self.current.type == EOF:
                self.fail(MSG_RBRACE)
            self.parse_statement()
        self.advance()

    def parse_expression(self) -> None:
        self.parse_operand()
        while self.current.type in BINARY_OPERATORS:
            self.advance()
            self.parse_operand()

    def parse_operand(self) -> None:
        if self.strict_operands and self.current.type not in OPERAND_KINDS:
            self.fail(MSG_OPERAND)
        self.advance()


def check(
    tokens: Iterable[Token], strict_blocks: bool = False, strict_operands: bool = False
) -> ParseResult:
    """Parse `tokens` with a fresh Parser and return the result."""
    return Parser(
        tokens, strict_blocks=strict_blocks, strict_operands=strict_operands
    ).parse()


__all__ = ["ParseError", "ParseResult", "Parser", "check"]
