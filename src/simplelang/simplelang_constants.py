"""
Canonical token kinds and diagnostic messages for SimpleLang.

The token kinds form a closed set. Every `Token` carries exactly one of them,
and the parser dispatches on nothing else.

Exports:
    - TOKEN_KINDS: every valid token kind
    - TYPE_KEYWORDS: kinds that open a declaration
    - BINARY_OPERATORS: kinds accepted between expression operands
    - OPERAND_KINDS: kinds accepted as operands in strict operand mode
    - token_hashmap: source spelling -> token kind, used by the lexer
    - MSG_*: the fixed parser diagnostics
"""

# Type keywords
INT = "INT"
BOOL = "BOOL"
STRING = "STRING"

# Control keywords
IF = "IF"
FOR = "FOR"

# Operands
IDENT = "IDENT"
NUMBER = "NUMBER"
BOOLEAN = "BOOLEAN"

# Operators
PLUS = "PLUS"
SUB = "SUB"
ASSIGN = "ASSIGN"
GT = "GT"
LT = "LT"
AND = "AND"
OR = "OR"

# Punctuation
SEMICOLON = "SEMICOLON"
LPAREN = "LPAREN"
RPAREN = "RPAREN"
LBRACE = "LBRACE"
RBRACE = "RBRACE"

EOF = "EOF"

TOKEN_KINDS: frozenset[str] = frozenset(
    {
        INT,
        BOOL,
        STRING,
        IF,
        FOR,
        IDENT,
        NUMBER,
        BOOLEAN,
        PLUS,
        SUB,
        ASSIGN,
        GT,
        LT,
        AND,
        OR,
        SEMICOLON,
        LPAREN,
        RPAREN,
        LBRACE,
        RBRACE,
        EOF,
    }
)

TYPE_KEYWORDS: frozenset[str] = frozenset({INT, BOOL, STRING})

BINARY_OPERATORS: frozenset[str] = frozenset({PLUS, SUB, GT, LT, AND, OR})

OPERAND_KINDS: frozenset[str] = frozenset({IDENT, NUMBER, BOOLEAN})

token_hashmap: dict[str, str] = {
    # keywords
    "int": INT,
    "bool": BOOL,
    "string": STRING,
    "if": IF,
    "for": FOR,
    "true": BOOLEAN,
    "false": BOOLEAN,
    # operators
    "+": PLUS,
    "-": SUB,
    "=": ASSIGN,
    ">": GT,
    "<": LT,
    "&&": AND,
    "||": OR,
    # punctuation
    ";": SEMICOLON,
    "(": LPAREN,
    ")": RPAREN,
    "{": LBRACE,
    "}": RBRACE,
}

# Parser diagnostics
MSG_DECL_IDENT = "Expected identifier in declaration"
MSG_DECL_SEMICOLON = "Missing ';' in declaration"
MSG_INVALID_STATEMENT = "Invalid statement"
MSG_ASSIGN_EQUALS = "Expected '=' in assignment"
MSG_ASSIGN_SEMICOLON = "Missing ';' in assignment"
MSG_IF_LPAREN = "Expected '(' after if"
MSG_FOR_LPAREN = "Expected '(' after for"
MSG_FOR_SEMICOLON = "Missing ';' in for"
MSG_RPAREN = "Expected ')'"
MSG_LBRACE = "Expected '{'"
MSG_RBRACE = "Expected '}'"
MSG_OPERAND = "Expected operand in expression"
MSG_NESTING = "Nesting too deep"

__all__ = [
    "TOKEN_KINDS",
    "TYPE_KEYWORDS",
    "BINARY_OPERATORS",
    "OPERAND_KINDS",
    "token_hashmap",
]
