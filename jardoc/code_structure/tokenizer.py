"""Lexical analysis of Java source text.

The tokenizer partitions the input into classified tokens without ever
failing: any character not covered by a more specific rule becomes a
single-character delimiter token.

The reserved words ``true``, ``false`` and ``null`` are reported as
literals, not identifiers, so a header parser never mistakes them for type
names.
"""

import re
from collections.abc import Iterator
from typing import assert_never

from .models import Token, TokenKind

JAVA_KEYWORDS = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch",
    "char", "class", "const", "continue", "default", "do", "double",
    "else", "enum", "extends", "final", "finally", "float", "for", "goto",
    "if", "implements", "import", "instanceof", "int", "interface", "long",
    "native", "new", "package", "private", "protected", "public", "return",
    "short", "static", "strictfp", "super", "switch", "synchronized",
    "this", "throw", "throws", "transient", "try", "void", "volatile",
    "while",
})

# Reserved literals lexed as identifiers but classified as literals.
_LITERAL_WORDS = frozenset({"true", "false", "null"})

OPERATOR_CHARS = "{}()[];,.<>=!&|+-*/"

_TOKEN_RE = re.compile(
    r"""
    (?P<whitespace>\s+)
    | (?P<comment>//[^\n]*|/\*[\s\S]*?(?:\*/|\Z))
    | (?P<literal>
        \"\"\"[\s\S]*?(?:\"\"\"|\Z)               # text block
      | "(?:\\.|[^"\\\n])*"?                    # string, unterminated stops at EOL
      | '(?:\\.|[^'\\\n])*'?                    # char
      | 0[xX][0-9a-fA-F_]+[lL]?
      | 0[bB][01_]+[lL]?
      | (?:\d[\d_]*(?:\.[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d+)?[lLfFdD]?
      )
    | (?P<identifier>(?:[^\W\d]|\$)(?:\w|\$)*)
    | (?P<operator>[""" + re.escape(OPERATOR_CHARS) + r"""])
    | (?P<delimiter>[\s\S])
    """,
    re.VERBOSE,
)

_GROUP_KINDS = {
    "whitespace": TokenKind.WHITESPACE,
    "comment": TokenKind.COMMENT,
    "literal": TokenKind.LITERAL,
    "identifier": TokenKind.IDENTIFIER,
    "operator": TokenKind.OPERATOR,
    "delimiter": TokenKind.DELIMITER,
}


def tokenize(source: str) -> Iterator[Token]:
    """Lazily split Java source into tokens.

    Calling again with the same text restarts the sequence.

    Args:
        source: Java source text.

    Yields:
        Tokens in source order, including whitespace and comments.
    """
    for match in _TOKEN_RE.finditer(source):
        text = match.group()
        kind = _GROUP_KINDS[match.lastgroup]
        if kind is TokenKind.IDENTIFIER:
            if text in JAVA_KEYWORDS:
                kind = TokenKind.KEYWORD
            elif text in _LITERAL_WORDS:
                kind = TokenKind.LITERAL
        yield Token(kind, text)


def is_significant(kind: TokenKind) -> bool:
    """Whether a token of this kind takes part in parsing."""
    if kind is TokenKind.WHITESPACE or kind is TokenKind.COMMENT:
        return False
    elif (
        kind is TokenKind.IDENTIFIER
        or kind is TokenKind.KEYWORD
        or kind is TokenKind.OPERATOR
        or kind is TokenKind.DELIMITER
        or kind is TokenKind.LITERAL
    ):
        return True
    else:
        assert_never(kind)


def significant_tokens(source: str) -> Iterator[Token]:
    """Tokens of *source* with whitespace and comments dropped."""
    return (tok for tok in tokenize(source) if is_significant(tok.kind))


class JavaLexer:
    """Restartable token sequence over one source string."""

    def __init__(self, source: str) -> None:
        self.source = source

    def __iter__(self) -> Iterator[Token]:
        return tokenize(self.source)

    def significant(self) -> Iterator[Token]:
        """Iterate tokens skipping whitespace and comments."""
        return significant_tokens(self.source)
