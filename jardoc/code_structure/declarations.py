"""Recursive-descent parser for Java class and interface headers.

Only the header grammar is recognized::

    modifier* ("class" | "interface") QualifiedName TypeParams?
        ("extends" QualifiedName TypeParams?)?
        ("implements" QualifiedName TypeParams? ("," QualifiedName TypeParams?)*)?

Type parameter lists are skipped by bracket depth and never interpreted.
Bodies are not parsed, so nested declarations are picked up by the same
forward scan that finds top-level ones.
"""

from jardoc.core.exceptions import DeclarationParseError
from jardoc.core.logger.logger import get_logger

from .models import ClassDeclaration, ParseIssue, Token, TokenKind
from .tokenizer import significant_tokens

logger = get_logger(__name__)

CLASS_MODIFIERS = frozenset({"public", "private", "protected", "static", "final", "abstract"})
DECLARATION_KEYWORDS = frozenset({"class", "interface"})


class JavaDeclarationParser:
    """Find class/interface declarations in one Java source string.

    Parsing is lenient: a header that breaks after its ``class`` or
    ``interface`` keyword is recorded in :attr:`issues` and the scan resumes
    right after that keyword.

    The significant tokens are buffered in a list on construction so the
    cursor can step back to the keyword after a failed header.
    """

    def __init__(self, source: str) -> None:
        """Initialize the parser.

        Args:
            source: Java source text.
        """
        self._tokens: list[Token] = list(significant_tokens(source))
        self._pos = 0
        self._keyword_pos = 0
        self.issues: list[ParseIssue] = []

    # -- token cursor -------------------------------------------------------

    def _current(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _advance(self) -> None:
        self._pos += 1

    def _at(self, kind: TokenKind, text: str) -> bool:
        tok = self._current()
        return tok is not None and tok.kind is kind and tok.text == text

    def _describe_current(self) -> str:
        tok = self._current()
        if tok is None:
            return "end of input"
        return f"{tok.kind.value} '{tok.text}'"

    def _is_class_literal(self) -> bool:
        """``Foo.class`` is an expression, not a declaration."""
        if self._pos == 0:
            return False
        prev = self._tokens[self._pos - 1]
        return prev.kind is TokenKind.OPERATOR and prev.text == "."

    # -- grammar ------------------------------------------------------------

    def _parse_identifier(self, what: str, class_name: str | None = None) -> str:
        """Parse a possibly dot-qualified identifier such as ``java.util.List``."""
        tok = self._current()
        if tok is None or tok.kind is not TokenKind.IDENTIFIER:
            raise DeclarationParseError(
                f"failed to parse {what}: expected identifier, got {self._describe_current()}",
                class_name=class_name,
                position=self._pos,
            )
        parts = [tok.text]
        self._advance()

        while self._at(TokenKind.OPERATOR, "."):
            self._advance()
            tok = self._current()
            if tok is None or tok.kind is not TokenKind.IDENTIFIER:
                raise DeclarationParseError(
                    f"failed to parse {what}: expected identifier after '.', "
                    f"got {self._describe_current()}",
                    class_name=class_name,
                    position=self._pos,
                )
            parts.append(tok.text)
            self._advance()

        return ".".join(parts)

    def _skip_type_parameters(self) -> None:
        """Skip a balanced ``<...>`` list if one starts here."""
        if not self._at(TokenKind.OPERATOR, "<"):
            return
        self._advance()
        depth = 1
        while depth > 0:
            tok = self._current()
            if tok is None:
                return
            if tok.kind is TokenKind.OPERATOR:
                if tok.text == "<":
                    depth += 1
                elif tok.text == ">":
                    depth -= 1
            self._advance()

    def _parse_interface_list(self, class_name: str) -> list[str]:
        interfaces: list[str] = []
        while True:
            interfaces.append(self._parse_identifier("interfaces", class_name))
            self._skip_type_parameters()
            if self._at(TokenKind.OPERATOR, ","):
                self._advance()
                continue
            return interfaces

    def _parse_declaration(self) -> ClassDeclaration | None:
        """Parse one header at the cursor.

        Returns:
            The declaration, or None when the modifier run here does not
            lead into ``class``/``interface``.

        Raises:
            DeclarationParseError: If the header is malformed after its keyword.
        """
        start = self._pos
        modifiers: list[str] = []
        while True:
            tok = self._current()
            if tok is None or tok.kind is not TokenKind.KEYWORD or tok.text not in CLASS_MODIFIERS:
                break
            modifiers.append(tok.text)
            self._advance()

        tok = self._current()
        if tok is None or tok.kind is not TokenKind.KEYWORD or tok.text not in DECLARATION_KEYWORDS:
            return None

        self._keyword_pos = self._pos
        is_interface = tok.text == "interface"
        self._advance()

        name = self._parse_identifier("class name")
        self._skip_type_parameters()

        parent_class = None
        if self._at(TokenKind.KEYWORD, "extends"):
            self._advance()
            parent_class = self._parse_identifier("parent class", name)
            self._skip_type_parameters()

        interfaces: list[str] = []
        if self._at(TokenKind.KEYWORD, "implements"):
            self._advance()
            interfaces = self._parse_interface_list(name)

        return ClassDeclaration(
            name=name,
            parent_class=parent_class,
            interfaces=interfaces,
            modifiers=modifiers,
            is_interface=is_interface,
            is_abstract="abstract" in modifiers,
            start_position=start,
            end_position=self._pos,
        )

    def parse(self) -> list[ClassDeclaration]:
        """Scan the whole token sequence for declarations.

        Returns:
            Declarations in source order. Failures are in :attr:`issues`.
        """
        declarations: list[ClassDeclaration] = []
        self._pos = 0
        self.issues = []

        while self._pos < len(self._tokens):
            tok = self._tokens[self._pos]
            starts_header = tok.kind is TokenKind.KEYWORD and (
                tok.text in CLASS_MODIFIERS or tok.text in DECLARATION_KEYWORDS
            )
            if not starts_header or self._is_class_literal():
                self._advance()
                continue

            start = self._pos
            try:
                decl = self._parse_declaration()
            except DeclarationParseError as e:
                issue = ParseIssue(
                    class_name=e.class_name or "",
                    message=e.message,
                    position=e.position,
                )
                logger.debug("Skipping malformed declaration: %s", issue.message)
                self.issues.append(issue)
                self._pos = self._keyword_pos + 1
                continue

            if decl is None:
                self._pos = start + 1
                continue
            declarations.append(decl)

        return declarations


def parse_class_declarations(source: str, strict: bool = False) -> list[ClassDeclaration]:
    """Extract every class/interface header from Java source.

    Args:
        source: Java source text.
        strict: Raise on the first malformed header instead of skipping it.

    Returns:
        Declarations in source order.

    Raises:
        DeclarationParseError: In strict mode, if any header is malformed.
    """
    parser = JavaDeclarationParser(source)
    declarations = parser.parse()
    if strict and parser.issues:
        first = parser.issues[0]
        raise DeclarationParseError(
            first.message,
            class_name=first.class_name or None,
            position=first.position,
        )
    return declarations


def build_inheritance_maps(
    declarations: list[ClassDeclaration],
) -> tuple[dict[str, str], dict[str, list[str]]]:
    """Fold declarations into parent and interface maps.

    Args:
        declarations: Parsed declarations.

    Returns:
        Tuple of (class -> parent, class -> interfaces). Classes without a
        parent or without interfaces are omitted from the respective map.
    """
    inheritance_tree: dict[str, str] = {}
    interface_impls: dict[str, list[str]] = {}
    for decl in declarations:
        if decl.parent_class:
            inheritance_tree[decl.name] = decl.parent_class
        if decl.interfaces:
            interface_impls[decl.name] = list(decl.interfaces)
    return inheritance_tree, interface_impls


def parse_inheritance(
    source: str, strict: bool = False
) -> tuple[dict[str, str], dict[str, list[str]]]:
    """Extract inheritance and interface relationships from Java source.

    Args:
        source: Java source text.
        strict: Raise on the first malformed header instead of skipping it.

    Returns:
        Tuple of (inheritance tree, interface implementations).

    Raises:
        DeclarationParseError: In strict mode, if any header is malformed.
    """
    return build_inheritance_maps(parse_class_declarations(source, strict=strict))
