"""Pattern-based structural extraction from Java source.

Everything here is a regex approximation rather than a grammar-driven
parse. Unusual formatting yields partial or empty results, never an error.
"""

import re
from bisect import bisect_left
from pathlib import PurePosixPath

from jardoc.core.logger.logger import get_logger

from .models import DEFAULT_SUPER_CLASS, FieldRecord, MethodRecord, SourceUnit, TokenKind
from .tokenizer import tokenize

logger = get_logger(__name__)

_PACKAGE_RE = re.compile(r"\bpackage\s+([a-zA-Z_][a-zA-Z0-9_.]*);")
_IMPORT_RE = re.compile(r"\bimport\s+(?:static\s+)?([a-zA-Z_][a-zA-Z0-9_.]*(?:\.\*)?);")
_CLASS_MODIFIERS_RE = re.compile(
    r"((?:\b(?:public|private|protected|static|final|abstract|strictfp)\s+)*)\bclass\s+"
)
_EXTENDS_RE = re.compile(
    r"\bclass\s+\w+(?:\s*<[^{]*?>)?\s+extends\s+([a-zA-Z_][a-zA-Z0-9_.]*)"
)
_IMPLEMENTS_RE = re.compile(r"\bimplements\s+([a-zA-Z_][a-zA-Z0-9_.,\s]*)")
_METHOD_RE = re.compile(
    r"\b((?:(?:public|private|protected|static|final|abstract|synchronized|native)\s+)*)"
    r"([a-zA-Z_][a-zA-Z0-9_.<>\[\]]*\s+)?"
    r"([a-zA-Z_][a-zA-Z0-9_]*)\s*\(([^)]*)\)\s*"
    r"(?:throws\s+[^{;]+)?\s*\{"
)
_FIELD_RE = re.compile(
    r"\b((?:(?:public|private|protected|static|final|volatile|transient)\s+)*)"
    r"([a-zA-Z_][a-zA-Z0-9_.<>\[\]]*\s+)"
    r"([a-zA-Z_][a-zA-Z0-9_]*)(?:\s*=\s*([^;]+))?;"
)
_ANNOTATION_RE = re.compile(r"@([a-zA-Z_][a-zA-Z0-9_]*)(?:\(([^)]*)\))?")

# Statement keywords the method pattern would otherwise read as a name.
_NON_METHOD_NAMES = frozenset({
    "if", "for", "while", "switch", "catch", "synchronized", "return",
    "new", "else", "do", "try", "throw", "super", "this",
})
# Statement keywords the method/field patterns would otherwise read as a type.
_NON_TYPE_WORDS = frozenset({
    "return", "throw", "new", "else", "case", "goto", "break", "continue",
    "package", "import", "assert", "yield", "do",
})


def class_name_from_path(file_name: str) -> str:
    """Derive a simple class name from a file name, path or qualified name.

    ``com/example/Foo.java``, ``Foo.class`` and ``com.example.Foo`` all give
    ``Foo``. Inner-class ``$`` separators are kept.
    """
    name = PurePosixPath(file_name.replace("\\", "/")).name
    for suffix in (".java", ".class"):
        name = name.removesuffix(suffix)
    return name.rsplit(".", 1)[-1]


def _split_words(text: str | None) -> list[str]:
    return text.split() if text else []


class JavaStructureExtractor:
    """Extract a :class:`SourceUnit` from one Java source string."""

    def extract(self, content: str, file_path: str) -> SourceUnit:
        """Extract the structural record of a class.

        Args:
            content: Java source text.
            file_path: File name, path or qualified name of the class.

        Returns:
            Structural record; constructs that do not match are left empty.
        """
        class_name = class_name_from_path(file_path)
        code, braces = _scan(content)
        unit = SourceUnit(
            class_name=class_name,
            package_name=self._extract_package(code),
            source_code=content,
            imports=self._extract_imports(code),
            methods=self._extract_methods(code, content, braces),
            fields=self._extract_fields(code),
            modifiers=self._extract_class_modifiers(code),
            super_class=self._extract_super_class(code),
            interfaces=self._extract_interfaces(code),
            annotations=self._extract_annotations(code),
        )
        logger.debug(
            "Extracted %s: %d imports, %d methods, %d fields",
            class_name,
            len(unit.imports),
            len(unit.methods),
            len(unit.fields),
        )
        return unit

    def _extract_package(self, content: str) -> str:
        match = _PACKAGE_RE.search(content)
        return match.group(1) if match else ""

    def _extract_imports(self, content: str) -> list[str]:
        return [m.group(1) for m in _IMPORT_RE.finditer(content)]

    def _extract_class_modifiers(self, content: str) -> list[str]:
        match = _CLASS_MODIFIERS_RE.search(content)
        return _split_words(match.group(1)) if match else []

    def _extract_super_class(self, content: str) -> str:
        match = _EXTENDS_RE.search(content)
        return match.group(1) if match else DEFAULT_SUPER_CLASS

    def _extract_interfaces(self, content: str) -> list[str]:
        match = _IMPLEMENTS_RE.search(content)
        if not match:
            return []
        return [name.strip() for name in match.group(1).split(",") if name.strip()]

    def _extract_methods(
        self, code: str, content: str, braces: list[tuple[int, str]]
    ) -> list[MethodRecord]:
        """Extract method signatures followed by a body.

        Args:
            code: Source text with comments blanked out.
            content: Original source text, same offsets as *code*.
            braces: Offsets of real brace tokens.

        Returns:
            Method records in source order, each carrying its body text when
            the opening brace is a real token.
        """
        methods: list[MethodRecord] = []

        for match in _METHOD_RE.finditer(code):
            modifiers_text, type_text, name, params_text = match.groups()
            return_type = type_text.strip() if type_text else "void"
            if name in _NON_METHOD_NAMES or return_type in _NON_TYPE_WORDS:
                continue

            parameters = [p.strip() for p in params_text.split(",")] if params_text.strip() else []
            methods.append(
                MethodRecord(
                    name=name,
                    return_type=return_type,
                    parameters=parameters,
                    modifiers=_split_words(modifiers_text),
                    body=_body_from(content, braces, match.end() - 1),
                    line_number=content.count("\n", 0, match.start(3)) + 1,
                )
            )

        return methods

    def _extract_fields(self, content: str) -> list[FieldRecord]:
        fields: list[FieldRecord] = []

        for match in _FIELD_RE.finditer(content):
            modifiers_text, type_text, name, default_text = match.groups()
            field_type = type_text.strip()
            if field_type in _NON_TYPE_WORDS:
                continue

            fields.append(
                FieldRecord(
                    name=name,
                    type=field_type,
                    modifiers=_split_words(modifiers_text),
                    default_value=default_text.strip() if default_text else "",
                    line_number=content.count("\n", 0, match.start(3)) + 1,
                )
            )

        return fields

    def _extract_annotations(self, content: str) -> dict[str, str]:
        annotations: dict[str, str] = {}
        for match in _ANNOTATION_RE.finditer(content):
            annotations[match.group(1)] = match.group(2) or ""
        return annotations


def _scan(content: str) -> tuple[str, list[tuple[int, str]]]:
    """Blank out comments and locate real braces in one tokenizer pass.

    Returns:
        Tuple of (source with every comment character except newlines
        replaced by a space, offsets of ``{``/``}`` operator tokens).
    """
    parts: list[str] = []
    braces: list[tuple[int, str]] = []
    offset = 0
    for tok in tokenize(content):
        if tok.kind is TokenKind.COMMENT:
            parts.append(re.sub(r"[^\n]", " ", tok.text))
        else:
            parts.append(tok.text)
            if tok.kind is TokenKind.OPERATOR and tok.text in "{}":
                braces.append((offset, tok.text))
        offset += len(tok.text)
    return "".join(parts), braces


def _body_from(content: str, braces: list[tuple[int, str]], open_offset: int) -> str | None:
    """Text from the brace at *open_offset* through its matching close brace.

    An unbalanced body runs to the end of input.
    """
    index = bisect_left(braces, (open_offset, ""))
    if index >= len(braces) or braces[index] != (open_offset, "{"):
        return None

    depth = 0
    for offset, brace in braces[index:]:
        depth += 1 if brace == "{" else -1
        if depth == 0:
            return content[open_offset : offset + 1]
    return content[open_offset:]


def extract_structure(content: str, file_path: str) -> SourceUnit:
    """Convenience function to extract one class's structural record.

    Args:
        content: Java source text.
        file_path: File name, path or qualified name of the class.

    Returns:
        Extracted source unit.
    """
    return JavaStructureExtractor().extract(content, file_path)


def extract_imports(content: str) -> list[str]:
    """All import targets in *content*, ``static`` stripped, wildcards kept."""
    return [m.group(1) for m in _IMPORT_RE.finditer(_scan(content)[0])]
