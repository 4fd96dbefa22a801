"""Data models for Java structural extraction and dependency graphs."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Base type assumed when a class declares no ``extends`` clause.
DEFAULT_SUPER_CLASS = "java.lang.Object"


class TokenKind(str, Enum):
    """Lexical category of a Java token."""

    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    DELIMITER = "delimiter"
    LITERAL = "literal"
    COMMENT = "comment"
    WHITESPACE = "whitespace"


@dataclass(frozen=True)
class Token:
    """One lexical unit produced by the tokenizer."""

    kind: TokenKind
    text: str


class DependencyKind(str, Enum):
    """Origin of a class-level dependency edge."""

    EXTENDS = "extends"
    IMPLEMENTS = "implements"
    IMPORTS = "imports"
    USES_FIELD = "uses_field"


class ClassDeclaration(BaseModel):
    """A parsed class or interface header."""

    model_config = ConfigDict(frozen=True)

    name: str
    parent_class: str | None = None
    interfaces: list[str] = Field(default_factory=list)
    modifiers: list[str] = Field(default_factory=list)
    is_interface: bool = False
    is_abstract: bool = False
    start_position: int = 0  # index of the first significant token
    end_position: int = 0  # index one past the last consumed token


class ParseIssue(BaseModel):
    """A declaration header that failed to parse."""

    model_config = ConfigDict(frozen=True)

    class_name: str
    message: str
    position: int | None = None


class FieldRecord(BaseModel):
    """A field declaration extracted from class source."""

    name: str
    type: str
    modifiers: list[str] = Field(default_factory=list)
    default_value: str = ""
    annotations: dict[str, str] = Field(default_factory=dict)
    line_number: int = 0

    @property
    def base_type(self) -> str:
        """Declared type with generic arguments and one array suffix removed.

        ``List<String>`` becomes ``List``, ``String[]`` becomes ``String``.
        """
        base = self.type.split("<", 1)[0]
        return base.removesuffix("[]").strip()


class MethodRecord(BaseModel):
    """A method signature extracted from class source."""

    name: str
    return_type: str = "void"
    parameters: list[str] = Field(default_factory=list)
    modifiers: list[str] = Field(default_factory=list)
    annotations: dict[str, str] = Field(default_factory=dict)
    body: str | None = None
    line_number: int = 0

    @property
    def is_public(self) -> bool:
        """Whether the method carries the ``public`` modifier."""
        return "public" in self.modifiers


class SourceUnit(BaseModel):
    """Structural record of one class, built from its source text."""

    class_name: str
    package_name: str = ""
    source_code: str = ""
    imports: list[str] = Field(default_factory=list)
    methods: list[MethodRecord] = Field(default_factory=list)
    fields: list[FieldRecord] = Field(default_factory=list)
    modifiers: list[str] = Field(default_factory=list)
    super_class: str = DEFAULT_SUPER_CLASS
    interfaces: list[str] = Field(default_factory=list)
    annotations: dict[str, str] = Field(default_factory=dict)

    @property
    def qualified_name(self) -> str:
        """Package-qualified class name."""
        if self.package_name:
            return f"{self.package_name}.{self.class_name}"
        return self.class_name

    @property
    def public_methods(self) -> list[MethodRecord]:
        """Methods declared ``public``."""
        return [m for m in self.methods if m.is_public]


class ClassDependency(BaseModel):
    """Directed dependency edge between two classes."""

    model_config = ConfigDict(frozen=True)

    from_class: str
    to_class: str
    dep_type: DependencyKind


class MethodCall(BaseModel):
    """Syntactic call-site observation ``receiver.method(``."""

    model_config = ConfigDict(frozen=True)

    caller_class: str
    caller_method: str
    callee_class: str  # textual receiver, usually a variable
    callee_method: str
    line_number: int = 0


class DependencyAnalysisResult(BaseModel):
    """Aggregate dependency data for a batch of source units."""

    class_dependencies: list[ClassDependency] = Field(default_factory=list)
    method_calls: list[MethodCall] = Field(default_factory=list)
    inheritance_tree: dict[str, str] = Field(default_factory=dict)
    interface_impls: dict[str, list[str]] = Field(default_factory=dict)
    import_statements: dict[str, list[str]] = Field(default_factory=dict)
    diagnostics: list[ParseIssue] = Field(default_factory=list)

    def class_graph(self) -> dict[str, list[str]]:
        """Class-level adjacency map, edges in insertion order."""
        graph: dict[str, list[str]] = {}
        for dep in self.class_dependencies:
            graph.setdefault(dep.from_class, []).append(dep.to_class)
        return graph

    def call_graph(self) -> dict[str, list[str]]:
        """Method-level call adjacency map keyed by ``Class.method``."""
        graph: dict[str, list[str]] = {}
        for call in self.method_calls:
            caller = f"{call.caller_class}.{call.caller_method}"
            callee = f"{call.callee_class}.{call.callee_method}"
            graph.setdefault(caller, []).append(callee)
        return graph

    def dependencies_of_kind(self, kind: DependencyKind) -> list[ClassDependency]:
        """Edges with the given origin."""
        return [d for d in self.class_dependencies if d.dep_type == kind]
