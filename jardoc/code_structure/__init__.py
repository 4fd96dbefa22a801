"""Java structural extraction and dependency graph module.

This module turns Java source text into per-class structural records and
cross-class dependency and call graphs.

Example usage:
    from jardoc.code_structure import analyze_dependencies, extract_structure

    unit = extract_structure(source, "com/example/OrderService.java")
    result = analyze_dependencies({unit.class_name: unit})
    print(result.class_graph())
    print(result.call_graph())
"""

from .call_scanner import find_containing_method, scan_method_calls
from .declarations import (
    JavaDeclarationParser,
    build_inheritance_maps,
    parse_class_declarations,
    parse_inheritance,
)
from .dependency_graph import (
    PRIMITIVE_TYPES,
    DependencyAnalyzer,
    analyze_dependencies,
    is_primitive_type,
)
from .extractor import (
    JavaStructureExtractor,
    class_name_from_path,
    extract_imports,
    extract_structure,
)
from .models import (
    DEFAULT_SUPER_CLASS,
    ClassDeclaration,
    ClassDependency,
    DependencyAnalysisResult,
    DependencyKind,
    FieldRecord,
    MethodCall,
    MethodRecord,
    ParseIssue,
    SourceUnit,
    Token,
    TokenKind,
)
from .tokenizer import JAVA_KEYWORDS, JavaLexer, significant_tokens, tokenize
from .units import (
    all_public_methods,
    find_unit_by_name,
    index_units,
    units_in_package,
    validate_source_unit,
)

__all__ = [
    # Data models
    "ClassDeclaration",
    "ClassDependency",
    "DependencyAnalysisResult",
    "DependencyKind",
    "FieldRecord",
    "MethodCall",
    "MethodRecord",
    "ParseIssue",
    "SourceUnit",
    "Token",
    "TokenKind",
    "DEFAULT_SUPER_CLASS",
    # Tokenizer
    "JAVA_KEYWORDS",
    "JavaLexer",
    "significant_tokens",
    "tokenize",
    # Declaration parser
    "JavaDeclarationParser",
    "build_inheritance_maps",
    "parse_class_declarations",
    "parse_inheritance",
    # Structural extractor
    "JavaStructureExtractor",
    "class_name_from_path",
    "extract_imports",
    "extract_structure",
    # Call scanner
    "find_containing_method",
    "scan_method_calls",
    # Graph builder
    "PRIMITIVE_TYPES",
    "DependencyAnalyzer",
    "analyze_dependencies",
    "is_primitive_type",
    # Unit helpers
    "all_public_methods",
    "find_unit_by_name",
    "index_units",
    "units_in_package",
    "validate_source_unit",
]
