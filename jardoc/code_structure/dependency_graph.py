"""Cross-class dependency and call graph construction."""

from collections.abc import Mapping

from jardoc.core.config.settings import AnalysisSettings, get_settings
from jardoc.core.exceptions import MissingInputError
from jardoc.core.logger.logger import get_logger

from .call_scanner import scan_method_calls
from .declarations import JavaDeclarationParser, build_inheritance_maps
from .extractor import extract_imports
from .models import (
    ClassDependency,
    DependencyAnalysisResult,
    DependencyKind,
    SourceUnit,
)

logger = get_logger(__name__)

# Field types that never produce a uses_field edge.
PRIMITIVE_TYPES = frozenset({
    "boolean", "byte", "char", "short", "int", "long", "float", "double", "void", "String",
})


def is_primitive_type(type_name: str) -> bool:
    """Whether *type_name* is a primitive or well-known value type."""
    return type_name in PRIMITIVE_TYPES


class DependencyAnalyzer:
    """Build a :class:`DependencyAnalysisResult` from a batch of source units.

    Each call to :meth:`analyze` works on its own result object, so one
    analyzer can be shared between callers.
    """

    def __init__(self, settings: AnalysisSettings | None = None) -> None:
        """Initialize the analyzer.

        Args:
            settings: Analysis settings. Uses global settings if not provided.
        """
        self.settings = settings or get_settings().analysis

    def analyze(self, units: Mapping[str, SourceUnit | None] | None) -> DependencyAnalysisResult:
        """Analyze dependency relationships between classes.

        Args:
            units: Source units keyed by class name. ``None`` entries are skipped.

        Returns:
            Aggregate dependency data. Classes are processed in mapping order.

        Raises:
            MissingInputError: If *units* is None.
        """
        if units is None:
            raise MissingInputError("input required: source units cannot be None", argument="units")

        result = DependencyAnalysisResult()

        for class_name, unit in units.items():
            if unit is None:
                continue

            if unit.source_code:
                result.import_statements[class_name] = extract_imports(unit.source_code)
            else:
                result.import_statements[class_name] = list(unit.imports)

            self._analyze_inheritance(class_name, unit, result)
            result.method_calls.extend(
                scan_method_calls(unit, compute_line_numbers=self.settings.compute_line_numbers)
            )
            self._analyze_field_dependencies(unit, result)

        self._build_class_dependencies(result)

        logger.info(
            "Analyzed %d classes: %d dependencies, %d method calls, %d diagnostics",
            len(result.import_statements),
            len(result.class_dependencies),
            len(result.method_calls),
            len(result.diagnostics),
        )
        return result

    def _analyze_inheritance(
        self, class_name: str, unit: SourceUnit, result: DependencyAnalysisResult
    ) -> None:
        """Merge parent and interface data parsed from the class header(s)."""
        parser = JavaDeclarationParser(unit.source_code)
        declarations = parser.parse()

        if parser.issues:
            for issue in parser.issues:
                result.diagnostics.append(issue.model_copy(update={"class_name": class_name}))
            if self.settings.strict_declarations:
                logger.warning(
                    "Skipping inheritance data for %s: %s", class_name, parser.issues[0].message
                )
                return

        inheritance_tree, interface_impls = build_inheritance_maps(declarations)
        result.inheritance_tree.update(inheritance_tree)
        result.interface_impls.update(interface_impls)

    def _analyze_field_dependencies(self, unit: SourceUnit, result: DependencyAnalysisResult) -> None:
        for field in unit.fields:
            base_type = field.base_type
            if base_type and not is_primitive_type(base_type):
                result.class_dependencies.append(
                    ClassDependency(
                        from_class=unit.class_name,
                        to_class=base_type,
                        dep_type=DependencyKind.USES_FIELD,
                    )
                )

    def _build_class_dependencies(self, result: DependencyAnalysisResult) -> None:
        """Synthesize extends, implements and imports edges from the collected maps."""
        for child, parent in result.inheritance_tree.items():
            result.class_dependencies.append(
                ClassDependency(from_class=child, to_class=parent, dep_type=DependencyKind.EXTENDS)
            )

        for class_name, interfaces in result.interface_impls.items():
            for iface in interfaces:
                result.class_dependencies.append(
                    ClassDependency(
                        from_class=class_name, to_class=iface, dep_type=DependencyKind.IMPLEMENTS
                    )
                )

        for class_name, imports in result.import_statements.items():
            for import_path in imports:
                imported_class = import_path.rsplit(".", 1)[-1]
                if imported_class == "*":
                    continue
                result.class_dependencies.append(
                    ClassDependency(
                        from_class=class_name,
                        to_class=imported_class,
                        dep_type=DependencyKind.IMPORTS,
                    )
                )


def analyze_dependencies(
    units: Mapping[str, SourceUnit | None] | None,
    settings: AnalysisSettings | None = None,
) -> DependencyAnalysisResult:
    """Convenience function to analyze a batch of source units.

    Args:
        units: Source units keyed by class name.
        settings: Analysis settings.

    Returns:
        Aggregate dependency data.

    Raises:
        MissingInputError: If *units* is None.
    """
    return DependencyAnalyzer(settings).analyze(units)
