"""Tests for the dependency graph builder."""

import pytest

from jardoc.code_structure.dependency_graph import (
    PRIMITIVE_TYPES,
    DependencyAnalyzer,
    analyze_dependencies,
    is_primitive_type,
)
from jardoc.code_structure.extractor import extract_structure
from jardoc.code_structure.models import (
    ClassDependency,
    DependencyKind,
    FieldRecord,
    SourceUnit,
)
from jardoc.core.config import settings as settings_module
from jardoc.core.config.settings import AnalysisSettings, get_settings
from jardoc.core.exceptions import MissingInputError


def edge(from_class: str, to_class: str, kind: DependencyKind) -> ClassDependency:
    """Shorthand for building an expected edge."""
    return ClassDependency(from_class=from_class, to_class=to_class, dep_type=kind)


class TestInputHandling:
    """Tests for required and empty input."""

    def test_none_input_raises(self):
        """Test that a missing unit collection is an error."""
        with pytest.raises(MissingInputError) as exc_info:
            analyze_dependencies(None)

        assert "input required" in str(exc_info.value)

    def test_empty_input(self):
        """Test that an empty collection yields an empty result."""
        result = analyze_dependencies({})

        assert result.class_dependencies == []
        assert result.method_calls == []
        assert result.inheritance_tree == {}
        assert result.class_graph() == {}
        assert result.call_graph() == {}

    def test_none_entries_skipped(self, test_class_unit):
        """Test that None values in the mapping are ignored."""
        result = analyze_dependencies({"Missing": None, "TestClass": test_class_unit})

        assert "Missing" not in result.import_statements
        assert "TestClass" in result.import_statements


class TestEdges:
    """Tests for individual edge kinds."""

    def test_test_class_scenario(self, test_class_unit):
        """Test inheritance, interface, field, import edges and calls together."""
        result = analyze_dependencies({"TestClass": test_class_unit})
        deps = result.class_dependencies

        assert edge("TestClass", "BaseClass", DependencyKind.EXTENDS) in deps
        assert edge("TestClass", "Runnable", DependencyKind.IMPLEMENTS) in deps
        assert edge("TestClass", "List", DependencyKind.USES_FIELD) in deps
        assert edge("TestClass", "List", DependencyKind.IMPORTS) in deps
        assert edge("TestClass", "ArrayList", DependencyKind.IMPORTS) in deps
        assert len(deps) == 5
        assert len(result.method_calls) == 3
        assert any(
            c.callee_class == "items" and c.callee_method == "add" for c in result.method_calls
        )

    def test_end_to_end_single_line(self):
        """Test the one-line TestClass scenario with a caller-supplied field."""
        source = (
            "public class TestClass extends BaseClass implements Runnable { "
            "private List<String> items; "
            'public void run() { items.add("x"); } }'
        )
        unit = SourceUnit(
            class_name="TestClass",
            source_code=source,
            fields=[FieldRecord(name="items", type="List<String>")],
        )
        result = analyze_dependencies({"TestClass": unit})

        assert result.class_dependencies == [
            edge("TestClass", "List", DependencyKind.USES_FIELD),
            edge("TestClass", "BaseClass", DependencyKind.EXTENDS),
            edge("TestClass", "Runnable", DependencyKind.IMPLEMENTS),
        ]
        assert result.method_calls[0].callee_class == "items"
        assert result.method_calls[0].callee_method == "add"

    def test_field_with_generic_type(self):
        """Test that List<String> yields only an edge to List."""
        unit = SourceUnit(
            class_name="Foo",
            source_code="class Foo {}",
            fields=[FieldRecord(name="names", type="List<String>")],
        )
        result = analyze_dependencies({"Foo": unit})

        assert result.class_dependencies == [edge("Foo", "List", DependencyKind.USES_FIELD)]

    def test_primitive_and_array_fields_filtered(self):
        """Test that primitive, String and primitive-array fields add no edges."""
        unit = SourceUnit(
            class_name="Foo",
            source_code="class Foo {}",
            fields=[
                FieldRecord(name="a", type="int"),
                FieldRecord(name="b", type="String"),
                FieldRecord(name="c", type="byte[]"),
                FieldRecord(name="d", type="String[]"),
                FieldRecord(name="e", type="Widget[]"),
            ],
        )
        result = analyze_dependencies({"Foo": unit})

        assert result.class_dependencies == [edge("Foo", "Widget", DependencyKind.USES_FIELD)]

    def test_imports_skip_wildcards(self):
        """Test that only non-wildcard imports produce edges."""
        unit = SourceUnit(
            class_name="Foo",
            source_code="import java.util.List;\nimport java.util.*;\nclass Foo {}",
        )
        result = analyze_dependencies({"Foo": unit})

        assert result.import_statements["Foo"] == ["java.util.List", "java.util.*"]
        assert result.dependencies_of_kind(DependencyKind.IMPORTS) == [
            edge("Foo", "List", DependencyKind.IMPORTS)
        ]

    def test_imports_fall_back_to_unit_list(self):
        """Test that units without source contribute their recorded imports."""
        unit = SourceUnit(class_name="Stub", imports=["com.example.Widget"])
        result = analyze_dependencies({"Stub": unit})

        assert result.class_dependencies == [edge("Stub", "Widget", DependencyKind.IMPORTS)]

    def test_nested_class_inheritance(self):
        """Test that nested declarations feed the inheritance map."""
        source = """
public class Outer extends Base {
    static class Inner extends Helper implements Task {}
}"""
        result = analyze_dependencies({"Outer": SourceUnit(class_name="Outer", source_code=source)})

        assert result.inheritance_tree == {"Outer": "Base", "Inner": "Helper"}
        assert result.interface_impls == {"Inner": ["Task"]}


class TestMalformedClasses:
    """Tests for per-class failure handling."""

    BROKEN = "import java.util.Map;\npublic class Broken extends {}"

    def test_broken_class_skips_inheritance_only(self):
        """Test that a malformed header drops inheritance but keeps imports."""
        units = {
            "Broken": SourceUnit(
                class_name="Broken",
                source_code=self.BROKEN,
                fields=[FieldRecord(name="m", type="Map<String, String>")],
            ),
            "Good": SourceUnit(class_name="Good", source_code="class Good extends Base {}"),
        }
        result = analyze_dependencies(units)

        assert result.inheritance_tree == {"Good": "Base"}
        assert edge("Broken", "Map", DependencyKind.IMPORTS) in result.class_dependencies
        assert edge("Broken", "Map", DependencyKind.USES_FIELD) in result.class_dependencies
        assert len(result.diagnostics) == 1
        assert result.diagnostics[0].class_name == "Broken"

    def test_lenient_mode_keeps_valid_declarations(self):
        """Test that non-strict analysis keeps the parts that did parse."""
        source = "class Ok extends Base {}\nclass Bad extends {}"
        settings = AnalysisSettings(strict_declarations=False)
        result = DependencyAnalyzer(settings).analyze(
            {"Ok": SourceUnit(class_name="Ok", source_code=source)}
        )

        assert result.inheritance_tree == {"Ok": "Base"}
        assert len(result.diagnostics) == 1

    def test_line_numbers_setting(self):
        """Test that the analyzer passes the line number setting through."""
        settings = AnalysisSettings(compute_line_numbers=True)
        unit = SourceUnit(class_name="A", source_code="class A {\n void f() { x.y(); }\n}")
        result = DependencyAnalyzer(settings).analyze({"A": unit})

        assert result.method_calls[0].line_number == 2


class TestDefaultSettings:
    """Tests for settings resolution when none are passed."""

    @pytest.fixture
    def yaml_settings(self, tmp_path, monkeypatch):
        """Point the global settings at a YAML file with an analysis section."""
        path = tmp_path / "default.yaml"
        path.write_text(
            "analysis:\n  compute_line_numbers: true\n  strict_declarations: false\n",
            encoding="utf-8",
        )
        monkeypatch.setattr(settings_module, "DEFAULT_CONFIG_PATH", path)
        get_settings.cache_clear()
        yield path
        get_settings.cache_clear()

    def test_analyzer_reads_yaml_analysis_section(self, yaml_settings):
        """Test that the analysis section of the config file is applied."""
        analyzer = DependencyAnalyzer()

        assert analyzer.settings.compute_line_numbers is True
        assert analyzer.settings.strict_declarations is False

    def test_convenience_function_uses_yaml_settings(self, yaml_settings):
        """Test line numbers and lenient parsing driven only by the config file."""
        source = "class Ok extends Base {\n  void f() {\n    x.y();\n  }\n}\nclass Bad extends {}"
        result = analyze_dependencies({"Ok": SourceUnit(class_name="Ok", source_code=source)})

        assert result.method_calls[0].line_number == 3
        assert result.inheritance_tree == {"Ok": "Base"}

    def test_explicit_settings_win(self, yaml_settings):
        """Test that passed settings override the config file."""
        analyzer = DependencyAnalyzer(AnalysisSettings(compute_line_numbers=False))
        assert analyzer.settings.compute_line_numbers is False


class TestGraphViews:
    """Tests for derived adjacency maps."""

    def test_class_graph(self, test_class_unit):
        """Test the class-level adjacency map."""
        graph = analyze_dependencies({"TestClass": test_class_unit}).class_graph()

        assert sorted(graph["TestClass"]) == sorted(
            ["List", "BaseClass", "Runnable", "List", "ArrayList"]
        )

    def test_call_graph(self, service_class_unit):
        """Test the method-level call map and its key format."""
        graph = analyze_dependencies({"ServiceClass": service_class_unit}).call_graph()

        assert list(graph) == ["ServiceClass.saveData"]
        assert graph["ServiceClass.saveData"] == [
            "dbHelper.connect",
            "dbHelper.save",
            "dbHelper.disconnect",
            "dbHelper.connect",
            "dbHelper.load",
            "dbHelper.disconnect",
        ]

    def test_views_recomputed(self, test_class_unit):
        """Test that views reflect later changes to the result."""
        result = analyze_dependencies({"TestClass": test_class_unit})
        before = len(result.class_graph()["TestClass"])
        result.class_dependencies.append(edge("TestClass", "Extra", DependencyKind.IMPORTS))

        assert len(result.class_graph()["TestClass"]) == before + 1


class TestIdempotence:
    """Tests for repeatable analysis."""

    def test_repeated_runs_match(self, test_class_unit, service_class_unit):
        """Test that identical input gives identical edges."""
        units = {"TestClass": test_class_unit, "ServiceClass": service_class_unit}
        first = analyze_dependencies(units)
        second = analyze_dependencies(units)

        assert len(first.class_dependencies) == len(second.class_dependencies)
        assert set(first.class_dependencies) == set(second.class_dependencies)
        assert first.method_calls == second.method_calls

    def test_extracted_units_end_to_end(self):
        """Test a batch built entirely by the structural extractor."""
        order = extract_structure(
            """package shop;
import shop.repo.OrderRepository;
public class OrderService extends BaseService implements Auditable {
    private OrderRepository repository;
    private int retries = 3;
    public void place(Order order) {
        repository.save(order);
    }
}""",
            "shop/OrderService.java",
        )
        base = extract_structure("package shop;\npublic abstract class BaseService {}", "BaseService")
        result = analyze_dependencies({order.class_name: order, base.class_name: base})

        assert edge("OrderService", "OrderRepository", DependencyKind.USES_FIELD) in result.class_dependencies
        assert edge("OrderService", "BaseService", DependencyKind.EXTENDS) in result.class_dependencies
        assert result.call_graph() == {"OrderService.place": ["repository.save"]}


class TestPrimitiveTypes:
    """Tests for the primitive type set."""

    def test_fixed_set(self):
        """Test the exact membership of the primitive set."""
        assert PRIMITIVE_TYPES == {
            "boolean", "byte", "char", "short", "int", "long", "float", "double", "void", "String",
        }

    @pytest.mark.parametrize("name", ["Integer", "Object", "List", "string"])
    def test_non_primitives(self, name):
        """Test that boxed and reference types are not primitive."""
        assert not is_primitive_type(name)
