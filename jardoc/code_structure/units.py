"""Validation and lookup helpers over collections of source units."""

from collections.abc import Iterable

from jardoc.core.exceptions import SourceUnitValidationError

from .models import MethodRecord, SourceUnit


def validate_source_unit(unit: SourceUnit | None) -> None:
    """Check that a source unit is complete enough to analyze.

    Args:
        unit: Unit to validate.

    Raises:
        SourceUnitValidationError: If the unit is missing, unnamed, has no
            source, or contains an unnamed method or field.
    """
    if unit is None:
        raise SourceUnitValidationError("source unit cannot be None")

    if not unit.class_name:
        raise SourceUnitValidationError("class name cannot be empty")

    if not unit.source_code:
        raise SourceUnitValidationError("source code cannot be empty", class_name=unit.class_name)

    for i, method in enumerate(unit.methods):
        if not method.name:
            raise SourceUnitValidationError(
                f"method name at index {i} cannot be empty", class_name=unit.class_name
            )

    for i, field in enumerate(unit.fields):
        if not field.name:
            raise SourceUnitValidationError(
                f"field name at index {i} cannot be empty", class_name=unit.class_name
            )


def find_unit_by_name(units: Iterable[SourceUnit], class_name: str) -> SourceUnit | None:
    """First unit whose class name matches, or None."""
    for unit in units:
        if unit.class_name == class_name:
            return unit
    return None


def units_in_package(units: Iterable[SourceUnit], package_name: str) -> list[SourceUnit]:
    """All units declared in *package_name*."""
    return [unit for unit in units if unit.package_name == package_name]


def all_public_methods(units: Iterable[SourceUnit]) -> list[MethodRecord]:
    """Public methods across all units, in unit order."""
    methods: list[MethodRecord] = []
    for unit in units:
        methods.extend(unit.public_methods)
    return methods


def index_units(units: Iterable[SourceUnit]) -> dict[str, SourceUnit]:
    """Key units by class name for :func:`analyze_dependencies`.

    Later units with the same class name replace earlier ones.
    """
    return {unit.class_name: unit for unit in units}
