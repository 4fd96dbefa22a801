"""Approximate call graph extraction from ``receiver.method(`` patterns."""

import re

from .models import MethodCall, SourceUnit

_CALL_RE = re.compile(r"([a-zA-Z_][a-zA-Z0-9_]*)\.([a-zA-Z_][a-zA-Z0-9_]*)\s*\(")

UNKNOWN_CALLER = "unknown"


def find_containing_method(unit: SourceUnit, call_text: str) -> str:
    """Best-effort name of the method a call belongs to.

    The first method whose body contains *call_text* wins. Methods supplied
    without a body are searched through the whole class source instead.

    Args:
        unit: Structural record of the calling class.
        call_text: Matched call text, e.g. ``items.add(``.

    Returns:
        Method name, or ``"unknown"``.
    """
    for method in unit.methods:
        haystack = method.body if method.body is not None else unit.source_code
        if call_text in haystack:
            return method.name
    return UNKNOWN_CALLER


def scan_method_calls(unit: SourceUnit, compute_line_numbers: bool = False) -> list[MethodCall]:
    """Find every ``identifier.identifier(`` occurrence in a class.

    The left identifier is reported as the callee class even though it is
    usually a variable; nothing is resolved semantically.

    Args:
        unit: Structural record of the class to scan.
        compute_line_numbers: Record the 1-based line of each call instead of 0.

    Returns:
        One call per match, in source order.
    """
    source = unit.source_code
    calls: list[MethodCall] = []

    for match in _CALL_RE.finditer(source):
        line_number = source.count("\n", 0, match.start()) + 1 if compute_line_numbers else 0
        calls.append(
            MethodCall(
                caller_class=unit.class_name,
                caller_method=find_containing_method(unit, match.group(0)),
                callee_class=match.group(1),
                callee_method=match.group(2),
                line_number=line_number,
            )
        )

    return calls
