"""
Output formatting utilities for check results.
"""

import json
from dataclasses import fields
from dataclasses import is_dataclass
from enum import Enum
from typing import Iterable

from pydantic import BaseModel

from a11ycheck.checks.registry import kind_name
from a11ycheck.checks.spec.metadata import ResultMetadata
from a11ycheck.checks.spec.result import AccessibilityHierarchyCheckResult
from a11ycheck.checks.strings import StringCatalog


def to_serializable(obj):
    # Pydantic model (v2)
    if isinstance(obj, BaseModel):
        return to_serializable(obj.model_dump())

    # Kind handles are written by name, as on the wire
    if isinstance(obj, type):
        return kind_name(obj)

    if isinstance(obj, Enum):
        return obj.value

    if isinstance(obj, ResultMetadata):
        return to_serializable(obj.to_dict())

    # Dataclass. Not asdict(): it would deep-copy metadata instead of converting it
    if is_dataclass(obj):
        return {f.name: to_serializable(getattr(obj, f.name)) for f in fields(obj)}

    # Dict
    if isinstance(obj, dict):
        return {k: to_serializable(v) for k, v in obj.items()}

    # List / Tuple / Set
    if isinstance(obj, (list, tuple, set)):
        return [to_serializable(v) for v in obj]

    # Primitive
    return obj


def _format_text_line(
    result: AccessibilityHierarchyCheckResult,
    locale: str,
    catalog: StringCatalog,
) -> str:
    return (
        f"{result.type.value:<10} {result.check_class.__name__} "
        f"element={result.element_id} id={result.result_id}: "
        f"{result.get_message(locale, catalog)}"
    )


def format_results(
    results: Iterable[AccessibilityHierarchyCheckResult],
    locale: str,
    catalog: StringCatalog,
    output_format: str = "text",
) -> str:
    """
    Render results for people (``text``) or machines (``json``).

    JSON output carries each result's fields plus its rendered message and short message.
    """
    results = list(results)
    if output_format == "json":
        combined_output = []
        for result in results:
            entry = to_serializable(result)
            entry["message"] = result.get_message(locale, catalog)
            entry["short_message"] = result.get_short_message(locale, catalog)
            combined_output.append(entry)
        return json.dumps(combined_output, indent=2)

    if output_format != "text":
        raise ValueError(f"Unknown output format: {output_format}")

    if not results:
        return "No results"
    return "\n".join(_format_text_line(result, locale, catalog) for result in results)
