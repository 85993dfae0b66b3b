# inference.py
# -*- coding: utf-8 -*-
"""
Infer a FieldType tree from JSON text.

Single-document inference samples only the first element of an array of
objects and never marks a field optional. `infer_from_samples` folds several
documents together and marks keys that are missing from some of them.
"""
from __future__ import annotations
from dataclasses import replace
from typing import Any, Dict, Iterable, List, Optional, Tuple

from field_types import (
    ARRAY, BOOLEAN, NULL, NUMBER, OBJECT, STRING, FieldType,
)
from lenient_json import lenient_loads

ROOT_NAME = "root"

class InferenceParseError(ValueError):
    """Input could not be resolved to a JSON value."""

def value_kind(x: Any) -> str:
    if x is None:
        return NULL
    if isinstance(x, bool):
        return BOOLEAN
    if isinstance(x, (int, float)):
        return NUMBER
    if isinstance(x, str):
        return STRING
    if isinstance(x, dict):
        return OBJECT
    if isinstance(x, (list, tuple)):
        return ARRAY
    return STRING

def parse_json(text: str) -> Any:
    try:
        return lenient_loads(text)
    except RecursionError as e:
        raise InferenceParseError("Invalid JSON: nesting too deep") from e
    except ValueError as e:
        raise InferenceParseError(f"Invalid JSON: {e}") from e

def infer_from_json_string(text: str, root_name: str = ROOT_NAME) -> FieldType:
    return infer_value(root_name, parse_json(text))

def unify_kinds(kinds: Iterable[str]) -> str:
    unique: List[str] = []
    for k in kinds:
        if k not in unique:
            unique.append(k)

    if len(unique) == 1:
        return unique[0]
    if NULL in unique:
        non_null = [k for k in unique if k != NULL]
        if len(non_null) == 1:
            return non_null[0]
    if NUMBER in unique and STRING in unique:
        return STRING
    if OBJECT in unique and len(unique) > 1:
        return OBJECT
    return unique[0] if unique else STRING

def infer_object_fields(obj: Dict[str, Any]) -> Tuple[FieldType, ...]:
    return tuple(infer_value(str(k), v) for k, v in obj.items())

def infer_value(name: str, value: Any) -> FieldType:
    kind = value_kind(value)

    if kind == NULL:
        return FieldType(name=name, type=NULL, nullable=True)

    if kind == ARRAY:
        if not value:
            return FieldType(name=name, type=ARRAY, array=True, array_item_type=NULL)
        unified = unify_kinds(value_kind(item) for item in value)
        children = None
        if unified == OBJECT:
            # first element wins; later items' keys are not reconciled
            first = value[0] if isinstance(value[0], dict) else next(
                (item for item in value if isinstance(item, dict)), {})
            children = infer_object_fields(first)
        return FieldType(name=name, type=unified, array=True,
                         array_item_type=unified, children=children)

    if kind == OBJECT:
        return FieldType(name=name, type=OBJECT, children=infer_object_fields(value))

    return FieldType(name=name, type=kind)

# -------- multi-sample merging --------

def _merge_children(a: Tuple[FieldType, ...], b: Tuple[FieldType, ...]) -> Tuple[FieldType, ...]:
    b_by_name = {c.name: c for c in b}
    a_names = {c.name for c in a}
    merged: List[FieldType] = []
    for child in a:
        other = b_by_name.get(child.name)
        if other is None:
            merged.append(replace(child, optional=True))
        else:
            merged.append(merge_fields(child, other))
    for child in b:
        if child.name not in a_names:
            merged.append(replace(child, optional=True))
    return tuple(merged)

def _is_bare_null(f: FieldType) -> bool:
    return f.type == NULL and not f.array

def merge_fields(a: FieldType, b: FieldType) -> FieldType:
    """Fold two observations of the same position into one node named like `a`."""
    optional = a.optional or b.optional
    if _is_bare_null(a) and _is_bare_null(b):
        return replace(a, optional=optional)
    if _is_bare_null(a):
        return replace(b, name=a.name, nullable=True, optional=optional)
    if _is_bare_null(b):
        return replace(a, nullable=True, optional=optional)
    if a.is_empty_array and b.array:
        return replace(b, name=a.name, nullable=a.nullable or b.nullable, optional=optional)
    if b.is_empty_array and a.array:
        return replace(a, nullable=a.nullable or b.nullable, optional=optional)
    # an empty array next to a bare value: the value is the item kind
    if a.is_empty_array:
        return replace(b, name=a.name, array=True, array_item_type=b.type,
                       nullable=a.nullable or b.nullable, optional=optional)
    if b.is_empty_array:
        return replace(a, array=True, array_item_type=a.type,
                       nullable=a.nullable or b.nullable, optional=optional)

    kind = unify_kinds([a.type, b.type])
    children: Optional[Tuple[FieldType, ...]] = None
    if kind == OBJECT:
        if a.children is not None and b.children is not None:
            children = _merge_children(a.children, b.children)
        else:
            children = a.children if a.children is not None else b.children
    array = a.array or b.array
    return FieldType(
        name=a.name,
        type=kind,
        optional=optional,
        nullable=a.nullable or b.nullable,
        array=array,
        array_item_type=kind if array else None,
        children=children,
    )

def infer_from_samples(values: Iterable[Any], root_name: str = ROOT_NAME) -> FieldType:
    root: Optional[FieldType] = None
    for v in values:
        node = infer_value(root_name, v)
        root = node if root is None else merge_fields(root, node)
    if root is None:
        return FieldType(name=root_name, type=OBJECT, children=())
    return root

def infer_from_json_lines(lines: Iterable[str], root_name: str = ROOT_NAME) -> FieldType:
    values: List[Any] = []
    for lineno, line in enumerate(lines, 1):
        if not line.strip():
            continue
        try:
            values.append(lenient_loads(line))
        except RecursionError as e:
            raise InferenceParseError(f"Invalid JSON: line {lineno}: nesting too deep") from e
        except ValueError as e:
            raise InferenceParseError(f"Invalid JSON: line {lineno}: {e}") from e
    return infer_from_samples(values, root_name=root_name)
