# generators/typescript.py
# -*- coding: utf-8 -*-
"""
FieldType tree -> TypeScript interface / type alias.

Nested objects are emitted inline as their own declaration, named after the
capitalized field name. Array fields use the tracked item kind; an empty
array has no item kind and renders as `any[]`.
"""
from __future__ import annotations
from typing import Optional

from field_types import FieldType
from generators.naming import capitalize, js_key, pad

DEFAULT_ROOT_NAME = "Root"

_TS_TYPES = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "null": "null",
    "array": "any[]",
    "object": "object",
}

def map_type(kind: Optional[str]) -> str:
    return _TS_TYPES.get(kind or "", "any")

def generate(root: FieldType, root_name: Optional[str] = None, use_interfaces: bool = True) -> str:
    return _declaration(root, root_name or DEFAULT_ROOT_NAME, 0, use_interfaces)

def _declaration(field: FieldType, name: str, depth: int, use_interfaces: bool) -> str:
    nested = depth > 0
    if not field.is_object or not field.children:
        if use_interfaces:
            return f"interface {name} {{\n{pad(depth + 1)}// Empty object\n{pad(depth)}}}"
        return f"type {name} = {{}}" if nested else f"type {name} = {{}};"

    lines = "\n".join(_member(child, depth + 1, use_interfaces) for child in field.children)
    if use_interfaces:
        return f"interface {name} {{\n{lines}\n{pad(depth)}}}"
    close = "}" if nested else "};"
    return f"type {name} = {{\n{lines}\n{pad(depth)}{close}"

def _member(child: FieldType, depth: int, use_interfaces: bool) -> str:
    optional = "?" if child.optional else ""
    if child.is_object:
        type_expr = _declaration(child, capitalize(child.name), depth, use_interfaces)
    elif child.array:
        type_expr = "any" if child.is_empty_array else map_type(child.array_item_type)
    else:
        type_expr = map_type(child.type)

    if child.array:
        type_expr += "[]"
    if child.nullable and type_expr != "null":
        type_expr += " | null"
    return f"{pad(depth)}{js_key(child.name)}{optional}: {type_expr};"
