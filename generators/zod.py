# generators/zod.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Optional

from field_types import FieldType
from generators.naming import js_key, pad

DEFAULT_ROOT_NAME = "Root"

_ZOD_BUILDERS = {
    "string": "z.string()",
    "number": "z.number()",
    "boolean": "z.boolean()",
    "null": "z.null()",
    "array": "z.array(z.any())",
    "object": "z.object({})",
}

def map_type(kind: Optional[str]) -> str:
    return _ZOD_BUILDERS.get(kind or "", "z.any()")

def generate(root: FieldType, root_name: Optional[str] = None) -> str:
    name = root_name or DEFAULT_ROOT_NAME
    if not root.is_object or not root.children:
        return f"const {name}Schema = z.object({{}});"
    return f"const {name}Schema = {_object_builder(root, 0)};"

def _object_builder(field: FieldType, depth: int) -> str:
    if not field.children:
        return "z.object({})"
    props = "\n".join(_property(child, depth + 1) for child in field.children)
    return f"z.object({{\n{props}\n{pad(depth)}}})"

def _property(child: FieldType, depth: int) -> str:
    schema = _field_builder(child, depth)
    # optional before nullable, the order zod users write the chain in
    if child.optional:
        schema += ".optional()"
    if child.nullable:
        schema += ".nullable()"
    return f"{pad(depth)}{js_key(child.name)}: {schema},"

def _field_builder(field: FieldType, depth: int) -> str:
    if field.array:
        if field.is_empty_array:
            return "z.array(z.any())"
        if field.is_object:
            return f"z.array({_object_builder(field, depth)})"
        return f"z.array({map_type(field.array_item_type)})"
    if field.is_object:
        return _object_builder(field, depth)
    return map_type(field.type)
