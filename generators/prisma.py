# generators/prisma.py
# -*- coding: utf-8 -*-
"""
FieldType tree -> Prisma model block.

Only top-level fields are emitted: nested objects collapse to `Json` and every
array becomes `String[]` whatever its item kind.
"""
from __future__ import annotations
from typing import Optional

from field_types import FieldType

DEFAULT_ROOT_NAME = "Model"

_PRISMA_TYPES = {
    "string": "String",
    "number": "Int",
    "boolean": "Boolean",
    "null": "String?",
    "object": "Json",
    "array": "String[]",
}

def map_type(field: FieldType) -> str:
    if field.array:
        return "String[]"
    return _PRISMA_TYPES.get(field.type, "String")

def generate(root: FieldType, root_name: Optional[str] = None) -> str:
    name = root_name or DEFAULT_ROOT_NAME
    if not root.is_object or not root.children:
        return f"model {name} {{\n  // Empty model\n}}"

    lines = []
    for child in root.children:
        type_name = map_type(child)
        # lists cannot be optional in prisma, and `String?` already carries the marker
        suffix = "?" if (child.optional or child.nullable) and not type_name.endswith(("?", "[]")) else ""
        lines.append(f"  {child.name} {type_name}{suffix}")
    return f"model {name} {{\n" + "\n".join(lines) + "\n}"
