# generators/mongoose.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Optional

from field_types import FieldType
from generators.naming import js_key, pad

DEFAULT_ROOT_NAME = "Model"

_MONGOOSE_TYPES = {
    "string": "String",
    "number": "Number",
    "boolean": "Boolean",
    "null": "String",
    "object": "mongoose.Schema.Types.Mixed",
    "array": "[String]",
}

def map_type(kind: Optional[str]) -> str:
    return _MONGOOSE_TYPES.get(kind or "", "String")

def generate(root: FieldType, root_name: Optional[str] = None) -> str:
    name = root_name or DEFAULT_ROOT_NAME
    if not root.is_object or not root.children:
        return f"const {name}Schema = new mongoose.Schema({{}});"
    props = _properties(root, 1)
    return f"const {name}Schema = new mongoose.Schema({{\n{props}\n}});"

def _properties(field: FieldType, depth: int) -> str:
    return "\n".join(
        f"{pad(depth)}{js_key(child.name)}: {_field_schema(child, depth)},"
        for child in field.children or ()
    )

def _field_schema(field: FieldType, depth: int) -> str:
    if field.array:
        if field.is_empty_array:
            return "[String]"
        return f"[{map_type(field.array_item_type)}]"

    if field.is_object:
        if not field.children:
            return "{}"
        return f"{{\n{_properties(field, depth + 1)}\n{pad(depth)}}}"

    base = map_type(field.type)
    wrapped = base
    if field.optional:
        wrapped = f"{{ type: {base}, required: false }}"
    # nullable replaces the optional wrapper rather than combining with it
    if field.nullable:
        wrapped = f"{{ type: {base}, default: null }}"
    return wrapped
