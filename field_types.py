# field_types.py
# -*- coding: utf-8 -*-
from __future__ import annotations
from dataclasses import dataclass, field as dc_field, replace
from typing import Any, Dict, Optional, Tuple

STRING = "string"
NUMBER = "number"
BOOLEAN = "boolean"
NULL = "null"
ARRAY = "array"
OBJECT = "object"

@dataclass(frozen=True)
class FieldType:
    """
    One node of the inferred shape tree.

    `children` is set only for objects (or arrays whose items are objects);
    `array_item_type` is set whenever `array` is true.
    """
    name: str
    type: str
    optional: bool = False
    nullable: bool = False
    array: bool = False
    array_item_type: Optional[str] = None
    children: Optional[Tuple["FieldType", ...]] = dc_field(default=None)

    @property
    def is_object(self) -> bool:
        return self.type == OBJECT and self.children is not None

    @property
    def is_empty_array(self) -> bool:
        return self.array and self.type == ARRAY and self.array_item_type == NULL

    def renamed(self, name: str) -> "FieldType":
        return replace(self, name=name)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "optional": self.optional,
            "nullable": self.nullable,
            "array": self.array,
        }
        if self.array_item_type is not None:
            out["arrayItemType"] = self.array_item_type
        if self.children is not None:
            out["children"] = [c.to_dict() for c in self.children]
        return out
