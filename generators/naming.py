# generators/naming.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import json
import re

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]

def js_key(name: str) -> str:
    """Object key as written in TS/JS source; quoted unless a plain identifier."""
    return name if _IDENTIFIER.match(name) else json.dumps(name, ensure_ascii=False)

def pad(depth: int) -> str:
    return "  " * depth
