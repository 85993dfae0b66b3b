# lenient_json.py
# -*- coding: utf-8 -*-
"""
Forgiving JSON loader for hand-pasted samples.

Tolerates `//` and `/* */` comments, unquoted object keys and trailing
commas, then hands the cleaned text to the strict `json` decoder. String
literals are never rewritten.
"""
from __future__ import annotations
import json
import re
from typing import Any, List

_STRING_LITERAL = r'"(?:\\.|[^"\\])*"'
_COMMENT_OR_STRING = re.compile(r'(' + _STRING_LITERAL + r')|/\*[\s\S]*?\*/|//[^\n]*')
_SPLIT_STRINGS = re.compile(r'(' + _STRING_LITERAL + r')')
_UNQUOTED_KEY = re.compile(r'([{,]\s*)([A-Za-z_$][A-Za-z0-9_$]*)\s*:')
_TRAILING_COMMA = re.compile(r',\s*([\]}])')

def strip_comments(text: str) -> str:
    return _COMMENT_OR_STRING.sub(lambda m: m.group(1) or "", text)

def _rewrite_code(segment: str) -> str:
    segment = _UNQUOTED_KEY.sub(r'\1"\2":', segment)
    return _TRAILING_COMMA.sub(r'\1', segment)

def clean(text: str) -> str:
    # odd indices of the split are string literals
    parts: List[str] = _SPLIT_STRINGS.split(strip_comments(text))
    return "".join(p if i % 2 else _rewrite_code(p) for i, p in enumerate(parts))

def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name}")

def lenient_loads(text: str) -> Any:
    """Raises ValueError (json.JSONDecodeError for syntax) when nothing parseable remains."""
    return json.loads(clean(text), parse_constant=_reject_constant)
