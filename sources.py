# sources.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import random
import sys
from typing import List, Optional

def read_text(path: str, encoding: str = "utf-8", max_chars: int = 0) -> str:
    """`-` reads stdin. Undecodable bytes become U+FFFD; missing files raise FileNotFoundError."""
    if path == "-":
        s = sys.stdin.read()
    else:
        with open(path, "r", encoding=encoding, errors="replace") as f:
            s = f.read()
    if max_chars and len(s) > max_chars:
        s = s[:max_chars]
    return s

def split_lines(text: str) -> List[str]:
    return [ln for ln in text.splitlines() if ln.strip()]

def reservoir_sample_lines(lines: List[str], k: int, rng: Optional[random.Random] = None) -> List[str]:
    rng = rng or random.Random()
    sample: List[str] = []
    for i, line in enumerate(lines, 1):
        if i <= k:
            sample.append(line)
        else:
            j = rng.randint(1, i)
            if j <= k:
                sample[j - 1] = line
    return sample

def load_ndjson_lines(text: str, sample_n: int = 0, rng: Optional[random.Random] = None) -> List[str]:
    lines = split_lines(text)
    if sample_n > 0:
        return reservoir_sample_lines(lines, sample_n, rng)
    return lines
