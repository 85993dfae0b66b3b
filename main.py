# main.py
# -*- coding: utf-8 -*-
"""
Infer a structural type from a JSON sample and print it as a schema.

Usage:
  python main.py path/to/sample.json [--target typescript|zod|prisma|mongoose|tree]
                 [--root-name Name] [--type-alias] [--ndjson] [--sample N]
                 [--config config.yaml] [--out schema.ts]

`-` as the path reads stdin. With --ndjson every line is a separate document
and keys missing from some lines are marked optional.
"""
from __future__ import annotations
import argparse
import copy
import os
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

import yaml

from emitters import SchemaToolset, Target, UnknownTargetError, comment_out
from inference import InferenceParseError, infer_from_json_lines, infer_from_json_string
from sources import load_ndjson_lines, read_text

DEFAULT_CONFIG: Dict[str, Any] = {
    "logging": {
        "enabled": False,
        "timestamp": True,
        "time_format": "%H:%M:%S",
        "prefix": "[SchemaGen]",
        "show_tree": False,
    },
    "generators": {
        "available": [t.value for t in Target],
        "default_target": Target.TYPESCRIPT.value,
        "root_names": {},
        "use_interfaces": True,
    },
    "input": {
        "encoding": "utf-8",
        "max_chars": 0,
    },
}

# -------- print-based logger --------
class PLogger:
    def __init__(self, log_cfg: Dict[str, Any], stream=None):
        self.enabled = bool(log_cfg.get("enabled", True))
        self.show_tree = bool(log_cfg.get("show_tree", False))
        self.timestamp = bool(log_cfg.get("timestamp", True))
        self.time_format = log_cfg.get("time_format", "%H:%M:%S")
        self.prefix = log_cfg.get("prefix", "[SchemaGen]")
        self.stream = stream

    def _ts(self) -> str:
        if not self.timestamp:
            return ""
        return datetime.now().strftime(self.time_format)

    def log(self, section: str, msg: str):
        if not self.enabled:
            return
        stream = self.stream or sys.stderr
        ts = self._ts()
        if ts:
            print(f"{self.prefix} {ts} [{section}] {msg}", file=stream)
        else:
            print(f"{self.prefix} [{section}] {msg}", file=stream)

def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for k, v in (override or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out

def load_config(path: Optional[str] = "config.yaml") -> Dict[str, Any]:
    if not path or not os.path.exists(path):
        return copy.deepcopy(DEFAULT_CONFIG)
    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(loaded).__name__}.")
    return _deep_merge(DEFAULT_CONFIG, loaded)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate schema code from a JSON sample.")
    p.add_argument("path", help="Path to a JSON file, or - for stdin.")
    p.add_argument("--target", "-t", default=None,
                   help="typescript, zod, prisma, mongoose or tree (default from config).")
    p.add_argument("--root-name", default=None, help="Name of the generated root declaration.")
    p.add_argument("--type-alias", action="store_true",
                   help="TypeScript: emit `type X = {...}` instead of interfaces.")
    p.add_argument("--ndjson", action="store_true",
                   help="Treat input as NDJSON and merge the documents.")
    p.add_argument("--sample", type=int, default=0, help="With --ndjson, sample up to N lines.")
    p.add_argument("--config", default="config.yaml", help="YAML config path.")
    p.add_argument("--out", default=None, help="Write the schema to this file instead of stdout.")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable logging to stderr.")
    args = p.parse_args(argv)
    if args.sample and not args.ndjson:
        p.error("--sample requires --ndjson")
    return args

def run(cfg: Dict[str, Any], text: str, *, target: str, root_name: Optional[str] = None,
        ndjson: bool = False, sample_n: int = 0, logger: Optional[PLogger] = None) -> str:
    """Infer and render one request. InferenceParseError propagates."""
    toolset = SchemaToolset(cfg.get("generators", {}), logger=logger)
    target = toolset.resolve(target)
    if ndjson:
        lines = load_ndjson_lines(text, sample_n)
        if logger:
            logger.log("INPUT", f"NDJSON lines={len(lines)}")
        root = infer_from_json_lines(lines)
    else:
        if logger:
            logger.log("INPUT", f"JSON chars={len(text)}")
        root = infer_from_json_string(text)
    if logger:
        logger.log("INFER", f"root type={root.type} fields={len(root.children or ())}")
        if logger.show_tree:
            logger.log("TREE", str(root.to_dict()))
    return toolset.call(target, root, root_name)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    cfg = load_config(args.config)
    if args.type_alias:
        cfg["generators"]["use_interfaces"] = False
    if args.verbose:
        cfg["logging"]["enabled"] = True
    logger = PLogger(cfg.get("logging", {}))
    target = args.target or cfg["generators"].get("default_target", Target.TYPESCRIPT.value)

    if args.path != "-" and not os.path.exists(args.path):
        print(f"File not found: {args.path}", file=sys.stderr)
        return 2
    text = read_text(args.path,
                     encoding=cfg["input"].get("encoding", "utf-8"),
                     max_chars=int(cfg["input"].get("max_chars", 0) or 0))
    if not text.strip():
        print("// Please enter JSON input")
        return 1

    try:
        out = run(cfg, text, target=target, root_name=args.root_name,
                  ndjson=args.ndjson, sample_n=args.sample, logger=logger)
    except UnknownTargetError as e:
        print(e.args[0], file=sys.stderr)
        return 2
    except InferenceParseError as e:
        logger.log("ERROR", str(e))
        print(comment_out(str(target).lower(), str(e)))
        return 1

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(out + "\n")
        logger.log("RESULT", f"Wrote {args.out}")
    else:
        print(out)
    return 0

if __name__ == "__main__":
    sys.exit(main())
