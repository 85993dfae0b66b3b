# emitters.py
# -*- coding: utf-8 -*-
from __future__ import annotations
import json
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from field_types import FieldType
from generators import mongoose, prisma, typescript, zod
from inference import infer_from_json_string

class Target(str, Enum):
    TYPESCRIPT = "typescript"
    ZOD = "zod"
    PRISMA = "prisma"
    MONGOOSE = "mongoose"
    TREE = "tree"

class UnknownTargetError(KeyError):
    pass

def render_tree(root: FieldType, root_name: Optional[str] = None) -> str:
    node = root.renamed(root_name) if root_name else root
    return json.dumps(node.to_dict(), ensure_ascii=False, indent=2)

_GENERATORS: Dict[str, Callable[..., str]] = {
    Target.TYPESCRIPT.value: typescript.generate,
    Target.ZOD.value: zod.generate,
    Target.PRISMA.value: prisma.generate,
    Target.MONGOOSE.value: mongoose.generate,
    Target.TREE.value: render_tree,
}

DEFAULT_ROOT_NAMES: Dict[str, str] = {
    Target.TYPESCRIPT.value: typescript.DEFAULT_ROOT_NAME,
    Target.ZOD.value: zod.DEFAULT_ROOT_NAME,
    Target.PRISMA.value: prisma.DEFAULT_ROOT_NAME,
    Target.MONGOOSE.value: mongoose.DEFAULT_ROOT_NAME,
}

def comment_out(target: str, message: str) -> str:
    """Error text shaped so it does not break highlighting of the target notation."""
    if target == Target.TREE.value:
        return json.dumps({"error": message}, ensure_ascii=False)
    lines = f"Error: {message}".splitlines()
    return "\n".join(f"// {line}" if line else "//" for line in lines)

class SchemaToolset:
    def __init__(self, gen_config: Optional[Dict[str, Any]] = None, logger=None):
        gen_config = gen_config or {}
        self.available: List[str] = gen_config.get("available") or [t.value for t in Target]
        self.root_names: Dict[str, str] = dict(DEFAULT_ROOT_NAMES)
        self.root_names.update(gen_config.get("root_names") or {})
        self.use_interfaces: bool = bool(gen_config.get("use_interfaces", True))
        self.logger = logger

    def _log(self, name: str, detail: str):
        if self.logger:
            self.logger.log(f"GEN-{name.upper()}", detail)

    def resolve(self, target: Any) -> str:
        name = target.value if isinstance(target, Target) else str(target).lower()
        if name not in _GENERATORS or name not in self.available:
            raise UnknownTargetError(
                f"Target `{name}` is not available (choose from: {', '.join(self.available)})."
            )
        return name

    # dispatch
    def call(self, target: Any, root: FieldType, root_name: Optional[str] = None) -> str:
        name = self.resolve(target)
        root_name = root_name or self.root_names.get(name)
        self._log(name, f"root={root_name} fields={len(root.children or ())}")
        if name == Target.TYPESCRIPT.value:
            out = typescript.generate(root, root_name, use_interfaces=self.use_interfaces)
        else:
            out = _GENERATORS[name](root, root_name)
        self._log(name, f"output len={len(out)}")
        return out

    def generate_from_text(self, text: str, target: Any, root_name: Optional[str] = None) -> str:
        """Parse, infer and render; InferenceParseError propagates to the caller."""
        root = infer_from_json_string(text)
        return self.call(target, root, root_name)
