#!/usr/bin/env python3
"""
Fail if core imports resource-level modules.
Checks all Python files under src/wit_client/core/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
CORE_DIR = REPO_ROOT / "src" / "wit_client" / "core"

FORBIDDEN_PREFIXES = (
    "wit_client.api",
    "wit_client.models",
    "wit_client.resources",
)

# Relative imports from core/ that climb out of the package ("from ..x import y").
FORBIDDEN_RELATIVE = ("api", "models", "resources")


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                mod = alias.name
                if is_forbidden(mod):
                    errors.append(f"{path}: forbidden import '{mod}'")
        elif isinstance(node, ast.ImportFrom):
            mod = node.module or ""
            if node.level == 0 and mod and is_forbidden(mod):
                errors.append(f"{path}: forbidden import '{mod}'")
            elif node.level >= 2:
                head = mod.split(".")[0] if mod else ""
                names = [a.name for a in node.names]
                if head in FORBIDDEN_RELATIVE or any(
                    n in FORBIDDEN_RELATIVE for n in names if not head
                ):
                    errors.append(f"{path}: forbidden import '{'.' * node.level}{mod}'")
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in CORE_DIR.rglob("*.py"):
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
