#!/usr/bin/env python3
"""Restrict environment variable reads to the style config module."""

from __future__ import annotations

import argparse
import ast
from pathlib import Path


ALLOWED_FILES = frozenset({"keystyle/runtime/config.py"})


def _is_os_environ(node: ast.expr) -> bool:
    return (
        isinstance(node, ast.Attribute)
        and node.attr == "environ"
        and isinstance(node.value, ast.Name)
        and node.value.id == "os"
    )


def _is_env_read(node: ast.AST) -> bool:
    # os.getenv(...) / os.environ.get(...)
    if isinstance(node, ast.Call) and isinstance(node.func, ast.Attribute):
        fn = node.func
        if fn.attr == "getenv" and isinstance(fn.value, ast.Name) and fn.value.id == "os":
            return True
        if fn.attr == "get" and _is_os_environ(fn.value):
            return True
    # os.environ[...]
    if isinstance(node, ast.Subscript) and _is_os_environ(node.value):
        return True
    return False


def find_env_reads(root: Path, *, allowed: frozenset[str] = ALLOWED_FILES) -> list[str]:
    """Return `path:line` entries for env reads outside the allowed modules."""
    violations: list[str] = []
    for path in sorted(root.rglob("*.py")):
        rel = path.as_posix()
        if rel in allowed or "__pycache__" in path.parts:
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for node in ast.walk(tree):
            if _is_env_read(node):
                violations.append(f"{rel}:{getattr(node, 'lineno', 0)}")
    return violations


def main() -> int:
    parser = argparse.ArgumentParser(description="Check env read placement.")
    parser.add_argument("--root", default="keystyle")
    args = parser.parse_args()

    violations = find_env_reads(Path(args.root))
    if violations:
        print("Env reads outside keystyle/runtime/config.py:")
        for line in violations:
            print(f"  {line}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
