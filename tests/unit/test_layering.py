"""Architecture guard: lower layers never import the layers built on top of them."""

from __future__ import annotations

import ast
from pathlib import Path

import space_trips

PACKAGE_ROOT = Path(space_trips.__file__).resolve().parent

# source layer -> layers it must not import
FORBIDDEN = {
    "domain": {"adapters", "persistence", "application", "api", "infrastructure", "cli"},
    "shared": {"adapters", "persistence", "application", "api", "cli"},
    "adapters": {"application", "api", "cli"},
    "persistence": {"application", "api", "cli"},
    "application": {"api", "cli"},
}


def _layer(module: str) -> str | None:
    parts = module.split(".")
    if parts[0] != "space_trips" or len(parts) < 2:
        return None
    return parts[1]


def _imported_modules(tree: ast.AST) -> list[tuple[str, int]]:
    found: list[tuple[str, int]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.extend((alias.name, node.lineno) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            found.append((node.module, node.lineno))
    return found


def _violations() -> list[str]:
    violations: list[str] = []
    for path in sorted(PACKAGE_ROOT.rglob("*.py")):
        source_layer = path.relative_to(PACKAGE_ROOT).parts[0].removesuffix(".py")
        banned = FORBIDDEN.get(source_layer)
        if not banned:
            continue
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        for module, lineno in _imported_modules(tree):
            if _layer(module) in banned:
                violations.append(f"{path.name}:{lineno} {source_layer} -> {module}")
    return violations


def test_layer_boundaries_hold():
    violations = _violations()
    assert violations == [], "Import boundary violations:\n" + "\n".join(violations)


def test_no_relative_imports():
    offenders = []
    for path in PACKAGE_ROOT.rglob("*.py"):
        tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        if any(isinstance(node, ast.ImportFrom) and node.level > 0 for node in ast.walk(tree)):
            offenders.append(path.name)
    assert offenders == []
