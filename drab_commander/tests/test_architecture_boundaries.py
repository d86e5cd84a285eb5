"""Architecture boundary guardrails for the inner ``base`` layer.

``drab_commander/base`` must not import the built-in capability package at
module level; the default registry pulls it in lazily. Built-in capabilities
in turn may only depend on ``base``. The scan is static so it runs without
import-time side effects.
"""

from __future__ import annotations

import re
from pathlib import Path

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
BASE_DIR = PACKAGE_ROOT / "base"

# Module-level (unindented) ``from X import ...`` statements only.
_FROM_IMPORT = re.compile(r"^from\s+(\.*)([\w.]*)\s+import\b", re.MULTILINE)


def _iter_py_files(root: Path) -> list[Path]:
    return [p for p in root.rglob("*.py") if "__pycache__" not in p.parts]


def _package_of(path: Path) -> list[str]:
    parts = ["drab_commander", *path.relative_to(PACKAGE_ROOT).with_suffix("").parts]
    # Both a package's __init__ and a plain module resolve relative to their directory.
    return parts[:-1]


def _module_imports(path: Path) -> set[str]:
    """Return absolute module names imported at module level by ``path``."""
    package = _package_of(path)
    found = set()
    for dots, name in _FROM_IMPORT.findall(path.read_text(encoding="utf-8")):
        if not dots:
            found.add(name)
            continue
        anchor = package[: len(package) - (len(dots) - 1)]
        found.add(".".join([*anchor, name] if name else anchor))
    return found


def test_base_has_no_top_level_builtin_imports() -> None:
    offenders = {
        str(path.relative_to(PACKAGE_ROOT)): sorted(
            m for m in _module_imports(path) if m.startswith("drab_commander.capabilities")
        )
        for path in _iter_py_files(BASE_DIR)
    }
    offenders = {k: v for k, v in offenders.items() if v}
    assert offenders == {}, f"base imports built-in capabilities at module level: {offenders}"


def test_builtins_only_depend_on_base() -> None:
    for path in _iter_py_files(PACKAGE_ROOT / "capabilities"):
        internal = {m for m in _module_imports(path) if m.startswith("drab_commander")}
        outside = {
            m
            for m in internal
            if not m.startswith(("drab_commander.base", "drab_commander.capabilities"))
        }
        assert outside == set(), f"{path.name} reaches outside base: {outside}"
