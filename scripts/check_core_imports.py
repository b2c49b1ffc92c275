#!/usr/bin/env python3
"""
Keep appstore_connect_mcp.core transport-agnostic.

Walks every module under src/appstore_connect_mcp/core/ (tool groups
included) and reports imports of the MCP server framework or of the
package's own transport/server layers. Exit status 1 lists each offence as
path:line.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import Iterable, List

REPO_ROOT = Path(__file__).resolve().parent.parent
CORE_DIR = REPO_ROOT / "src" / "appstore_connect_mcp" / "core"

FORBIDDEN_PREFIXES = (
    "mcp.server",
    "fastmcp",
    "appstore_connect_mcp.transports",
    "appstore_connect_mcp.server",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def _imported_modules(tree: ast.AST) -> Iterable[tuple[int, str]]:
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield node.lineno, alias.name
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            yield node.lineno, node.module


def scan_file(path: Path) -> List[str]:
    tree = ast.parse(path.read_text(), filename=str(path))
    return [
        f"{path}:{lineno}: forbidden import '{module}'"
        for lineno, module in _imported_modules(tree)
        if is_forbidden(module)
    ]


def main(core_dir: Path = CORE_DIR) -> int:
    violations: List[str] = []
    for py_file in sorted(core_dir.rglob("*.py")):
        violations.extend(scan_file(py_file))

    for v in violations:
        print(v, file=sys.stderr)
    return 1 if violations else 0


if __name__ == "__main__":
    sys.exit(main())
