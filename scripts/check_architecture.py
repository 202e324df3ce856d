"""Architecture boundary checker (no external deps).

Rules:
- core/ is pure: no PyQt5, no app/infra/services/ui/screens
- services/ must not import PyQt5, ui, screens
- infra/ must not import PyQt5 or any higher layer

Usage:
  python scripts/check_architecture.py
"""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

RULES = {
    'core': {'PyQt5', 'app', 'infra', 'services', 'ui', 'screens'},
    'services': {'PyQt5', 'ui', 'screens'},
    'infra': {'PyQt5', 'core', 'services', 'ui', 'screens'},
}


def iter_layer_files(layer: str) -> list[Path]:
    return sorted(p for p in (ROOT / layer).rglob('*.py') if '__pycache__' not in p.parts)


def top_import_names(tree: ast.AST) -> list[tuple[str, int]]:
    names: list[tuple[str, int]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.extend((alias.name.split('.')[0], node.lineno) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and not node.level:
            names.append((node.module.split('.')[0], node.lineno))
    return names


def find_violations() -> list[str]:
    violations: list[str] = []
    for layer, forbidden in RULES.items():
        for fpath in iter_layer_files(layer):
            tree = ast.parse(fpath.read_text(encoding='utf-8'), filename=str(fpath))
            for name, lineno in top_import_names(tree):
                if name in forbidden:
                    violations.append(f"{layer}: {fpath.relative_to(ROOT)}:{lineno} imports '{name}'")
    return violations


def main() -> int:
    violations = find_violations()
    if violations:
        print('Architecture boundary violations found:')
        for v in violations:
            print('  -', v)
        return 2

    print('OK: no architecture boundary violations found.')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
