from __future__ import annotations

import ast
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]


def _line_count(path: Path) -> int:
    return len(path.read_text(encoding="utf-8", errors="ignore").splitlines())


def _python_files(root: Path):
    for path in root.rglob("*.py"):
        # Keep architecture checks focused on source/test code, not packaged artifacts.
        if "dist" in path.parts or "build" in path.parts:
            continue
        yield path


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom):
            yield node.module or ""


def _is_under(name: str, package: str) -> bool:
    return name == package or name.startswith(package + ".")


def test_no_python_module_exceeds_hard_line_limit():
    offenders = []
    for path in _python_files(ROOT):
        lines = _line_count(path)
        if lines > 1200:
            offenders.append((str(path.relative_to(ROOT)), lines))
    assert not offenders, f"Modules exceed hard 1200-line limit: {offenders}"


def test_core_layer_does_not_import_infra_layer():
    violations: list[tuple[str, str]] = []
    for path in _python_files(ROOT / "core"):
        for name in _imported_modules(path):
            if _is_under(name, "infra"):
                violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Core layer imports infra layer: {violations}"


def test_scheduling_engine_is_storage_free():
    violations: list[tuple[str, str]] = []
    roots = [ROOT / "core" / "services" / "scheduling", ROOT / "core" / "domain"]
    for root in roots:
        for path in _python_files(root):
            for name in _imported_modules(path):
                if _is_under(name, "sqlalchemy") or _is_under(name, "alembic"):
                    violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Pure computation modules import storage libraries: {violations}"


def test_infra_repositories_module_is_facade_only():
    repo_path = ROOT / "infra" / "db" / "repositories.py"
    text = repo_path.read_text(encoding="utf-8", errors="ignore")

    assert "from infra.db.task import" in text
    assert "from infra.db.critical_path import" in text
    assert "class SqlAlchemy" not in text


def test_known_modules_have_growth_budgets():
    budgets = {
        "core/services/critical_path/service.py": 260,
        "core/services/scheduling/passes.py": 200,
        "core/services/scheduling/graph.py": 140,
        "core/services/scheduling/results.py": 160,
        "infra/db/repositories.py": 40,
        "infra/db/models.py": 140,
    }

    breaches = []
    for rel_path, max_lines in budgets.items():
        path = ROOT / rel_path
        lines = _line_count(path)
        if lines > max_lines:
            breaches.append((rel_path, lines, max_lines))

    assert not breaches, f"Module budgets exceeded: {breaches}"


def test_single_utc_clock_helper():
    definitions = []
    for root in (ROOT / "core", ROOT / "infra"):
        for path in _python_files(root):
            tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
            for node in tree.body:
                if isinstance(node, ast.FunctionDef) and node.name == "utc_now":
                    definitions.append(str(path.relative_to(ROOT)))

    assert definitions == [str(Path("core") / "services" / "common" / "time.py")]
