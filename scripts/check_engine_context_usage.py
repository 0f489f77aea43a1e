import argparse
import re
from pathlib import Path

ENGINE_MODULE = "src/bignumber_utils/engine.py"
IGNORE_DIRS = {"tests", ".venv", "venv", "docs", "build", "dist", "__pycache__"}
ALLOW_MARKER = "# engine-context-allow"

# Anything that reads, mutates or rounds through a decimal context.
CONTEXT_ACCESS = re.compile(r"\b(getcontext|setcontext|localcontext|DefaultContext|BasicContext)\b|\.quantize\(")
# Operators that silently round to the caller's 28-digit default context.
DEFAULT_CONTEXT_OPERATORS = re.compile(r"(?:[=(,\[]|\breturn)\s*-\s*[A-Za-z_]|\babs\(")


def is_candidate(path: Path) -> bool:
    if any(part in IGNORE_DIRS for part in path.parts):
        return False
    return path.suffix == ".py" and path.as_posix() != ENGINE_MODULE


def scan_repo(repo_root: Path) -> list[str]:
    findings: list[str] = []
    for file_path in (repo_root / "src").rglob("*.py"):
        rel_path = file_path.relative_to(repo_root)
        if not is_candidate(rel_path):
            continue
        for line_no, line in enumerate(file_path.read_text(encoding="utf-8").splitlines(), start=1):
            code = line.split("#", 1)[0]
            if ALLOW_MARKER in line:
                continue
            if CONTEXT_ACCESS.search(code) or DEFAULT_CONTEXT_OPERATORS.search(code):
                findings.append(f"{rel_path.as_posix()}:{line_no}:{line.strip()}")
    return sorted(set(findings))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Guard against decimal arithmetic that bypasses the engine context"
    )
    parser.add_argument("--repo-root", default=".")
    args = parser.parse_args(argv)

    findings = scan_repo(Path(args.repo_root).resolve())
    if findings:
        print("Decimal context usage outside the engine module detected:")
        for item in findings:
            print(f" - {item}")
        print(f"\nRoute the arithmetic through {ENGINE_MODULE} or mark the line with '{ALLOW_MARKER}'.")
        return 1

    print("Engine context guard passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
