#!/usr/bin/env python3
"""
Проверка качества проекта http-dump.

Запускает по очереди:
- black (форматирование)
- ruff (линтинг)
- mypy (типы) - пропускается с --fast
- pytest с coverage - пропускается с --skip-tests

Usage:
    python scripts/check.py
    python scripts/check.py --fast
    python scripts/check.py --fix
"""

import sys
import subprocess
import argparse
from pathlib import Path
from typing import List, Tuple


class Colors:
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    BOLD = '\033[1m'
    END = '\033[0m'


def run_command(command: List[str], description: str) -> bool:
    """
    Запустить инструмент и напечатать результат.

    Отсутствующий инструмент не считается ошибкой.
    """
    print(f"\n{Colors.BOLD}{Colors.BLUE}▶ {description}{Colors.END}")

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            encoding='utf-8',
            errors='ignore'
        )
    except FileNotFoundError:
        print(f"{Colors.YELLOW}⚠ Command not found: {command[0]} - SKIPPED{Colors.END}")
        return True

    if result.returncode == 0:
        print(f"{Colors.GREEN}✓ {description} - OK{Colors.END}")
        return True

    print(f"{Colors.RED}✗ {description} - FAILED{Colors.END}")
    print((result.stdout + result.stderr)[-2000:])
    return False


def build_checks(args: argparse.Namespace, src_dir: Path, tests_dir: Path) -> List[Tuple[str, List[str]]]:
    """Список (имя, команда) с учетом флагов."""
    paths = [str(src_dir), str(tests_dir)]

    checks = [
        ("Black", ["black", *paths] if args.fix else ["black", "--check", *paths]),
        ("Ruff", ["ruff", "check", *paths] + (["--fix"] if args.fix else [])),
    ]
    if not args.fast:
        checks.append(("Mypy", ["mypy", str(src_dir), "--ignore-missing-imports"]))
    if not args.skip_tests:
        checks.append(("Pytest", ["pytest", "--cov=http_dump", "--cov-report=term-missing"]))
    return checks


def main() -> int:
    parser = argparse.ArgumentParser(description="Проверка качества кода")
    parser.add_argument("--fast", action="store_true", help="Без mypy")
    parser.add_argument("--fix", action="store_true", help="Автоматические исправления")
    parser.add_argument("--skip-tests", action="store_true", help="Только линтеры")
    args = parser.parse_args()

    root_dir = Path(__file__).parent.parent
    checks = build_checks(args, root_dir / "src", root_dir / "tests")

    results = [(name, run_command(command, name)) for name, command in checks]

    print(f"\n{Colors.BOLD}{'=' * 60}\n  ИТОГ\n{'=' * 60}{Colors.END}")
    for name, success in results:
        color = Colors.GREEN if success else Colors.RED
        status = "✓ PASSED" if success else "✗ FAILED"
        print(f"{color}{status:12}{Colors.END} {name}")

    return 0 if all(success for _, success in results) else 1


if __name__ == "__main__":
    sys.exit(main())
