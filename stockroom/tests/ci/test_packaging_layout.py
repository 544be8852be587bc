from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PROJECT_ROOT = Path(__file__).resolve().parents[3]
PACKAGE_ROOT = PROJECT_ROOT / "stockroom"


def _find_config() -> dict:
    data = tomllib.loads((PROJECT_ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    return data["tool"]["setuptools"]["packages"]["find"]


def test_tests_are_excluded_from_distribution() -> None:
    find = _find_config()

    assert "stockroom*" in find["include"]
    assert "stockroom.tests*" in find.get("exclude", [])


def test_ports_do_not_reexport_errors() -> None:
    text = (PACKAGE_ROOT / "domain" / "ports.py").read_text(encoding="utf-8")

    assert "UseCaseError" not in text
