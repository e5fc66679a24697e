"""Checks on the installable distribution layout."""

from __future__ import annotations

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_only_the_client_is_installed_as_a_top_level_module() -> None:
    config = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))

    assert config["tool"]["setuptools"]["py-modules"] == ["crud_demo_client"]
