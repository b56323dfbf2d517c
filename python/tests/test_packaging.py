"""Project metadata points at files that ship with the source tree."""

from __future__ import annotations

import tomllib
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


def test_readme_is_a_real_readme() -> None:
    with open(PROJECT_ROOT / "pyproject.toml", "rb") as f:
        project = tomllib.load(f)["project"]

    readme = PROJECT_ROOT / project["readme"]
    assert readme.name == "README.md"
    assert readme.read_text().startswith("# N-Puzzle")
