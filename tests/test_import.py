"""Verify package imports work correctly."""

import pytest


def test_version_matches_pyproject() -> None:
    tomllib = pytest.importorskip("tomllib")
    from pathlib import Path

    import mathdocx

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert mathdocx.__version__ == expected


def test_public_api() -> None:
    import mathdocx

    for name in mathdocx.__all__:
        assert hasattr(mathdocx, name), name
