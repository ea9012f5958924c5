"""Smoke tests for unified entry points.

These tests assert that `python -m tunetree` and the console script
both resolve to the CLI's `main` function exposed under `tunetree.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m tunetree` path exposes a `main` callable."""
    m = import_module("tunetree.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `tunetree.ui.cli:main` and is importable."""
    m = import_module("tunetree.ui.cli")
    assert hasattr(m, "main")


def test_package_exports_build_library() -> None:
    m = import_module("tunetree")
    assert callable(m.build_library)
    assert m.__version__ == "0.1.0"
