"""Smoke tests for unified entry points.

These tests assert that `python -m flacscan` and the console script
both resolve to the CLI's `main` function exposed under `flacscan.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m flacscan` path exposes a `main` callable."""
    m = import_module("flacscan.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `flacscan.ui.cli:main` and is importable."""
    m = import_module("flacscan.ui.cli")
    assert hasattr(m, "main")
