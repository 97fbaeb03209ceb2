"""Smoke tests for unified entry points.

These tests assert that `python -m x500dn` and the console script
both resolve to the CLI's `main` function exposed under `x500dn.ui.cli`.
"""

from importlib import import_module


def test_module_entry_point_exposes_main() -> None:
    """`python -m x500dn` path exposes a `main` callable."""
    m = import_module("x500dn.__main__")
    assert hasattr(m, "main")


def test_console_script_target_exposes_main() -> None:
    """Console script points to `x500dn.ui.cli:main` and is importable."""
    m = import_module("x500dn.ui.cli")
    assert hasattr(m, "main")


def test_package_exports_core_api() -> None:
    """The top-level package re-exports the parsing surface."""
    import x500dn

    assert x500dn.DistinguishedName("CN=a").common_name() == "a"
    assert x500dn.split("a;b") == ["a", "b"]
