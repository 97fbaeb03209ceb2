"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file override at a temporary location."""

    target = tmp_path / "config" / "config.toml"
    monkeypatch.setenv("X500DN_CONFIG_FILE", str(target))
    return target


@pytest.fixture
def config_runtime_env(config_file: Path) -> Iterator[Path]:
    """Reset the configuration singleton around a test run."""

    from x500dn.config.config import Config

    original_instance = Config._instance  # pyright: ignore[reportPrivateUsage]
    Config._instance = None  # pyright: ignore[reportPrivateUsage]

    try:
        yield config_file
    finally:
        Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
