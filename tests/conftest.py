"""Session-wide pytest configuration."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Point the config file at a scratch location before any import loads it."""

    _ = config
    scratch = Path(tempfile.mkdtemp(prefix="x500dn-tests-"))
    _ = os.environ.setdefault("X500DN_CONFIG_FILE", str(scratch / "config.toml"))
