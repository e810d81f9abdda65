"""Pytest fixtures for cargo-kubos tests."""

from pathlib import Path

import pytest


@pytest.fixture
def cargo_home(tmp_path: Path) -> Path:
    """Empty CARGO_HOME directory."""
    home = tmp_path / "cargo"
    home.mkdir()
    return home


@pytest.fixture
def arm_linker_config(cargo_home: Path) -> Path:
    """CARGO_HOME whose config sets a linker for arm-unknown-linux-gnueabihf. Returns cargo_home."""
    (cargo_home / "config").write_text(
        "[target.arm-unknown-linux-gnueabihf]\n"
        'linker = "/usr/bin/bbb_toolchain/usr/bin/arm-linux-gcc"\n'
    )
    return cargo_home
