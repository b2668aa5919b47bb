"""Shared test fixtures for shell_fields tests."""

from __future__ import annotations

import pytest

SAMPLE_BOOTCONFIG = (
    'kernel.CabCmdBranches = "test\\x20me", "here", "ok"\n'
    'kernel.CabCmdDryRun = "1"\n'
    'kernel.CabIP = "10.10.1.234"\n'
)


@pytest.fixture
def bootconfig_text() -> str:
    return SAMPLE_BOOTCONFIG


@pytest.fixture
def bootconfig_file(tmp_path, bootconfig_text):
    path = tmp_path / "bootconfig"
    path.write_text(bootconfig_text, encoding="utf-8")
    return path
