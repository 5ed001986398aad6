"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from hbsdcontrol.adapters import MemoryAttributeStore


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without system attribute access")


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep ~/.hbsdcontrol lookups away from the real home directory."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def as_root(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(os, "geteuid", lambda: 0)


@pytest.fixture
def store() -> MemoryAttributeStore:
    return MemoryAttributeStore()


@pytest.fixture
def target_file(tmp_path: Path) -> str:
    path = tmp_path / "firefox"
    path.write_bytes(b"\x7fELF")
    return str(path)


class FakeFileFlags:
    """Records immutable flag changes instead of calling chflags(2)."""

    def __init__(self, immutable: set[str] | None = None):
        self.immutable = set(immutable or ())
        self.calls: list[tuple[str, str]] = []

    def is_immutable(self, path: str) -> bool:
        return path in self.immutable

    def set_immutable(self, path: str) -> None:
        self.calls.append(("set", path))
        self.immutable.add(path)

    def clear_immutable(self, path: str) -> None:
        self.calls.append(("clear", path))
        self.immutable.discard(path)


@pytest.fixture
def fake_flags() -> FakeFileFlags:
    return FakeFileFlags()
