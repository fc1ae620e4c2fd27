"""
Pytest configuration and shared fixtures for the bridge tests.
"""

import pytest

from twigbridge.support import Config, EnvHelper, Storage


class FakeFilesystem:
    """
    Filesystem collaborator backed by a set of paths.

    Records every exists() call; set fail=True to make further calls raise.
    """

    def __init__(self, *existing: str):
        self.existing = set(existing)
        self.checked = []
        self.fail = False

    def add(self, *paths: str):
        self.existing.update(paths)

    def exists(self, path: str) -> bool:
        if self.fail:
            raise AssertionError(f"filesystem touched for {path}")
        self.checked.append(path)
        return path in self.existing


class FakeApplication:
    """Minimal host application container."""

    def __init__(self):
        self.bindings = {}

    def singleton(self, key, instance):
        self.bindings[key] = instance

    def make(self, key):
        return self.bindings[key]


@pytest.fixture
def filesystem():
    return FakeFilesystem()


@pytest.fixture
def app():
    return FakeApplication()


@pytest.fixture(autouse=True)
def reset_support_state():
    """Config overrides and base paths are class-level; reset them between tests."""
    yield
    Config.clear_runtime_overrides()
    Config.reload()
    Storage.initialize()
    EnvHelper.initialize()


@pytest.fixture
def write_view(tmp_path):
    """Create a template file under tmp_path and return its path."""
    def _write(relative: str, content: str = ''):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return path
    return _write
