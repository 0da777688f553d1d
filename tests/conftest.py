"""Shared fixtures."""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from typogly import settings


class ScriptedRandom:
    """Ambient source that replays fixed draws and counts them."""

    def __init__(self, values, fallback=0.0):
        self.values = list(values)
        self.fallback = fallback
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.fallback


@pytest.fixture
def scripted():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture
def app_config(tmp_path, monkeypatch):
    """Point TYPOGLY_CONFIG at a temporary YAML file written by the test."""
    path = tmp_path / "app.yaml"

    def write(text: str):
        path.write_text(text, encoding="utf-8")
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))
        settings.load_app_config.cache_clear()
        return path

    yield write
    settings.load_app_config.cache_clear()
