"""
Pytest configuration and shared fixtures for mux_builder tests.
"""
import os
import sys
from pathlib import Path

import pytest

# Add repository root to Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

from mux_builder import config  # noqa: E402
from mux_builder.language import LanguageConfig  # noqa: E402

from tests.fixtures.mux_factories import create_iso_table  # noqa: E402


@pytest.fixture
def iso_table():
    """A small synthetic ISO-639 table."""
    return create_iso_table()


@pytest.fixture
def languages(iso_table):
    """LanguageConfig backed by the synthetic table and default display names."""
    return LanguageConfig(iso_table=iso_table)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch, tmp_path):
    """Isolate settings: no cached value, no MUX_* env, config dir in tmp."""
    for key in list(os.environ):
        if key.startswith("MUX_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "CONFIG_DIR", tmp_path / "config")
    monkeypatch.setattr(config, "CONFIG_FILE", tmp_path / "config" / "settings.json")
    monkeypatch.chdir(tmp_path)
    config.clear_settings_cache()
    yield
    config.clear_settings_cache()
