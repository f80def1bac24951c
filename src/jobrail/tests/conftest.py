"""Shared fixtures: fresh settings and silent logging for every test."""

import pytest

from jobrail.config import clear_settings_cache
from jobrail.observability import configure_logging


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> object:
    """Drop JOBRAIL_* variables, reset cached settings, silence logs."""
    import os
    for key in [k for k in os.environ if k.startswith("JOBRAIL_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    configure_logging("none")
    yield
    clear_settings_cache()
    configure_logging("none")
