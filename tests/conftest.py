import pytest

from termcells.config import UNICODE_VERSION_ENV, reset_config_cache


@pytest.fixture(autouse=True)
def default_unicode_version(monkeypatch):
    """Run every test against the default table edition."""
    monkeypatch.delenv(UNICODE_VERSION_ENV, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
