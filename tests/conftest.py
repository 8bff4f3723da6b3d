import pytest

from pipeline_filter.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Each test starts from default settings."""
    monkeypatch.delenv("PIPELINE_FILTER_JSON_INDENT", raising=False)
    monkeypatch.delenv("PIPELINE_FILTER_VALIDATE_OUTPUT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
