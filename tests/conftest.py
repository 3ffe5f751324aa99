"""Shared fixtures"""

import pytest

from otel_log_format.core.formatter_config import RESOURCE_ATTRIBUTES_ENV, SERVICE_NAME_ENV


@pytest.fixture(autouse=True)
def clean_resource_env(monkeypatch):
    """Keep host resource settings out of the tests."""
    monkeypatch.delenv(SERVICE_NAME_ENV, raising=False)
    monkeypatch.delenv(RESOURCE_ATTRIBUTES_ENV, raising=False)
