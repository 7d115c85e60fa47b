"""
Shared fixtures.
"""

import pytest

from prototype_index.utils.build_logger import BuildLogger


ENV_VARS = [
    "PROTOTYPE_INDEX_BASE_URL",
    "PROTOTYPE_INDEX_DOCS_URL",
    "PROTOTYPE_INDEX_ABOUT_URL",
    "PROTOTYPE_INDEX_SITE_TITLE",
    "PROTOTYPE_INDEX_VARIANT",
    "PROTOTYPE_INDEX_LOG_LEVEL",
    "PROTOTYPE_INDEX_LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate each test from PROTOTYPE_INDEX_* settings and the logger singleton."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    BuildLogger.reset()
    yield
    BuildLogger.reset()
