import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from smart_trim.app_factory import create_trimmer  # noqa: E402
from smart_trim.infrastructure.external import (  # noqa: E402
    BeautifulSoupCorrector,
    BeautifulSoupLinkRenderer,
)
from smart_trim.settings import Settings, reload_settings  # noqa: E402


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def corrector():
    return BeautifulSoupCorrector()


@pytest.fixture
def link_renderer():
    return BeautifulSoupLinkRenderer()


@pytest.fixture
def trimmer(settings):
    return create_trimmer(settings)


@pytest.fixture(autouse=True)
def _fresh_settings():
    reload_settings()
    yield
    reload_settings()


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "tests/functional/" in str(item.fspath):
            item.add_marker(pytest.mark.functional)
