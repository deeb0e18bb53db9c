"""Shared fixtures for the tagging tests."""
import os

# pywikibot refuses to import without a user-config.py otherwise
os.environ.setdefault('PYWIKIBOT_NO_USER_CONFIG', '2')

from unittest import mock  # noqa: E402

import pytest  # noqa: E402

from tag_config import TagConfig  # noqa: E402
from tag_engine import TagEngine  # noqa: E402


@pytest.fixture(autouse=True)
def bot_output():
    """Silence pywikibot output and record it."""
    with mock.patch('pywikibot.info') as info, \
            mock.patch('pywikibot.warning') as warning, \
            mock.patch('pywikibot.error') as error:
        yield mock.Mock(info=info, warning=warning, error=error)


@pytest.fixture
def config():
    return TagConfig(timestamp='October 2026')


@pytest.fixture
def engine(config):
    return TagEngine(config)
