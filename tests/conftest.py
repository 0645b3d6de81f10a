"""Shared fixtures."""
from unittest.mock import Mock, patch

import pytest

from shortlinks.cache import ShortlinkCache
from shortlinks.resolver import ShortlinkResolver
from shortlinks.store import InMemoryStore

from .fakes import FakeClient, FakePage, FakeSite


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def cache(store):
    return ShortlinkCache(store)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def site():
    return FakeSite(pages=[FakePage(42, 'https://example.com/hello-world')])


@pytest.fixture
def resolver(cache, fake_client, site):
    return ShortlinkResolver(cache, fake_client, site)


@pytest.fixture
def tinyurl():
    """Patch the HTTP call made by the real client; 200 with a fixed body."""
    response = Mock(status_code=200, text='https://tinyurl.com/abcd123')
    with patch('shortlinks.client.requests.get', return_value=response) as mock_get:
        yield mock_get


@pytest.fixture
def hello_page(db, settings):
    from pages.models import Page
    settings.BASE_URL = 'https://example.com'
    return Page.objects.create(id=42, title='Hello World', slug='hello-world', status='published')
