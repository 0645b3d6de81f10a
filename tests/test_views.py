from unittest.mock import Mock, patch

import pytest
from django.contrib.auth.models import User

from pages.models import Page

pytestmark = pytest.mark.django_db

SHORTLINK = 'https://tinyurl.com/abcd123'
TWITTER = 'https://twitter.com/intent/tweet?text=Hello%20World%20-%20https%3A%2F%2Ftinyurl.com%2Fabcd123'
FACEBOOK = 'https://www.facebook.com/sharer.php?u=https%3A%2F%2Ftinyurl.com%2Fabcd123'


@pytest.fixture
def staff_client(client):
    client.force_login(User.objects.create_user('editor', is_staff=True))
    return client


class TestPageToolbar:

    def test_anonymous_visitor_sees_no_toolbar(self, client, hello_page, tinyurl):
        response = client.get('/hello-world/')

        assert response.status_code == 200
        assert b'admin-bar' not in response.content
        tinyurl.assert_not_called()

    def test_staff_sees_shortlink_and_share_links(self, staff_client, hello_page, tinyurl):
        response = staff_client.get('/hello-world/')
        html = response.content.decode()

        assert response.status_code == 200
        assert 'id="admin-bar-shortlink"' in html
        assert f'href="{SHORTLINK}"' in html
        assert TWITTER in html
        assert FACEBOOK in html
        assert 'admin-bar-get-shortlink' not in html
        tinyurl.assert_called_once()

    def test_front_page_has_no_shortlink_entries(self, staff_client, tinyurl):
        Page.objects.create(title='Home', slug='home', status='published', is_front_page=True)

        response = staff_client.get('/')

        assert response.status_code == 200
        assert b'admin-bar-shortlink' not in response.content
        tinyurl.assert_not_called()

    def test_draft_page_is_not_found(self, client, db):
        Page.objects.create(title='Draft', slug='draft')
        assert client.get('/draft/').status_code == 404


class TestShortlinkAPI:

    def test_returns_tinyurl_shortlink(self, client, hello_page, tinyurl):
        response = client.get('/api/pages/42/shortlink/')

        assert response.status_code == 200
        assert response.json() == {'page': 42, 'shortlink': SHORTLINK, 'source': 'tinyurl', 'outcome': 'stored'}

    def test_falls_back_to_default_shortlink(self, client, hello_page):
        with patch('shortlinks.client.requests.get', return_value=Mock(status_code=503, text='')):
            response = client.get('/api/pages/42/shortlink/')

        assert response.status_code == 200
        assert response.json()['source'] == 'default'
        assert response.json()['shortlink'] == 'https://example.com/?p=42'
        assert response.json()['outcome'] == 'service_failure'

    def test_unknown_page(self, client, db):
        assert client.get('/api/pages/404/shortlink/').status_code == 404


def test_health_check(client, db):
    response = client.get('/health/')

    assert response.status_code == 200
    assert response.json()['database'] == 'ok'
