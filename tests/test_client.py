"""Tests for the TinyURL client."""
from unittest.mock import Mock, patch

import pytest
import requests

from shortlinks.client import TinyURLClient, do_shortlink


class TestTinyURLClient:

    @patch('shortlinks.client.requests.get')
    def test_shorten_returns_body_on_200(self, mock_get):
        mock_get.return_value = Mock(status_code=200, text='https://tinyurl.com/abcd123')

        client = TinyURLClient()
        assert client.shorten('https://example.com/hello-world') == 'https://tinyurl.com/abcd123'

        mock_get.assert_called_once_with(
            'https://tinyurl.com/api-create.php',
            params={'url': 'https://example.com/hello-world'},
            timeout=5,
        )

    @patch('shortlinks.client.requests.get')
    def test_shorten_non_200_is_empty(self, mock_get):
        mock_get.return_value = Mock(status_code=500, text='Error')

        assert TinyURLClient().shorten('https://example.com/') == ''

    @pytest.mark.parametrize('error', [
        requests.exceptions.ConnectionError('refused'),
        requests.exceptions.Timeout('too slow'),
    ])
    def test_shorten_transport_error_is_empty(self, error):
        with patch('shortlinks.client.requests.get', side_effect=error):
            assert TinyURLClient().shorten('https://example.com/') == ''

    @patch('shortlinks.client.requests.get')
    def test_settings_override_endpoint(self, mock_get, settings):
        settings.SHORTLINKS_API_URL = 'https://short.test/api'
        settings.SHORTLINKS_TIMEOUT = 1.5
        mock_get.return_value = Mock(status_code=200, text='x')

        TinyURLClient().shorten('https://example.com/')

        mock_get.assert_called_once_with('https://short.test/api', params={'url': 'https://example.com/'}, timeout=1.5)

    def test_long_url_is_percent_encoded(self):
        """The url parameter is sent form-encoded."""
        captured = {}

        def fake_get(url, params=None, timeout=None):
            captured['url'] = requests.Request('GET', url, params=params).prepare().url
            return Mock(status_code=200, text='ok')

        with patch('shortlinks.client.requests.get', side_effect=fake_get):
            TinyURLClient().shorten('https://example.com/hello world?a=1&b=2')

        assert captured['url'] == (
            'https://tinyurl.com/api-create.php?url='
            'https%3A%2F%2Fexample.com%2Fhello+world%3Fa%3D1%26b%3D2'
        )


@patch('shortlinks.client.requests.get')
def test_do_shortlink_is_deprecated(mock_get):
    mock_get.return_value = Mock(status_code=200, text='https://tinyurl.com/old')

    with pytest.warns(DeprecationWarning):
        assert do_shortlink('https://example.com/') == 'https://tinyurl.com/old'
