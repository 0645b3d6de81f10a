import time
import warnings
import logging

import requests
from django.conf import settings

from .metrics import SERVICE_LATENCY

logger = logging.getLogger(__name__)

TINYURL_API_URL = 'https://tinyurl.com/api-create.php'
DEFAULT_TIMEOUT = 5


class TinyURLClient:
    """Asks tinyurl.com for a shortlink. Failures come back as an empty string."""

    def __init__(self, api_url=None, timeout=None, session=None):
        self.api_url = api_url or getattr(settings, 'SHORTLINKS_API_URL', TINYURL_API_URL)
        self.timeout = timeout or getattr(settings, 'SHORTLINKS_TIMEOUT', DEFAULT_TIMEOUT)
        self.session = session or requests

    def shorten(self, long_url: str) -> str:
        started = time.monotonic()
        try:
            # requests form-encodes params, same as urlencode() on the url
            response = self.session.get(
                self.api_url,
                params={'url': long_url},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning(f"Shortening service unreachable for {long_url}: {e}")
            return ''
        finally:
            SERVICE_LATENCY.observe(time.monotonic() - started)

        if response.status_code != 200:
            logger.warning(f"Shortening service answered {response.status_code} for {long_url}")
            return ''

        return response.text


def do_shortlink(url):
    """
    Retrieve the raw response from TinyURL.

    Deprecated since 1.0.1, use ``TinyURLClient().shorten(url)``.
    """
    warnings.warn(
        'do_shortlink() is deprecated since 1.0.1; use TinyURLClient.shorten()',
        DeprecationWarning,
        stacklevel=2,
    )
    return TinyURLClient().shorten(url)
