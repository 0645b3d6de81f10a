import enum
import logging

from .cache import ShortlinkCache
from .metrics import RESOLUTIONS
from .site import InvalidPage, SiteGateway

logger = logging.getLogger(__name__)


class ResolutionOutcome(enum.Enum):
    FRONT_PAGE = 'front_page'
    UNRESOLVED_PAGE = 'unresolved_page'
    CACHE_HIT = 'cache_hit'
    STORED = 'stored'
    SERVICE_FAILURE = 'service_failure'


class ShortlinkResolver:
    """
    Read-through cache in front of the shortening service.

    ``resolve`` returns the shortlink or ``False`` when there is none; callers
    fall back to their own default in that case. Nothing is raised.
    """

    def __init__(self, cache: ShortlinkCache, client, site: SiteGateway):
        self.cache = cache
        self.client = client
        self.site = site

    def resolve(self, context, page_id=0, request=None):
        return self.resolve_with_outcome(context, page_id, request)[0]

    def resolve_with_outcome(self, context, page_id=0, request=None):
        """Like ``resolve``, paired with the ResolutionOutcome that produced it."""
        if self.site.is_front_page(request):
            return self._done(ResolutionOutcome.FRONT_PAGE, None, False)

        target_id, page = self._target(context, page_id, request)
        if target_id is None:
            return self._done(ResolutionOutcome.UNRESOLVED_PAGE, page_id, False)

        shortlink = self.cache.get(target_id)
        if shortlink:
            return self._done(ResolutionOutcome.CACHE_HIT, target_id, shortlink)

        if page is None:
            try:
                page = self.site.get_page(target_id)
            except InvalidPage:
                return self._done(ResolutionOutcome.UNRESOLVED_PAGE, target_id, False)

        shortlink = self.client.shorten(self.site.get_permalink(page))
        if shortlink:
            self.cache.set(target_id, shortlink)
            return self._done(ResolutionOutcome.STORED, target_id, shortlink)

        return self._done(ResolutionOutcome.SERVICE_FAILURE, target_id, False)

    def _target(self, context, page_id, request):
        """``(id, page)`` of the page to shorten; ``page`` is only loaded for 'post'."""
        if context == 'query':
            return self.site.queried_page_id(request), None
        if context == 'post':
            try:
                page = self.site.get_page(page_id)
            except InvalidPage:
                logger.debug(f"No page with id {page_id!r}")
                return None, None
            return page.pk, page
        return None, None

    def _done(self, outcome, page_id, result):
        RESOLUTIONS.labels(outcome=outcome.value).inc()
        logger.debug(f"Shortlink for page {page_id}: {outcome.value}")
        return result, outcome
