"""
Capabilities the plugin offers to the site, and the receivers that plug them
into the site's signals.
"""
import logging
from abc import ABC, abstractmethod

from django.db.models.signals import post_save, post_delete

from .cache import ENTITY_TYPE, META_KEY, ShortlinkCache
from .client import TinyURLClient
from .resolver import ShortlinkResolver
from .site import DjangoSiteGateway
from .store import MetadataStore
from .toolbar import add_share_menu

logger = logging.getLogger(__name__)


class Invalidatable(ABC):

    @abstractmethod
    def invalidate(self, page_id):
        pass

    @abstractmethod
    def invalidate_all(self):
        pass


class ShortlinkFilter(ABC):

    @abstractmethod
    def filter_shortlink(self, shortlink, id, context, allow_slugs=True, request=None):
        """Return a replacement for ``shortlink``, or ``shortlink`` itself."""


class TinyURLService(Invalidatable, ShortlinkFilter):

    def __init__(self, resolver: ShortlinkResolver, cache: ShortlinkCache):
        self.resolver = resolver
        self.cache = cache

    @classmethod
    def from_settings(cls):
        cache = ShortlinkCache(MetadataStore())
        resolver = ShortlinkResolver(cache, TinyURLClient(), DjangoSiteGateway())
        return cls(resolver, cache)

    def filter_shortlink(self, shortlink, id, context, allow_slugs=True, request=None):
        return self.resolver.resolve(context, id, request) or shortlink

    def invalidate(self, page_id):
        self.cache.invalidate(page_id)

    def invalidate_all(self):
        return self.cache.invalidate_all()

    def build_menu(self, menu, request):
        from pages.shortlinks import get_shortlink, queried_page

        shortlink = get_shortlink(0, 'query', request=request)
        page = queried_page(request)
        title = page.title if page is not None else ''
        return add_share_menu(menu, shortlink, title)

    # Signal receivers

    def on_pre_get_shortlink(self, sender, shortlink=False, id=0, context='post',
                             allow_slugs=True, request=None, **kwargs):
        return self.filter_shortlink(shortlink, id, context, allow_slugs, request)

    def on_page_changed(self, sender, instance, **kwargs):
        self.invalidate(instance.pk)

    def on_meta_changed(self, sender, entity_type, entity_id, meta_key, **kwargs):
        # Our own writes must not clear what was just stored
        if entity_type != ENTITY_TYPE or meta_key == META_KEY:
            return
        self.invalidate(entity_id)

    def on_admin_bar_menu(self, sender, bar, request=None, **kwargs):
        self.build_menu(bar, request)


def connect(service: TinyURLService):
    from pages.models import Page
    from pages import signals

    signals.pre_get_shortlink.connect(service.on_pre_get_shortlink, dispatch_uid='shortlinks.pre_get_shortlink')
    signals.admin_bar_menu.connect(service.on_admin_bar_menu, dispatch_uid='shortlinks.admin_bar_menu')

    post_save.connect(service.on_page_changed, sender=Page, dispatch_uid='shortlinks.page_saved')
    post_delete.connect(service.on_page_changed, sender=Page, dispatch_uid='shortlinks.page_deleted')
    signals.meta_added.connect(service.on_meta_changed, dispatch_uid='shortlinks.meta_added')
    signals.meta_updated.connect(service.on_meta_changed, dispatch_uid='shortlinks.meta_updated')
    signals.meta_deleted.connect(service.on_meta_changed, dispatch_uid='shortlinks.meta_deleted')
    logger.debug("Shortlink hooks connected")


def get_service() -> TinyURLService:
    from django.apps import apps
    return apps.get_app_config('shortlinks').service
