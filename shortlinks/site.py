from abc import ABC, abstractmethod


class InvalidPage(LookupError):
    """The id does not resolve to a page of the site."""


class SiteGateway(ABC):
    """What the resolution flow needs to know about the hosting site."""

    @abstractmethod
    def is_front_page(self, request) -> bool:
        pass

    @abstractmethod
    def queried_page_id(self, request):
        """Id of the single page ``request`` is about, or None."""

    @abstractmethod
    def get_page(self, page_id):
        """Return the page, raise InvalidPage when there is none."""

    @abstractmethod
    def get_permalink(self, page) -> str:
        pass


class DjangoSiteGateway(SiteGateway):

    def is_front_page(self, request):
        from pages.shortlinks import is_front_page
        return is_front_page(request)

    def queried_page_id(self, request):
        from pages.shortlinks import queried_page
        page = queried_page(request)
        return page.pk if page is not None else None

    def get_page(self, page_id):
        from pages.models import Page
        try:
            return Page.objects.get(pk=page_id)
        except (Page.DoesNotExist, ValueError, TypeError):
            raise InvalidPage(page_id)

    def get_permalink(self, page):
        return page.permalink
