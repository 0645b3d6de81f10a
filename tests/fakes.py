"""Stand-ins for the shortening service and the site."""
from shortlinks.site import InvalidPage, SiteGateway


class FakeClient:
    """Counts calls and answers with a fixed shortlink ('' means failure)."""

    def __init__(self, answer='https://tinyurl.com/abcd123'):
        self.answer = answer
        self.calls = []

    def shorten(self, long_url):
        self.calls.append(long_url)
        return self.answer


class FakePage:
    def __init__(self, pk, permalink, title='Hello World'):
        self.pk = pk
        self.permalink = permalink
        self.title = title


class FakeSite(SiteGateway):

    def __init__(self, pages=(), front_page=False, queried_id=None):
        self.pages = {p.pk: p for p in pages}
        self.front_page = front_page
        self.queried_id = queried_id
        self.lookups = []

    def is_front_page(self, request):
        return self.front_page

    def queried_page_id(self, request):
        return self.queried_id

    def get_page(self, page_id):
        self.lookups.append(page_id)
        try:
            return self.pages[page_id]
        except KeyError:
            raise InvalidPage(page_id)

    def get_permalink(self, page):
        return page.permalink


