"""Built-in shortlinks, overridable through the ``pre_get_shortlink`` filter."""
from django.conf import settings

from .middleware import get_current_request
from .models import Page
from .signals import pre_get_shortlink


def queried_page(request):
    """The page a singular request is about, or None."""
    if request is None:
        return None
    return getattr(request, 'queried_object', None)


def is_front_page(request):
    if request is None:
        return False
    page = queried_page(request)
    if page is not None:
        return page.is_front_page
    return request.path == '/'


def get_shortlink(page_id=0, context='post', allow_slugs=True, request=None):
    """
    Returns a shortlink for a page, or an empty string.

    ``context`` is either ``'post'`` (use ``page_id``) or ``'query'`` (use the
    page the current request is about).
    """
    if request is None:
        request = get_current_request()

    for receiver, response in pre_get_shortlink.send(
        sender=Page,
        shortlink=False,
        id=page_id,
        context=context,
        allow_slugs=allow_slugs,
        request=request,
    ):
        if response:
            return response

    page = None
    if context == 'query':
        page = queried_page(request)
    elif context == 'post':
        page = Page.objects.filter(pk=page_id).first()
    return default_shortlink(page)


def default_shortlink(page):
    """The site's own shortlink: published pages other than the front page."""
    if page is None or page.status != 'published' or page.is_front_page:
        return ''
    return f"{settings.BASE_URL.rstrip('/')}/?p={page.pk}"
