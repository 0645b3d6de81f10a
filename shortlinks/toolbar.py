from abc import ABC, abstractmethod
from urllib.parse import quote, quote_plus

from django.utils.translation import gettext_lazy as _

TWITTER_INTENT_URL = 'https://twitter.com/intent/tweet?text={text}'
FACEBOOK_SHARER_URL = 'https://www.facebook.com/sharer.php?u={url}'


class MenuBuilder(ABC):
    """A toolbar that entries can be added to and removed from."""

    @abstractmethod
    def add_entry(self, parent_id, id, title, href, new_tab=False):
        pass

    @abstractmethod
    def remove_entry(self, id):
        pass


def twitter_share_url(title, shortlink):
    # Spaces as %20, the intent endpoint shows '+' literally
    text = quote_plus(f"{title} - {shortlink}").replace('+', '%20')
    return TWITTER_INTENT_URL.format(text=text)


def facebook_share_url(shortlink):
    return FACEBOOK_SHARER_URL.format(url=quote(shortlink, safe=''))


def add_share_menu(menu: MenuBuilder, shortlink, title):
    """Replace the site's shortlink entry with ours plus two share links."""
    if not shortlink:
        return False

    menu.remove_entry('get-shortlink')
    menu.add_entry(None, 'shortlink', _('Shortlink'), shortlink)
    menu.add_entry('shortlink', 'tinyurl-share', _('Share on Twitter'),
                   twitter_share_url(title, shortlink), new_tab=True)
    menu.add_entry('shortlink', 'tinyurl-share-facebook', _('Share on Facebook'),
                   facebook_share_url(shortlink), new_tab=True)
    return True
