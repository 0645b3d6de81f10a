from dataclasses import dataclass
from typing import Optional
from django.utils.translation import gettext_lazy as _

from .shortlinks import get_shortlink
from .signals import admin_bar_menu


@dataclass
class MenuEntry:
    id: str
    title: str
    href: str
    parent: Optional[str] = None
    new_tab: bool = False


class AdminBar:
    """Toolbar shown to staff on public pages."""

    def __init__(self):
        self._entries = {}

    def add_entry(self, parent_id, id, title, href, new_tab=False):
        self._entries[id] = MenuEntry(id=id, title=title, href=href, parent=parent_id, new_tab=new_tab)

    def remove_entry(self, id):
        self._entries.pop(id, None)

    def get_entry(self, id):
        return self._entries.get(id)

    def top_level(self):
        return [e for e in self._entries.values() if e.parent is None]

    def children(self, parent_id):
        return [e for e in self._entries.values() if e.parent == parent_id]

    def tree(self):
        return [(e, self.children(e.id)) for e in self.top_level()]

    def __len__(self):
        return len(self._entries)


def build_admin_bar(request):
    bar = AdminBar()

    shortlink = get_shortlink(0, 'query', request=request)
    if shortlink:
        bar.add_entry(None, 'get-shortlink', _('Shortlink'), shortlink)

    admin_bar_menu.send(sender=AdminBar, bar=bar, request=request)
    return bar
