"""
Hook surface of the site.

Plugins connect receivers to these signals from their ``AppConfig.ready()``.
Metadata signals are sent by :mod:`pages.meta` with ``entity_type``,
``entity_id`` and ``meta_key`` keyword arguments.
"""
from django.dispatch import Signal

meta_added = Signal()
meta_updated = Signal()
meta_deleted = Signal()

# Filter: receivers get (shortlink, id, context, allow_slugs, request) and
# may return a replacement value; falsy responses are ignored.
pre_get_shortlink = Signal()

# Receivers get ``bar`` (an AdminBar) and ``request`` and add entries to it.
admin_bar_menu = Signal()
