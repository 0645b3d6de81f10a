from django.db import transaction

from .models import PageMeta
from .signals import meta_added, meta_updated, meta_deleted


def get_metadata(entity_type, entity_id, meta_key):
    """Returns the stored value, or None if the key was never set."""
    row = PageMeta.objects.filter(
        entity_type=entity_type, entity_id=entity_id, meta_key=meta_key,
    ).values_list('meta_value', flat=True).first()
    return row


def update_metadata(entity_type, entity_id, meta_key, meta_value):
    """Creates or replaces a value and announces the change."""
    with transaction.atomic():
        obj, created = PageMeta.objects.update_or_create(
            entity_type=entity_type,
            entity_id=entity_id,
            meta_key=meta_key,
            defaults={'meta_value': meta_value},
        )
    signal = meta_added if created else meta_updated
    signal.send(
        sender=PageMeta,
        entity_type=entity_type,
        entity_id=entity_id,
        meta_key=meta_key,
        meta_value=meta_value,
    )
    return obj


def delete_metadata(entity_type, entity_id, meta_key, delete_all=False):
    """
    Deletes a value for one entity, or for every entity when ``delete_all``
    is set (``entity_id`` is ignored then). Returns the ids that lost the key.
    """
    qs = PageMeta.objects.filter(entity_type=entity_type, meta_key=meta_key)
    if not delete_all:
        qs = qs.filter(entity_id=entity_id)

    entity_ids = list(qs.values_list('entity_id', flat=True))
    if not entity_ids:
        return []

    qs.delete()
    for deleted_id in entity_ids:
        meta_deleted.send(
            sender=PageMeta,
            entity_type=entity_type,
            entity_id=deleted_id,
            meta_key=meta_key,
        )
    return entity_ids
