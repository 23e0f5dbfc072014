"""
Doughman Signal Handlers.

Keeps the recipe catalog in step with the database: once a change to a
bread type, dough recipe or filling recipe is committed, the cached
snapshot is dropped. Rolled-back changes leave the catalog alone.

This module is imported in apps.py to register handlers.
"""

import logging

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from doughman.models import BreadType, DoughRecipe, FillingRecipe
from doughman.services.catalog import invalidate_catalog

logger = logging.getLogger(__name__)


@receiver(post_save, sender=BreadType)
@receiver(post_save, sender=DoughRecipe)
@receiver(post_save, sender=FillingRecipe)
@receiver(post_delete, sender=BreadType)
@receiver(post_delete, sender=DoughRecipe)
@receiver(post_delete, sender=FillingRecipe)
def invalidate_catalog_on_recipe_change(sender, instance, using=None, **kwargs):
    """
    When recipe data changes, drop the cached catalog after commit.

    Outside a transaction on_commit runs the callback immediately. Inside
    one, a catalog that is already loaded keeps serving the snapshot
    from before the change until the transaction commits.
    """
    transaction.on_commit(invalidate_catalog, using=using)

    logger.debug(
        f"Recipe catalog invalidation queued by {sender.__name__} {instance.code}",
        extra={"model": sender.__name__, "code": instance.code},
    )
