"""
BreadType model.

A bread type is a finished product. Per unit it consumes:
- ``dough_weight`` of the dough identified by ``dough_code``
- a list of fillings, each with an absolute weight
- decorations: raw ingredients used as-is (seeds, sugar, glaze...)
"""

from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords

from doughman.models.recipe import validate_line_items


class BreadType(models.Model):
    """Finished bakery product (one unit = one piece)."""

    code = models.CharField(
        unique=True,
        max_length=100,
        verbose_name=_("Code"),
        help_text=_("Product id (ex: croissant)"),
    )
    name = models.CharField(
        unique=True,
        max_length=200,
        verbose_name=_("Name"),
    )
    description = models.TextField(
        blank=True,
        verbose_name=_("Description"),
    )

    # Dough (weight per unit, NOT relative to the dough yield)
    dough_code = models.CharField(
        max_length=100,
        blank=True,
        verbose_name=_("Dough"),
        help_text=_("Code of the DoughRecipe used"),
    )
    dough_weight = models.DecimalField(
        max_digits=10,
        decimal_places=3,
        null=True,
        blank=True,
        verbose_name=_("Dough Weight"),
        help_text=_("Dough weight per unit"),
    )

    fillings = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_("Fillings"),
        help_text=_('[{"fillingId": "custard", "quantity": 30, "unit": "g"}]'),
    )
    decorations = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_("Decorations"),
        help_text=_('[{"ingredientId": "sesame", "quantity": 2, "unit": "g"}]'),
    )

    is_active = models.BooleanField(
        default=True,
        verbose_name=_("Active"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    history = HistoricalRecords()

    class Meta:
        db_table = "doughman_bread_type"
        verbose_name = _("Bread Type")
        verbose_name_plural = _("Bread Types")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active"], name="doughman_bread_active_idx"),
        ]

    def clean(self):
        super().clean()
        validate_line_items(self.fillings, "fillings", ("fillingId",))
        validate_line_items(self.decorations, "decorations", ("ingredientId",))

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return self.name
