"""
DoughRecipe and FillingRecipe models.

A recipe lists ingredient quantities for ONE BATCH, which produces
``yield_quantity`` of output. Every use of the recipe elsewhere is scaled
by (required weight / yield_quantity).

Line items are stored as JSON lists, in the same shape the recipe data
has always been exchanged in:

    ingredients:   [{"ingredientId": "flour", "quantity": 500, "unit": "g"}]
    pre_ferments:  [{"id": "poolish", "quantity": 200, "unit": "g"}]
    sub_fillings:  [{"recipeId": "custard", "quantity": 150, "unit": "g"}]
"""

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords


def validate_line_items(value, field_name: str, key_names: tuple[str, ...]) -> None:
    """
    Check that a JSON field holds a list of objects carrying one of ``key_names``.

    Only the structure is checked. Quantities are not: malformed quantities
    are dropped when materials are calculated.
    """
    if value in (None, ""):
        return
    if not isinstance(value, list):
        raise ValidationError({field_name: _("Must be a list of line items.")})
    for i, item in enumerate(value):
        if not isinstance(item, dict):
            raise ValidationError({
                field_name: _(f"Line {i+1} must be an object.")
            })
        if not any(item.get(key) for key in key_names):
            raise ValidationError({
                field_name: _(f"Line {i+1} must define {' or '.join(key_names)}.")
            })


class DoughRecipe(models.Model):
    """
    Dough recipe (BOM for a dough).

    May consume other doughs as pre-ferments (poolish, levain, biga...),
    which are themselves DoughRecipes expanded recursively.
    """

    code = models.CharField(
        unique=True,
        max_length=100,
        verbose_name=_("Code"),
        help_text=_("Recipe id used by references (ex: baguette-dough)"),
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

    yield_quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        null=True,
        blank=True,
        verbose_name=_("Yield"),
        help_text=_("Total weight produced by one batch"),
    )
    unit = models.CharField(
        max_length=10,
        default="g",
        verbose_name=_("Unit"),
    )

    ingredients = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_("Ingredients"),
        help_text=_('[{"ingredientId": "flour", "quantity": 500, "unit": "g"}]'),
    )
    pre_ferments = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_("Pre-ferments"),
        help_text=_('[{"id": "poolish", "quantity": 200, "unit": "g"}]'),
    )

    is_active = models.BooleanField(
        default=True,
        verbose_name=_("Active"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    history = HistoricalRecords()

    class Meta:
        db_table = "doughman_dough_recipe"
        verbose_name = _("Dough Recipe")
        verbose_name_plural = _("Dough Recipes")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active"], name="doughman_dough_active_idx"),
        ]

    def clean(self):
        super().clean()
        validate_line_items(self.ingredients, "ingredients", ("ingredientId",))
        validate_line_items(self.pre_ferments, "pre_ferments", ("id",))

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} ({self.yield_quantity}{self.unit})"


class FillingRecipe(models.Model):
    """
    Filling recipe (BOM for a filling, cream, topping...).

    May consume other fillings as sub-fillings, expanded recursively.
    """

    code = models.CharField(
        unique=True,
        max_length=100,
        verbose_name=_("Code"),
        help_text=_("Recipe id used by references (ex: custard)"),
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

    yield_quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        null=True,
        blank=True,
        verbose_name=_("Yield"),
        help_text=_("Total weight produced by one batch"),
    )
    unit = models.CharField(
        max_length=10,
        default="g",
        verbose_name=_("Unit"),
    )

    ingredients = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_("Ingredients"),
        help_text=_('[{"ingredientId": "milk", "quantity": 500, "unit": "g"}]'),
    )
    sub_fillings = models.JSONField(
        default=list,
        blank=True,
        verbose_name=_("Sub-fillings"),
        help_text=_('[{"recipeId": "custard", "quantity": 150, "unit": "g"}]'),
    )

    is_active = models.BooleanField(
        default=True,
        verbose_name=_("Active"),
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    history = HistoricalRecords()

    class Meta:
        db_table = "doughman_filling_recipe"
        verbose_name = _("Filling Recipe")
        verbose_name_plural = _("Filling Recipes")
        ordering = ["name"]
        indexes = [
            models.Index(fields=["is_active"], name="doughman_filling_active_idx"),
        ]

    def clean(self):
        super().clean()
        validate_line_items(self.ingredients, "ingredients", ("ingredientId",))
        validate_line_items(self.sub_fillings, "sub_fillings", ("recipeId", "id"))

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.name} ({self.yield_quantity}{self.unit})"
