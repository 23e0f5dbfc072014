"""
Initial migration for Doughman.

Creates:
- BreadType, DoughRecipe, FillingRecipe
- History tracking for the three models
"""

import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        # ══════════════════════════════════════════════════════════════
        # DOUGH RECIPE
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="DoughRecipe",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "code",
                    models.CharField(
                        help_text="Recipe id used by references (ex: baguette-dough)",
                        max_length=100,
                        unique=True,
                        verbose_name="Code",
                    ),
                ),
                ("name", models.CharField(max_length=200, unique=True, verbose_name="Name")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                (
                    "yield_quantity",
                    models.DecimalField(
                        blank=True,
                        decimal_places=3,
                        help_text="Total weight produced by one batch",
                        max_digits=12,
                        null=True,
                        verbose_name="Yield",
                    ),
                ),
                ("unit", models.CharField(default="g", max_length=10, verbose_name="Unit")),
                (
                    "ingredients",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"ingredientId": "flour", "quantity": 500, "unit": "g"}]',
                        verbose_name="Ingredients",
                    ),
                ),
                (
                    "pre_ferments",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"id": "poolish", "quantity": 200, "unit": "g"}]',
                        verbose_name="Pre-ferments",
                    ),
                ),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "Dough Recipe",
                "verbose_name_plural": "Dough Recipes",
                "db_table": "doughman_dough_recipe",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["is_active"], name="doughman_dough_active_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="HistoricalDoughRecipe",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        auto_created=True, blank=True, db_index=True, verbose_name="ID"
                    ),
                ),
                (
                    "code",
                    models.CharField(
                        db_index=True,
                        help_text="Recipe id used by references (ex: baguette-dough)",
                        max_length=100,
                        verbose_name="Code",
                    ),
                ),
                ("name", models.CharField(db_index=True, max_length=200, verbose_name="Name")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                (
                    "yield_quantity",
                    models.DecimalField(
                        blank=True,
                        decimal_places=3,
                        help_text="Total weight produced by one batch",
                        max_digits=12,
                        null=True,
                        verbose_name="Yield",
                    ),
                ),
                ("unit", models.CharField(default="g", max_length=10, verbose_name="Unit")),
                (
                    "ingredients",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"ingredientId": "flour", "quantity": 500, "unit": "g"}]',
                        verbose_name="Ingredients",
                    ),
                ),
                (
                    "pre_ferments",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"id": "poolish", "quantity": 200, "unit": "g"}]',
                        verbose_name="Pre-ferments",
                    ),
                ),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                (
                    "created_at",
                    models.DateTimeField(blank=True, editable=False, verbose_name="created at"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(blank=True, editable=False, verbose_name="updated at"),
                ),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                (
                    "history_type",
                    models.CharField(
                        choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")],
                        max_length=1,
                    ),
                ),
                (
                    "history_user",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "historical Dough Recipe",
                "verbose_name_plural": "historical Dough Recipes",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        # ══════════════════════════════════════════════════════════════
        # FILLING RECIPE
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="FillingRecipe",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "code",
                    models.CharField(
                        help_text="Recipe id used by references (ex: custard)",
                        max_length=100,
                        unique=True,
                        verbose_name="Code",
                    ),
                ),
                ("name", models.CharField(max_length=200, unique=True, verbose_name="Name")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                (
                    "yield_quantity",
                    models.DecimalField(
                        blank=True,
                        decimal_places=3,
                        help_text="Total weight produced by one batch",
                        max_digits=12,
                        null=True,
                        verbose_name="Yield",
                    ),
                ),
                ("unit", models.CharField(default="g", max_length=10, verbose_name="Unit")),
                (
                    "ingredients",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"ingredientId": "milk", "quantity": 500, "unit": "g"}]',
                        verbose_name="Ingredients",
                    ),
                ),
                (
                    "sub_fillings",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"recipeId": "custard", "quantity": 150, "unit": "g"}]',
                        verbose_name="Sub-fillings",
                    ),
                ),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "Filling Recipe",
                "verbose_name_plural": "Filling Recipes",
                "db_table": "doughman_filling_recipe",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["is_active"], name="doughman_filling_active_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="HistoricalFillingRecipe",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        auto_created=True, blank=True, db_index=True, verbose_name="ID"
                    ),
                ),
                (
                    "code",
                    models.CharField(
                        db_index=True,
                        help_text="Recipe id used by references (ex: custard)",
                        max_length=100,
                        verbose_name="Code",
                    ),
                ),
                ("name", models.CharField(db_index=True, max_length=200, verbose_name="Name")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                (
                    "yield_quantity",
                    models.DecimalField(
                        blank=True,
                        decimal_places=3,
                        help_text="Total weight produced by one batch",
                        max_digits=12,
                        null=True,
                        verbose_name="Yield",
                    ),
                ),
                ("unit", models.CharField(default="g", max_length=10, verbose_name="Unit")),
                (
                    "ingredients",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"ingredientId": "milk", "quantity": 500, "unit": "g"}]',
                        verbose_name="Ingredients",
                    ),
                ),
                (
                    "sub_fillings",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"recipeId": "custard", "quantity": 150, "unit": "g"}]',
                        verbose_name="Sub-fillings",
                    ),
                ),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                (
                    "created_at",
                    models.DateTimeField(blank=True, editable=False, verbose_name="created at"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(blank=True, editable=False, verbose_name="updated at"),
                ),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                (
                    "history_type",
                    models.CharField(
                        choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")],
                        max_length=1,
                    ),
                ),
                (
                    "history_user",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "historical Filling Recipe",
                "verbose_name_plural": "historical Filling Recipes",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        # ══════════════════════════════════════════════════════════════
        # BREAD TYPE
        # ══════════════════════════════════════════════════════════════
        migrations.CreateModel(
            name="BreadType",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "code",
                    models.CharField(
                        help_text="Product id (ex: croissant)",
                        max_length=100,
                        unique=True,
                        verbose_name="Code",
                    ),
                ),
                ("name", models.CharField(max_length=200, unique=True, verbose_name="Name")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                (
                    "dough_code",
                    models.CharField(
                        blank=True,
                        help_text="Code of the DoughRecipe used",
                        max_length=100,
                        verbose_name="Dough",
                    ),
                ),
                (
                    "dough_weight",
                    models.DecimalField(
                        blank=True,
                        decimal_places=3,
                        help_text="Dough weight per unit",
                        max_digits=10,
                        null=True,
                        verbose_name="Dough Weight",
                    ),
                ),
                (
                    "fillings",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"fillingId": "custard", "quantity": 30, "unit": "g"}]',
                        verbose_name="Fillings",
                    ),
                ),
                (
                    "decorations",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"ingredientId": "sesame", "quantity": 2, "unit": "g"}]',
                        verbose_name="Decorations",
                    ),
                ),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="updated at")),
            ],
            options={
                "verbose_name": "Bread Type",
                "verbose_name_plural": "Bread Types",
                "db_table": "doughman_bread_type",
                "ordering": ["name"],
                "indexes": [
                    models.Index(fields=["is_active"], name="doughman_bread_active_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="HistoricalBreadType",
            fields=[
                (
                    "id",
                    models.BigIntegerField(
                        auto_created=True, blank=True, db_index=True, verbose_name="ID"
                    ),
                ),
                (
                    "code",
                    models.CharField(
                        db_index=True,
                        help_text="Product id (ex: croissant)",
                        max_length=100,
                        verbose_name="Code",
                    ),
                ),
                ("name", models.CharField(db_index=True, max_length=200, verbose_name="Name")),
                ("description", models.TextField(blank=True, verbose_name="Description")),
                (
                    "dough_code",
                    models.CharField(
                        blank=True,
                        help_text="Code of the DoughRecipe used",
                        max_length=100,
                        verbose_name="Dough",
                    ),
                ),
                (
                    "dough_weight",
                    models.DecimalField(
                        blank=True,
                        decimal_places=3,
                        help_text="Dough weight per unit",
                        max_digits=10,
                        null=True,
                        verbose_name="Dough Weight",
                    ),
                ),
                (
                    "fillings",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"fillingId": "custard", "quantity": 30, "unit": "g"}]',
                        verbose_name="Fillings",
                    ),
                ),
                (
                    "decorations",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text='[{"ingredientId": "sesame", "quantity": 2, "unit": "g"}]',
                        verbose_name="Decorations",
                    ),
                ),
                ("is_active", models.BooleanField(default=True, verbose_name="Active")),
                (
                    "created_at",
                    models.DateTimeField(blank=True, editable=False, verbose_name="created at"),
                ),
                (
                    "updated_at",
                    models.DateTimeField(blank=True, editable=False, verbose_name="updated at"),
                ),
                ("history_id", models.AutoField(primary_key=True, serialize=False)),
                ("history_date", models.DateTimeField(db_index=True)),
                ("history_change_reason", models.CharField(max_length=100, null=True)),
                (
                    "history_type",
                    models.CharField(
                        choices=[("+", "Created"), ("~", "Changed"), ("-", "Deleted")],
                        max_length=1,
                    ),
                ),
                (
                    "history_user",
                    models.ForeignKey(
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="+",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "historical Bread Type",
                "verbose_name_plural": "historical Bread Types",
                "ordering": ("-history_date", "-history_id"),
                "get_latest_by": ("history_date", "history_id"),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
