"""
Restaurant models - Categories, menu items, and display settings.
"""

from django.core.validators import MinValueValidator
from django.db import models

from apps.web.core.models import TimestampedModel


class Category(TimestampedModel):
    """
    Menu category (e.g., Starters, Mains, Desserts).

    Names are unique; the store enforces it so concurrent creates cannot
    both succeed.
    """

    name = models.CharField(max_length=200, unique=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self) -> str:
        return self.name


class ItemType(models.TextChoices):
    """Course a menu item belongs to."""

    STARTER = "starter", "Starter"
    MAIN_DISH = "maindish", "Main dish"
    DESSERT = "dessert", "Dessert"


class MenuItem(TimestampedModel):
    """
    Individual menu item.

    Owned by exactly one Category. The category cannot be deleted while
    items still point at it.
    """

    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="items",
    )
    name = models.CharField(max_length=200)
    description = models.TextField()
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)],
    )
    image_url = models.URLField(max_length=500)
    item_type = models.CharField(max_length=20, choices=ItemType.choices)

    # Placement flags
    is_special = models.BooleanField(
        default=False,
        help_text="Featured as a chef's special",
    )
    is_main_menu = models.BooleanField(
        default=False,
        help_text="Shown on the main menu page",
    )

    class Meta:
        ordering = ["name"]
        indexes = [
            models.Index(fields=["category"], name="menu_item_category_idx"),
            models.Index(fields=["item_type"], name="menu_item_type_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class MenuSettings(TimestampedModel):
    """
    Global display policy for public menu listings.

    Singleton: the row with pk=1 is created by migration and every handler
    assumes it exists.
    """

    SINGLETON_PK = 1

    show_price = models.BooleanField(default=True)
    show_description = models.BooleanField(default=True)

    class Meta:
        verbose_name = "menu settings"
        verbose_name_plural = "menu settings"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(id=1),
                name="menu_settings_singleton",
            ),
        ]

    def __str__(self) -> str:
        return "Menu settings"

    @classmethod
    def load(cls) -> "MenuSettings | None":
        """Return the settings row, or None if it was never seeded."""
        return cls.objects.filter(pk=cls.SINGLETON_PK).first()
