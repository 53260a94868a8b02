"""
Menu services - categories, menu items, and the display policy.

Every function takes an optional gateway so callers (and tests) can supply
their own; the defaults are process-scoped instances.
"""

import logging

from django.db.models import Q

from apps.web.core.exceptions import ConflictError, NotFoundError, ValidationError
from apps.web.core.gateway import ModelGateway
from apps.web.restaurant.models import Category, MenuItem, MenuSettings
from apps.web.restaurant.serializers import (
    MenuItemRequest,
    MenuItemSchema,
    MenuSettingsRequest,
)

logger = logging.getLogger(__name__)

category_gateway: ModelGateway[Category] = ModelGateway(Category)
menu_item_gateway: ModelGateway[MenuItem] = ModelGateway(MenuItem, label="Menu item")
settings_gateway: ModelGateway[MenuSettings] = ModelGateway(MenuSettings)


# =============================================================================
# Categories
# =============================================================================


def list_categories(gateway: ModelGateway[Category] | None = None) -> list[Category]:
    gateway = gateway or category_gateway
    return gateway.find_many(order_by=["name"])


def create_category(
    name: str, gateway: ModelGateway[Category] | None = None
) -> Category:
    """
    Create a category.

    Relies on the unique constraint on name: a duplicate raises ConflictError
    without a separate existence check.
    """
    gateway = gateway or category_gateway
    category = gateway.create(name=name)
    logger.info("Created category %s (%s)", category.pk, category.name)
    return category


def rename_category(
    category_id: int, name: str, gateway: ModelGateway[Category] | None = None
) -> Category:
    gateway = gateway or category_gateway
    return gateway.update(category_id, name=name)


def delete_category(
    category_id: int,
    gateway: ModelGateway[Category] | None = None,
    items: ModelGateway[MenuItem] | None = None,
) -> Category:
    """
    Delete a category that no menu item references.

    Raises:
        NotFoundError: If the category does not exist
        ConflictError: If menu items still reference it
    """
    gateway = gateway or category_gateway
    items = items or menu_item_gateway

    category = gateway.get(category_id)
    in_use = items.count(Q(category_id=category.pk))
    if in_use:
        raise ConflictError(
            f"This category is used by {in_use} menu item(s)",
            code="category_in_use",
        )

    deleted = gateway.delete(category.pk)
    logger.info("Deleted category %s (%s)", category_id, deleted.name)
    return deleted


# =============================================================================
# Menu items
# =============================================================================


def _require_category(category_id: int, gateway: ModelGateway[Category]) -> None:
    """Foreign keys are checked at commit, so verify the category up front."""
    if gateway.find_unique(pk=category_id) is None:
        raise ValidationError(
            "Validation failed",
            details={"categoryId": ["Category not found"]},
        )


def list_menu_items(gateway: ModelGateway[MenuItem] | None = None) -> list[MenuItem]:
    gateway = gateway or menu_item_gateway
    return gateway.find_many(order_by=["name"], select_related=["category"])


def get_menu_item(
    item_id: int, gateway: ModelGateway[MenuItem] | None = None
) -> MenuItem:
    gateway = gateway or menu_item_gateway
    return gateway.get(item_id, select_related=["category"])


def create_menu_item(
    data: MenuItemRequest,
    gateway: ModelGateway[MenuItem] | None = None,
    categories: ModelGateway[Category] | None = None,
) -> MenuItem:
    gateway = gateway or menu_item_gateway
    _require_category(data.category_id, categories or category_gateway)

    item = gateway.create(**data.model_dump())
    logger.info("Created menu item %s (%s)", item.pk, item.name)
    return gateway.get(item.pk, select_related=["category"])


def update_menu_item(
    item_id: int,
    data: MenuItemRequest,
    gateway: ModelGateway[MenuItem] | None = None,
    categories: ModelGateway[Category] | None = None,
) -> MenuItem:
    gateway = gateway or menu_item_gateway
    # 404 takes precedence over a bad category reference
    gateway.get(item_id)
    _require_category(data.category_id, categories or category_gateway)

    gateway.update(item_id, **data.model_dump())
    return gateway.get(item_id, select_related=["category"])


def delete_menu_item(
    item_id: int, gateway: ModelGateway[MenuItem] | None = None
) -> MenuItem:
    gateway = gateway or menu_item_gateway
    deleted = gateway.delete(item_id)
    logger.info("Deleted menu item %s (%s)", item_id, deleted.name)
    return deleted


# =============================================================================
# Menu settings & display policy
# =============================================================================


def get_menu_settings(
    gateway: ModelGateway[MenuSettings] | None = None,
) -> MenuSettings:
    gateway = gateway or settings_gateway
    try:
        return gateway.get(MenuSettings.SINGLETON_PK)
    except NotFoundError as e:
        logger.error("Menu settings row is missing")
        raise NotFoundError("Menu settings are not configured") from e


def update_menu_settings(
    data: MenuSettingsRequest,
    gateway: ModelGateway[MenuSettings] | None = None,
) -> MenuSettings:
    gateway = gateway or settings_gateway
    # Surface the missing-row case with the same message as reads
    get_menu_settings(gateway)
    settings = gateway.update(MenuSettings.SINGLETON_PK, **data.model_dump())
    logger.info(
        "Menu settings updated: show_price=%s show_description=%s",
        settings.show_price,
        settings.show_description,
    )
    return settings


def apply_display_policy(
    item: MenuItemSchema, settings: MenuSettings | None
) -> MenuItemSchema:
    """
    Hide price/description according to the settings.

    A missing settings row hides both fields.
    """
    show_price = bool(settings and settings.show_price)
    show_description = bool(settings and settings.show_description)
    return item.model_copy(
        update={
            "price": item.price if show_price else None,
            "description": item.description if show_description else None,
        }
    )


def serialize_menu_items(
    items: list[MenuItem], privileged: bool = False
) -> list[MenuItemSchema]:
    """Serialize items, applying the display policy for public callers."""
    serialized = [MenuItemSchema.model_validate(item) for item in items]
    if privileged:
        return serialized

    settings = MenuSettings.load()
    return [apply_display_policy(item, settings) for item in serialized]
