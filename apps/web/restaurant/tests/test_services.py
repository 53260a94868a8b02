"""
Tests for menu services and the display policy.
"""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from apps.web.core.exceptions import ConflictError, NotFoundError, ValidationError
from apps.web.restaurant import services
from apps.web.restaurant.models import Category, MenuItem, MenuSettings
from apps.web.restaurant.serializers import (
    MenuItemRequest,
    MenuItemSchema,
    MenuSettingsRequest,
)

from .factories import CategoryFactory, MenuItemFactory


def _item_request(category_id: int, **overrides) -> MenuItemRequest:
    data = {
        "name": "Tiramisu",
        "description": "Espresso-soaked ladyfingers",
        "price": "8.50",
        "category_id": category_id,
        "image_url": "https://img.example.com/tiramisu.jpg",
        "item_type": "dessert",
    }
    data.update(overrides)
    return MenuItemRequest.model_validate(data)


@pytest.mark.django_db
class TestCategories:
    def test_duplicate_name_conflicts(self) -> None:
        services.create_category("Desserts")

        with pytest.raises(ConflictError, match="already exists"):
            services.create_category("Desserts")

        assert Category.objects.filter(name="Desserts").count() == 1

    def test_rename(self) -> None:
        category = CategoryFactory(name="Mains")

        renamed = services.rename_category(category.pk, "Main courses")

        assert renamed.name == "Main courses"

    def test_rename_missing(self) -> None:
        with pytest.raises(NotFoundError, match="Category not found"):
            services.rename_category(999, "Anything")

    def test_delete_in_use_is_refused(self) -> None:
        item = MenuItemFactory()

        with pytest.raises(ConflictError) as exc_info:
            services.delete_category(item.category_id)

        assert exc_info.value.code == "category_in_use"
        assert "1 menu item(s)" in exc_info.value.message
        assert Category.objects.filter(pk=item.category_id).exists()

    def test_delete_unused(self) -> None:
        category = CategoryFactory(name="Seasonal")

        deleted = services.delete_category(category.pk)

        assert deleted.pk == category.pk
        assert deleted.name == "Seasonal"
        assert not Category.objects.filter(pk=category.pk).exists()

    def test_injected_gateway(self) -> None:
        gateway = MagicMock()
        gateway.find_many.return_value = []

        assert services.list_categories(gateway=gateway) == []
        gateway.find_many.assert_called_once_with(order_by=["name"])


@pytest.mark.django_db
class TestMenuItems:
    def test_create_then_get_round_trip(self) -> None:
        category = CategoryFactory(name="Desserts")

        created = services.create_menu_item(_item_request(category.pk))
        fetched = services.get_menu_item(created.pk)

        assert fetched.name == "Tiramisu"
        assert fetched.price == Decimal("8.50")
        assert fetched.category.name == "Desserts"
        assert fetched.item_type == "dessert"
        assert fetched.is_special is False

    def test_create_with_unknown_category(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            services.create_menu_item(_item_request(999))

        assert exc_info.value.details == {"categoryId": ["Category not found"]}
        assert MenuItem.objects.count() == 0

    def test_update_missing_item_is_not_found_first(self) -> None:
        with pytest.raises(NotFoundError):
            services.update_menu_item(999, _item_request(999))

    def test_update_moves_category(self) -> None:
        item = MenuItemFactory()
        other = CategoryFactory(name="Specials")

        updated = services.update_menu_item(
            item.pk, _item_request(other.pk, is_special=True)
        )

        assert updated.category_id == other.pk
        assert updated.is_special is True

    def test_delete(self) -> None:
        item = MenuItemFactory()

        services.delete_menu_item(item.pk)

        with pytest.raises(NotFoundError, match="Menu item not found"):
            services.get_menu_item(item.pk)


@pytest.mark.django_db
class TestMenuSettings:
    def test_update(self) -> None:
        updated = services.update_menu_settings(
            MenuSettingsRequest(show_price=False, show_description=True)
        )

        assert updated.show_price is False
        assert MenuSettings.load().show_price is False

    def test_missing_row(self) -> None:
        MenuSettings.objects.all().delete()

        with pytest.raises(NotFoundError, match="not configured"):
            services.get_menu_settings()

        with pytest.raises(NotFoundError, match="not configured"):
            services.update_menu_settings(
                MenuSettingsRequest(show_price=True, show_description=True)
            )


@pytest.mark.django_db
class TestDisplayPolicy:
    def _schema(self) -> MenuItemSchema:
        return MenuItemSchema.model_validate(MenuItemFactory(description="Crispy"))

    def test_hides_price_only(self) -> None:
        settings = MenuSettings(show_price=False, show_description=True)

        shown = services.apply_display_policy(self._schema(), settings)

        assert shown.price is None
        assert shown.description == "Crispy"

    def test_missing_settings_hides_both(self) -> None:
        shown = services.apply_display_policy(self._schema(), None)

        assert shown.price is None
        assert shown.description is None

    def test_privileged_bypasses_policy(self) -> None:
        MenuSettings.objects.filter(pk=1).update(
            show_price=False, show_description=False
        )
        item = MenuItemFactory(price=Decimal("4.00"))

        [public] = services.serialize_menu_items([item])
        [privileged] = services.serialize_menu_items([item], privileged=True)

        assert public.price is None
        assert public.description is None
        assert privileged.price == Decimal("4.00")
        assert privileged.description == item.description
