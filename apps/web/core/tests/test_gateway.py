"""
Tests for the persistence gateway.
"""

from django.db.models import Q

import pytest

from apps.web.core.exceptions import ConflictError, NotFoundError
from apps.web.core.gateway import ModelGateway
from apps.web.restaurant.models import Category, MenuItem
from apps.web.restaurant.tests.factories import CategoryFactory, MenuItemFactory


@pytest.fixture
def categories() -> ModelGateway[Category]:
    return ModelGateway(Category)


@pytest.mark.django_db
class TestModelGateway:
    def test_label_defaults_to_verbose_name(self) -> None:
        assert ModelGateway(Category).label == "Category"
        assert ModelGateway(MenuItem, label="Menu item").label == "Menu item"

    def test_create_and_get(self, categories: ModelGateway[Category]) -> None:
        created = categories.create(name="Starters")

        assert categories.get(created.pk).name == "Starters"

    def test_create_duplicate_raises_conflict(
        self, categories: ModelGateway[Category]
    ) -> None:
        categories.create(name="Starters")

        with pytest.raises(ConflictError, match="Category already exists"):
            categories.create(name="Starters")

    @pytest.mark.parametrize("pk", [999, "abc", None])
    def test_get_missing_raises_not_found(
        self, categories: ModelGateway[Category], pk
    ) -> None:
        with pytest.raises(NotFoundError, match="Category not found"):
            categories.get(pk)

    def test_find_unique(self, categories: ModelGateway[Category]) -> None:
        CategoryFactory(name="Starters")

        assert categories.find_unique(name="Starters") is not None
        assert categories.find_unique(name="Mains") is None

    def test_find_many_with_paging(self, categories: ModelGateway[Category]) -> None:
        for name in ["A", "B", "C", "D"]:
            CategoryFactory(name=name)

        rows = categories.find_many(
            Q(name__in=["A", "B", "C"]), offset=1, limit=5, order_by=["-name"]
        )

        assert [c.name for c in rows] == ["B", "A"]
        assert categories.count(Q(name__in=["A", "B", "C"])) == 3

    def test_update_rename_collision(self, categories: ModelGateway[Category]) -> None:
        CategoryFactory(name="Starters")
        mains = CategoryFactory(name="Mains")

        with pytest.raises(ConflictError):
            categories.update(mains.pk, name="Starters")

    def test_update_missing(self, categories: ModelGateway[Category]) -> None:
        with pytest.raises(NotFoundError):
            categories.update(999, name="Anything")

    def test_delete_returns_row_with_pk(
        self, categories: ModelGateway[Category]
    ) -> None:
        category = CategoryFactory(name="Seasonal")

        deleted = categories.delete(category.pk)

        assert deleted.pk == category.pk
        assert categories.count() == 0

    def test_delete_protected_raises_conflict(
        self, categories: ModelGateway[Category]
    ) -> None:
        item = MenuItemFactory()

        with pytest.raises(ConflictError, match="still referenced"):
            categories.delete(item.category_id)
