"""
Persistence gateway - thin accessor over one Django model.

Translates ORM outcomes into the API error taxonomy:
- missing rows raise NotFoundError
- unique constraint violations raise ConflictError
- deletes blocked by PROTECT foreign keys raise ConflictError

Usage:
    categories = ModelGateway(Category)
    category = categories.create(name="Desserts")
    category = categories.get(category.pk)
"""

from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from django.db import IntegrityError, models, transaction
from django.db.models import ProtectedError, Q

from apps.web.core.exceptions import ConflictError, NotFoundError

_T = TypeVar("_T", bound=models.Model)


class ModelGateway(Generic[_T]):
    """CRUD and simple queries for a single model."""

    def __init__(self, model: type[_T], label: str | None = None) -> None:
        self.model = model
        self.label = label or model._meta.verbose_name.capitalize()

    def _queryset(self, select_related: Sequence[str] = ()) -> models.QuerySet[_T]:
        queryset = self.model._default_manager.all()
        if select_related:
            queryset = queryset.select_related(*select_related)
        return queryset

    def create(self, **fields: Any) -> _T:
        """Insert a row; unique violations surface as ConflictError."""
        try:
            with transaction.atomic():
                return self._queryset().create(**fields)
        except IntegrityError as e:
            raise ConflictError(f"{self.label} already exists") from e

    def get(self, pk: Any, select_related: Sequence[str] = ()) -> _T:
        """Fetch by primary key or raise NotFoundError."""
        try:
            return self._queryset(select_related).get(pk=pk)
        except (self.model.DoesNotExist, ValueError, TypeError) as e:
            raise NotFoundError(f"{self.label} not found") from e

    def find_unique(self, **lookup: Any) -> _T | None:
        """Fetch the single row matching a unique lookup, or None."""
        return self._queryset().filter(**lookup).first()

    def find_many(
        self,
        filters: Q | None = None,
        *,
        offset: int = 0,
        limit: int | None = None,
        order_by: Sequence[str] = (),
        select_related: Sequence[str] = (),
    ) -> list[_T]:
        """Filtered, ordered, optionally paginated listing."""
        queryset = self._queryset(select_related)
        if filters is not None:
            queryset = queryset.filter(filters)
        if order_by:
            queryset = queryset.order_by(*order_by)
        if limit is not None:
            return list(queryset[offset : offset + limit])
        return list(queryset[offset:])

    def count(self, filters: Q | None = None) -> int:
        queryset = self._queryset()
        if filters is not None:
            queryset = queryset.filter(filters)
        return queryset.count()

    def update(self, pk: Any, **fields: Any) -> _T:
        """Overwrite the given fields on one row and return it."""
        instance = self.get(pk)
        for name, value in fields.items():
            setattr(instance, name, value)

        update_fields = list(fields)
        if any(f.name == "updated_at" for f in self.model._meta.concrete_fields):
            update_fields.append("updated_at")

        try:
            with transaction.atomic():
                instance.save(update_fields=update_fields)
        except IntegrityError as e:
            raise ConflictError(f"{self.label} already exists") from e
        return instance

    def delete(self, pk: Any) -> _T:
        """Delete one row and return the (now unsaved) instance."""
        instance = self.get(pk)
        deleted_pk = instance.pk
        try:
            with transaction.atomic():
                instance.delete()
        except ProtectedError as e:
            raise ConflictError(
                f"{self.label} is still referenced by other records"
            ) from e
        instance.pk = deleted_pk
        return instance
