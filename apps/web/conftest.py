"""
Pytest configuration for Django app tests.
"""

from django.test import Client as DjangoClient

import pytest

from apps.web.core.models import Admin
from apps.web.core.tests.factories import AdminFactory


@pytest.fixture
def admin_user() -> Admin:
    """An active admin account."""
    return AdminFactory(email="owner@example.com")


@pytest.fixture
def api_client() -> DjangoClient:
    """Django test client for anonymous API requests."""
    return DjangoClient()


@pytest.fixture
def admin_client(admin_user: Admin) -> DjangoClient:
    """Django test client carrying an admin session."""
    client = DjangoClient()
    client.force_login(admin_user)
    return client
