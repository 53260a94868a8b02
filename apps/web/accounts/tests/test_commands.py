"""
Tests for the create_admin management command.
"""

from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError

import pytest

from apps.web.core.models import Admin
from apps.web.core.tests.factories import AdminFactory


@pytest.mark.django_db
class TestCreateAdmin:
    def test_creates_admin(self) -> None:
        out = StringIO()

        call_command(
            "create_admin", email="chef@example.com", password="s3cret-pass", stdout=out
        )

        admin = Admin.objects.get(email="chef@example.com")
        assert admin.check_password("s3cret-pass")
        assert not admin.is_superuser
        assert "Created admin chef@example.com" in out.getvalue()

    def test_superuser_flag(self) -> None:
        call_command(
            "create_admin",
            email="chef@example.com",
            password="s3cret-pass",
            superuser=True,
            stdout=StringIO(),
        )

        admin = Admin.objects.get(email="chef@example.com")
        assert admin.is_superuser
        assert admin.is_staff

    def test_duplicate_email(self) -> None:
        AdminFactory(email="chef@example.com")

        with pytest.raises(CommandError, match="already exists"):
            call_command(
                "create_admin", email="chef@example.com", password="s3cret-pass"
            )

    def test_short_password(self) -> None:
        with pytest.raises(CommandError, match="at least 8"):
            call_command("create_admin", email="chef@example.com", password="short")

    def test_common_password(self) -> None:
        with pytest.raises(CommandError, match="too common"):
            call_command(
                "create_admin", email="chef@example.com", password="password123"
            )

        assert not Admin.objects.filter(email="chef@example.com").exists()
