"""
Create a restaurant admin account.

Usage:
    doppler run -- uv run python apps/web/manage.py create_admin \\
        --email owner@example.com
    doppler run -- uv run python apps/web/manage.py create_admin \\
        --email owner@example.com --password "s3cret-pass" --superuser
"""

import getpass
from typing import Any

from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from apps.web.core.models import Admin


class Command(BaseCommand):
    help = "Create an admin account that can sign in to the API"

    def add_arguments(self, parser: Any) -> None:
        parser.add_argument("--email", required=True, help="Admin email address")
        parser.add_argument(
            "--password",
            help="Password (prompted for when omitted)",
        )
        parser.add_argument(
            "--superuser",
            action="store_true",
            help="Also grant access to the Django admin site",
        )

    def handle(self, *_args: Any, **options: Any) -> None:
        email = Admin.objects.normalize_email(options["email"].strip())
        password = options["password"] or getpass.getpass("Password: ")

        if Admin.objects.filter(email=email).exists():
            msg = f"An admin with email {email} already exists"
            raise CommandError(msg)

        try:
            password_validation.validate_password(password, Admin(email=email))
        except ValidationError as e:
            raise CommandError(" ".join(e.messages)) from e

        if options["superuser"]:
            admin = Admin.objects.create_superuser(email, password)
        else:
            admin = Admin.objects.create_user(email, password)

        self.stdout.write(self.style.SUCCESS(f"Created admin {admin.email}"))
