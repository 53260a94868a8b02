"""Create the MenuSettings singleton row every handler expects."""

from django.db import migrations


def create_settings(apps, schema_editor):  # type: ignore[no-untyped-def]
    MenuSettings = apps.get_model("restaurant", "MenuSettings")
    MenuSettings.objects.get_or_create(
        pk=1, defaults={"show_price": True, "show_description": True}
    )


def remove_settings(apps, schema_editor):  # type: ignore[no-untyped-def]
    MenuSettings = apps.get_model("restaurant", "MenuSettings")
    MenuSettings.objects.filter(pk=1).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("restaurant", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_settings, remove_settings),
    ]
