"""Admin registration for menu models."""

from django.contrib import admin

from apps.web.restaurant.models import Category, MenuItem, MenuSettings


class MenuItemInline(admin.TabularInline):
    """Inline for items within a category."""

    model = MenuItem
    extra = 0
    fields = ["name", "price", "item_type", "is_special", "is_main_menu"]


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """Admin for categories."""

    list_display = ["name", "created_at"]
    search_fields = ["name"]
    inlines = [MenuItemInline]
    readonly_fields = ["created_at", "updated_at"]


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    """Admin for menu items."""

    list_display = [
        "name",
        "category",
        "price",
        "item_type",
        "is_special",
        "is_main_menu",
    ]
    list_filter = ["item_type", "is_special", "is_main_menu", "category"]
    search_fields = ["name", "description"]
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = [
        (None, {"fields": ["category", "name", "description", "price"]}),
        ("Media", {"fields": ["image_url"]}),
        ("Placement", {"fields": ["item_type", "is_special", "is_main_menu"]}),
        ("Timestamps", {"fields": ["created_at", "updated_at"]}),
    ]


@admin.register(MenuSettings)
class MenuSettingsAdmin(admin.ModelAdmin):
    """Admin for the display policy singleton."""

    list_display = ["__str__", "show_price", "show_description", "updated_at"]
    readonly_fields = ["created_at", "updated_at"]

    def has_add_permission(self, request):  # type: ignore[no-untyped-def]
        return not MenuSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):  # type: ignore[no-untyped-def]
        return False
