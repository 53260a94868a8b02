"""
Menu API views - categories, menu items, and display settings.

Reads are public; every write requires an admin session. Public menu item
reads go through the display policy in MenuSettings.
"""

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from apps.web.core.decorators import admin_required, api_view, is_admin
from apps.web.core.exceptions import NotFoundError
from apps.web.core.responses import json_response
from apps.web.core.validation import parse_json_body, validate_payload
from apps.web.restaurant import services
from apps.web.restaurant.serializers import (
    CategoryRequest,
    CategorySchema,
    MenuItemRequest,
    MenuSettingsRequest,
    MenuSettingsSchema,
)


def _wants_privileged_view(request: HttpRequest) -> bool:
    """?admin=true only counts when the caller really is a signed-in admin."""
    return request.GET.get("admin") == "true" and is_admin(request)


# =============================================================================
# Categories
# =============================================================================


@csrf_exempt
@require_http_methods(["GET", "POST"])
def category_collection(request: HttpRequest) -> JsonResponse:
    """GET|POST /api/categories"""
    if request.method == "POST":
        return create_category(request)
    return list_categories(request)


@csrf_exempt
@require_http_methods(["PUT", "DELETE"])
def category_detail(request: HttpRequest, category_id: int) -> JsonResponse:
    """PUT|DELETE /api/categories/{category_id}"""
    if request.method == "DELETE":
        return delete_category(request, category_id)
    return update_category(request, category_id)


@api_view("CATEGORY_GET")
def list_categories(_request: HttpRequest) -> JsonResponse:
    """
    GET /api/categories

    Returns every category. 404 when none exist yet.
    """
    categories = services.list_categories()
    if not categories:
        raise NotFoundError("No categories found")
    return json_response([CategorySchema.model_validate(c) for c in categories])


@api_view("CATEGORY_POST")
@admin_required
def create_category(request: HttpRequest) -> JsonResponse:
    """
    POST /api/categories

    Request body: CategoryRequest
    Response: CategorySchema (200) or 400 on validation error / duplicate name
    """
    data = validate_payload(CategoryRequest, parse_json_body(request)).unwrap()
    category = services.create_category(data.name)
    return json_response(CategorySchema.model_validate(category))


@api_view("CATEGORY_PUT")
@admin_required
def update_category(request: HttpRequest, category_id: int) -> JsonResponse:
    """
    PUT /api/categories/{category_id}

    Rename a category.
    """
    data = validate_payload(CategoryRequest, parse_json_body(request)).unwrap()
    category = services.rename_category(category_id, data.name)
    return json_response(CategorySchema.model_validate(category))


@api_view("CATEGORY_DELETE")
@admin_required
def delete_category(_request: HttpRequest, category_id: int) -> JsonResponse:
    """
    DELETE /api/categories/{category_id}

    Refused with 400 while menu items still reference the category.
    """
    category = services.delete_category(category_id)
    return json_response(CategorySchema.model_validate(category))


# =============================================================================
# Menu items
# =============================================================================


@csrf_exempt
@require_http_methods(["GET", "POST"])
def menu_item_collection(request: HttpRequest) -> JsonResponse:
    """GET|POST /api/menu-items"""
    if request.method == "POST":
        return create_menu_item(request)
    return list_menu_items(request)


@csrf_exempt
@require_http_methods(["GET", "PUT", "DELETE"])
def menu_item_detail(request: HttpRequest, item_id: int) -> JsonResponse:
    """GET|PUT|DELETE /api/menu-items/{item_id}"""
    if request.method == "PUT":
        return update_menu_item(request, item_id)
    if request.method == "DELETE":
        return delete_menu_item(request, item_id)
    return get_menu_item(request, item_id)


@api_view("MENU_ITEMS_GET")
def list_menu_items(request: HttpRequest) -> JsonResponse:
    """
    GET /api/menu-items

    Public callers see price/description only when MenuSettings allows it.
    Signed-in admins can pass ?admin=true to bypass the policy.
    """
    items = services.list_menu_items()
    serialized = services.serialize_menu_items(
        items, privileged=_wants_privileged_view(request)
    )
    return json_response(serialized)


@api_view("MENU_ITEM_GET")
def get_menu_item(request: HttpRequest, item_id: int) -> JsonResponse:
    """
    GET /api/menu-items/{item_id}

    Returns one item with its category embedded.
    """
    item = services.get_menu_item(item_id)
    [serialized] = services.serialize_menu_items(
        [item], privileged=_wants_privileged_view(request)
    )
    return json_response(serialized)


@api_view("MENU_ITEM_POST")
@admin_required
def create_menu_item(request: HttpRequest) -> JsonResponse:
    """
    POST /api/menu-items

    Request body: MenuItemRequest
    Response: MenuItemSchema (201) or 400 with field errors
    """
    data = validate_payload(MenuItemRequest, parse_json_body(request)).unwrap()
    item = services.create_menu_item(data)
    [serialized] = services.serialize_menu_items([item], privileged=True)
    return json_response(serialized, status=201)


@api_view("MENU_ITEM_PUT")
@admin_required
def update_menu_item(request: HttpRequest, item_id: int) -> JsonResponse:
    """
    PUT /api/menu-items/{item_id}

    Full replacement; the body is validated like a create.
    """
    data = validate_payload(MenuItemRequest, parse_json_body(request)).unwrap()
    item = services.update_menu_item(item_id, data)
    [serialized] = services.serialize_menu_items([item], privileged=True)
    return json_response(serialized)


@api_view("MENU_ITEM_DELETE")
@admin_required
def delete_menu_item(_request: HttpRequest, item_id: int) -> JsonResponse:
    """DELETE /api/menu-items/{item_id}"""
    services.delete_menu_item(item_id)
    return json_response({"message": "Menu item deleted successfully"})


# =============================================================================
# Menu settings
# =============================================================================


@csrf_exempt
@require_http_methods(["GET", "POST"])
@api_view("MENU_SETTINGS")
@admin_required
def menu_settings(request: HttpRequest) -> JsonResponse:
    """
    GET|POST /api/menu-settings

    GET returns the display policy; POST replaces both flags.
    """
    if request.method == "POST":
        data = validate_payload(MenuSettingsRequest, parse_json_body(request)).unwrap()
        settings = services.update_menu_settings(data)
    else:
        settings = services.get_menu_settings()
    return json_response(MenuSettingsSchema.model_validate(settings))
