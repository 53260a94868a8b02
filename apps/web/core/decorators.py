"""
Decorators for request handling and authorization.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

from django.http import HttpRequest

from apps.web.core.exceptions import AuthError
from apps.web.core.responses import error_response


def is_admin(request: HttpRequest) -> bool:
    """True when the request carries a valid session for an active admin."""
    user = getattr(request, "user", None)
    return bool(user is not None and user.is_authenticated and user.is_active)


def admin_required(view_func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator that requires a signed-in admin.

    Anonymous callers get a 401 JSON response and the wrapped view never runs.
    Authenticated requests are forwarded unchanged.

    Usage:
        @admin_required
        def create_category(request):
            ...
    """

    @wraps(view_func)
    def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
        if not is_admin(request):
            return error_response(AuthError("Admin session required"))
        return view_func(request, *args, **kwargs)

    return wrapper


def api_view(component: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorator that translates every exception raised by a view.

    Domain errors become their structured responses; anything unexpected is
    logged under ``component`` and answered with a generic 500.

    Usage:
        @api_view("CATEGORY_PUT")
        def update_category(request, category_id):
            ...
    """

    def decorator(view_func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view_func)
        def wrapper(request: HttpRequest, *args: Any, **kwargs: Any) -> Any:
            try:
                return view_func(request, *args, **kwargs)
            except Exception as exc:
                return error_response(exc, component)

        return wrapper

    return decorator
