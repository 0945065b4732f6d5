from __future__ import annotations

from functools import wraps

from flask import g

from ..common.http import bearer_token
from .service import AdminService


def admin_required(admins: AdminService):
    """Decorator factory: the view runs only with a valid admin bearer token.

    The resolved admin id is exposed as ``g.admin_id``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.admin_id = admins.authenticate(bearer_token())
            return view(*args, **kwargs)

        return wrapper

    return decorator
