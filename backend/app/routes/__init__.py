# Routes package init
"""
Shelter Admin Backend — API Routes Package
============================================

What:  HTTP route handlers, one module per resource.
How:   Routes are thin: parse the request, call the service, wrap the result
       in the `{data, code, message}` envelope.

Route Inventory:
    - auth.py              POST /auth/login, /auth/register         (public)
    - users.py             /users, /users/me, freeze/unfreeze/reset-password
    - pets.py              /pets, /pets/{id}/favorite
    - adoptions.py         /adoptions, approve, cancel
    - adoption_records.py  /adoption-records, follow-up
    - rescues.py           /rescues
    - activities.py        /activities, join, leave
    - volunteers.py        /volunteers, hours
    - donations.py         /donations, confirm, cancel, receipt
    - notifications.py     /notifications, unread-count, mark-read, mark-all-read
    - dashboard.py         /dashboard/*                              (public)
    - health.py            GET /health                               (public)
"""

from typing import Optional, TypeVar

from app.schemas.common import ApiResponse

T = TypeVar("T")


def ok(data: Optional[T] = None, code: int = 200) -> ApiResponse[T]:
    """Wraps a payload in the success envelope."""
    return ApiResponse(data=data, code=code)
