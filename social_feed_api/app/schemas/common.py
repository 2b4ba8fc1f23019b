"""
Schemas shared by every create operation.
"""

from typing import Any, Optional

from pydantic import BaseModel


class Created(BaseModel):
    """Identifier assigned by the store to a freshly inserted row."""

    id: int


class CreateResponse(BaseModel):
    """``{"success": true, "id": ...}`` or ``{"success": false[, "message": ...]}``."""

    success: bool
    id: Optional[int] = None
    message: Optional[str] = None


def coerce_text(value: Any) -> Any:
    """Turn a number sent in a text field into its string form.

    Zero and booleans are left alone so they still fail ``str``
    validation, the way a missing field would.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value:
        return str(value)
    return value
