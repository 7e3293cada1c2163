"""
Layered API — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions raised by the data-access layer.
How:   Each exception carries a human-readable message and an optional
       context dict. The request-handling layer converts them into the
       failure envelope {"success": false, "message": ...}.
Who:   Raised by repositories; propagated untouched by services; caught by
       controllers and by the app-level fallback handlers in main.py.

Exception Hierarchy:
    LayeredApiError (base)
    └── NotFoundError      → requested id absent from the backend

Backend faults (SQLAlchemy / driver errors such as IntegrityError) are NOT
part of this hierarchy. They propagate unchanged from the repository and are
only turned into a failure envelope at the request-handling layer.

Every failure maps to HTTP 500, including NotFoundError.
"""

from typing import Any, Dict, Optional


class LayeredApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable description, returned in the failure envelope
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def to_envelope(self) -> Dict[str, Any]:
        """Failure payload: success=false plus the message, no data."""
        return {"success": False, "message": self.message}


class NotFoundError(LayeredApiError):
    """
    Raised when a requested id does not exist in the backend.

    Message format is "<Entity> not found", e.g. "User not found".
    """

    def __init__(
        self,
        entity: str = "Resource",
        entity_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["entity"] = entity
        if entity_id is not None:
            ctx["entity_id"] = entity_id
        super().__init__(message=f"{entity} not found", context=ctx)
        self.entity = entity
        self.entity_id = entity_id


def failure_envelope(exc: BaseException) -> Dict[str, Any]:
    """
    Build the failure payload for any exception.

    Application errors use their own message; backend faults are reported
    with their string form, unclassified.
    """
    if isinstance(exc, LayeredApiError):
        return exc.to_envelope()
    return {"success": False, "message": str(exc) or type(exc).__name__}
