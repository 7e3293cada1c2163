"""
Layered API — Response Envelope
================================

What:  The uniform {data, success, message?} wrapper returned by every
       data-access and business-logic operation.
How:   A generic Pydantic model parameterized by the payload type.

Invariant:
    success=True   → data is a fully populated T, message is absent
    success=False  → message is set, data is absent

Failures are not normally built as Envelope instances: they travel up the
stack as exceptions and are rendered by exceptions.failure_envelope().
"""

from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Generic response wrapper shared by every layer."""

    data: Optional[T] = Field(default=None, description="Operation payload")
    success: bool = Field(description="Whether the operation succeeded")
    message: Optional[str] = Field(
        default=None,
        description="Human-readable failure description (absent on success)",
    )

    @classmethod
    def ok(cls, data: T) -> "Envelope[T]":
        return cls(data=data, success=True)

    def to_body(self) -> Dict[str, Any]:
        """
        JSON-ready body with absent keys dropped.

        {"data": ..., "success": true} on success,
        {"success": false, "message": "..."} on failure.
        """
        return self.model_dump(mode="json", exclude_none=True)
