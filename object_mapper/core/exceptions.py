"""
Custom exception hierarchy for the mapper.

All library-specific exceptions inherit from ObjectMapperException,
so callers can catch one base type and still get a structured payload.

Hierarchy:
    ObjectMapperException
    ├── InvalidDescriptorException  — Bad property mapping descriptor at add time
    └── InvalidPathException        — Dotted path cannot address a location

Exceptions raised by user-supplied transforms or mapping functions are
never wrapped; they reach the caller unchanged.
"""

from enum import Enum
from typing import Any


class ObjectMapperException(Exception):
    """
    Base exception for all mapper errors.

    Attributes:
        message:    Human-readable error description.
        error_code: Machine-readable error identifier (e.g. "INVALID_DESCRIPTOR").
        details:    Optional dict with extra context for debugging.
    """

    def __init__(
        self,
        message: str = "An unexpected mapping error occurred.",
        error_code: str = "OBJECT_MAPPER_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the exception into a JSON-friendly dict."""
        payload: dict[str, Any] = {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
        }
        if self.details:
            payload["details"] = self.details
        return payload


# ─── Descriptor Errors ────────────────────────────────────────────────


class InvalidDescriptorKind(str, Enum):
    """Why a property mapping descriptor was rejected."""

    NOT_AN_OBJECT = "NOT_AN_OBJECT"
    MISSING_FROM = "MISSING_FROM"
    INVALID_FIELD = "INVALID_FIELD"


_DESCRIPTOR_MESSAGES = {
    InvalidDescriptorKind.NOT_AN_OBJECT: "Property mapping descriptor must be an object.",
    InvalidDescriptorKind.MISSING_FROM: '"from" must be defined for property mapping descriptor.',
    InvalidDescriptorKind.INVALID_FIELD: "Property mapping descriptor has an invalid field.",
}


class InvalidDescriptorException(ObjectMapperException):
    """Raised when a property mapping descriptor is rejected."""

    def __init__(
        self,
        kind: InvalidDescriptorKind,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.kind = kind
        super().__init__(
            message=message or _DESCRIPTOR_MESSAGES[kind],
            error_code="INVALID_DESCRIPTOR",
            details={**(details or {}), "kind": kind.value},
        )


# ─── Path Errors ──────────────────────────────────────────────────────


class InvalidPathException(ObjectMapperException):
    """Raised when a value cannot be written at a dotted path."""

    def __init__(
        self,
        path: str,
        reason: str = "Path cannot be written.",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.path = path
        super().__init__(
            message=f"Cannot set path '{path}': {reason}",
            error_code="INVALID_PATH",
            details={**(details or {}), "path": path},
        )
