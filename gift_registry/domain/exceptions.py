"""
Exception hierarchy for the gift registry.

Raised by use cases, repositories and the image-analysis provider. All
errors inherit from GiftRegistryError and carry a user-facing message that
the API layer can return without exposing internal details.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class GiftRegistryError(Exception):
    """Base exception for all gift registry errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(GiftRegistryError):
    """Raised when request input is rejected before any provider or store call."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("user_message", message)
        super().__init__(message, **kwargs)


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class NotFoundError(GiftRegistryError):
    """Raised when an item id does not exist."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            f"{resource} not found: {resource_id}",
            user_message=f"{resource} not found",
            details={"resource": resource, "id": resource_id},
        )
        self.resource = resource
        self.resource_id = resource_id


# -----------------------------------------------------------------------------
# Image-analysis provider
# -----------------------------------------------------------------------------


class ProviderError(GiftRegistryError):
    """Raised when the image-analysis call fails. Ingestion aborts; nothing is persisted."""

    NETWORK = "network"
    TIMEOUT = "timeout"
    AUTH = "auth"
    QUOTA = "quota"
    MALFORMED_IMAGE = "malformed_image"
    UNAVAILABLE = "unavailable"
    INVALID_RESPONSE = "invalid_response"

    KINDS = (NETWORK, TIMEOUT, AUTH, QUOTA, MALFORMED_IMAGE, UNAVAILABLE, INVALID_RESPONSE)

    def __init__(
        self,
        message: str,
        kind: str = UNAVAILABLE,
        status_code: Optional[int] = None,
        **kwargs,
    ):
        if kind not in self.KINDS:
            raise ValueError(f"Unknown provider error kind: {kind}")
        kwargs.setdefault("user_message", "Image analysis failed. Please try again.")
        kwargs.setdefault("details", {"kind": kind, "status_code": status_code})
        super().__init__(message, **kwargs)
        self.kind = kind
        self.status_code = status_code


# -----------------------------------------------------------------------------
# Store
# -----------------------------------------------------------------------------


class StoreError(GiftRegistryError):
    """Raised when the item store fails; the surrounding write is rolled back."""

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        kwargs.setdefault("user_message", "Storage error. Please try again.")
        super().__init__(message, **kwargs)
        self.operation = operation


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API boundaries so internal details are never exposed.
    """
    if isinstance(exc, GiftRegistryError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Something went wrong. Please try again."
