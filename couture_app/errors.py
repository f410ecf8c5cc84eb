"""Exception types shared across the stylist request path."""

from __future__ import annotations

USER_FACING_ERROR = "The stylist is currently unavailable. Please try again in a moment."


class CoutureMindError(Exception):
    """Base class for application errors."""


class StylistConfigurationError(CoutureMindError):
    """Raised when the model client cannot be used with the current config."""


class RecommendationFormatError(CoutureMindError):
    """Raised when the model reply is not a valid recommendation."""

    def __init__(self, message: str, details: list | None = None) -> None:
        super().__init__(message)
        self.details = details or []


class CriteriaIncompleteError(CoutureMindError):
    """Raised when a generation is attempted without an occasion."""


class StylistUnavailableError(CoutureMindError):
    """Single failure surfaced to the user; the cause is kept for logs only."""

    def __init__(self, message: str = USER_FACING_ERROR) -> None:
        super().__init__(message)
        self.user_message = message


__all__ = [
    "USER_FACING_ERROR",
    "CoutureMindError",
    "StylistConfigurationError",
    "RecommendationFormatError",
    "CriteriaIncompleteError",
    "StylistUnavailableError",
]
