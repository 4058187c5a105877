"""Custom exception hierarchy for the Barnhaus estimator."""

from __future__ import annotations


class BarnhausError(Exception):
    """Base exception for all Barnhaus errors."""


class LocationNotFoundError(BarnhausError):
    """Raised when a location id is not in the city table."""

    def __init__(self, location: str) -> None:
        self.location = location
        super().__init__(f"Unknown location: '{location}'")


class TransportError(BarnhausError):
    """Raised when a call to the language model provider fails."""


class ImageValidationError(BarnhausError):
    """Raised when an uploaded image is empty or in an unsupported format."""
