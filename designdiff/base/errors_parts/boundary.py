"""
Boundary (caller) errors.

These are the only failures that propagate out of the orchestration layer.
They describe malformed requests rather than provider trouble, and the HTTP
layer maps both to ``400 Bad Request``.
"""
from __future__ import annotations


class UnsupportedProviderError(ValueError):
    """Raised when a provider name is not one of the supported variants."""

    def __init__(self, provider: object) -> None:
        self.provider = provider
        super().__init__(f"Unsupported provider '{provider}'")


class InputArityError(ValueError):
    """Raised when a request carries too few inputs (e.g. one screenshot)."""

    def __init__(self, message: str, *, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(message)


__all__ = ["UnsupportedProviderError", "InputArityError"]
