"""
Structured Error Taxonomy — typed exceptions for the package surfaces.

Exceptions raised by a step are never wrapped: they reach the caller of
`process_do_something()` unchanged. The classes below cover the registry
and CLI that sit around the pattern.
"""

from __future__ import annotations

__all__ = [
    "TemplateMethodError",
    "RegistryError",
    "VariantNotFoundError",
    "VariantAlreadyRegisteredError",
]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Base
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class TemplateMethodError(Exception):
    """Root exception for the package.

    Attributes:
        error_code: Machine-readable code for structured logs.
    """

    error_code: str = "TEMPLATEMETHOD_ERROR"

    def __init__(self, message: str, *, detail: str | None = None):
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict:
        """Serialize for structured logging."""
        return {
            "error_code": self.error_code,
            "message": str(self),
            "detail": self.detail,
        }


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Registry Layer — Errors from variant lookup and registration
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class RegistryError(TemplateMethodError):
    """Base for all variant registry errors."""

    error_code = "REGISTRY_ERROR"

    def __init__(self, message: str, *, variant_name: str = "", **kwargs):
        self.variant_name = variant_name
        super().__init__(message, **kwargs)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["variant_name"] = self.variant_name
        return d


class VariantNotFoundError(RegistryError, KeyError):
    """No variant is registered under the requested name."""

    error_code = "VARIANT_NOT_FOUND"

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return Exception.__str__(self)


class VariantAlreadyRegisteredError(RegistryError):
    """A variant with the same name is already registered."""

    error_code = "VARIANT_ALREADY_REGISTERED"
