"""
VariantRegistry — Named catalogue of AbstractProcess variants.

The registry maps a short name to a variant class so callers (the CLI in
particular) can build a process by name:

    registry = get_registry()
    registry.create("goodbye").process_do_something()

The global registry comes pre-populated with the built-in variants.
"""

from __future__ import annotations

import structlog

from templatemethod.base import AbstractProcess, HelloWorldProcess
from templatemethod.errors import VariantAlreadyRegisteredError, VariantNotFoundError
from templatemethod.models import VariantInfo
from templatemethod.variants import GoodbyeProcess

logger = structlog.get_logger(__name__)


class VariantRegistry:
    """
    Registers and looks up variant classes by name.

    Usage:
        registry = VariantRegistry()
        registry.register("shout", ShoutProcess, description="Upper-case greeting")

        process = registry.create("shout")
        all_variants = registry.list_all()
    """

    def __init__(self):
        self._variants: dict[str, type[AbstractProcess]] = {}
        self._descriptions: dict[str, str] = {}

    # ── Registration ──────────────────────────────────────────────────

    def register(
        self,
        name: str,
        cls: type[AbstractProcess],
        *,
        description: str = "",
    ) -> None:
        """Register a variant class under `name`."""
        if not (isinstance(cls, type) and issubclass(cls, AbstractProcess)):
            raise TypeError(
                f"Variant '{name}' must be an AbstractProcess subclass, "
                f"got {cls!r}"
            )
        if name in self._variants:
            raise VariantAlreadyRegisteredError(
                f"Variant '{name}' is already registered.",
                variant_name=name,
            )

        self._variants[name] = cls
        self._descriptions[name] = description or _first_doc_line(cls)
        logger.debug("variant_registered", name=name, cls=cls.__name__)

    # ── Lookup ────────────────────────────────────────────────────────

    def get(self, name: str) -> type[AbstractProcess] | None:
        """Get a variant class by name."""
        return self._variants.get(name)

    def get_or_raise(self, name: str) -> type[AbstractProcess]:
        """Get a variant class by name or raise VariantNotFoundError."""
        cls = self._variants.get(name)
        if cls is None:
            raise VariantNotFoundError(
                f"Variant '{name}' not found in registry.",
                variant_name=name,
            )
        return cls

    def create(self, name: str) -> AbstractProcess:
        """Instantiate the variant registered under `name`."""
        return self.get_or_raise(name)()

    # ── Listing ───────────────────────────────────────────────────────

    def list_names(self) -> list[str]:
        """List all registered variant names."""
        return list(self._variants.keys())

    def list_all(self) -> list[VariantInfo]:
        """List all registered variants with summary info."""
        return [
            VariantInfo(
                name=name,
                class_name=cls.__name__,
                description=self._descriptions[name],
                overrides_step=cls.overrides_step(),
            )
            for name, cls in self._variants.items()
        ]

    @property
    def count(self) -> int:
        return len(self._variants)


def _first_doc_line(cls: type) -> str:
    doc = cls.__doc__ or ""
    return doc.strip().splitlines()[0] if doc.strip() else ""


# ── Singleton ─────────────────────────────────────────────────────────

_registry: VariantRegistry | None = None


def get_registry() -> VariantRegistry:
    """Get or create the global VariantRegistry with built-in variants."""
    global _registry
    if _registry is None:
        _registry = VariantRegistry()
        _registry.register("hello_world", HelloWorldProcess)
        _registry.register("goodbye", GoodbyeProcess)
    return _registry
