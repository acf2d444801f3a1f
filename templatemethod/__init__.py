"""
templatemethod — The Template Method pattern.

A base class fixes the algorithm skeleton (`process_do_something()`) and
defers one step (`do_something()`) to variants, supplied either by
subclassing or by injecting a `Step`.
"""

import structlog

from templatemethod.base import AbstractProcess, HelloWorldProcess
from templatemethod.step import FunctionalStep, PrintStep, Step, StepProcess
from templatemethod.variants import GoodbyeProcess
from templatemethod.registry import VariantRegistry, get_registry
from templatemethod.models import VariantInfo
from templatemethod.logging import setup_logging
from templatemethod.errors import (
    TemplateMethodError,
    VariantAlreadyRegisteredError,
    VariantNotFoundError,
)

__all__ = [
    # Template
    "AbstractProcess",
    "HelloWorldProcess",
    "GoodbyeProcess",
    # Step capability
    "Step",
    "PrintStep",
    "FunctionalStep",
    "StepProcess",
    # Registry
    "VariantRegistry",
    "VariantInfo",
    "get_registry",
    # Errors
    "TemplateMethodError",
    "VariantNotFoundError",
    "VariantAlreadyRegisteredError",
]

# Keep stdout clean for step output when the host app has not set up structlog.
if not structlog.is_configured():
    setup_logging()
