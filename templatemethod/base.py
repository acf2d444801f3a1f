"""
AbstractProcess — Template Method base class.

The base class owns the algorithm skeleton (`process_do_something()`) and
defers the variable part to a single overridable step (`do_something()`).

Usage:
    class Shout(AbstractProcess):
        def do_something(self) -> None:
            print("HELLO WORLD")

    Shout().process_do_something()

The skeleton is final: subclasses customize the step, never the skeleton.
"""

from __future__ import annotations

import abc
import time
from typing import final

import structlog
from opentelemetry import trace

from templatemethod.observability import get_tracer

logger = structlog.get_logger(__name__)

DEFAULT_MESSAGE = "Hello World"

_SKELETON_METHODS = ("process_do_something",)


class AbstractProcess(abc.ABC):
    """
    Base type exposing one non-overridable orchestration operation and
    one overridable step operation.

    Subclasses MAY override:
      - do_something(): The step (default: print "Hello World")

    Subclasses MUST NOT override:
      - process_do_something(): Rejected with TypeError at class creation,
        whether redefined on the subclass or inherited from a mixin.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for method in _SKELETON_METHODS:
            if getattr(cls, method) is not getattr(AbstractProcess, method):
                raise TypeError(
                    f"{cls.__name__} must not override {method}(); "
                    f"override do_something() instead."
                )

    # ── Step (overridable) ────────────────────────────────────────────

    def do_something(self) -> None:
        """Write "Hello World" to standard output."""
        print(DEFAULT_MESSAGE)

    # ── Skeleton (final) ──────────────────────────────────────────────

    @final
    def process_do_something(self) -> None:
        """
        Run the algorithm skeleton.

        Invokes do_something() exactly once, synchronously, before
        returning. Whatever the step raises propagates unchanged.
        """
        with get_tracer().start_as_current_span(
            "process.do_something",
            attributes={"process_type": type(self).__name__},
            record_exception=False,
        ) as span:
            logger.debug("step_started", process=type(self).__name__)

            start = time.monotonic()
            try:
                self.do_something()
            except Exception as exc:
                elapsed = round((time.monotonic() - start) * 1000, 2)
                logger.error(
                    "step_failed",
                    process=type(self).__name__,
                    duration_ms=elapsed,
                    error=str(exc),
                )
                span.record_exception(exc)
                span.set_status(trace.StatusCode.ERROR, str(exc))
                raise

            elapsed = round((time.monotonic() - start) * 1000, 2)
            span.set_attribute("duration_ms", elapsed)
            logger.debug(
                "step_completed",
                process=type(self).__name__,
                duration_ms=elapsed,
            )

            # Further skeleton steps go here, after the first one.

    @classmethod
    def overrides_step(cls) -> bool:
        """True when this class replaces the default step."""
        return cls.do_something is not AbstractProcess.do_something

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class HelloWorldProcess(AbstractProcess):
    """Base-behavior variant: keeps the default step."""
