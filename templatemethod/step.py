"""
Step — Interface-based rendition of the template's overridable step.

Instead of subclassing AbstractProcess, a caller can hand any `Step`
implementation to `StepProcess`. The skeleton stays in AbstractProcess;
only the step comes from outside.

Types of steps:
  1. Step          — Subclass and implement run().
  2. PrintStep     — Writes a fixed line to standard output.
  3. FunctionalStep — Wraps a plain zero-argument function as a step.

Usage:
    StepProcess(PrintStep("Goodbye")).process_do_something()
    StepProcess(FunctionalStep(lambda: print("hi"))).process_do_something()
"""

from __future__ import annotations

import abc
from typing import Any, Callable

from templatemethod.base import DEFAULT_MESSAGE, AbstractProcess


class Step(abc.ABC):
    """The capability a StepProcess needs: one required operation."""

    name: str = "step"

    @abc.abstractmethod
    def run(self) -> None:
        """Perform the step."""
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class PrintStep(Step):
    """Writes `text` followed by a line terminator to standard output."""

    def __init__(self, text: str = DEFAULT_MESSAGE, *, name: str = "print"):
        self.text = text
        self.name = name

    def run(self) -> None:
        print(self.text)


class FunctionalStep(Step):
    """
    Wraps a plain Python function as a Step.

    The function is called with no arguments; its return value is ignored.
    """

    def __init__(self, func: Callable[[], Any], *, name: str | None = None):
        self._func = func
        self.name = name if name is not None else getattr(func, "__name__", "step")

    def run(self) -> None:
        self._func()


class StepProcess(AbstractProcess):
    """Template whose step is supplied by a Step object."""

    def __init__(self, step: Step | None = None):
        if step is None:
            step = PrintStep()
        if not isinstance(step, Step):
            raise TypeError(
                f"StepProcess expects a Step instance, got {type(step).__name__}"
            )
        self.step = step

    def do_something(self) -> None:
        self.step.run()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} step={self.step!r}>"
