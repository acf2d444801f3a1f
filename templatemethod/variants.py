"""Ready-made variants of AbstractProcess."""

from templatemethod.base import AbstractProcess

GOODBYE_MESSAGE = "Goodbye"


class GoodbyeProcess(AbstractProcess):
    """Overrides the step to write "Goodbye" instead of the default text."""

    def do_something(self) -> None:
        print(GOODBYE_MESSAGE)
