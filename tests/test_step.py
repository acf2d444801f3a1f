"""Tests for the Step capability and StepProcess."""

from unittest.mock import MagicMock

import pytest

from templatemethod.step import FunctionalStep, PrintStep, Step, StepProcess


class RecordingStep(Step):
    name = "recording"

    def __init__(self):
        self.calls = 0

    def run(self) -> None:
        self.calls += 1


class TestStepProcess:
    def test_default_step_prints_hello_world(self, capsys):
        StepProcess().process_do_something()

        assert capsys.readouterr().out == "Hello World\n"

    def test_print_step_with_custom_text(self, capsys):
        StepProcess(PrintStep("Goodbye")).process_do_something()

        out = capsys.readouterr().out
        assert out == "Goodbye\n"
        assert "Hello World" not in out

    def test_injected_step_runs_once_per_call(self):
        step = RecordingStep()
        process = StepProcess(step)

        process.process_do_something()
        process.process_do_something()

        assert step.calls == 2

    def test_rejects_non_step(self):
        with pytest.raises(TypeError, match="Step instance"):
            StepProcess(lambda: None)

    def test_step_exception_propagates(self):
        exc = OSError("disk gone")
        step = FunctionalStep(MagicMock(side_effect=exc), name="failing")

        with pytest.raises(OSError) as info:
            StepProcess(step).process_do_something()

        assert info.value is exc


class TestFunctionalStep:
    def test_calls_function_without_arguments(self):
        func = MagicMock(return_value="ignored")

        FunctionalStep(func, name="mocked").run()

        func.assert_called_once_with()

    def test_name_defaults_to_function_name(self):
        def greet():
            pass

        assert FunctionalStep(greet).name == "greet"

    def test_explicit_name(self):
        assert FunctionalStep(print, name="printer").name == "printer"

    def test_empty_name_is_kept(self):
        def greet():
            pass

        assert FunctionalStep(greet, name="").name == ""


class TestStepContract:
    def test_step_is_abstract(self):
        with pytest.raises(TypeError):
            Step()

    def test_repr_includes_name(self):
        assert repr(PrintStep()) == "<PrintStep name='print'>"
        assert "PrintStep" in repr(StepProcess())
