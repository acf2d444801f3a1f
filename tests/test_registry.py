import pytest

from templatemethod.base import AbstractProcess, HelloWorldProcess
from templatemethod.errors import VariantAlreadyRegisteredError, VariantNotFoundError
from templatemethod.registry import VariantRegistry
from templatemethod.variants import GoodbyeProcess


class ShoutProcess(AbstractProcess):
    """Upper-case greeting."""

    def do_something(self) -> None:
        print("HELLO WORLD")


class TestVariantRegistry:
    def test_singleton_pattern(self):
        """Verify get_registry returns the same instance."""
        from templatemethod.registry import get_registry

        reg1 = get_registry()
        reg2 = get_registry()
        assert reg1 is reg2

    def test_builtin_variants(self):
        from templatemethod.registry import get_registry

        registry = get_registry()
        assert registry.list_names() == ["hello_world", "goodbye"]
        assert registry.get("hello_world") is HelloWorldProcess
        assert registry.get("goodbye") is GoodbyeProcess

    def test_register_and_create(self, capsys):
        registry = VariantRegistry()
        registry.register("shout", ShoutProcess)

        assert registry.count == 1
        process = registry.create("shout")
        assert isinstance(process, ShoutProcess)

        process.process_do_something()
        assert capsys.readouterr().out == "HELLO WORLD\n"

    def test_get_unknown_returns_none(self):
        assert VariantRegistry().get("non_existent") is None

    def test_get_or_raise_unknown(self):
        registry = VariantRegistry()

        with pytest.raises(VariantNotFoundError) as info:
            registry.get_or_raise("non_existent")

        assert info.value.variant_name == "non_existent"
        assert str(info.value) == "Variant 'non_existent' not found in registry."

    def test_not_found_is_a_key_error(self):
        with pytest.raises(KeyError):
            VariantRegistry().create("missing")

    def test_duplicate_name_rejected(self):
        registry = VariantRegistry()
        registry.register("shout", ShoutProcess)

        with pytest.raises(VariantAlreadyRegisteredError):
            registry.register("shout", GoodbyeProcess)

        assert registry.get("shout") is ShoutProcess

    def test_non_process_rejected(self):
        registry = VariantRegistry()

        with pytest.raises(TypeError):
            registry.register("bad", object)
        with pytest.raises(TypeError):
            registry.register("instance", HelloWorldProcess())

    def test_list_all_returns_info(self):
        registry = VariantRegistry()
        registry.register("hello_world", HelloWorldProcess)
        registry.register("shout", ShoutProcess, description="Loud")

        infos = {info.name: info for info in registry.list_all()}

        assert infos["hello_world"].class_name == "HelloWorldProcess"
        assert infos["hello_world"].overrides_step is False
        assert infos["hello_world"].description == "Base-behavior variant: keeps the default step."
        assert infos["shout"].description == "Loud"
        assert infos["shout"].overrides_step is True
