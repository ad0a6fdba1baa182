"""Unit tests for the parameter registry."""

import logging

from claparse.core.domain.parameter import ParameterSpec
from claparse.core.services.parameter_registry import ParameterRegistry


class TestParameterRegistry:
    def test_register_and_get(self):
        registry = ParameterRegistry()
        spec = ParameterSpec(name="out", min_values=1, max_values=1)

        assert registry.register(spec) is None
        assert registry.get("out") is spec
        assert "out" in registry
        assert len(registry) == 1

    def test_same_name_replaces_previous(self, caplog):
        registry = ParameterRegistry()
        first = ParameterSpec(name="out")
        second = ParameterSpec(name="out", prefix="--")

        registry.register(first)
        with caplog.at_level(logging.DEBUG, logger="claparse"):
            replaced = registry.register(second)

        assert replaced is first
        assert registry.get_all() == [second]
        assert "Replaced parameter: out" in caplog.text

    def test_find_by_marker(self):
        registry = ParameterRegistry()
        registry.register(ParameterSpec(name="all", prefix="--"))

        assert registry.find_by_marker("--all").name == "all"
        assert registry.find_by_marker("-all") is None
        assert registry.find_by_marker("all") is None

    def test_find_by_marker_follows_mutated_affixes(self):
        registry = ParameterRegistry()
        spec = ParameterSpec(name="all")
        registry.register(spec)

        spec.prefix = "/"

        assert registry.find_by_marker("/all") is spec
        assert registry.find_by_marker("-all") is None

    def test_unregister(self):
        registry = ParameterRegistry()
        spec = ParameterSpec(name="v")
        registry.register(spec)

        assert registry.unregister("v") is spec
        assert registry.unregister("v") is None
        assert registry.get("v") is None

    def test_required_names(self):
        registry = ParameterRegistry()
        registry.register(ParameterSpec(name="a", required=True))
        registry.register(ParameterSpec(name="b"))
        registry.register(ParameterSpec(name="c", required=True))

        assert registry.required_names() == ["a", "c"]

    def test_get_all_returns_a_new_list(self):
        registry = ParameterRegistry()
        registry.register(ParameterSpec(name="v"))

        registry.get_all().clear()

        assert len(registry.get_all()) == 1
