"""Tests for the demo runner and its collaborators."""
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from pattern_catalogue.application.console import DemoConsole
from pattern_catalogue.application.decorators import demo, get_registered_demos
from pattern_catalogue.application.dto import DemoResult
from pattern_catalogue.application.runner import DemoRunner
from pattern_catalogue.domain.exceptions import ConfigurationError, InvalidArgumentError
from pattern_catalogue.infrastructure.di import DIContainer
from pattern_catalogue.infrastructure.registry import DemoRegistry


def greeting_demo(console, container):
    console.emit("hello")
    console.emit(42)


def failing_demo(console, container):
    console.emit("before")
    raise RuntimeError("demo broke")


class TestDemoRunner:
    """Test running demos from a registry."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = DemoRegistry()
        self.registry.register("greeting", "creational", greeting_demo, "Says hello")
        self.registry.register("failing", "behavioral", failing_demo)
        self.container = DIContainer()
        self.runner = DemoRunner(self.registry, self.container)

    def test_run_returns_result(self):
        result = self.runner.run("greeting")

        assert isinstance(result, DemoResult)
        assert result.pattern == "greeting"
        assert result.category == "creational"
        assert result.lines == ["hello", "42"]
        assert result.duration_ms >= 0

    def test_demo_receives_container(self):
        demo_func = Mock()
        self.registry.register("mocked", "structural", demo_func)

        self.runner.run("mocked")

        console, container = demo_func.call_args[0]
        assert isinstance(console, DemoConsole)
        assert container is self.container

    def test_demo_errors_propagate(self):
        with pytest.raises(RuntimeError, match="demo broke"):
            self.runner.run("failing")

    def test_unknown_demo(self):
        with pytest.raises(InvalidArgumentError):
            self.runner.run("missing")

    def test_run_many_preserves_order(self):
        results = self.runner.run_many(["greeting", "greeting"])

        assert [r.pattern for r in results] == ["greeting", "greeting"]

    def test_run_many_validates_names_first(self):
        demo_func = Mock()
        self.registry.register("mocked", "structural", demo_func)

        with pytest.raises(InvalidArgumentError):
            self.runner.run_many(["mocked", "missing"])

        demo_func.assert_not_called()

    def test_run_all_uses_catalogue_order(self):
        self.registry.clear_registrations()
        self.registry.register("late", "behavioral", greeting_demo)
        self.registry.register("early", "creational", greeting_demo)

        results = self.runner.run_all()

        assert [r.pattern for r in results] == ["early", "late"]

    def test_run_all_with_enabled_subset(self):
        results = self.runner.run_all(["greeting"])

        assert [r.pattern for r in results] == ["greeting"]

    def test_echo_receives_lines(self):
        echoed = []
        runner = DemoRunner(self.registry, self.container, echo=echoed.append)

        runner.run("greeting")

        assert echoed == ["hello", "42"]


class TestDemoResult:
    def test_frozen(self):
        result = DemoResult(pattern="chain", category="behavioral", lines=["x"])

        with pytest.raises(ValidationError):
            result.pattern = "other"

    def test_to_dict(self):
        result = DemoResult(pattern="chain", category="behavioral", lines=["x"], duration_ms=1.5)

        assert result.to_dict() == {
            "pattern": "chain",
            "category": "behavioral",
            "lines": ["x"],
            "duration_ms": 1.5,
        }


class TestDemoDecorator:
    def test_rejects_unknown_category(self):
        with pytest.raises(ValueError, match="Category must be one of"):
            demo("x", category="architectural")

    def test_rejects_duplicate_name(self):
        from pattern_catalogue.application.demos.structural import facade_demo

        with pytest.raises(ConfigurationError, match="already declared"):
            demo("facade", category="structural")(lambda console, container: None)

        definitions = {d.name: d for d in get_registered_demos()}
        assert definitions["facade"].func is facade_demo

    def test_marks_function(self):
        from pattern_catalogue.application.demos.structural import facade_demo

        assert facade_demo._demo_name == "facade"


class TestDemoConsole:
    def test_collects_lines_as_strings(self):
        console = DemoConsole()

        console.emit(5)
        console.emit(["a"])

        assert console.lines == ["5", "['a']"]

    def test_lines_is_a_copy(self):
        console = DemoConsole()
        console.emit("a")

        console.lines.append("b")

        assert console.lines == ["a"]
