"""Tests for the Singleton pattern."""
import pytest

from pattern_catalogue.domain.creational import Singleton
from pattern_catalogue.domain.exceptions import InvalidOperationError, PatternError


class TestSingleton:
    """Test lazy creation and identity of the shared instance."""

    def test_get_instance_returns_same_object(self):
        """Every access returns the identical instance and value."""
        instances = [Singleton.get_instance() for _ in range(10)]

        first = instances[0]
        assert all(instance is first for instance in instances)
        assert all(instance.value == first.value for instance in instances)

    def test_value_in_unit_interval(self):
        instance = Singleton.get_instance()

        assert 0.0 <= instance.value < 1.0

    def test_instance_created_lazily(self):
        assert not Singleton.has_instance()

        Singleton.get_instance()

        assert Singleton.has_instance()

    def test_direct_construction_after_instance_exists_fails(self):
        Singleton.get_instance()

        with pytest.raises(InvalidOperationError, match="Use Singleton.get_instance"):
            Singleton()

    def test_invalid_operation_is_pattern_error(self):
        Singleton.get_instance()

        with pytest.raises(PatternError):
            Singleton()

    def test_injected_value_factory(self):
        instance = Singleton.get_instance(value_factory=lambda: 0.25)

        assert instance.value == 0.25

    def test_value_factory_ignored_once_created(self):
        first = Singleton.get_instance(value_factory=lambda: 0.25)
        second = Singleton.get_instance(value_factory=lambda: 0.75)

        assert second is first
        assert second.value == 0.25

    def test_reset_allows_new_instance(self):
        first = Singleton.get_instance(value_factory=lambda: 0.1)
        Singleton.reset()
        second = Singleton.get_instance(value_factory=lambda: 0.2)

        assert second is not first
        assert second.value == 0.2
