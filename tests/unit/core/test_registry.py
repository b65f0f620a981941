"""Unit tests for NamespaceRegistry."""

from memo_cache.core.registry import NamespaceRegistry, get_default_registry
from memo_cache.utils.config import CacheConfig


class TestNamespaceRegistry:
    """Test namespace to store resolution."""

    def test_same_namespace_returns_same_store(self, registry):
        """Test repeated lookups return the identical instance."""
        first = registry.get_store("x")
        second = registry.get_store("x")

        assert first is second
        first.set("key", "value", 1000)
        assert second.get("key") == "value"

    def test_default_namespace(self, registry):
        """Test omitting the namespace selects "default"."""
        store = registry.get_store()

        assert store.namespace == "default"
        assert registry.get_store("default") is store

    def test_empty_string_is_distinct_namespace(self, registry):
        """Test "" is its own namespace, not an alias of "default"."""
        assert registry.get_store("") is not registry.get_store("default")

    def test_namespaces_are_isolated(self, registry):
        """Test the same key in two namespaces holds independent values."""
        registry.get_store("a").set("key", "from-a", 1000)
        registry.get_store("b").set("key", "from-b", 1000)

        assert registry.get_store("a").get("key") == "from-a"
        assert registry.get_store("b").get("key") == "from-b"

    def test_namespaces_and_contains(self, registry):
        """Test membership does not create stores."""
        assert "a" not in registry
        registry.get_store("a")
        registry.get_store("b")
        registry.get_store("a")

        assert "a" in registry
        assert "c" not in registry
        assert registry.namespaces() == ["a", "b"]

    def test_configured_default_namespace(self, clock):
        """Test the config picks which store get_store() returns."""
        registry = NamespaceRegistry(CacheConfig(default_namespace="app"), clock=clock)

        assert registry.get_store().namespace == "app"

    def test_stores_share_registry_clock_and_metrics(self, registry, clock):
        """Test stores expire entries against the registry's clock."""
        store = registry.get_store("x")
        store.set("key", "value", 5)
        clock.advance(6)

        assert store.get("key") is None
        assert registry.metrics.evictions.get(namespace="x", reason="expired") == 1

    def test_registries_are_independent(self, clock):
        """Test two registries never share stores."""
        one = NamespaceRegistry(clock=clock)
        two = NamespaceRegistry(clock=clock)

        assert one.get_store("x") is not two.get_store("x")


class TestDefaultRegistry:
    """Test the process-wide registry."""

    def test_default_registry_is_singleton(self):
        assert get_default_registry() is get_default_registry()
        assert get_default_registry().get_store("x") is get_default_registry().get_store("x")
