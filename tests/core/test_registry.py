"""Tests for the class registry."""

import pytest
from pydantic import ValidationError

from legion import (
    ClassNameCollisionError,
    ClassRegistry,
    LegionSettings,
    RegistrationPolicy,
    define_root,
)


@pytest.fixture
def strict_registry():
    return ClassRegistry(policy=RegistrationPolicy.ERROR)


def test_root_registers_itself(root, registry):
    assert registry["Class"] is root
    assert registry.names() == ["Class"]


def test_roots_do_not_share_registries(root, registry):
    other_registry = ClassRegistry()
    other_root = define_root(other_registry)

    Animal = other_root.extend({"class_name": "Animal"})

    assert "Animal" in other_registry
    assert "Animal" not in registry
    assert other_registry.get("Animal") is Animal


def test_error_policy_rejects_collision(strict_registry):
    root = define_root(strict_registry)
    root.extend({"class_name": "Animal"})

    with pytest.raises(ClassNameCollisionError, match="Animal"):
        root.extend({"class_name": "Animal"})


def test_error_policy_rejects_inherited_name(strict_registry):
    """Under ERROR, a Type that inherits its parent's name collides with it."""
    root = define_root(strict_registry)
    Animal = root.extend({"class_name": "Animal"})

    with pytest.raises(ClassNameCollisionError):
        Animal.extend({"legs": 4})


def test_reregistering_same_type_is_allowed(strict_registry):
    root = define_root(strict_registry)
    Animal = root.extend({"class_name": "Animal"})

    assert strict_registry.register(Animal) is Animal
    assert len(strict_registry) == 2


def test_get_missing_returns_none(registry):
    assert registry.get("Nope") is None
    with pytest.raises(KeyError, match="Nope"):
        registry["Nope"]


def test_unregister_and_clear(root, registry):
    Animal = root.extend({"class_name": "Animal"})

    assert registry.unregister("Animal") is Animal
    assert registry.unregister("Animal") is None

    registry.clear()
    assert len(registry) == 0
    assert list(registry) == []


def test_from_settings_uses_configured_policy():
    registry = ClassRegistry.from_settings(LegionSettings(registry_policy="error"))

    assert registry.policy is RegistrationPolicy.ERROR


def test_revive_rebuilds_identity_without_init(root, registry):
    calls = []

    def init(self, properties=None, parent=None):
        calls.append(properties)
        parent(properties)

    Unit = root.extend({"class_name": "Unit", "init": init, "hp": 10})
    original = Unit({"id": 5, "client_id": "c1"})

    revived = registry.revive(original.serialize())

    assert type(revived) is Unit
    assert (revived.id, revived.client_id, revived.hp) == (5, "c1", 10)
    assert len(calls) == 1


def test_revive_unknown_class_name(registry):
    with pytest.raises(KeyError, match="Ghost"):
        registry.revive({"id": 1, "clientID": None, "className": "Ghost"})


def test_revive_requires_class_name(registry):
    with pytest.raises(ValidationError):
        registry.revive({"id": 1})
