"""Class registry: maps class names to the Types produced by extension.

Usage:
    registry = ClassRegistry(policy=RegistrationPolicy.ERROR)
    Root = define_root(registry)
    Animal = Root.extend({"class_name": "Animal"})

    assert registry["Animal"] is Animal
    cat = registry.revive({"id": 7, "clientID": "server", "className": "Animal"})
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from legion.core.identity import IdentityRecord
from legion.core.registry.models import ClassNameCollisionError, RegistrationPolicy

if TYPE_CHECKING:
    from legion.config import LegionSettings


class ClassRegistry:
    """Registry mapping class names to Types.

    One registry is owned by each composition root. The module-level default
    instance backs the built-in ``Class`` root.
    """

    def __init__(self, policy: RegistrationPolicy = RegistrationPolicy.LAST_WINS) -> None:
        """Initialize empty registry.

        Args:
            policy: Behavior when a name is registered twice by different Types.
        """
        self.policy = policy
        self._by_name: dict[str, type] = {}

    @classmethod
    def from_settings(cls, settings: LegionSettings) -> ClassRegistry:
        """Build a registry whose policy comes from configuration."""
        return cls(policy=RegistrationPolicy(settings.registry_policy))

    def register(self, cls: type, class_name: str | None = None) -> type:
        """Register a Type under its class name.

        Args:
            cls: Type to register.
            class_name: Name to register under. Defaults to ``cls.class_name``.

        Returns:
            The registered Type.

        Raises:
            ClassNameCollisionError: If policy is ERROR and another Type holds the name.
        """
        name = class_name if class_name is not None else cls.class_name  # type: ignore[attr-defined]
        existing = self._by_name.get(name)
        if existing is not None and existing is not cls and self.policy is RegistrationPolicy.ERROR:
            raise ClassNameCollisionError(name, existing, cls)
        self._by_name[name] = cls
        return cls

    def unregister(self, class_name: str) -> type | None:
        """Remove and return the Type registered under ``class_name``, if any."""
        return self._by_name.pop(class_name, None)

    def get(self, class_name: str) -> type | None:
        """Get Type by class name.

        Args:
            class_name: Registered class name.

        Returns:
            Type if registered, None otherwise.
        """
        return self._by_name.get(class_name)

    def __getitem__(self, class_name: str) -> type:
        try:
            return self._by_name[class_name]
        except KeyError:
            raise KeyError(f"No class registered under {class_name!r}") from None

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def names(self) -> list[str]:
        """Registered class names in registration order."""
        return list(self._by_name)

    def clear(self) -> None:
        """Drop every registration."""
        self._by_name.clear()

    def revive(self, record: Mapping[str, Any]) -> Any:
        """Rebuild an instance from a serialized identity record.

        The instance is created without running ``init``; only ``id`` and
        ``client_id`` are restored.

        Args:
            record: Mapping with ``id``, ``clientID`` and ``className`` keys,
                as produced by ``serialize()``.

        Returns:
            New instance of the registered Type.

        Raises:
            pydantic.ValidationError: If the record has no string ``className``.
            KeyError: If ``className`` is not registered.
        """
        identity = IdentityRecord.model_validate(record)
        cls = self[identity.class_name]
        instance = cls.raw()  # type: ignore[attr-defined]
        instance.id = identity.id
        instance.client_id = identity.client_id
        return instance


# Module-level registry instance
_registry = ClassRegistry()


def get_registry() -> ClassRegistry:
    """Access the default class registry.

    Returns:
        The process-wide ClassRegistry backing the built-in ``Class`` root.
    """
    return _registry
