"""Class registry: name to Type mapping with an explicit collision policy."""

from legion.core.registry.core import ClassRegistry, get_registry
from legion.core.registry.models import ClassNameCollisionError, RegistrationPolicy

__all__ = [
    "ClassRegistry",
    "ClassNameCollisionError",
    "RegistrationPolicy",
    "get_registry",
]
