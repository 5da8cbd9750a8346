"""Core functionalities: parent chaining, registry, identity and the extension engine.

Architecture Note:
    chain/ and identity/ are pure building blocks with no runtime state.
    registry/ and klass/ hold the process-wide default registry and the root
    Type bound to it. For stateful game services, see storage/ and game/.
"""

from legion.core.chain import PARENT_PARAMETER, MethodChain, Parent, chain_override, is_method
from legion.core.identity import IdentityRecord, ObjectId
from legion.core.klass import (
    Class,
    Definition,
    DefinitionSource,
    UnsafeMixinWarning,
    define_root,
)
from legion.core.registry import (
    ClassNameCollisionError,
    ClassRegistry,
    RegistrationPolicy,
    get_registry,
)

__all__ = [
    # Chain
    "MethodChain",
    "Parent",
    "PARENT_PARAMETER",
    "chain_override",
    "is_method",
    # Identity
    "ObjectId",
    "IdentityRecord",
    # Extension
    "Class",
    "define_root",
    "Definition",
    "DefinitionSource",
    "UnsafeMixinWarning",
    # Registry
    "ClassRegistry",
    "ClassNameCollisionError",
    "RegistrationPolicy",
    "get_registry",
]
