"""Legion: classical-inheritance emulation for a small game runtime.

Usage:
    from legion import Class

    Base = Class.extend({"class_name": "Base", "speak": lambda self: "base"})
    Child = Base.extend({
        "class_name": "Child",
        "speak": lambda self, parent: "child-" + parent(),
    })

    Child().speak()  # "child-base"
"""

__version__ = "0.1.0"

# Configuration
from legion.config import LegionSettings, get_settings

# Core primitives
from legion.core import (
    PARENT_PARAMETER,
    Class,
    ClassNameCollisionError,
    ClassRegistry,
    Definition,
    DefinitionSource,
    IdentityRecord,
    MethodChain,
    ObjectId,
    Parent,
    RegistrationPolicy,
    UnsafeMixinWarning,
    define_root,
    get_registry,
)

# Game runtime
from legion.game import Environment, Game

# Storage
from legion.storage import ObjectIdAllocator

__all__ = [
    # Version
    "__version__",
    # Core
    "Class",
    "define_root",
    "Definition",
    "DefinitionSource",
    "MethodChain",
    "Parent",
    "PARENT_PARAMETER",
    "UnsafeMixinWarning",
    "ObjectId",
    "IdentityRecord",
    # Registry
    "ClassRegistry",
    "ClassNameCollisionError",
    "RegistrationPolicy",
    "get_registry",
    # Game
    "Game",
    "Environment",
    # Storage
    "ObjectIdAllocator",
    # Config
    "LegionSettings",
    "get_settings",
]
