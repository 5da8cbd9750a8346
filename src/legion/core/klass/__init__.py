"""Extension engine: root Type, extend/implement and the base Type contract."""

from legion.core.klass.core import Class, define_root
from legion.core.klass.models import Definition, DefinitionSource, UnsafeMixinWarning

__all__ = [
    "Class",
    "define_root",
    "Definition",
    "DefinitionSource",
    "UnsafeMixinWarning",
]
