"""Stateful services backing a game."""

from legion.storage.allocator import ObjectIdAllocator

__all__ = [
    "ObjectIdAllocator",
]
