"""Object id allocation service.

ObjectIdAllocator is the stateful service a Game uses to hand out ids.
"""

from __future__ import annotations

from legion.core.identity import ObjectId


class ObjectIdAllocator:
    """Hands out object ids and recycles released indices.

    A recycled index comes back with its generation incremented, so an id
    kept by a removed object never equals the id of the object that reuses
    its slot.
    """

    def __init__(self) -> None:
        self._next_index = 0
        self._free: list[int] = []
        self._generations: dict[int, int] = {}

    def allocate(self) -> ObjectId:
        """Allocate an id, reusing a released index when one is available."""
        if self._free:
            index = self._free.pop()
        else:
            index = self._next_index
            self._next_index += 1
            self._generations[index] = 0
        return ObjectId(index=index, generation=self._generations[index])

    def release(self, oid: ObjectId) -> None:
        """Free ``oid`` so its index can be reused under the next generation.

        Raises:
            ValueError: If ``oid`` is not a live id from this allocator.
        """
        if not self.is_alive(oid):
            raise ValueError(f"Cannot release {oid}: not a live id")
        self._generations[oid.index] += 1
        self._free.append(oid.index)

    def is_alive(self, oid: ObjectId) -> bool:
        """Check if ``oid`` was handed out here and not released since."""
        return oid.index not in self._free and self._generations.get(oid.index) == oid.generation
