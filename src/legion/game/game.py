"""Game: owns bound objects, hands out their ids, and drives the loop.

Usage:
    game = Game(environment=Environment())
    player = game.add(Player({"name": "ada"}))
    game.loop()
    game.environment.run(max_frames=10)

    # Types extend Game like any other legion Type
    def loop(self, parent):
        print("frame", self.frame)
        parent()

    Noisy = Game.extend({"class_name": "NoisyGame", "loop": loop})
"""

from __future__ import annotations

from typing import Any

from legion.config import get_settings
from legion.core.identity import ObjectId
from legion.core.klass import Class
from legion.storage import ObjectIdAllocator


class _GameMembers:
    class_name = "Game"

    paused = False
    environment: Any = None
    frame = 0
    """Number of frames the loop has run."""

    def _prepare(self) -> None:
        self._allocator = ObjectIdAllocator()
        self._objects: dict[Any, Any] = {}
        self.client_id = get_settings().client_id

    def _get_object_id(self) -> ObjectId:
        oid = self._allocator.allocate()
        # Skip ids already held by objects that joined from another game
        while oid in self._objects:
            oid = self._allocator.allocate()
        return oid

    def add(self, obj: Any) -> Any:
        """Bind ``obj`` to this game and track it by id.

        Returns:
            The object, for chaining.

        Raises:
            ValueError: If another object in this game already holds the
                object's id (possible for objects coming from another game).
        """
        if obj.id is not None and self._objects.get(obj.id, obj) is not obj:
            raise ValueError(f"Cannot add {obj!r}: id {obj.id} is taken in this game")
        obj._bind_game(self)
        self._objects[obj.id] = obj
        return obj

    def remove(self, obj: Any) -> None:
        """Stop tracking ``obj``, release its id and unbind it.

        Raises:
            KeyError: If the object is not in this game.
        """
        if self._objects.get(obj.id) is not obj:
            raise KeyError(f"{obj!r} is not in this game")
        del self._objects[obj.id]
        if isinstance(obj.id, ObjectId) and self._allocator.is_alive(obj.id):
            self._allocator.release(obj.id)
        obj._bind_game(None)

    def get(self, oid: Any) -> Any:
        """Object bound under ``oid``, or None."""
        return self._objects.get(oid)

    def objects(self) -> list[Any]:
        """Bound objects in the order they were added."""
        return list(self._objects.values())

    def update(self, dt: float) -> None:
        """Advance every bound object that defines ``update(dt)``."""
        for obj in self.objects():
            update = getattr(obj, "update", None)
            if callable(update):
                update(dt)

    def loop(self) -> None:
        """Run one frame and schedule the next, unless paused.

        Raises:
            RuntimeError: If the game has no environment.
        """
        if self.paused:
            return
        if self.environment is None:
            raise RuntimeError("Game has no environment to loop on")
        self.frame += 1
        self.update(self.environment.frame_interval)
        self.environment.request_frame(self.loop)


Game = Class.implement(_GameMembers)
