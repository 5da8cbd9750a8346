"""Registry models: collision policy and errors."""

from __future__ import annotations

from enum import Enum


class RegistrationPolicy(Enum):
    """What happens when a second Type registers under a taken class name."""

    LAST_WINS = "last_wins"
    """Later Type replaces the earlier entry. Default, matches extend() chains reusing names."""

    ERROR = "error"
    """Raise ClassNameCollisionError. Useful for catching accidental name reuse."""


class ClassNameCollisionError(RuntimeError):
    """Raised under RegistrationPolicy.ERROR when a class name is already taken."""

    def __init__(self, class_name: str, existing: type, incoming: type):
        super().__init__(
            f"Class name collision: {class_name!r} is held by {existing.__qualname__}, "
            f"cannot register {incoming.__qualname__}"
        )
        self.class_name = class_name
        self.existing = existing
        self.incoming = incoming
