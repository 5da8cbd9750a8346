"""Object identity: lightweight ids handed out by a game."""

from legion.core.identity.models import IdentityRecord, ObjectId

__all__ = [
    "IdentityRecord",
    "ObjectId",
]
