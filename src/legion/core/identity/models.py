"""Object identity models: ids handed out by a game and the wire identity record.

Usage:
    oid = ObjectId(index=42, generation=1)
    record = IdentityRecord(id=oid, client_id="server", class_name="Cat")
    record.to_wire()  # {"id": oid, "clientID": "server", "className": "Cat"}
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True, slots=True)
class ObjectId:
    """Identifier a game assigns to a bound object.

    Generation distinguishes a recycled index from the object that held it
    before.
    """

    index: int = 0
    generation: int = 0

    def __str__(self) -> str:
        return f"{self.index}:{self.generation}"


class IdentityRecord(BaseModel):
    """Minimal wire-format identity of a legion object.

    Field aliases are the wire keys: ``id``, ``clientID``, ``className``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Any = None
    client_id: Any = Field(default=None, alias="clientID")
    class_name: str = Field(alias="className")

    def to_wire(self) -> dict[str, Any]:
        """Plain dict keyed by wire names, values passed through untouched."""
        return {
            info.alias or name: getattr(self, name)
            for name, info in type(self).model_fields.items()
        }
