"""Domain models for households and users."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class HouseRecord:
    """A household grouping users and their shared foods."""

    id: UUID
    name: str


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: UUID
    name: str
    house_id: UUID | None = None
