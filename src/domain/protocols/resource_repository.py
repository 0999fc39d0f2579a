"""ResourceRepository protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities import Resource


class ResourceRepository(Protocol):
    """Resource repository protocol (port)."""

    async def find_by_id(self, resource_id: UUID) -> Resource | None:
        """Find resource by ID."""
        ...

    async def save(self, resource: Resource) -> None:
        """Create new resource."""
        ...
