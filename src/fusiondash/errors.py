"""Exceptions raised by the composition layer."""

from __future__ import annotations


class NotFoundError(LookupError):
    """Raised when a view is requested for an entity that does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class UnknownResourceError(ValueError):
    """Raised when a resource name cannot be routed to a collection."""
