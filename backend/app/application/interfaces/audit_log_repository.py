"""Abstract repository interface for the audit trail."""

from abc import ABC, abstractmethod

from app.domain.entities import AuditEntity, AuditLogEntry


class AuditLogRepository(ABC):
    """Append-only port — entries are never updated or deleted."""

    @abstractmethod
    async def append(self, entry: AuditLogEntry) -> AuditLogEntry:
        ...

    @abstractmethod
    async def list_for_entity(self, entity: AuditEntity, entity_id: int) -> list[AuditLogEntry]:
        """Entries for one entity, oldest first."""
        ...
