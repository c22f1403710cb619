"""Concrete audit log repository backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import AuditLogRepository
from app.domain.entities import AuditEntity, AuditLogEntry
from app.infrastructure.database.models import AuditLogModel
from app.infrastructure.database.repositories.mappers import audit_log_to_entity


class SQLAlchemyAuditLogRepository(AuditLogRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def append(self, entry: AuditLogEntry) -> AuditLogEntry:
        model = AuditLogModel(
            user_id=entry.user_id,
            action=entry.action.value,
            entity=entry.entity.value,
            entity_id=entry.entity_id,
            details=entry.details,
            created_at=entry.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return audit_log_to_entity(model)

    async def list_for_entity(self, entity: AuditEntity, entity_id: int) -> list[AuditLogEntry]:
        result = await self._session.execute(
            select(AuditLogModel)
            .where(AuditLogModel.entity == entity.value, AuditLogModel.entity_id == entity_id)
            .order_by(AuditLogModel.id.asc())
        )
        return [audit_log_to_entity(m) for m in result.scalars().all()]
