"""Domain entity for the append-only audit trail."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class AuditAction(str, Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"


class AuditEntity(str, Enum):
    RATING = "RATING"
    USER = "USER"
    STORE = "STORE"


@dataclass
class AuditLogEntry:
    """One row per mutating operation, written in the mutation's transaction."""

    user_id: int
    action: AuditAction
    entity: AuditEntity
    entity_id: int
    details: dict[str, Any] = field(default_factory=dict)
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
