"""Liveness probe for the PostgreSQL store."""

from __future__ import annotations

from wander.infrastructure.database.postgres_database import PostgresDatabase
from wander.shared.consts import DATABASE_COMPONENT

HEALTH_QUERY = "SELECT 1"


class PostgresProbe:
    """Run a no-op query and expect exactly one row holding ``1``."""

    def __init__(
        self,
        database: PostgresDatabase,
        *,
        name: str = DATABASE_COMPONENT,
        slug: str = "db",
    ) -> None:
        self._database = database
        self.name = name
        self.slug = slug

    async def check(self) -> bool:
        rows = await self._database.fetch(HEALTH_QUERY)
        if len(rows) != 1:
            return False
        return rows[0][0] == 1
