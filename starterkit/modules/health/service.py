from enum import Enum

from pydantic import BaseModel
from sqlalchemy import text

from starterkit.core.base import BaseService


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class OverallHealthStatus(BaseModel):
    status: HealthStatus
    database: HealthStatus
    version: str


class HealthService(BaseService):
    async def _check_database(self) -> HealthStatus:
        try:
            await self.db.execute(text("SELECT 1"))
            return HealthStatus.HEALTHY
        except Exception as e:
            self.logger.error("Database health check failed", error=str(e))
            return HealthStatus.UNHEALTHY

    async def check(self, version: str) -> OverallHealthStatus:
        database = await self._check_database()
        return OverallHealthStatus(
            status=database,
            database=database,
            version=version,
        )
