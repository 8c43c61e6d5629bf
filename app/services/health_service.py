from datetime import datetime, timezone
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from app.config import settings
from app.database import get_database_info
from app.repositories.entry_repository import EntryRepository
from app.repositories.user_repository import UserRepository

logger = logging.getLogger("work_ledger.health")


class HealthService:
    """Database reachability, ledger row counts and whether the API guard is armed"""

    def __init__(self, db: Session):
        self.db = db

    def is_connected(self) -> bool:
        try:
            self.db.execute(text("SELECT 1")).fetchone()
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def health_check(self):
        connected = self.is_connected()

        return {
            "status": "healthy" if connected else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.app_name,
            "version": settings.version,
            "apiTokenConfigured": bool(settings.api_token),
            "ledger": {
                "users": UserRepository(self.db).count(),
                "entries": EntryRepository(self.db).count(),
            } if connected else None,
        }

    def get_database_info(self):
        db_info = get_database_info()

        return {
            "profile": db_info["profile"],
            "connectionStatus": "connected" if self.is_connected() else "disconnected",
            "urlMasked": db_info["url"],
        }
