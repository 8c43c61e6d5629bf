from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
import logging
from app.config import settings

logger = logging.getLogger("work_ledger.database")


def get_engine_config():
    """Get engine configuration based on database profile"""
    database_url = settings.database_url

    if settings.is_sqlite:
        return {
            "url": database_url,
            "connect_args": {"check_same_thread": False},
            "poolclass": StaticPool,
            "echo": settings.debug
        }
    elif settings.is_postgresql:
        return {
            "url": database_url,
            "pool_size": 10,
            "max_overflow": 20,
            "pool_pre_ping": True,
            "pool_recycle": 3600,
            "echo": settings.debug
        }
    else:
        logger.warning(f"Unknown database profile: {settings.database_profile}. Using default configuration.")
        return {
            "url": database_url,
            "echo": settings.debug
        }


engine = create_engine(**get_engine_config())

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Database dependency"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    """Create all tables"""
    # Import models to ensure they're registered with Base
    from app import models  # noqa: F401

    logger.info(f"Creating tables for {settings.database_profile} database: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)


def get_database_info():
    """Get information about the current database setup"""
    url = settings.database_url
    if settings.is_postgresql:
        url = url.replace(settings.postgres_password, "****")
    return {
        "profile": settings.database_profile,
        "url": url,
        "is_sqlite": settings.is_sqlite,
        "is_postgresql": settings.is_postgresql
    }
