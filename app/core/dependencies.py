"""
Dependency injection configuration
"""
from datetime import date
from fastapi import Depends
from sqlalchemy.orm import Session
from app.database import get_db
from app.services.entry_service import EntryService
from app.services.report_service import ReportService
from app.services.user_service import UserService
from app.services.health_service import HealthService


# Service Dependencies
def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Get user service instance"""
    return UserService(db)


def get_entry_service(db: Session = Depends(get_db)) -> EntryService:
    """Get entry service instance"""
    return EntryService(db)


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    """Get report service instance"""
    return ReportService(db)


def get_health_service(db: Session = Depends(get_db)) -> HealthService:
    """Get health service instance"""
    return HealthService(db)


# Context Dependencies
def get_today() -> date:
    """Wall clock read once at the request boundary"""
    return date.today()
