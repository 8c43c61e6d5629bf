"""
Base repository class with common CRUD operations
"""
from typing import Type, TypeVar, Generic, Optional, List, Dict, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from app.database import Base
from app.core.exceptions import raise_not_found, DatabaseError
import logging

logger = logging.getLogger("work_ledger.repositories")

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common database operations"""

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def get_by_id(self, id: str) -> Optional[ModelType]:
        """Get a single record by ID"""
        try:
            return self.db.query(self.model).filter(self.model.id == id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error getting {self.model.__name__} by ID {id}: {e}")
            raise DatabaseError(f"Failed to retrieve {self.model.__name__}")

    def get_by_id_or_raise(self, id: str, resource: str = None) -> ModelType:
        """Get a single record by ID or raise NotFound exception"""
        obj = self.get_by_id(id)
        if not obj:
            raise_not_found(resource or self.model.__name__, id)
        return obj

    def create(self, obj_data: Dict[str, Any]) -> ModelType:
        """Create and commit a new record"""
        try:
            db_obj = self.model(**obj_data)
            self.db.add(db_obj)
            self.db.commit()
            self.db.refresh(db_obj)
            return db_obj
        except SQLAlchemyError as e:
            logger.error(f"Error creating {self.model.__name__}: {e}")
            self.db.rollback()
            raise DatabaseError(f"Failed to create {self.model.__name__}")

    def update(self, db_obj: ModelType, update_data: Dict[str, Any]) -> ModelType:
        """Apply field changes to a loaded record and commit"""
        try:
            for field, value in update_data.items():
                if hasattr(db_obj, field):
                    setattr(db_obj, field, value)
            self.db.commit()
            self.db.refresh(db_obj)
            return db_obj
        except SQLAlchemyError as e:
            logger.error(f"Error updating {self.model.__name__} {db_obj.id}: {e}")
            self.db.rollback()
            raise DatabaseError(f"Failed to update {self.model.__name__}")

    def delete(self, db_obj: ModelType) -> ModelType:
        """Delete a loaded record (hard delete) and commit"""
        try:
            self.db.delete(db_obj)
            self.db.commit()
            return db_obj
        except SQLAlchemyError as e:
            logger.error(f"Error deleting {self.model.__name__} {db_obj.id}: {e}")
            self.db.rollback()
            raise DatabaseError(f"Failed to delete {self.model.__name__}")

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        """Count records with optional equality filters"""
        try:
            query = self.db.query(self.model)
            for field, value in (filters or {}).items():
                query = query.filter(getattr(self.model, field) == value)
            return query.count()
        except SQLAlchemyError as e:
            logger.error(f"Error counting {self.model.__name__}: {e}")
            raise DatabaseError(f"Failed to count {self.model.__name__} records")

    def _all(self, query) -> List[ModelType]:
        try:
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Error listing {self.model.__name__}: {e}")
            raise DatabaseError(f"Failed to retrieve {self.model.__name__} records")
