from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session

from app.models import Entry
from app.repositories.base import BaseRepository


class EntryRepository(BaseRepository[Entry]):
    """Queries that hand the reporting engine its pre-filtered entry sets"""

    def __init__(self, db: Session):
        super().__init__(Entry, db)

    def list_page(self, user_id: Optional[str], skip: int, take: int) -> List[Entry]:
        query = self.db.query(Entry)
        if user_id:
            query = query.filter(Entry.user_id == user_id)
        query = query.order_by(Entry.date.desc(), Entry.created_at.desc()).offset(skip).limit(take)
        return self._all(query)

    def between(self, user_id: str, start: date, end: date) -> List[Entry]:
        """Entries in ``[start, end]`` inclusive, oldest date first"""
        query = (
            self.db.query(Entry)
            .filter(Entry.user_id == user_id, Entry.date >= start, Entry.date <= end)
            .order_by(Entry.date.asc(), Entry.created_at.asc())
        )
        return self._all(query)

    def for_user(self, user_id: str, start: Optional[date] = None, end: Optional[date] = None) -> List[Entry]:
        """All entries of a user, newest date first, optionally bounded"""
        query = self.db.query(Entry).filter(Entry.user_id == user_id)
        if start is not None:
            query = query.filter(Entry.date >= start)
        if end is not None:
            query = query.filter(Entry.date <= end)
        return self._all(query.order_by(Entry.date.desc(), Entry.created_at.asc()))

    def on_day(self, day: date, user_id: Optional[str] = None) -> List[Entry]:
        """Entries of one calendar day in creation order"""
        query = self.db.query(Entry).filter(Entry.date == day)
        if user_id:
            query = query.filter(Entry.user_id == user_id)
        return self._all(query.order_by(Entry.created_at.asc()))

    def recent(self, user_id: str, limit: int) -> List[Entry]:
        query = (
            self.db.query(Entry)
            .filter(Entry.user_id == user_id)
            .order_by(Entry.date.desc(), Entry.created_at.desc())
            .limit(limit)
        )
        return self._all(query)
