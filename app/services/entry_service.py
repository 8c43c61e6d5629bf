"""
Entry Service
CRUD for work-day entries; keeps net_amount = gross_amount - expenses.
"""
from sqlalchemy.orm import Session
from typing import Optional, List
import logging

from app.config import settings
from app.models import Entry
from app.schemas import EntryCreate, EntryUpdate, EntryPage, EntryResponse, PageMeta
from app.repositories.entry_repository import EntryRepository
from app.repositories.user_repository import UserRepository

logger = logging.getLogger("work_ledger.entries")


class EntryService:
    def __init__(self, db: Session):
        self.db = db
        self.entries = EntryRepository(db)
        self.users = UserRepository(db)

    def create_entry(self, data: EntryCreate) -> Entry:
        user = self.users.get_by_id_or_raise(data.user_id, "User")

        entry = self.entries.create({
            "date": data.date,
            "day_of_week": data.day_of_week,
            "gross_amount": data.gross_amount,
            "expenses": data.expenses,
            "net_amount": data.gross_amount - data.expenses,
            "description": data.description,
            "user_id": user.id,
        })
        logger.info(f"Created entry {entry.id} for user {user.id} on {entry.date}")
        return entry

    def list_entries(self, user_id: Optional[str] = None, skip: int = 0, take: Optional[int] = None) -> EntryPage:
        if take is None:
            take = settings.default_page_size
        rows = self.entries.list_page(user_id, skip, take)
        total = self.entries.count({"user_id": user_id} if user_id else None)

        return EntryPage(
            entries=[EntryResponse.model_validate(e) for e in rows],
            meta=PageMeta(total=total, skip=skip or 0, take=take or len(rows)),
        )

    def get_entry(self, entry_id: str) -> Entry:
        return self.entries.get_by_id_or_raise(entry_id, "Entry")

    def update_entry(self, entry_id: str, data: EntryUpdate) -> Entry:
        entry = self.get_entry(entry_id)
        # Only description may be cleared with an explicit null
        changes = {
            field: value for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field == "description"
        }

        if "gross_amount" in changes or "expenses" in changes:
            gross = changes.get("gross_amount", entry.gross_amount)
            expenses = changes.get("expenses", entry.expenses)
            changes["gross_amount"] = gross
            changes["expenses"] = expenses
            changes["net_amount"] = gross - expenses

        updated = self.entries.update(entry, changes)
        logger.info(f"Updated entry {entry_id}: {sorted(changes)}")
        return updated

    def delete_entry(self, entry_id: str) -> EntryResponse:
        entry = self.get_entry(entry_id)
        snapshot = EntryResponse.model_validate(entry)
        self.entries.delete(entry)
        logger.info(f"Deleted entry {entry_id}")
        return snapshot

    def recent_entries(self, user_id: str, limit: Optional[int] = None) -> List[Entry]:
        return self.entries.recent(user_id, limit or settings.recent_entries_default)
