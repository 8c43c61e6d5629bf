from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from app import schemas
from app.config import settings
from app.core.dependencies import get_entry_service
from app.core.security import require_api_token
from app.services.entry_service import EntryService

router = APIRouter(prefix="/entries", tags=["entries"], dependencies=[Depends(require_api_token)])


@router.post("", response_model=schemas.EntryResponse, status_code=status.HTTP_201_CREATED)
def create_entry(
    entry: schemas.EntryCreate,
    entry_service: EntryService = Depends(get_entry_service)
):
    """Record a work day; net amount is derived from gross and expenses"""
    return entry_service.create_entry(entry)


@router.get("", response_model=schemas.EntryPage)
def list_entries(
    user_id: Optional[str] = Query(None, alias="userId", description="Filter by user"),
    skip: int = Query(0, ge=0, description="Skip records for pagination"),
    take: int = Query(settings.default_page_size, ge=1, le=1000, description="Limit records for pagination"),
    entry_service: EntryService = Depends(get_entry_service)
):
    """List entries newest first"""
    return entry_service.list_entries(user_id, skip, take)


@router.get("/{entry_id}", response_model=schemas.EntryResponse)
def get_entry(entry_id: str, entry_service: EntryService = Depends(get_entry_service)):
    return entry_service.get_entry(entry_id)


@router.patch("/{entry_id}", response_model=schemas.EntryResponse)
def update_entry(
    entry_id: str,
    entry: schemas.EntryUpdate,
    entry_service: EntryService = Depends(get_entry_service)
):
    return entry_service.update_entry(entry_id, entry)


@router.delete("/{entry_id}", response_model=schemas.EntryResponse)
def delete_entry(entry_id: str, entry_service: EntryService = Depends(get_entry_service)):
    return entry_service.delete_entry(entry_id)
