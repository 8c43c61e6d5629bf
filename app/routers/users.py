from fastapi import APIRouter, Depends, status
from typing import List

from app import schemas
from app.core.dependencies import get_user_service
from app.core.security import require_api_token
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(require_api_token)])


@router.post("", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user: schemas.UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    """Register a new user"""
    return user_service.create_user(user)


@router.get("", response_model=List[schemas.UserResponse])
def list_users(user_service: UserService = Depends(get_user_service)):
    return user_service.list_users()


@router.get("/email/{email}", response_model=schemas.UserResponse)
def get_user_by_email(email: str, user_service: UserService = Depends(get_user_service)):
    return user_service.get_user_by_email(email)


@router.get("/{user_id}", response_model=schemas.UserResponse)
def get_user(user_id: str, user_service: UserService = Depends(get_user_service)):
    return user_service.get_user(user_id)
