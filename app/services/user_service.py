from sqlalchemy.orm import Session
from typing import List
import logging

from app.models import User
from app.schemas import UserCreate
from app.core.exceptions import ConflictError, NotFoundError, raise_validation_error
from app.core.security import get_password_hash
from app.repositories.user_repository import UserRepository

logger = logging.getLogger("work_ledger.users")

MIN_PASSWORD_LENGTH = 5


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def create_user(self, user_data: UserCreate) -> User:
        logger.info(f"Attempting to register user: {user_data.email}")
        if self.users.get_by_email(user_data.email):
            logger.warning(f"Registration failed: email {user_data.email} already exists")
            raise ConflictError("Email already registered", {"email": user_data.email})

        if len(user_data.password) < MIN_PASSWORD_LENGTH:
            raise_validation_error("password", f"must contain at least {MIN_PASSWORD_LENGTH} characters")

        user = self.users.create({
            "email": user_data.email,
            "name": user_data.name,
            "password": get_password_hash(user_data.password),
        })
        logger.info(f"Registered user {user.email} with id {user.id}")
        return user

    def list_users(self) -> List[User]:
        return self.users.list_newest_first()

    def get_user(self, user_id: str) -> User:
        return self.users.get_by_id_or_raise(user_id, "User")

    def get_user_by_email(self, email: str) -> User:
        user = self.users.get_by_email(email)
        if not user:
            raise NotFoundError("User not found", {"email": email})
        return user
