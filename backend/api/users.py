# backend/api/users.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.core.log import get_logger
from backend.core.security import get_password_hash
from backend.database import get_db
from backend.repositories import user as user_repo


router = APIRouter(prefix="/api/users")
logger = get_logger(__name__)


class UserUpdateRequest(BaseModel):
    """
    Request schema for updating a user.
    The password is rehashed only when present and non-empty.
    """
    username: str
    password: str | None = None


@router.get("")
def list_users(db: Session = Depends(get_db)):
    try:
        users = user_repo.list_users(db)
    except SQLAlchemyError as e:
        logger.error("users_fetch_failed", error=str(e))
        return PlainTextResponse("Error fetching users", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return [user.to_dict() for user in users]


@router.put("/{user_id}", response_class=PlainTextResponse)
def update_user(user_id: int, req: UserUpdateRequest, db: Session = Depends(get_db)):
    """
    Updates the username and, if supplied, the password of a user.
    An unknown id is a no-op and still reports success.
    """
    try:
        hashed = get_password_hash(req.password) if req.password else None
        user_repo.update_user(db, user_id, req.username, hashed)
    except (SQLAlchemyError, ValueError) as e:
        logger.error("user_update_failed", user_id=user_id, error=str(e))
        return PlainTextResponse("Error updating user", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return "User updated successfully!"


@router.delete("/{user_id}", response_class=PlainTextResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    try:
        user_repo.delete_user(db, user_id)
    except SQLAlchemyError as e:
        logger.error("user_delete_failed", user_id=user_id, error=str(e))
        return PlainTextResponse("Error deleting user", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return "User deleted successfully!"
