# backend/api/auth.py

from pydantic import BaseModel
from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.core.log import get_logger
from backend.core.security import get_password_hash, verify_password
from backend.database import get_db
from backend.repositories import user as user_repo


router = APIRouter(prefix="/api")
logger = get_logger(__name__)


class SignupRequest(BaseModel):
    username: str
    password: str


class LoginRequest(BaseModel):
    username: str
    password: str


def authenticate_user(db: Session, username: str, password: str):
    user = user_repo.get_user_by_username(db, username)
    if not user or not verify_password(password, user.password):
        return None
    return user


@router.post("/signup")
def signup(req: SignupRequest, db: Session = Depends(get_db)):
    """
    Registers a new user with a bcrypt-hashed password.
    Duplicate usernames are rejected by the store's unique constraint.
    """
    try:
        hashed = get_password_hash(req.password)
        user_repo.create_user(db, req.username, hashed)
    except (SQLAlchemyError, ValueError) as e:
        # ValueError: passlib rejects NUL bytes and unencodable strings.
        logger.warning("user_signup_failed", username=req.username, error=str(e))
        return PlainTextResponse("Username already exists or invalid data", status_code=status.HTTP_400_BAD_REQUEST)

    logger.info("user_signed_up", username=req.username)
    return PlainTextResponse("Signup successful!", status_code=status.HTTP_201_CREATED)


@router.post("/login")
def login(req: LoginRequest, db: Session = Depends(get_db)):
    """
    Returns the stored user record when the password matches.
    """
    try:
        user = authenticate_user(db, req.username, req.password)
    except SQLAlchemyError as e:
        logger.error("user_login_failed", username=req.username, error=str(e))
        return PlainTextResponse("Internal server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if not user:
        return PlainTextResponse("Invalid username or password", status_code=status.HTTP_401_UNAUTHORIZED)

    # TODO: drop the password hash from this payload once clients stop reading it.
    return user.to_dict()
