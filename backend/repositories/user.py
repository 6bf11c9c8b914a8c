# backend/repositories/user.py

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.models.user import User


def create_user(db: Session, username: str, password_hash: str) -> None:
    """
    Inserts a user row. A duplicate username surfaces as the store's IntegrityError.
    """
    user = User(username=username, password=password_hash)
    try:
        db.add(user)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def list_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.id).all()


def update_user(db: Session, user_id: int, username: str, password_hash: str | None = None) -> int:
    """
    Renames a user and, when a new hash is given, replaces the password.
    Returns the number of matched rows; zero is not an error.
    """
    values = {User.username: username}
    if password_hash is not None:
        values[User.password] = password_hash

    try:
        count = db.query(User).filter(User.id == user_id).update(values, synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return count


def delete_user(db: Session, user_id: int) -> int:
    try:
        count = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    return count
