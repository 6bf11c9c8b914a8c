# backend/core/security.py

from passlib.context import CryptContext


# bcrypt work factor used for every stored password
BCRYPT_ROUNDS = 10

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Checks a plaintext password against a stored bcrypt hash.
    A stored value that is not a bcrypt hash never matches.
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False
