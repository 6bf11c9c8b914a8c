# backend/core/config.py

import os
from dotenv import load_dotenv


load_dotenv()


# -------------------------------
# Database
# -------------------------------

def _normalize_database_url(url: str) -> str:
    # Hosting providers still hand out the legacy scheme SQLAlchemy rejects.
    if url.startswith("postgres://"):
        return "postgresql://" + url[len("postgres://"):]
    return url


DATABASE_URL = _normalize_database_url(os.getenv("DATABASE_URL", "sqlite:///./data/app.db"))

# libpq sslmode for PostgreSQL. "require" encrypts but does not verify the certificate.
DATABASE_SSLMODE = os.getenv("DATABASE_SSLMODE", "require")


# -------------------------------
# HTTP server
# -------------------------------

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))

CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
