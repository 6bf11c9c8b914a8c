# backend/main.py

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from backend.api import auth, products, root, users
from backend.core.config import CORS_ORIGINS, DATABASE_URL, HOST, LOG_LEVEL, PORT
from backend.core.log import configure_logging, get_logger
from backend.database import check_connection, engine, init_db


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Checks the store once at startup without aborting on failure,
    creates the tables of a local SQLite store,
    and releases the connection pool on shutdown.
    """
    configure_logging(LOG_LEVEL)
    if check_connection() and DATABASE_URL.startswith("sqlite"):
        # Local SQLite stores are created on first run.
        init_db()
    yield
    engine.dispose()
    logger.info("database_pool_closed")


app = FastAPI(title="Backend API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("request_validation_failed", path=request.url.path, errors=exc.errors())
    return PlainTextResponse("Invalid request data", status_code=status.HTTP_400_BAD_REQUEST)


app.include_router(root.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(products.router)


def run():
    configure_logging(LOG_LEVEL)
    logger.info("starting_server", url=f"http://{HOST}:{PORT}")
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    run()
