# backend/api/root.py

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def read_root():
    return "Welcome to the backend API"
