# backend/repositories/__init__.py

from . import product, user

__all__ = ["product", "user"]
