# backend/projectplan/models/__init__.py
from ..database import Base
from .record import KVRecord

__all__ = [
    "Base",
    "KVRecord"
]
