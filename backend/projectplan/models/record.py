# backend/projectplan/models/record.py
from sqlalchemy import Column, String, Text
from ..database import Base

class KVRecord(Base):
    """One entry of the flat key-value namespace"""
    __tablename__ = "kv_records"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
