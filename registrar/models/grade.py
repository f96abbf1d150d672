# registrar/models/grade.py
from sqlalchemy import Column, String
from .base import Base

class Grade(Base):
    __tablename__ = "grades"

    name = Column(String(5), primary_key=True)
