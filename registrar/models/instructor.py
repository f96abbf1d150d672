# registrar/models/instructor.py
from sqlalchemy import Column, String, Integer
from .base import Base

class Instructor(Base):
    __tablename__ = "instructors"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=True)
    email = Column(String(100), nullable=True, unique=True)
