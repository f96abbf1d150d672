# registrar/models/department.py
from sqlalchemy import Column, String, Integer
from .base import Base

class Department(Base):
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
