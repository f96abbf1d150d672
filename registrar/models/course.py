# registrar/models/course.py
from sqlalchemy import Column, String, Integer, Numeric, ForeignKey
from .base import Base

class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, autoincrement=False)
    title = Column(String(100), nullable=False)
    dept = Column(Integer, ForeignKey("departments.id"), nullable=False)
    credits = Column(Integer, nullable=False)
    cost = Column(Numeric(10, 2), nullable=False)
