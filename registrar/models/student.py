# registrar/models/student.py
from sqlalchemy import Column, String, Integer, Boolean, BigInteger
from .base import Base

class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)
    credits = Column(Integer, default=0, nullable=False)
    registered = Column(Boolean, default=True, nullable=False)
    probation = Column(Boolean, default=False, nullable=False)
    ssn = Column(BigInteger, nullable=False)
