# registrar/models/semester.py
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, func
from .base import Base


class Semester(Base):
    __tablename__ = "semesters"

    # e.g. Winter, Spring, Summer, Fall
    name = Column(String(20), primary_key=True)


class CurrentSemester(Base):
    """Append-only log; the newest row is the active current semester."""
    __tablename__ = "current_semesters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(20), ForeignKey("semesters.name"), nullable=False)
    year = Column(Integer, nullable=False)
    date_added = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)


class NextSemester(Base):
    """Append-only log; the newest row is the active next semester."""
    __tablename__ = "next_semesters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(20), ForeignKey("semesters.name"), nullable=False)
    year = Column(Integer, nullable=False)
    date_added = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
