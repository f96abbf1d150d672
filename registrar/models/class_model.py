# registrar/models/class_model.py
from sqlalchemy import Column, String, Integer, ForeignKey, UniqueConstraint
from .base import Base


class ClassModel(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Foreign Keys
    course_id = Column(Integer, ForeignKey("courses.id"), nullable=False, index=True)
    instructor = Column(Integer, ForeignKey("instructors.id"), nullable=True)
    semester = Column(String(20), ForeignKey("semesters.name"), nullable=False)

    section = Column(String(10), nullable=False)
    year = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint("course_id", "section", "year", "semester", name="uq_class_identity"),
    )
