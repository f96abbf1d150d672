# registrar/models/account_type.py
from sqlalchemy import Column, String
from .base import Base

class AccountType(Base):
    __tablename__ = "account_types"

    # e.g. Student, Instructor, Administrator
    name = Column(String(50), primary_key=True)
