from sqlalchemy.orm import as_declarative


@as_declarative()
class Base:
    __abstract__ = True  # Prevents creating a table for the base class
