from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Semester(Base):
    """Higher semester_id means a later semester."""
    __tablename__ = "semester"

    semester_id = Column(Integer, primary_key=True, autoincrement=False)
    semester_name = Column(String(100), nullable=False)
