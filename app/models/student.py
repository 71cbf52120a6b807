from sqlalchemy import Column, Date, Integer, String
from app.core.database import Base


class Student(Base):
    __tablename__ = "student"

    student_id = Column(String(32), primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    admission_date = Column(Date, nullable=True)
    department = Column(String(100), nullable=False, index=True)
    current_year = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default="Active")
