from sqlalchemy import Column, Float, ForeignKey, Integer, String
from app.core.database import Base


class Grade(Base):
    __tablename__ = "grade"

    grade_id = Column(Integer, primary_key=True, autoincrement=True)
    enrollment_id = Column(Integer, ForeignKey("enrollment.enrollment_id"), unique=True, nullable=False)
    numeric_score = Column(Float, nullable=True)
    letter_grade = Column(String(4), nullable=True)
    gpa_point = Column(Float, nullable=True)  # NULL until graded
