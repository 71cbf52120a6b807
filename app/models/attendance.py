from sqlalchemy import Column, Date, ForeignKey, Integer, String
from app.core.database import Base


class Attendance(Base):
    __tablename__ = "attendance"

    attendance_id = Column(Integer, primary_key=True, autoincrement=True)
    enrollment_id = Column(Integer, ForeignKey("enrollment.enrollment_id"), nullable=False, index=True)
    status = Column(String(10), nullable=False)
    class_date = Column(Date, nullable=False)
