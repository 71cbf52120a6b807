from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from app.core.database import Base


class Enrollment(Base):
    __tablename__ = "enrollment"
    __table_args__ = (
        UniqueConstraint("student_id", "course_id", name="uq_enrollment_student_course"),
    )

    # Assigned as max + 1 by the enrollment service
    enrollment_id = Column(Integer, primary_key=True, autoincrement=False)
    student_id = Column(String(32), ForeignKey("student.student_id"), nullable=False, index=True)
    course_id = Column(String(32), ForeignKey("course.course_id"), nullable=False, index=True)
    semester_id = Column(Integer, ForeignKey("semester.semester_id"), nullable=False, index=True)
