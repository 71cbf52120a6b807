import logging
import os
from datetime import date, timedelta

from app.core.config import settings
from app.core.database import create_db_engine, create_database_tables, create_session_factory
from app.core.security import hash_password
from app.models.admin import Admin
from app.models.attendance import Attendance
from app.models.course import Course
from app.models.enrollment import Enrollment
from app.models.grade import Grade
from app.models.semester import Semester
from app.models.student import Student

# Setup logging to see output
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SEMESTERS = [
    (1, "Fall 2025"),
    (2, "Spring 2026"),
]

COURSES = [
    ("CS101", "Introduction to Programming", 4, "Dr. Alan Reed", "Computer Science", "Mon/Wed 09:00"),
    ("CS201", "Data Structures", 3, "Dr. Alan Reed", "Computer Science", "Tue/Thu 11:00"),
    ("EE110", "Circuit Analysis", 3, "Dr. Priya Nair", "Electrical Engineering", "Mon/Wed 13:00"),
    ("ME120", "Engineering Mechanics", 3, "Dr. Omar Haddad", "Mechanical Engineering", "Fri 10:00"),
    ("CE130", "Surveying", 2, "Dr. Lena Fischer", "Civil Engineering", "Thu 14:00"),
]

STUDENTS = [
    ("S1001", "Aarav", "Mehta", "aarav.mehta@example.edu", "Computer Science", 2),
    ("S1002", "Maya", "Lopez", "maya.lopez@example.edu", "Electrical Engineering", 1),
    ("S1003", "Jonas", "Berg", "jonas.berg@example.edu", "Mechanical Engineering", 3),
]

# (enrollment_id, student_id, course_id, semester_id, score, letter, gpa_point)
ENROLLMENTS = [
    (1, "S1001", "CS101", 1, 91.0, "A+", 10.0),
    (2, "S1001", "CS201", 2, 84.0, "A", 9.0),
    (3, "S1001", "EE110", 2, None, None, None),
    (4, "S1002", "EE110", 1, 72.0, "B", 7.0),
    (5, "S1002", "CS101", 2, 65.0, "C", 6.0),
    (6, "S1003", "ME120", 2, 58.0, "D", 5.0),
]

ATTENDANCE_PATTERN = ["Present", "Present", "Late", "Absent", "Present"]


def seed_data():
    """
    Function to seed initial data into the database.
    """
    engine = create_db_engine(settings)
    if settings.is_sqlite:
        create_database_tables(engine)
    db = create_session_factory(engine)()
    try:
        # Skip when data already exists to avoid duplicates
        if db.query(Student).first():
            logger.info("Database already contains data. Skipping seed.")
            return

        logger.info("Seeding data...")

        db.add_all(Semester(semester_id=sid, semester_name=name) for sid, name in SEMESTERS)
        db.add_all(
            Course(course_id=cid, course_name=name, credit_hours=credits,
                   faculty_name=faculty, department=dept, schedule=schedule)
            for cid, name, credits, faculty, dept, schedule in COURSES
        )

        default_password = os.getenv("SEED_STUDENT_PASSWORD", "student123")
        db.add_all(
            Student(student_id=sid, first_name=first, last_name=last, email=email,
                    password_hash=hash_password(default_password, rounds=settings.BCRYPT_ROUNDS),
                    admission_date=date(2024, 8, 1), department=dept, current_year=year)
            for sid, first, last, email, dept, year in STUDENTS
        )

        admin_password = os.getenv("SEED_ADMIN_PASSWORD", "adminpassword123")
        db.add(Admin(
            email=os.getenv("SEED_ADMIN_EMAIL", "admin@example.edu"),
            name="Administrator",
            password_hash=hash_password(admin_password, rounds=settings.BCRYPT_ROUNDS),
        ))
        db.flush()

        start = date.today() - timedelta(weeks=len(ATTENDANCE_PATTERN))
        for enrollment_id, sid, cid, semester_id, score, letter, point in ENROLLMENTS:
            db.add(Enrollment(enrollment_id=enrollment_id, student_id=sid,
                              course_id=cid, semester_id=semester_id))
            db.flush()
            if point is not None:
                db.add(Grade(enrollment_id=enrollment_id, numeric_score=score,
                             letter_grade=letter, gpa_point=point))
            for week, status in enumerate(ATTENDANCE_PATTERN):
                db.add(Attendance(enrollment_id=enrollment_id, status=status,
                                  class_date=start + timedelta(weeks=week, days=enrollment_id % 5)))

        db.commit()

        logger.info("✅ Data seeded successfully!")

    except Exception as e:
        logger.error(f"❌ Error seeding data: {e}")
        db.rollback()  # Rollback if error occurs
        raise
    finally:
        db.close()  # Always close the connection


if __name__ == "__main__":
    seed_data()
