"""Initial schema for the student information system.

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create all tables, parents before children."""
    op.create_table(
        'student',
        sa.Column('student_id', sa.String(32), primary_key=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('admission_date', sa.Date(), nullable=True),
        sa.Column('department', sa.String(100), nullable=False),
        sa.Column('current_year', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='Active'),
    )
    op.create_index('ix_student_student_id', 'student', ['student_id'])
    op.create_index('ix_student_email', 'student', ['email'], unique=True)
    op.create_index('ix_student_department', 'student', ['department'])

    op.create_table(
        'admin',
        sa.Column('email', sa.String(255), primary_key=True),
        sa.Column('name', sa.String(100), nullable=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
    )
    op.create_index('ix_admin_email', 'admin', ['email'])

    op.create_table(
        'course',
        sa.Column('course_id', sa.String(32), primary_key=True),
        sa.Column('course_name', sa.String(200), nullable=False),
        sa.Column('credit_hours', sa.Integer(), nullable=False),
        sa.Column('faculty_name', sa.String(100), nullable=True),
        sa.Column('department', sa.String(100), nullable=False),
        sa.Column('schedule', sa.String(100), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='Active'),
    )
    op.create_index('ix_course_course_id', 'course', ['course_id'])

    op.create_table(
        'semester',
        sa.Column('semester_id', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('semester_name', sa.String(100), nullable=False),
    )

    op.create_table(
        'enrollment',
        sa.Column('enrollment_id', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('student_id', sa.String(32), sa.ForeignKey('student.student_id'), nullable=False),
        sa.Column('course_id', sa.String(32), sa.ForeignKey('course.course_id'), nullable=False),
        sa.Column('semester_id', sa.Integer(), sa.ForeignKey('semester.semester_id'), nullable=False),
        sa.UniqueConstraint('student_id', 'course_id', name='uq_enrollment_student_course'),
    )
    op.create_index('ix_enrollment_student_id', 'enrollment', ['student_id'])
    op.create_index('ix_enrollment_course_id', 'enrollment', ['course_id'])
    op.create_index('ix_enrollment_semester_id', 'enrollment', ['semester_id'])

    op.create_table(
        'grade',
        sa.Column('grade_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('enrollment_id', sa.Integer(), sa.ForeignKey('enrollment.enrollment_id'),
                  nullable=False, unique=True),
        sa.Column('numeric_score', sa.Float(), nullable=True),
        sa.Column('letter_grade', sa.String(4), nullable=True),
        sa.Column('gpa_point', sa.Float(), nullable=True),
    )

    op.create_table(
        'attendance',
        sa.Column('attendance_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('enrollment_id', sa.Integer(), sa.ForeignKey('enrollment.enrollment_id'), nullable=False),
        sa.Column('status', sa.String(10), nullable=False),
        sa.Column('class_date', sa.Date(), nullable=False),
    )
    op.create_index('ix_attendance_enrollment_id', 'attendance', ['enrollment_id'])


def downgrade() -> None:
    """Drop all tables, children before parents."""
    op.drop_table('attendance')
    op.drop_table('grade')
    op.drop_table('enrollment')
    op.drop_table('semester')
    op.drop_table('course')
    op.drop_table('admin')
    op.drop_table('student')
