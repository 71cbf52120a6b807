"""
Dashboard arithmetic over rows that were already fetched from the store.

Nothing in here touches the database: the query services build the row
objects below and hand them over, so every figure can be checked with plain
lists in tests. Ratios with a zero denominator come out as 0. Rounding to
display precision happens only in format_gpa / format_percent, at the
response boundary.
"""

from collections import OrderedDict
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

ATTENDED_STATUSES = frozenset({"Present", "Late"})
ABSENT_STATUS = "Absent"

# (label, lower bound), highest first; a value belongs to the first bucket whose
# lower bound it reaches, so 9.0 lands in the top bucket and 8.999 in the next
GPA_BUCKETS: Tuple[Tuple[str, float], ...] = (
    ("9.0-10.0", 9.0),
    ("8.0-9.0", 8.0),
    ("7.0-8.0", 7.0),
    ("6.0-7.0", 6.0),
    ("5.0-6.0", 5.0),
    ("Below 5.0", 0.0),
)


# ---------------------------------------------------------------------------
# Row types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CourseGradeRow:
    """One enrollment of the target semester, joined with its course and grade."""
    enrollment_id: int
    course_id: str
    course_name: str
    credit_hours: int
    numeric_score: Optional[float] = None
    letter_grade: Optional[str] = None
    gpa_point: Optional[float] = None

    @property
    def is_graded(self) -> bool:
        return self.gpa_point is not None


@dataclass(frozen=True)
class AttendanceRow:
    course_id: str
    course_name: str
    status: str
    class_date: Optional[date] = None

    @property
    def attended(self) -> bool:
        return self.status in ATTENDED_STATUSES


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GradeSummary:
    sgpa: float
    total_credits: int
    courses_passed: int
    total_courses: int
    average_score: float


@dataclass(frozen=True)
class AttendanceSummary:
    total_classes: int
    classes_attended: int
    total_absences: int
    rate: float


@dataclass(frozen=True)
class CourseAttendance:
    course_id: str
    course_name: str
    total_classes: int
    classes_attended: int
    absences: int
    rate: float


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def safe_ratio(numerator: float, denominator: float) -> float:
    if not denominator:
        return 0.0
    return numerator / denominator


def percentage(part: float, whole: float) -> float:
    return safe_ratio(part, whole) * 100


def mean(values: Iterable[float]) -> float:
    values = list(values)
    return safe_ratio(sum(values), len(values))


def latest_semester(semester_ids: Iterable[Optional[int]]) -> Optional[int]:
    """The student's current semester: the highest id they are enrolled in, or None."""
    ids = [semester_id for semester_id in semester_ids if semester_id is not None]
    return max(ids) if ids else None


# ---------------------------------------------------------------------------
# Grades
# ---------------------------------------------------------------------------

def compute_sgpa(rows: Iterable[CourseGradeRow]) -> float:
    """sum(credit_hours * gpa_point) / sum(credit_hours) over graded rows."""
    graded = [row for row in rows if row.is_graded]
    weighted = sum(row.credit_hours * row.gpa_point for row in graded)
    credits = sum(row.credit_hours for row in graded)
    return safe_ratio(weighted, credits)


def summarize_grades(rows: Sequence[CourseGradeRow]) -> GradeSummary:
    """
    Semester summary. Ungraded enrollments count towards the credits attempted
    but not towards SGPA, passes, graded-course count or the average score.
    """
    graded = [row for row in rows if row.is_graded]
    scores = [row.numeric_score for row in graded if row.numeric_score is not None]
    return GradeSummary(
        sgpa=compute_sgpa(graded),
        total_credits=sum(row.credit_hours for row in rows),
        courses_passed=sum(1 for row in graded if row.gpa_point > 0),
        total_courses=len(graded),
        average_score=mean(scores),
    )


def student_cgpa(gpa_points: Iterable[Optional[float]]) -> Optional[float]:
    """
    Mean of every graded gpa_point; None when nothing is graded.

    Summed as decimals of the stored values: 7.6, 9.7, 9.7 averages to exactly 9.0.
    """
    points = [Decimal(str(point)) for point in gpa_points if point is not None]
    if not points:
        return None
    return float(sum(points) / len(points))


def gpa_bucket(cgpa: float) -> str:
    for label, lower in GPA_BUCKETS:
        if cgpa >= lower:
            return label
    return GPA_BUCKETS[-1][0]


def gpa_distribution(cgpas: Iterable[float]) -> List[Dict[str, object]]:
    """Count students per bucket, all six buckets present, highest first."""
    counts = OrderedDict((label, 0) for label, _ in GPA_BUCKETS)
    for cgpa in cgpas:
        counts[gpa_bucket(cgpa)] += 1
    return [{"range": label, "count": count} for label, count in counts.items()]


# ---------------------------------------------------------------------------
# Attendance
# ---------------------------------------------------------------------------

def attendance_rate(statuses: Iterable[str]) -> float:
    """Present and Late count as attended; every record counts towards the total."""
    statuses = list(statuses)
    attended = sum(1 for status in statuses if status in ATTENDED_STATUSES)
    return percentage(attended, len(statuses))


def summarize_attendance(rows: Sequence[AttendanceRow]) -> AttendanceSummary:
    attended = sum(1 for row in rows if row.attended)
    return AttendanceSummary(
        total_classes=len(rows),
        classes_attended=attended,
        total_absences=sum(1 for row in rows if row.status == ABSENT_STATUS),
        rate=percentage(attended, len(rows)),
    )


def attendance_by_course(rows: Iterable[AttendanceRow]) -> List[CourseAttendance]:
    """Per-course breakdown, in order of first appearance."""
    grouped: "OrderedDict[str, List[AttendanceRow]]" = OrderedDict()
    for row in rows:
        grouped.setdefault(row.course_id, []).append(row)

    breakdown = []
    for course_id, course_rows in grouped.items():
        summary = summarize_attendance(course_rows)
        breakdown.append(CourseAttendance(
            course_id=course_id,
            course_name=course_rows[0].course_name,
            total_classes=summary.total_classes,
            classes_attended=summary.classes_attended,
            absences=summary.total_absences,
            rate=summary.rate,
        ))
    return breakdown


def weekly_attendance(rows: Iterable[Tuple[date, str]], weeks: int) -> List[Dict[str, object]]:
    """
    Attendance rate per ISO week for the last `weeks` weeks that have records,
    oldest first. Rows are (class_date, status) pairs.
    """
    grouped: Dict[Tuple[int, int], List[str]] = {}
    for class_date, status in rows:
        year, week, _ = class_date.isocalendar()
        grouped.setdefault((year, week), []).append(status)

    recent = sorted(grouped)[-weeks:] if weeks > 0 else []
    return [
        {
            "week": f"{year}-W{week:02d}",
            "totalClasses": len(grouped[(year, week)]),
            "rate": format_percent(attendance_rate(grouped[(year, week)])),
        }
        for year, week in recent
    ]


# ---------------------------------------------------------------------------
# Departments
# ---------------------------------------------------------------------------

def department_distribution(
    counts: Mapping[str, int],
    departments: Iterable[str],
) -> List[Tuple[str, int]]:
    """
    Zero-filled counts for the configured departments, sorted by name.
    Departments outside the configured set are dropped.
    """
    return [(name, int(counts.get(name, 0))) for name in sorted(set(departments))]


# ---------------------------------------------------------------------------
# Response formatting
# ---------------------------------------------------------------------------

def format_gpa(value: Optional[float]) -> str:
    return f"{(value or 0.0):.2f}"


def format_percent(value: Optional[float]) -> str:
    return f"{(value or 0.0):.1f}"
