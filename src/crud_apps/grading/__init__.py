"""School grading: student file ingestion, letter grades and the graded report."""

from .models import Student, compute_grade
from .processor import StudentResultProcessor, grade_distribution, parse_student_line

__all__ = ["Student", "compute_grade", "StudentResultProcessor", "grade_distribution", "parse_student_line"]
