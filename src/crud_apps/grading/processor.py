"""
Student results processing: text file in, graded report out.

Input format, one student per line:

    <id>, <full name>, <score>

The first malformed line aborts the read with an error carrying its
1-based line number.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from crud_apps.core.exceptions import (
    InvalidIdFormatError,
    InvalidScoreFormatError,
    MissingFieldError,
)
from crud_apps.core.repository import KeyedRepository
from crud_apps.grading.models import GRADE_LETTERS, Student
from crud_apps.io.readers import read_lines
from crud_apps.io.writers import atomic_write_lines

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ","
EXPECTED_FIELDS = 3
_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def _parse_int(text: str) -> Optional[int]:
    text = text.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


def parse_student_line(line: str, line_number: int) -> Student:
    """
    Parse one `id, name, score` line.

    Raises:
        MissingFieldError: wrong number of fields
        InvalidIdFormatError: id is not an integer
        InvalidScoreFormatError: score is not an integer
    """
    parts = line.split(FIELD_DELIMITER)
    if len(parts) != EXPECTED_FIELDS:
        raise MissingFieldError(line_number)

    student_id = _parse_int(parts[0])
    if student_id is None:
        raise InvalidIdFormatError(line_number)

    full_name = parts[1].strip()

    score = _parse_int(parts[2])
    if score is None:
        raise InvalidScoreFormatError(line_number)

    return Student(id=student_id, full_name=full_name, score=score)


def grade_distribution(students: Iterable[Student]) -> pd.Series:
    """Number of students per grade letter, A to F, zeros included."""
    grades = pd.Series([s.grade for s in students], dtype="object")
    return grades.value_counts().reindex(list(GRADE_LETTERS), fill_value=0).astype(int)


class StudentResultProcessor:

    def read_students_from_file(self, input_file_path: Path) -> List[Student]:
        """
        Read and validate every student in the file.

        Raises:
            FileNotFoundError: input file does not exist
            MalformedRecordError: first malformed line, with its line number
            DuplicateKeyError: two lines share a student id
        """
        students: KeyedRepository[Student] = KeyedRepository(quantity_field="score", name="students")
        for line_number, line in enumerate(read_lines(input_file_path), start=1):
            students.add(parse_student_line(line, line_number))

        logger.info(f"Read {len(students)} students from {input_file_path}")
        return students.list_all()

    def write_report_to_file(self, students: Iterable[Student], output_file_path: Path) -> Path:
        lines = [str(student) for student in students]
        atomic_write_lines(lines, Path(output_file_path))
        logger.info(f"Wrote {len(lines)} report lines to {output_file_path}")
        return Path(output_file_path)
