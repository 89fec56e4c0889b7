from pydantic import Field

from crud_apps.core.entity import Entity

# Inclusive (low, high, letter) bands, checked top-down. Anything else is F.
GRADE_BANDS: tuple[tuple[int, int, str], ...] = (
    (80, 100, "A"),
    (70, 79, "B"),
    (60, 69, "C"),
    (50, 59, "D"),
)
FAILING_GRADE = "F"
GRADE_LETTERS: tuple[str, ...] = tuple(letter for _, _, letter in GRADE_BANDS) + (FAILING_GRADE,)


def compute_grade(score: int) -> str:
    for low, high, letter in GRADE_BANDS:
        if low <= score <= high:
            return letter
    return FAILING_GRADE


class Student(Entity):
    full_name: str = Field(..., description="Student full name")
    score: int = Field(..., description="Raw exam score")

    @property
    def grade(self) -> str:
        return compute_grade(self.score)

    def __str__(self) -> str:
        return f"{self.full_name} (ID: {self.id}): Score = {self.score}, Grade = {self.grade}"
