# reportcard/analysis/grading.py
from __future__ import annotations
from typing import Optional, Sequence

from reportcard.models.report_schemas import Grade, SubjectMark

# (lower bound, grade), checked top-down; first match wins
GRADE_BANDS = [
    (90.0, Grade.A),
    (75.0, Grade.B),
    (60.0, Grade.C),
]


def subject_average(mark: SubjectMark) -> float:
    """Mean of the four term scores. Out-of-range scores pass through."""
    terms = mark.terms
    return sum(terms) / len(terms)


def total_marks(subjects: Sequence[SubjectMark]) -> float:
    return sum((subject_average(s) for s in subjects), 0.0)


def overall_average(subjects: Sequence[SubjectMark]) -> Optional[float]:
    """
    Mean of the per-subject averages.
    Returns None for an empty sequence instead of dividing by zero.
    """
    if not subjects:
        return None
    return total_marks(subjects) / len(subjects)


def assign_grade(average: Optional[float]) -> Grade:
    if average is None:
        return Grade.NO_DATA
    for lower, grade in GRADE_BANDS:
        if average >= lower:
            return grade
    return Grade.D


def format_average(average: Optional[float]) -> str:
    if average is None:
        return "N/A"
    return f"{average:.2f}"
