# reportcard/models/report_schemas.py
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class Grade(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    NO_DATA = "N/A (No subjects)"


class SubjectMark(BaseModel):
    """One subject's four term scores. Scores are not range-checked."""

    name: str
    first_term: float
    second_term: float
    third_term: float
    final_term: float

    model_config = ConfigDict(frozen=True)

    @property
    def terms(self) -> Tuple[float, float, float, float]:
        return (self.first_term, self.second_term, self.third_term, self.final_term)


class StudentRecord(BaseModel):
    name: str
    class_name: str
    section: str
    # display order only; grading ignores it
    subjects: Tuple[SubjectMark, ...] = ()
    comment: str = ""

    model_config = ConfigDict(frozen=True)
