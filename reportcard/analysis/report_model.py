# reportcard/analysis/report_model.py
from __future__ import annotations
from typing import List, Optional

from reportcard.analysis.grading import (
    assign_grade,
    overall_average,
    subject_average,
    total_marks,
)
from reportcard.models.report_schemas import Grade, StudentRecord


def output_filename(student_name: str) -> str:
    """'Bright Ben' -> 'Bright_Ben_report_card.pdf'"""
    safe = "".join(ch if ch.isalnum() else "_" for ch in student_name)
    return f"{safe}_report_card.pdf"


class ReportCard:
    """
    Read-only view over a StudentRecord.
    Every derived value is recomputed from record.subjects on access.
    """

    def __init__(self, record: StudentRecord):
        self._record = record

    @property
    def record(self) -> StudentRecord:
        return self._record

    @property
    def name(self) -> str:
        return self._record.name

    @property
    def num_subjects(self) -> int:
        return len(self._record.subjects)

    @property
    def subject_averages(self) -> List[float]:
        return [subject_average(s) for s in self._record.subjects]

    @property
    def total_marks(self) -> float:
        return total_marks(self._record.subjects)

    @property
    def overall_average(self) -> Optional[float]:
        return overall_average(self._record.subjects)

    @property
    def grade(self) -> Grade:
        return assign_grade(self.overall_average)

    @property
    def output_filename(self) -> str:
        return output_filename(self._record.name)

    def __repr__(self) -> str:
        return f"ReportCard(name={self.name!r}, subjects={self.num_subjects})"
