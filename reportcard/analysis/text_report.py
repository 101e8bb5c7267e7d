# reportcard/analysis/text_report.py
from __future__ import annotations
from typing import List

from reportcard.analysis.grading import format_average
from reportcard.analysis.report_model import ReportCard

HEADER = "--- Student Report Card ---"
FOOTER = "---------------------------"
SUBJECT_COL = 15


def format_report_lines(card: ReportCard) -> List[str]:
    record = card.record
    lines = [
        HEADER,
        f"Student Name: {record.name}",
        f"Class: {record.class_name}, Section: {record.section}",
        f"Number of Subjects: {card.num_subjects}",
        "Subjects:",
    ]

    for mark, avg in zip(record.subjects, card.subject_averages):
        scores = "  ".join(f"{t:6.2f}" for t in mark.terms)
        lines.append(f"  {mark.name:<{SUBJECT_COL}} {scores}  Avg: {avg:.2f}")

    lines.append(f"Total Marks: {card.total_marks:.2f}")
    lines.append(f"Average Marks: {format_average(card.overall_average)}")
    lines.append(f"Grade: {card.grade.value}")
    lines.append(f"Comment: {record.comment}")
    lines.append(FOOTER)
    return lines


def print_report(card: ReportCard) -> None:
    print("\n" + "\n".join(format_report_lines(card)) + "\n")
