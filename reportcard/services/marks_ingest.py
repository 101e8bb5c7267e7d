# reportcard/services/marks_ingest.py
import csv
import io
import math
from pathlib import Path
from typing import Dict, List, Tuple

from reportcard.core.errors import MarksIngestError
from reportcard.core.logger import get_logger
from reportcard.models.report_schemas import StudentRecord, SubjectMark

logger = get_logger("marks_ingest")

REQUIRED_HEADERS = (
    "student_name",
    "class_name",
    "section",
    "subject",
    "first_term",
    "second_term",
    "third_term",
    "final_term",
)
TERM_HEADERS = REQUIRED_HEADERS[4:]


def load_students_csv(file_content: bytes) -> List[StudentRecord]:
    """
    Parses a marks CSV into student records, one row per subject.
    Expected headers: student_name, class_name, section, subject,
    first_term, second_term, third_term, final_term, comment (optional)

    Students are keyed by (name, class, section) and keep first-seen order.
    A row with an empty subject registers the student without adding a
    subject. Rows whose scores are unparsable or not finite are skipped.
    """
    try:
        decoded = file_content.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MarksIngestError(f"marks CSV is not valid UTF-8: {exc}") from exc

    reader = csv.DictReader(io.StringIO(decoded))
    missing = [h for h in REQUIRED_HEADERS if h not in (reader.fieldnames or [])]
    if missing:
        raise MarksIngestError(f"marks CSV is missing headers: {', '.join(missing)}")

    profiles: Dict[Tuple[str, str, str], Dict] = {}
    skipped = 0

    for row in reader:
        # 1. Extract and clean row data
        sname = (row.get("student_name") or "").strip()
        if not sname:
            skipped += 1
            continue

        sclass = (row.get("class_name") or "").strip()
        ssection = (row.get("section") or "").strip()
        key = (sname, sclass, ssection)

        if key not in profiles:
            profiles[key] = {
                "name": sname,
                "class_name": sclass,
                "section": ssection,
                "comment": (row.get("comment") or "").strip(),
                "subjects": [],
            }
        elif not profiles[key]["comment"]:
            profiles[key]["comment"] = (row.get("comment") or "").strip()

        subject = (row.get("subject") or "").strip()
        if not subject:
            continue

        # 2. Parse the four term scores
        try:
            terms = [float(row.get(h) or "") for h in TERM_HEADERS]
        except ValueError:
            skipped += 1
            continue  # skip invalid rows
        if not all(math.isfinite(t) for t in terms):
            skipped += 1
            continue  # nan / inf are not scores

        profiles[key]["subjects"].append(SubjectMark(
            name=subject,
            first_term=terms[0],
            second_term=terms[1],
            third_term=terms[2],
            final_term=terms[3],
        ))

    if skipped:
        logger.warning("skipped %d invalid marks rows", skipped)

    return [
        StudentRecord(
            name=p["name"],
            class_name=p["class_name"],
            section=p["section"],
            subjects=tuple(p["subjects"]),
            comment=p["comment"],
        )
        for p in profiles.values()
    ]


def load_students_file(path: str | Path) -> List[StudentRecord]:
    with open(path, "rb") as f:
        return load_students_csv(f.read())
