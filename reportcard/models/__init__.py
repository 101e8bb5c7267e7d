# reportcard/models/__init__.py

from .report_schemas import Grade, StudentRecord, SubjectMark

__all__ = [
    "Grade",
    "StudentRecord",
    "SubjectMark",
]
