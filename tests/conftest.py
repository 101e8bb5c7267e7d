import pytest

from reportcard.models.report_schemas import StudentRecord, SubjectMark


def make_subject(name, first, second, third, final):
    return SubjectMark(
        name=name,
        first_term=first,
        second_term=second,
        third_term=third,
        final_term=final,
    )


class RecordingCanvas:
    """Stands in for a reportlab canvas and records every drawing call."""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
        return record

    def named(self, name):
        return [c for c in self.calls if c[0] == name]

    def strings(self):
        return [args[2] for _, args, _ in self.named("drawString")]


@pytest.fixture
def top_student():
    return StudentRecord(
        name="Ramesh Mishra",
        class_name="10",
        section="A",
        subjects=tuple(make_subject(s, 95, 92, 98, 93) for s in ("Mathematics", "Science", "English")),
        comment="Excellent performance across all subjects.",
    )


@pytest.fixture
def average_student():
    return StudentRecord(
        name="Bright Ben",
        class_name="10",
        section="B",
        subjects=tuple(make_subject(s, 65, 60, 70, 68) for s in ("Mathematics", "Science")),
        comment="Steady effort.",
    )


@pytest.fixture
def empty_student():
    return StudentRecord(
        name="Thomas Johnson",
        class_name="9",
        section="C",
        comment="No marks recorded this year.",
    )


@pytest.fixture
def canvas():
    return RecordingCanvas()
