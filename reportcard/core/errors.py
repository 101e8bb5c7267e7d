# reportcard/core/errors.py


class ReportCardError(Exception):
    """Failure while producing one student's report card."""

    def __init__(self, student_name: str, message: str):
        super().__init__(message)
        self.student_name = student_name

    def __str__(self) -> str:
        return f"{self.student_name}: {self.args[0]}"


class FontLoadError(ReportCardError):
    pass


class DocumentRenderError(ReportCardError):
    pass


class DocumentWriteError(ReportCardError):
    pass


class MarksIngestError(ValueError):
    pass
