import logging

import pytest

from reportcard.core.config import Settings
from reportcard.core.errors import DocumentWriteError
from reportcard.services import report_batch
from reportcard.services.report_batch import run_report_cards


def test_writes_one_pdf_per_student(tmp_path, top_student, average_student, empty_student, capsys):
    result = run_report_cards([top_student, average_student, empty_student], tmp_path, Settings())

    assert result.failed == {}
    assert [p.name for p in result.generated] == [
        "Ramesh_Mishra_report_card.pdf",
        "Bright_Ben_report_card.pdf",
        "Thomas_Johnson_report_card.pdf",
    ]
    for path in result.generated:
        assert path.exists()

    out = capsys.readouterr().out
    assert out.count("--- Student Report Card ---") == 3
    assert "Grade: N/A (No subjects)" in out


def test_default_output_dir_from_settings(tmp_path, average_student):
    result = run_report_cards([average_student], settings=Settings(OUTPUT_DIR=str(tmp_path)))
    assert result.generated == [tmp_path / "Bright_Ben_report_card.pdf"]


def test_missing_directory_fails_each_student_without_aborting(tmp_path, top_student, average_student, caplog):
    caplog.set_level(logging.ERROR, logger="reportcard")
    missing = tmp_path / "report_cards"

    result = run_report_cards([top_student, average_student], missing, Settings())

    assert result.generated == []
    assert set(result.failed) == {"Ramesh Mishra", "Bright Ben"}
    messages = [r.getMessage() for r in caplog.records]
    assert any("Ramesh Mishra" in m for m in messages)
    assert any("Bright Ben" in m for m in messages)


def test_one_failure_does_not_stop_the_batch(tmp_path, top_student, average_student, empty_student, monkeypatch, capsys):
    real_write = report_batch.write_report_card_pdf

    def flaky_write(card, output_dir, settings):
        if card.name == "Bright Ben":
            raise DocumentWriteError(card.name, "disk full")
        return real_write(card, output_dir, settings)

    monkeypatch.setattr(report_batch, "write_report_card_pdf", flaky_write)

    result = run_report_cards([top_student, average_student, empty_student], tmp_path, Settings())

    assert result.failed == {"Bright Ben": "Bright Ben: disk full"}
    assert [p.name for p in result.generated] == [
        "Ramesh_Mishra_report_card.pdf",
        "Thomas_Johnson_report_card.pdf",
    ]
    # errors go to the log, not to the printed report cards
    assert "disk full" not in capsys.readouterr().out


def test_non_report_errors_propagate(tmp_path, top_student, monkeypatch):
    def broken(card, output_dir, settings):
        raise ValueError("unexpected")

    monkeypatch.setattr(report_batch, "write_report_card_pdf", broken)
    with pytest.raises(ValueError):
        run_report_cards([top_student], tmp_path, Settings())


def test_reused_output_path_is_warned_and_listed_once(tmp_path, average_student, caplog):
    caplog.set_level(logging.WARNING, logger="reportcard")
    namesake = average_student.model_copy(update={"class_name": "9", "section": "A"})

    result = run_report_cards([average_student, namesake], tmp_path, Settings())

    assert result.generated == [tmp_path / "Bright_Ben_report_card.pdf"]
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert any("overwritten by Bright Ben" in r.getMessage() for r in warnings)
