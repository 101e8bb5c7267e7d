# reportcard/services/report_batch.py
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List

from reportcard.analysis.pdf_report import write_report_card_pdf
from reportcard.analysis.report_model import ReportCard
from reportcard.analysis.text_report import print_report
from reportcard.core.config import CONFIG, Settings
from reportcard.core.errors import ReportCardError
from reportcard.core.logger import get_logger
from reportcard.models.report_schemas import StudentRecord

logger = get_logger("report_batch")


@dataclass
class BatchResult:
    generated: List[Path] = field(default_factory=list)
    failed: Dict[str, str] = field(default_factory=dict)  # student name -> cause


def run_report_cards(
    students: Iterable[StudentRecord],
    output_dir: str | Path | None = None,
    settings: Settings = CONFIG,
) -> BatchResult:
    """
    Prints and writes a report card for each student, one at a time.
    A document failure for one student is logged and the batch moves on.
    Students whose names map to the same file overwrite each other; this is
    logged and the path is listed once in generated.
    """
    out_dir = Path(output_dir if output_dir is not None else settings.OUTPUT_DIR)
    result = BatchResult()

    for record in students:
        card = ReportCard(record)
        print_report(card)

        try:
            path = write_report_card_pdf(card, out_dir, settings)
        except ReportCardError as exc:
            logger.error("Failed to generate report card for %s: %s", card.name, exc.__cause__ or exc)
            result.failed[card.name] = str(exc)
            continue

        logger.info("Report card for %s written to %s", card.name, path)
        if path in result.generated:
            logger.warning("%s was already written in this batch and has been overwritten by %s", path, card.name)
            continue
        result.generated.append(path)

    return result
