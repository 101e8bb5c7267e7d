# reportcard/analysis/pdf_report.py
from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas as pdf_canvas

from reportcard.analysis.grading import format_average
from reportcard.analysis.report_model import ReportCard
from reportcard.core.config import CONFIG, Settings
from reportcard.core.errors import DocumentRenderError, DocumentWriteError, FontLoadError
from reportcard.core.logger import get_logger
from reportcard.utils.pdf_draw import draw_rect, draw_text, set_text_color

logger = get_logger("pdf_report")

PAGE_WIDTH_MM = 210.0
PAGE_HEIGHT_MM = 297.0
TOP_Y = 280.0

TABLE_X = 15.0
TABLE_WIDTH = 180.0
ROW_HEIGHT = 10.0
BOX_HEIGHT = 35.0
TEXT_X = 20.0

# Subjects, 1st, 2nd, 3rd, Final
COLUMN_X = (20.0, 60.0, 90.0, 120.0, 150.0)
COLUMN_LABELS = ("Subjects", "1st Term", "2nd Term", "3rd Term", "Final Term")

HEADER_FILL = colors.purple
BOX_FILL = colors.lightgrey

BODY_SIZE = 12
TABLE_SIZE = 10


@dataclass(frozen=True)
class LayoutCursor:
    """Vertical position (mm from the page bottom) where the next section starts."""

    y: float = TOP_Y

    def drop(self, offset: float) -> "LayoutCursor":
        return LayoutCursor(self.y - offset)


@dataclass(frozen=True)
class PageStyle:
    school_name: str
    font: str
    font_bold: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "PageStyle":
        return cls(
            school_name=settings.SCHOOL_NAME,
            font=settings.FONT_NAME,
            font_bold=settings.FONT_NAME_BOLD,
        )


# ---------------- Layout steps ----------------
# Each step draws one section and returns the cursor for the next one.

def draw_title(c, cursor: LayoutCursor, card: ReportCard, style: PageStyle) -> LayoutCursor:
    draw_text(c, 60, cursor.y, style.school_name, 20, style.font_bold)
    cursor = cursor.drop(15)
    draw_text(c, 80, cursor.y, "REPORT CARD", 16, style.font_bold)
    return cursor.drop(25)


def draw_student_info(c, cursor: LayoutCursor, card: ReportCard, style: PageStyle) -> LayoutCursor:
    record = card.record
    draw_rect(c, TABLE_X, cursor.y - 25, TABLE_WIDTH, BOX_HEIGHT,
              fill=BOX_FILL, stroke=colors.black)
    set_text_color(c, colors.black)
    draw_text(c, TEXT_X, cursor.y, f"Name: {record.name}", BODY_SIZE, style.font)
    draw_text(c, TEXT_X, cursor.y - 10,
              f"Class: {record.class_name}   Section: {record.section}",
              BODY_SIZE, style.font)
    return cursor.drop(40)


def draw_table_header(c, cursor: LayoutCursor, card: ReportCard, style: PageStyle) -> LayoutCursor:
    draw_rect(c, TABLE_X, cursor.y - 3, TABLE_WIDTH, ROW_HEIGHT, fill=HEADER_FILL)
    # white text while over the dark bar
    set_text_color(c, colors.white)
    for x, label in zip(COLUMN_X, COLUMN_LABELS):
        draw_text(c, x, cursor.y, label, TABLE_SIZE, style.font_bold)
    return cursor.drop(ROW_HEIGHT)


def draw_subject_rows(c, cursor: LayoutCursor, card: ReportCard, style: PageStyle) -> LayoutCursor:
    for mark in card.record.subjects:
        draw_rect(c, TABLE_X, cursor.y - 3, TABLE_WIDTH, ROW_HEIGHT,
                  fill=colors.white, stroke=colors.black)
        set_text_color(c, colors.black)
        cells = [mark.name] + [f"{t:.2f}" for t in mark.terms]
        for x, text in zip(COLUMN_X, cells):
            draw_text(c, x, cursor.y, text, TABLE_SIZE, style.font)
        cursor = cursor.drop(ROW_HEIGHT)
    return cursor.drop(ROW_HEIGHT)


def draw_totals(c, cursor: LayoutCursor, card: ReportCard, style: PageStyle) -> LayoutCursor:
    draw_rect(c, TABLE_X, cursor.y - 3, TABLE_WIDTH, ROW_HEIGHT, fill=BOX_FILL)
    set_text_color(c, colors.black)
    draw_text(c, TEXT_X, cursor.y, f"Total Marks: {card.total_marks:.2f}", BODY_SIZE, style.font_bold)
    draw_text(c, 120, cursor.y, f"Grade: {card.grade.value}", BODY_SIZE, style.font_bold)
    return cursor.drop(15)


def draw_comment(c, cursor: LayoutCursor, card: ReportCard, style: PageStyle) -> LayoutCursor:
    draw_rect(c, TABLE_X, cursor.y - 25, TABLE_WIDTH, BOX_HEIGHT, fill=BOX_FILL)
    set_text_color(c, colors.black)
    draw_text(c, TEXT_X, cursor.y, "Comment:", BODY_SIZE, style.font_bold)
    draw_text(c, TEXT_X, cursor.y - 15, card.record.comment, BODY_SIZE, style.font)
    return cursor.drop(50)


def draw_signatures(c, cursor: LayoutCursor, card: ReportCard, style: PageStyle) -> LayoutCursor:
    # fixed offsets from the final cursor; nothing is laid out below
    draw_text(c, 20, cursor.y, "Class Teacher's Signature", TABLE_SIZE, style.font)
    draw_text(c, 80, cursor.y, "Parent's Signature", TABLE_SIZE, style.font)
    draw_text(c, 140, cursor.y, "Principal's Signature", TABLE_SIZE, style.font)
    return cursor


LAYOUT_STEPS = (
    draw_title,
    draw_student_info,
    draw_table_header,
    draw_subject_rows,
    draw_totals,
    draw_comment,
    draw_signatures,
)


def layout_page(c, card: ReportCard, style: PageStyle, start: LayoutCursor | None = None) -> LayoutCursor:
    cursor = start or LayoutCursor()
    for step in LAYOUT_STEPS:
        cursor = step(c, cursor, card, style)
    return cursor


# ---------------- Document ----------------

def _check_fonts(card: ReportCard, style: PageStyle) -> None:
    for font in (style.font, style.font_bold):
        try:
            pdfmetrics.getFont(font)
        except KeyError as exc:
            raise FontLoadError(card.name, f"font {font!r} is not available") from exc


def render_report_card_pdf(card: ReportCard, settings: Settings = CONFIG) -> bytes:
    """
    Lays out the single A4 page for one student and returns the PDF bytes.
    Average / grade fall back to N/A when the student has no subjects.
    """
    style = PageStyle.from_settings(settings)
    _check_fonts(card, style)

    buf = io.BytesIO()
    try:
        c = pdf_canvas.Canvas(buf, pagesize=A4)
        c.setTitle(f"Report Card - {card.name}")
        end = layout_page(c, card, style)
        c.showPage()
        c.save()
    except Exception as exc:
        raise DocumentRenderError(card.name, f"could not render page: {exc}") from exc

    logger.debug(
        "laid out %s: %d subjects, average %s, cursor ended at %.1f",
        card.name, card.num_subjects, format_average(card.overall_average), end.y,
    )
    return buf.getvalue()


def write_report_card_pdf(card: ReportCard, output_dir: str | Path, settings: Settings = CONFIG) -> Path:
    """Renders the card and writes it under output_dir. The directory must already exist."""
    data = render_report_card_pdf(card, settings)
    path = Path(output_dir) / card.output_filename
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise DocumentWriteError(card.name, f"could not write {path}: {exc}") from exc
    return path
