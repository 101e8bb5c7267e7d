# reportcard/core/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Where one PDF per student is written (must already exist for the core)
    OUTPUT_DIR: str = "report_cards"

    # Marks CSV read by generate_report_cards.py
    INPUT_CSV: str = "students.csv"

    # Page header placeholder
    SCHOOL_NAME: str = "[School Name]"

    # Built-in reportlab fonts
    FONT_NAME: str = "Helvetica"
    FONT_NAME_BOLD: str = "Helvetica-Bold"

    LOG_LEVEL: str = "INFO"

    class Config:
        env_prefix = "REPORT_CARD_"
        case_sensitive = False


CONFIG = Settings()
