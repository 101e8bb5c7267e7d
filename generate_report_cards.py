import os
import sys

# Ensure reportcard package is importable when run from a checkout
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from reportcard.core.config import CONFIG
from reportcard.services.marks_ingest import load_students_file
from reportcard.services.report_batch import run_report_cards
from reportcard.utils.helpers import ensure_dir


def main():
    csv_path = CONFIG.INPUT_CSV
    if not os.path.exists(csv_path):
        print(f"Error: {csv_path} not found.", file=sys.stderr)
        return 1

    print("Student Report Card Generator\n")
    students = load_students_file(csv_path)

    # the core expects the output directory to exist
    out_dir = ensure_dir(CONFIG.OUTPUT_DIR)
    result = run_report_cards(students, out_dir)

    print(f"Generated {len(result.generated)} report card(s), {len(result.failed)} failed.")
    return 1 if result.failed else 0


if __name__ == "__main__":
    sys.exit(main())
