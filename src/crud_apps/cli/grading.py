"""
CLI for the school grading report.

Reads `id, name, score` lines from the input file and writes one graded line
per student to the report file.
"""

import argparse
import logging
from pathlib import Path

from crud_apps import logging_setup
from crud_apps.core.exceptions import RepositoryError
from crud_apps.grading.processor import StudentResultProcessor, grade_distribution
from crud_apps.settings import get_settings

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate a graded report from a student results file")

    cfg = get_settings()

    parser.add_argument(
        "--input",
        type=Path,
        default=cfg.students_input,
        help=f"Path to the student results file (default: {cfg.students_input})"
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=cfg.report_output,
        help=f"Path to write the report (default: {cfg.report_output})"
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Also print how many students got each grade"
    )
    parser.add_argument("--log_level", default=cfg.log_level, help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    args = parser.parse_args(argv)
    logging_setup.setup_logging(args.log_level)

    processor = StudentResultProcessor()
    try:
        students = processor.read_students_from_file(args.input)
        processor.write_report_to_file(students, args.out)
    except FileNotFoundError:
        print("Error: The input file was not found.")
        return 1
    except RepositoryError as e:
        print(f"Error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Report generation failed: {e}", exc_info=True)
        print(f"An unexpected error occurred: {e}")
        return 1

    print(f"Report generated successfully in {args.out}")

    if args.summary:
        print("\nGrade distribution:")
        print(grade_distribution(students).to_string())

    return 0


if __name__ == "__main__":
    exit(main())
