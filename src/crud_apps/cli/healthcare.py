"""
CLI for the healthcare patient and prescription lookup.

Prints every patient, then asks for a patient id on stdin (or takes it from
--patient-id) and prints that patient's prescriptions.
"""

import argparse
import logging

from crud_apps import logging_setup
from crud_apps.healthcare.app import INVALID_INPUT_MESSAGE, HealthSystemApp, parse_patient_id
from crud_apps.settings import get_settings

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Look up prescriptions by patient")

    cfg = get_settings()

    parser.add_argument(
        "--patient-id",
        help="Patient ID to look up; prompts on stdin when omitted"
    )
    parser.add_argument("--log_level", default=cfg.log_level, help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    args = parser.parse_args(argv)
    logging_setup.setup_logging(args.log_level)

    app = HealthSystemApp()
    app.seed_data()
    app.build_prescription_map()
    app.print_all_patients()

    raw = args.patient_id
    if raw is None:
        try:
            raw = input("\nEnter Patient ID to view prescriptions: ")
        except EOFError:
            raw = None

    patient_id = parse_patient_id(raw)
    if patient_id is None:
        print(INVALID_INPUT_MESSAGE)
        return 0

    app.print_prescriptions_for_patient(patient_id)
    return 0


if __name__ == "__main__":
    exit(main())
