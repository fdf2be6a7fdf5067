import argparse
import logging
import os
import sys

from crime_eda.config import LOG_DIR, RAW_COMPLAINTS_FILE, REPORTS_DIR
from crime_eda.data_ingestion import LoadError, load_complaints
from crime_eda.eda import run_analyses
from crime_eda.logging_setup import setup_logging
from crime_eda.preprocessing import clean_complaints
from crime_eda.report import generate_final_report

logger = logging.getLogger(__name__)


def run_pipeline(input_path: str = RAW_COMPLAINTS_FILE, reports_dir: str = REPORTS_DIR) -> str:
    raw = load_complaints(input_path)
    complaints, summary = clean_complaints(raw)

    analyses = run_analyses(complaints, os.path.join(reports_dir, "figures"))
    levels = analyses["by_offense_level"].table
    breakdown = ", ".join(f"{lvl}={int(n):,}" for lvl, n in zip(levels["offense_level"], levels["count"]))
    logger.info(f"Complaints by offense level: {breakdown}")
    report_path = generate_final_report(
        complaints, summary, analyses, os.path.join(reports_dir, "final_report.md")
    )
    logger.info(f"Pipeline complete. See reports in: {reports_dir}")
    return report_path


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="NYC Crime Complaint Exploratory Analysis")
    p.add_argument("--input", type=str, default=RAW_COMPLAINTS_FILE, help="Complaint CSV export")
    p.add_argument("--reports-dir", type=str, default=REPORTS_DIR, help="Where figures and the report go")
    p.add_argument(
        "--log-level",
        type=str.upper,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console and file log level",
    )
    p.add_argument("--log-file", type=str, default=None, help="Also log to this file under logs/")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(log_level=args.log_level, log_file=args.log_file, log_dir=LOG_DIR)
    try:
        run_pipeline(args.input, args.reports_dir)
    except LoadError as exc:
        logger.error(f"Could not load complaints: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
