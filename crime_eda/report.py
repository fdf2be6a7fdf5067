import logging
import os
from typing import Dict, List, Optional

import pandas as pd

from .config import FINAL_REPORT_FILE, UNKNOWN
from .eda import AnalysisResult
from .preprocessing import CleaningSummary

logger = logging.getLogger(__name__)


def _date(value) -> str:
    return "n/a" if pd.isna(value) else value.strftime("%Y-%m-%d")


def _count_lines(table: pd.DataFrame, column: str, limit: Optional[int] = None) -> List[str]:
    rows = table if limit is None else table.head(limit)
    return [f"- {r[column]}: {int(r['count']):,}" for _, r in rows.iterrows()]


def generate_final_report(
    df: pd.DataFrame,
    summary: CleaningSummary,
    analyses: Dict[str, AnalysisResult],
    report_path: str = FINAL_REPORT_FILE,
) -> str:
    """Write a Markdown summary of the cleaned complaints and the rendered figures."""
    report_dir = os.path.dirname(report_path)
    if report_dir:
        os.makedirs(report_dir, exist_ok=True)

    total = len(df)
    lines = []
    lines.append("# NYC Crime Complaints: Exploratory Summary")
    lines.append("")
    lines.append("## Data Coverage")
    lines.append(f"- Complaints analysed: {total:,}")
    lines.append(f"- Earliest start date: {_date(df['date_start'].min())}")
    lines.append(f"- Latest start date: {_date(df['date_start'].max())}")
    lines.append(f"- Complaints with no recorded end date: {int(df['date_end_missing'].sum()):,}")
    lines.append("")
    lines.append("## Cleaning")
    lines.append(f"- Raw rows read: {summary.rows_input:,}")
    lines.append(f"- Start dates that could not be parsed: {summary.invalid_start_dates:,}")
    lines.append(f"- End dates that could not be parsed: {summary.invalid_end_dates:,}")
    lines.append(f"- Rows dropped by the date-range filter: {summary.dropped_by_date_range:,}")
    lines.append(f"- Offense labels corrected: {summary.relabelled_offenses:,}")
    lines.append(f"- Demographic fields set to {UNKNOWN}: {summary.demographics_filled:,}")
    lines.append("")

    lines.append("## Most Frequent Offense per Year")
    for _, r in analyses["top_offense_per_year"].table.iterrows():
        lines.append(f"- {int(r['year'])}: {r['offense_desc']} ({int(r['count']):,})")
    lines.append("")

    lines.append("## Complaints by Borough")
    lines.extend(_count_lines(analyses["by_borough"].table, "borough"))
    lines.append("")
    lines.append("## Offense Level")
    lines.extend(_count_lines(analyses["by_offense_level"].table, "offense_level"))
    lines.append("")
    lines.append("## Top Offenses")
    lines.extend(_count_lines(analyses["top_offenses"].table, "offense_desc"))
    lines.append("")

    lines.append("## Suspect and Victim Demographics (top 3 per field)")
    for column in ["susp_race", "susp_sex", "susp_age_group", "vic_race", "vic_sex", "vic_age_group"]:
        result = analyses[column]
        lines.append(f"### {result.title}")
        lines.extend(_count_lines(result.table, column, limit=3))
    lines.append("")

    lines.append("## Top Complaint Locations")
    for _, r in analyses["top_locations"].table.iterrows():
        lines.append(f"- ({r['latitude']:.5f}, {r['longitude']:.5f}): {int(r['count']):,}")
    lines.append("")

    lines.append("## Figures")
    for result in analyses.values():
        lines.append(f"- {result.title}: {os.path.relpath(result.figure_path, report_dir or '.')}")

    with open(report_path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")

    logger.info(f"Report written to {report_path}")
    return report_path
