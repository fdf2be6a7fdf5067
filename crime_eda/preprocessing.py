import logging
from dataclasses import asdict, dataclass
from typing import Dict, Tuple

import pandas as pd

from .config import (
    COLUMN_RENAMES,
    DATE_FORMAT,
    DEMOGRAPHIC_COLUMNS,
    DROP_COLUMNS,
    MIN_DATE,
    MISSING_END_DATE,
    NULL_MARKER,
    OFFENSE_LABEL_FIXES,
    UNKNOWN,
)

logger = logging.getLogger(__name__)

MIN_TIMESTAMP = pd.Timestamp(MIN_DATE)
PLACEHOLDER_TIMESTAMP = pd.to_datetime(MISSING_END_DATE, format=DATE_FORMAT)


@dataclass
class CleaningSummary:
    """Row counts recorded while cleaning one complaint table."""

    rows_input: int = 0
    rows_output: int = 0
    invalid_start_dates: int = 0
    invalid_end_dates: int = 0
    missing_end_dates: int = 0
    relabelled_offenses: int = 0
    demographics_filled: int = 0
    dropped_by_date_range: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def _to_dates(values: pd.Series) -> pd.Series:
    """Parse month/day/year text; values that do not parse become NaT."""
    if pd.api.types.is_datetime64_any_dtype(values):
        return values
    return pd.to_datetime(values, format=DATE_FORMAT, errors="coerce")


def prune_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Drop the sparse raw columns and rename the rest to snake_case names."""
    return df.drop(columns=DROP_COLUMNS, errors="ignore").rename(columns=COLUMN_RENAMES)


def canonicalize_offenses(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["offense_desc"] = df["offense_desc"].replace(OFFENSE_LABEL_FIXES)
    return df


def parse_start_dates(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    df["date_start"] = _to_dates(df["date_start"])
    return df


def parse_end_dates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Flag missing end dates, fill them with the placeholder date, then parse.

    The flag is OR-ed with any flag already on the table so that re-cleaning
    a cleaned table keeps the record of which end dates were substituted.
    """
    df = df.copy()
    missing = df["date_end"].isna()
    if "date_end_missing" in df.columns:
        missing = missing | df["date_end_missing"].fillna(False).astype(bool)
    df["date_end_missing"] = missing

    if pd.api.types.is_datetime64_any_dtype(df["date_end"]):
        df["date_end"] = df["date_end"].fillna(PLACEHOLDER_TIMESTAMP)
    else:
        df["date_end"] = _to_dates(df["date_end"].fillna(MISSING_END_DATE))
    return df


def filter_date_range(df: pd.DataFrame) -> pd.DataFrame:
    """
    Keep complaints that start on/after MIN_DATE and either end on/after it
    or carry the placeholder end date.

    Unparsed start or end dates (NaT) never satisfy the comparisons, so those
    rows fall out here.
    """
    start_ok = df["date_start"] >= MIN_TIMESTAMP
    placeholder_end = (df["date_end"] == PLACEHOLDER_TIMESTAMP) & df["date_end_missing"]
    end_ok = (df["date_end"] >= MIN_TIMESTAMP) | placeholder_end
    return df.loc[start_ok & end_ok].copy()


def fill_demographics(df: pd.DataFrame) -> pd.DataFrame:
    """Replace the '(null)' marker and missing values in suspect/victim fields with UNKNOWN."""
    df = df.copy()
    for col in DEMOGRAPHIC_COLUMNS:
        if col in df.columns:
            df[col] = df[col].replace(NULL_MARKER, UNKNOWN).fillna(UNKNOWN)
    return df


def coerce_types(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    precinct = pd.to_numeric(df["precinct_num"], errors="coerce")
    whole = (precinct % 1 == 0).fillna(False).astype(bool)
    df["precinct_num"] = precinct.where(whole).astype("Int64")
    for col in ["latitude", "longitude", "x_coord", "y_coord"]:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def add_time_features(df: pd.DataFrame) -> pd.DataFrame:
    """Derive calendar and time-of-day columns from the start date and time."""
    df = df.copy()
    df["year"] = df["date_start"].dt.year
    df["month"] = df["date_start"].dt.month
    df["day_of_week"] = df["date_start"].dt.day_name()
    if "time_start" in df.columns:
        times = pd.to_datetime(df["time_start"], format="%H:%M:%S", errors="coerce")
        df["hour"] = times.dt.hour.astype("Int64")
    return df


def clean_complaints(df: pd.DataFrame) -> Tuple[pd.DataFrame, CleaningSummary]:
    """
    Run every cleaning step over a raw (or already cleaned) complaint table.

    Returns the cleaned table and a CleaningSummary of what changed. The input
    frame is not modified.
    """
    summary = CleaningSummary(rows_input=len(df))

    df = prune_columns(df)

    summary.relabelled_offenses = int(df["offense_desc"].isin(OFFENSE_LABEL_FIXES).sum())
    df = canonicalize_offenses(df)
    logger.info(f"Relabelled {summary.relabelled_offenses:,} offense descriptions")

    df = parse_start_dates(df)
    summary.invalid_start_dates = int(df["date_start"].isna().sum())
    if summary.invalid_start_dates:
        logger.warning(f"{summary.invalid_start_dates:,} start dates could not be parsed")

    df = parse_end_dates(df)
    summary.missing_end_dates = int(df["date_end_missing"].sum())
    summary.invalid_end_dates = int(df["date_end"].isna().sum())
    logger.info(f"{summary.missing_end_dates:,} end dates missing, placeholder {MISSING_END_DATE} substituted")
    if summary.invalid_end_dates:
        logger.warning(f"{summary.invalid_end_dates:,} end dates could not be parsed")

    before = len(df)
    df = filter_date_range(df)
    summary.dropped_by_date_range = before - len(df)
    logger.info(f"Dropped {summary.dropped_by_date_range:,} complaints dated before {MIN_DATE} or undated")

    present = [c for c in DEMOGRAPHIC_COLUMNS if c in df.columns]
    summary.demographics_filled = int((df[present].isna() | (df[present] == NULL_MARKER)).sum().sum())
    df = fill_demographics(df)

    df = coerce_types(df)
    df = add_time_features(df)
    df = df.reset_index(drop=True)

    summary.rows_output = len(df)
    logger.info(f"Cleaning complete: {summary.rows_input:,} -> {summary.rows_output:,} complaints")
    return df, summary
