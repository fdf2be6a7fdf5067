"""
Shared fixtures: raw complaint rows in the export's schema.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List

import pandas as pd
import pytest

from crime_eda.config import RAW_COLUMNS

BASE_ROW: Dict[str, Any] = {
    "CMPLNT_NUM": "100000001",
    "ADDR_PCT_CD": "44",
    "BORO_NM": "BRONX",
    "CMPLNT_FR_DT": "03/01/2022",
    "CMPLNT_FR_TM": "14:30:00",
    "CMPLNT_TO_DT": "03/01/2022",
    "CMPLNT_TO_TM": "15:00:00",
    "CRM_ATPT_CPTD_CD": "COMPLETED",
    "HADEVELOPT": None,
    "HOUSING_PSA": None,
    "JURISDICTION_CODE": 0,
    "JURIS_DESC": "N.Y. POLICE DEPT",
    "KY_CD": 578,
    "LAW_CAT_CD": "VIOLATION",
    "LOC_OF_OCCUR_DESC": "INSIDE",
    "OFNS_DESC": "HARRASSMENT 2",
    "PARKS_NM": None,
    "PATROL_BORO": "PATROL BORO BRONX",
    "PD_CD": 638,
    "PD_DESC": "HARASSMENT,SUBD 3,4,5",
    "PREM_TYP_DESC": "RESIDENCE - APT. HOUSE",
    "RPT_DT": "03/02/2022",
    "STATION_NAME": None,
    "SUSP_AGE_GROUP": "25-44",
    "SUSP_RACE": "BLACK",
    "SUSP_SEX": "M",
    "TRANSIT_DISTRICT": None,
    "VIC_AGE_GROUP": "25-44",
    "VIC_RACE": "WHITE HISPANIC",
    "VIC_SEX": "F",
    "X_COORD_CD": 1007314.0,
    "Y_COORD_CD": 241257.0,
    "Latitude": 40.828848,
    "Longitude": -73.916661,
    "Lat_Lon": "(40.828848, -73.916661)",
}


def build_raw(overrides: List[Dict[str, Any]]) -> pd.DataFrame:
    rows = []
    for i, override in enumerate(overrides):
        row = dict(BASE_ROW)
        row["CMPLNT_NUM"] = str(100000001 + i)
        row.update(override)
        rows.append(row)
    return pd.DataFrame(rows, columns=RAW_COLUMNS)


@pytest.fixture
def make_raw() -> Callable[[List[Dict[str, Any]]], pd.DataFrame]:
    """Build a raw complaint frame; each dict overrides fields of one default row."""
    return build_raw


@pytest.fixture
def sample_raw() -> pd.DataFrame:
    """A mix of clean rows and the quirks the cleaner has to handle."""
    return build_raw(
        [
            {},
            {"OFNS_DESC": "PETIT LARCENY", "LAW_CAT_CD": "MISDEMEANOR", "BORO_NM": "MANHATTAN"},
            {"CMPLNT_FR_DT": "01/15/1022", "CMPLNT_TO_DT": "01/15/1022"},
            {"CMPLNT_TO_DT": None, "CMPLNT_TO_TM": None},
            {"SUSP_RACE": "(null)", "SUSP_SEX": "(null)", "SUSP_AGE_GROUP": "(null)"},
            {"CMPLNT_FR_DT": "12/31/2016", "CMPLNT_TO_DT": "01/02/2017"},
            {"OFNS_DESC": "FELONY ASSAULT", "LAW_CAT_CD": "FELONY", "CRM_ATPT_CPTD_CD": "ATTEMPTED",
             "CMPLNT_FR_DT": "07/04/2019", "CMPLNT_TO_DT": "07/04/2019", "CMPLNT_FR_TM": "23:05:00",
             "Latitude": 40.7580, "Longitude": -73.9855},
            {"CMPLNT_FR_DT": "not a date"},
            {"VIC_RACE": "(null)", "VIC_SEX": "E", "VIC_AGE_GROUP": None},
        ]
    )


@pytest.fixture
def raw_csv(tmp_path: Path, sample_raw: pd.DataFrame) -> Path:
    path = tmp_path / "complaints.csv"
    sample_raw.to_csv(path, index=False)
    return path


@pytest.fixture
def restore_logging():
    """Put the root logger back after a test that calls setup_logging()."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
