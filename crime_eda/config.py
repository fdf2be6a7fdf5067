"""
Configuration constants for the complaint dataset, cleaning rules and report output.
"""

# Default data paths
RAW_DIR = "data/raw"
REPORTS_DIR = "reports"
FIGURES_DIR = f"{REPORTS_DIR}/figures"
LOG_DIR = "logs"

# Files
RAW_COMPLAINTS_FILE = f"{RAW_DIR}/NYPD_Complaint_Data_Historic.csv"
FINAL_REPORT_FILE = f"{REPORTS_DIR}/final_report.md"

# Raw schema of the NYPD complaint export
RAW_COLUMNS = [
    "CMPLNT_NUM",
    "ADDR_PCT_CD",
    "BORO_NM",
    "CMPLNT_FR_DT",
    "CMPLNT_FR_TM",
    "CMPLNT_TO_DT",
    "CMPLNT_TO_TM",
    "CRM_ATPT_CPTD_CD",
    "HADEVELOPT",
    "HOUSING_PSA",
    "JURISDICTION_CODE",
    "JURIS_DESC",
    "KY_CD",
    "LAW_CAT_CD",
    "LOC_OF_OCCUR_DESC",
    "OFNS_DESC",
    "PARKS_NM",
    "PATROL_BORO",
    "PD_CD",
    "PD_DESC",
    "PREM_TYP_DESC",
    "RPT_DT",
    "STATION_NAME",
    "SUSP_AGE_GROUP",
    "SUSP_RACE",
    "SUSP_SEX",
    "TRANSIT_DISTRICT",
    "VIC_AGE_GROUP",
    "VIC_RACE",
    "VIC_SEX",
    "X_COORD_CD",
    "Y_COORD_CD",
    "Latitude",
    "Longitude",
    "Lat_Lon",
]

# Columns that mix well-formed and malformed values; read as text
TEXT_COLUMNS = ["CMPLNT_NUM", "ADDR_PCT_CD", "BORO_NM", "CMPLNT_FR_DT", "CMPLNT_TO_DT"]

# Mostly-empty or redundant columns
DROP_COLUMNS = [
    "HADEVELOPT",
    "HOUSING_PSA",
    "PARKS_NM",
    "STATION_NAME",
    "TRANSIT_DISTRICT",
    "PATROL_BORO",
    "LOC_OF_OCCUR_DESC",
    "RPT_DT",
    "Lat_Lon",
]

COLUMN_RENAMES = {
    "CMPLNT_NUM": "complaint_num",
    "ADDR_PCT_CD": "precinct_num",
    "BORO_NM": "borough",
    "CMPLNT_FR_DT": "date_start",
    "CMPLNT_FR_TM": "time_start",
    "CMPLNT_TO_DT": "date_end",
    "CMPLNT_TO_TM": "time_end",
    "CRM_ATPT_CPTD_CD": "status",
    "JURISDICTION_CODE": "jurisdiction_code",
    "JURIS_DESC": "jurisdiction_desc",
    "KY_CD": "offense_code",
    "OFNS_DESC": "offense_desc",
    "PD_CD": "internal_code",
    "PD_DESC": "internal_desc",
    "LAW_CAT_CD": "offense_level",
    "PREM_TYP_DESC": "premise_desc",
    "SUSP_AGE_GROUP": "susp_age_group",
    "SUSP_RACE": "susp_race",
    "SUSP_SEX": "susp_sex",
    "VIC_AGE_GROUP": "vic_age_group",
    "VIC_RACE": "vic_race",
    "VIC_SEX": "vic_sex",
    "X_COORD_CD": "x_coord",
    "Y_COORD_CD": "y_coord",
    "Latitude": "latitude",
    "Longitude": "longitude",
}

# Raw offense labels replaced by clearer text (exact match only)
OFFENSE_LABEL_FIXES = {
    "HARRASSMENT 2": "HARASSMENT",
    "OFF. AGNST PUB ORD SENSBLTY &": "OFFENSES AGAINST PUBLIC ORDER SENSIBILITY",
    "CRIMINAL MISCHIEF & RELATED OF": "CRIMINAL MISCHIEF & RELATED OFFENSES",
}

# Dates
DATE_FORMAT = "%m/%d/%Y"
MIN_DATE = "2017-01-01"
# Substituted for missing end dates before parsing
MISSING_END_DATE = "01/01/1900"

# Demographics
DEMOGRAPHIC_COLUMNS = [
    "susp_age_group",
    "susp_race",
    "susp_sex",
    "vic_age_group",
    "vic_race",
    "vic_sex",
]
NULL_MARKER = "(null)"
UNKNOWN = "UNKNOWN"

# Aggregation
TOP_N = 10
MIN_GROUP_COUNT = 5

# Map
NYC_CENTER = {"lat": 40.7128, "lon": -74.0060}
MAP_ZOOM = 9.5
