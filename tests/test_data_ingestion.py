"""
Unit tests for the complaint loader.
"""

import pandas as pd
import pytest

from crime_eda.config import TEXT_COLUMNS
from crime_eda.data_ingestion import LoadError, load_complaints


class TestLoadComplaints:
    def test_loads_every_row(self, raw_csv, sample_raw):
        df = load_complaints(str(raw_csv))
        assert len(df) == len(sample_raw)
        assert list(df.columns) == list(sample_raw.columns)

    def test_text_columns_keep_raw_text(self, tmp_path, make_raw):
        path = tmp_path / "complaints.csv"
        make_raw([{"CMPLNT_NUM": "000123", "ADDR_PCT_CD": "044", "CMPLNT_FR_DT": "01/15/1022"}]).to_csv(
            path, index=False
        )

        df = load_complaints(str(path))

        assert df.loc[0, "CMPLNT_NUM"] == "000123"
        assert df.loc[0, "ADDR_PCT_CD"] == "044"
        assert df.loc[0, "CMPLNT_FR_DT"] == "01/15/1022"
        for col in TEXT_COLUMNS:
            assert isinstance(df.loc[0, col], str)

    def test_other_columns_use_inferred_types(self, raw_csv):
        df = load_complaints(str(raw_csv))
        assert pd.api.types.is_float_dtype(df["Latitude"])
        assert pd.api.types.is_integer_dtype(df["KY_CD"])

    def test_missing_end_date_is_null(self, raw_csv):
        df = load_complaints(str(raw_csv))
        assert df["CMPLNT_TO_DT"].isna().sum() == 1

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(LoadError, match="not found"):
            load_complaints(str(tmp_path / "nope.csv"))

    def test_directory_raises(self, tmp_path):
        with pytest.raises(LoadError):
            load_complaints(str(tmp_path))

    def test_empty_file_raises(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(LoadError, match="empty"):
            load_complaints(str(path))

    def test_missing_columns_raise(self, tmp_path, sample_raw):
        path = tmp_path / "short.csv"
        sample_raw.drop(columns=["SUSP_RACE", "Latitude"]).to_csv(path, index=False)

        with pytest.raises(LoadError) as excinfo:
            load_complaints(str(path))

        assert "SUSP_RACE" in str(excinfo.value)
        assert "Latitude" in str(excinfo.value)

    def test_extra_columns_are_tolerated(self, tmp_path, sample_raw):
        path = tmp_path / "wide.csv"
        sample_raw.assign(New_Georeferenced_Column="POINT (0 0)").to_csv(path, index=False)

        df = load_complaints(str(path))

        assert "New_Georeferenced_Column" in df.columns

    def test_schema_check_can_be_disabled(self, tmp_path):
        path = tmp_path / "other.csv"
        path.write_text("CMPLNT_NUM,BORO_NM\n1,QUEENS\n")

        df = load_complaints(str(path), text_columns=["CMPLNT_NUM"], expected_columns=None)

        assert df.loc[0, "CMPLNT_NUM"] == "1"
