import logging
import os
from typing import Iterable, Optional

import pandas as pd

from .config import RAW_COLUMNS, TEXT_COLUMNS

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when the complaint file cannot be read or does not match the schema."""


def load_complaints(
    path: str,
    text_columns: Iterable[str] = TEXT_COLUMNS,
    expected_columns: Optional[Iterable[str]] = RAW_COLUMNS,
) -> pd.DataFrame:
    """
    Read the raw complaint CSV into a DataFrame.

    Columns listed in ``text_columns`` are kept as strings because the export
    mixes well-formed and malformed values in them; every other column uses
    pandas' inferred type. Raises LoadError when the file is missing,
    unreadable or lacks any of ``expected_columns``.
    """
    if not os.path.isfile(path):
        raise LoadError(f"Complaint file not found at {path}")

    dtypes = {c: str for c in text_columns}
    try:
        df = pd.read_csv(path, dtype=dtypes, low_memory=False)
    except pd.errors.EmptyDataError as exc:
        raise LoadError(f"Complaint file is empty: {path}") from exc
    except (pd.errors.ParserError, UnicodeDecodeError, OSError) as exc:
        raise LoadError(f"Could not read complaint file {path}: {exc}") from exc

    if expected_columns is not None:
        missing = [c for c in expected_columns if c not in df.columns]
        if missing:
            raise LoadError(
                f"Complaint file {path} is missing {len(missing)} expected column(s): {', '.join(missing)}"
            )

    logger.info(f"Loaded {len(df):,} complaints with {len(df.columns)} columns from {path}")
    return df
