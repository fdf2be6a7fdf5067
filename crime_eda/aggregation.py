import logging
from typing import Callable, List, Optional, Sequence, Union

import pandas as pd

from .config import TOP_N

logger = logging.getLogger(__name__)

Keys = Union[str, Sequence[str]]
Where = Union[pd.Series, Callable[[pd.DataFrame], pd.Series]]


def _as_list(keys: Keys) -> List[str]:
    if isinstance(keys, str):
        return [keys]
    return list(keys)


def count_by(
    df: pd.DataFrame,
    keys: Keys,
    where: Optional[Where] = None,
    top_n: Optional[int] = None,
    min_count: Optional[int] = None,
) -> pd.DataFrame:
    """
    Count complaints per distinct value of ``keys``.

    Groups are collected in the order they are first encountered and then
    stable-sorted by count, descending, so equal counts keep encounter order.
    ``where`` pre-filters rows (a boolean mask or a callable returning one),
    ``min_count`` drops groups with a count at or below it, and ``top_n``
    keeps only the first N groups. Rows with a missing key are not counted.
    """
    keys = _as_list(keys)
    if where is not None:
        mask = where(df) if callable(where) else where
        df = df.loc[mask]

    counts = df.groupby(keys, sort=False).size().rename("count").reset_index()
    if min_count is not None:
        counts = counts[counts["count"] > min_count]
    counts = counts.sort_values("count", ascending=False, kind="stable")
    if top_n is not None:
        counts = counts.head(top_n)
    return counts.reset_index(drop=True)


def top_per_group(df: pd.DataFrame, group: str, key: str) -> pd.DataFrame:
    """Highest-count ``key`` for every value of ``group``; ties go to the first one seen."""
    counts = count_by(df, [group, key])
    best = counts.drop_duplicates(subset=[group], keep="first")
    return best.sort_values(group, kind="stable").reset_index(drop=True)


def top_offense_per_year(df: pd.DataFrame) -> pd.DataFrame:
    return top_per_group(df, "year", "offense_desc")


def top_locations(
    df: pd.DataFrame,
    n: int = TOP_N,
    lat: str = "latitude",
    lon: str = "longitude",
) -> pd.DataFrame:
    """The ``n`` coordinate pairs with the most complaints, most frequent first."""
    located = df.dropna(subset=[lat, lon])
    dropped = len(df) - len(located)
    if dropped:
        logger.debug(f"{dropped:,} complaints without coordinates left out of location counts")
    return count_by(located, [lat, lon], top_n=n)
