import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .aggregation import count_by, top_locations, top_offense_per_year
from .config import FIGURES_DIR, MAP_ZOOM, MIN_GROUP_COUNT, NYC_CENTER, TOP_N

logger = logging.getLogger(__name__)

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


@dataclass
class AnalysisResult:
    name: str
    title: str
    table: pd.DataFrame
    figure_path: str


def ensure_figures_dir(figures_dir: str = FIGURES_DIR) -> str:
    os.makedirs(figures_dir, exist_ok=True)
    return figures_dir


def save_figure(fig: go.Figure, name: str, figures_dir: str = FIGURES_DIR) -> str:
    out = os.path.join(ensure_figures_dir(figures_dir), f"{name}.html")
    fig.write_html(out)
    logger.debug(f"Wrote figure {out}")
    return out


def bar_chart(
    table: pd.DataFrame,
    category: str,
    count: str = "count",
    title: str = "",
    horizontal: bool = False,
    ranked: bool = True,
    color: Optional[str] = None,
) -> go.Figure:
    """
    Bar chart of a (category, count) table.

    With ``ranked`` the bars run from the largest count to the smallest
    (top to bottom when horizontal); otherwise the table order is kept.
    """
    if ranked:
        table = table.sort_values(count, ascending=False, kind="stable")
    order = [str(v) for v in table[category]]
    plot_df = table.assign(**{category: order})

    if horizontal:
        fig = px.bar(plot_df, x=count, y=category, orientation="h", color=color, title=title)
        fig.update_yaxes(type="category", categoryorder="array", categoryarray=order[::-1])
    else:
        fig = px.bar(plot_df, x=category, y=count, color=color, title=title)
        fig.update_xaxes(type="category", categoryorder="array", categoryarray=order)
    return fig


def line_chart(table: pd.DataFrame, x: str, y: str = "count", title: str = "") -> go.Figure:
    return px.line(table.sort_values(x), x=x, y=y, markers=True, title=title)


def marker_map(
    table: pd.DataFrame,
    lat: str = "latitude",
    lon: str = "longitude",
    value: str = "count",
    title: str = "",
) -> go.Figure:
    """Point map with markers sized and coloured by ``value``; the colour bar is the legend."""
    fig = px.scatter_map(
        table,
        lat=lat,
        lon=lon,
        size=value,
        color=value,
        color_continuous_scale="Reds",
        size_max=30,
        hover_data={lat: ":.5f", lon: ":.5f", value: True},
        center=NYC_CENTER,
        zoom=MAP_ZOOM,
        map_style="open-street-map",
        title=title,
    )
    fig.update_layout(coloraxis_colorbar={"title": value.replace("_", " ").title()})
    return fig


def temporal_trends(df: pd.DataFrame, figures_dir: str = FIGURES_DIR) -> Dict[str, AnalysisResult]:
    results = {}

    by_year = count_by(df, "year").sort_values("year").reset_index(drop=True)
    title = "Complaints per Year"
    results["by_year"] = AnalysisResult(
        "by_year", title, by_year, save_figure(line_chart(by_year, "year", title=title), "temporal_year", figures_dir)
    )

    by_month = count_by(df, "month").sort_values("month").reset_index(drop=True)
    title = "Complaints by Month of Year"
    results["by_month"] = AnalysisResult(
        "by_month", title, by_month, save_figure(line_chart(by_month, "month", title=title), "temporal_month", figures_dir)
    )

    by_hour = count_by(df, "hour").sort_values("hour").reset_index(drop=True)
    title = "Complaints by Hour of Day"
    fig = bar_chart(by_hour, "hour", title=title, ranked=False)
    results["by_hour"] = AnalysisResult("by_hour", title, by_hour, save_figure(fig, "temporal_hour", figures_dir))

    by_weekday = count_by(df, "day_of_week")
    by_weekday["day_of_week"] = pd.Categorical(by_weekday["day_of_week"], categories=WEEKDAYS, ordered=True)
    by_weekday = by_weekday.sort_values("day_of_week").reset_index(drop=True)
    by_weekday["day_of_week"] = by_weekday["day_of_week"].astype(str)
    title = "Complaints by Day of Week"
    fig = bar_chart(by_weekday, "day_of_week", title=title, ranked=False)
    results["by_weekday"] = AnalysisResult(
        "by_weekday", title, by_weekday, save_figure(fig, "temporal_weekday", figures_dir)
    )

    per_year = top_offense_per_year(df)
    title = "Most Frequent Offense per Year"
    fig = bar_chart(per_year, "year", title=title, ranked=False, color="offense_desc")
    results["top_offense_per_year"] = AnalysisResult(
        "top_offense_per_year", title, per_year, save_figure(fig, "temporal_top_offense", figures_dir)
    )
    return results


def offense_breakdown(df: pd.DataFrame, figures_dir: str = FIGURES_DIR) -> Dict[str, AnalysisResult]:
    breakdowns = [
        ("by_borough", "borough", "Complaints by Borough", None, False),
        ("by_offense_level", "offense_level", "Complaints by Offense Level", None, False),
        ("by_status", "status", "Attempted vs Completed", None, False),
        ("top_offenses", "offense_desc", f"Top {TOP_N} Offenses", TOP_N, True),
        ("top_premises", "premise_desc", f"Top {TOP_N} Premises", TOP_N, True),
    ]
    results = {}
    for name, column, title, top_n, horizontal in breakdowns:
        table = count_by(df, column, top_n=top_n)
        fig = bar_chart(table, column, title=title, horizontal=horizontal)
        results[name] = AnalysisResult(name, title, table, save_figure(fig, f"offense_{name}", figures_dir))
    return results


def demographic_breakdown(df: pd.DataFrame, figures_dir: str = FIGURES_DIR) -> Dict[str, AnalysisResult]:
    """
    Race, sex and age-group counts for suspects and victims.

    Victim age groups hold a scatter of invalid codes with a handful of rows
    each; groups at or below MIN_GROUP_COUNT are left out of that one chart.
    """
    results = {}
    for party, label in [("susp", "Suspect"), ("vic", "Victim")]:
        for field in ["race", "sex", "age_group"]:
            column = f"{party}_{field}"
            min_count = MIN_GROUP_COUNT if column == "vic_age_group" else None
            table = count_by(df, column, min_count=min_count)
            title = f"{label} {field.replace('_', ' ').title()}"
            fig = bar_chart(table, column, title=title, horizontal=field == "race")
            results[column] = AnalysisResult(column, title, table, save_figure(fig, f"demographic_{column}", figures_dir))
    return results


def location_hotspots(df: pd.DataFrame, figures_dir: str = FIGURES_DIR) -> Dict[str, AnalysisResult]:
    table = top_locations(df, n=TOP_N)
    title = f"Top {TOP_N} Complaint Locations"
    fig = marker_map(table, title=title)
    return {"top_locations": AnalysisResult("top_locations", title, table, save_figure(fig, "map_top_locations", figures_dir))}


def run_analyses(df: pd.DataFrame, figures_dir: str = FIGURES_DIR) -> Dict[str, AnalysisResult]:
    results: Dict[str, AnalysisResult] = {}
    for analysis in [temporal_trends, offense_breakdown, demographic_breakdown, location_hotspots]:
        results.update(analysis(df, figures_dir))
    logger.info(f"Rendered {len(results)} figures to {figures_dir}")
    return results
