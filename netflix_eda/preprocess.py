"""
Loading and cleaning of the raw catalog CSV, plus the multi-valued column
explosion every per-country / per-person / per-genre count relies on.
"""

import logging

import pandas as pd
from pandas.api.types import is_datetime64_any_dtype, is_scalar

from .settings import COLUMNS, DATE_FORMAT, DEDUP_KEYS, ID_COLUMN

logger = logging.getLogger(__name__)

# Running times that ended up in the rating column ("74 min")
MISPLACED_DURATION = r"^\s*\d+\s*min\s*$"


def validate_columns(df: pd.DataFrame, required=COLUMNS) -> None:
    missing = [col for col in required if col not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns in CSV: {missing}")


def load_catalog(path) -> pd.DataFrame:
    """Read the catalog CSV and check it carries the expected 12 columns."""
    df = pd.read_csv(path)
    validate_columns(df)
    logger.info("Loaded %s rows from %s", f"{len(df):,}", path)
    return df


def fill_mode(series: pd.Series) -> pd.Series:
    """Fill NaN values with the mode."""
    modes = series.mode()
    if modes.empty:
        return series.copy()
    return series.fillna(modes.iloc[0])


def repair_misplaced_durations(df: pd.DataFrame) -> pd.DataFrame:
    """
    Move running times found in ``rating`` back to an empty ``duration``.

    The rating left behind is set missing so that mode imputation fills it.
    """
    mask = (df["rating"].astype(str).str.match(MISPLACED_DURATION)
            & df["duration"].isna())
    if not mask.any():
        return df
    df = df.copy()
    df["duration"] = df["duration"].where(~mask, df["rating"].astype(str).str.strip())
    df["rating"] = df["rating"].where(~mask)
    logger.info("Moved %d misplaced durations out of the rating column", mask.sum())
    return df


def parse_date_added(series: pd.Series) -> pd.Series:
    if is_datetime64_any_dtype(series):
        return series
    return pd.to_datetime(series.astype(str).str.strip(),
                          format=DATE_FORMAT, errors="coerce")


def extract_duration(df: pd.DataFrame) -> pd.DataFrame:
    """Add ``duration_num``: minutes for movies, seasons for TV shows."""
    df = df.copy()
    digits = df["duration"].astype(str).str.extract(r"(\d+)", expand=False)
    df["duration_num"] = pd.to_numeric(digits, errors="coerce").astype(float)
    return df


def clean_catalog(df: pd.DataFrame) -> pd.DataFrame:
    """
    Drop the ID column, impute the rating mode, parse ``date_added``,
    extract numeric durations and deduplicate on title/country/type/year.

    The input frame is left untouched.
    """
    df = df.drop(columns=[ID_COLUMN], errors="ignore")
    df = repair_misplaced_durations(df)

    missing_ratings = int(df["rating"].isna().sum())
    df["rating"] = fill_mode(df["rating"])
    if missing_ratings:
        logger.info("Imputed %d missing ratings with the mode", missing_ratings)

    df["date_added"] = parse_date_added(df["date_added"])
    df = extract_duration(df)

    before = len(df)
    df = df.drop_duplicates(subset=DEDUP_KEYS).reset_index(drop=True)
    logger.info("After dedup: %s rows (%d duplicates dropped)",
                f"{len(df):,}", before - len(df))
    return df


def split_tokens(value, sep: str = ",") -> list:
    """
    Split a delimiter-separated cell into stripped, non-empty tokens.

    Anything that is not text becomes a single token of its ``str()``.
    """
    if value is None or (is_scalar(value) and pd.isna(value)):
        return []
    if not isinstance(value, str):
        return [str(value)]
    return [tok.strip() for tok in value.split(sep) if tok.strip()]


def explode_column(df: pd.DataFrame, column: str, sep: str = ",") -> pd.DataFrame:
    """
    One row per (source row, token) of a multi-valued column.

    Rows where ``column`` is null are dropped; every other column is carried
    along unchanged and source row order is kept.
    """
    out = df[df[column].notna()].copy()
    out[column] = out[column].map(lambda v: split_tokens(v, sep))
    out = out.explode(column)
    out = out[out[column].notna()]
    return out.reset_index(drop=True)
