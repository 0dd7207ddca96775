"""
Group-and-count helpers over the cleaned catalog.

Every function is pure: it reads the cleaned frame and returns a new frame or
series, so each chart can be rebuilt from the same table any number of times.
Counts are sorted by size with ties broken by label, keeping the output
stable between runs.
"""

from collections import Counter
from itertools import combinations

import pandas as pd

from .preprocess import explode_column, split_tokens
from .settings import (BOX_COUNTRIES, FOCUS_COUNTRY, MOVIE, TOP_COUNTRIES,
                       TOP_GENRES, TOP_PEOPLE, TOTAL)


def _largest(sizes: pd.Series, n=None) -> pd.Series:
    # groupby output is label-sorted, mergesort keeps that order among ties
    ordered = sizes.sort_values(ascending=False, kind="mergesort")
    return ordered if n is None else ordered.head(n)


def _type_pivot(df: pd.DataFrame, column: str, top_n=None) -> pd.DataFrame:
    """``column`` x type count table, largest totals first."""
    if df.empty:
        return pd.DataFrame()
    pivot = df.groupby([column, "type"]).size().unstack(fill_value=0)
    order = _largest(pivot.sum(axis=1), top_n).index
    return pivot.loc[order]


def count_by_type(df: pd.DataFrame) -> pd.Series:
    return df["type"].value_counts()


def country_type_counts(df: pd.DataFrame, top_n: int = TOP_COUNTRIES) -> pd.DataFrame:
    return _type_pivot(explode_column(df, "country"), "country", top_n)


def rating_type_counts(df: pd.DataFrame) -> pd.DataFrame:
    return _type_pivot(df[df["rating"].notna()], "rating")


def genre_type_counts(df: pd.DataFrame, top_n: int = TOP_GENRES) -> pd.DataFrame:
    return _type_pivot(explode_column(df, "listed_in"), "listed_in", top_n)


def cumulative_by_date(df: pd.DataFrame) -> pd.DataFrame:
    """
    Titles added per day and their running total, per type and overall.

    Returns a long frame with columns ``date_added``, ``type``, ``added`` and
    ``cumulative``; the overall series is labelled ``Total``. Rows without a
    ``date_added`` are left out.
    """
    dated = df[df["date_added"].notna()]

    per_type = (dated.groupby(["date_added", "type"])
                     .size()
                     .reset_index(name="added"))
    per_type["cumulative"] = per_type.groupby("type")["added"].cumsum()

    total = (dated.groupby("date_added")
                  .size()
                  .reset_index(name="added")
                  .assign(type=TOTAL))
    total["cumulative"] = total["added"].cumsum()

    timeline = pd.concat([per_type, total], ignore_index=True)
    return timeline[["date_added", "type", "added", "cumulative"]]


def top_values(df: pd.DataFrame, column: str, n: int = TOP_PEOPLE) -> pd.DataFrame:
    """The ``n`` most frequent tokens of a multi-valued column."""
    exploded = explode_column(df, column)
    if exploded.empty:
        return pd.DataFrame({column: pd.Series(dtype=object),
                             "count": pd.Series(dtype="int64")})
    counts = _largest(exploded.groupby(column).size(), n)
    return counts.rename_axis(column).reset_index(name="count")


def top_directors(df: pd.DataFrame, n: int = TOP_PEOPLE) -> pd.DataFrame:
    return top_values(df, "director", n)


def top_actors(df: pd.DataFrame, country: str = FOCUS_COUNTRY,
               n: int = TOP_PEOPLE) -> pd.DataFrame:
    """Most frequent cast members among titles produced in ``country``."""
    produced = explode_column(df, "country")
    produced = produced[produced["country"] == country]
    return top_values(produced, "cast", n)


def duration_by_country(df: pd.DataFrame, content_type: str = MOVIE,
                        top_n: int = BOX_COUNTRIES):
    """
    Numeric durations of one content type in its ``top_n`` countries.

    Returns ``(frame, order)``: a long frame of ``country`` / ``duration_num``
    and the countries sorted by title count.
    """
    subset = df[(df["type"] == content_type) & df["duration_num"].notna()]
    exploded = explode_column(subset, "country")
    if exploded.empty:
        return exploded[["country", "duration_num"]], []
    order = _largest(exploded.groupby("country").size(), top_n).index.tolist()
    frame = exploded.loc[exploded["country"].isin(order), ["country", "duration_num"]]
    return frame.reset_index(drop=True), order


def genre_cooccurrence(df: pd.DataFrame, content_type: str = MOVIE) -> pd.DataFrame:
    """Symmetric genre x genre matrix of how often two genres share a title."""
    genres = set()
    pairs = Counter()
    for cell in df.loc[df["type"] == content_type, "listed_in"]:
        tokens = sorted(set(split_tokens(cell)))
        genres.update(tokens)
        pairs.update(combinations(tokens, 2))

    labels = sorted(genres)
    matrix = pd.DataFrame(0, index=labels, columns=labels)
    for (g1, g2), count in pairs.items():
        matrix.loc[g1, g2] = count
        matrix.loc[g2, g1] = count
    return matrix
