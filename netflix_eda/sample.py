"""Synthetic catalog shaped like the Kaggle ``netflix_titles.csv``."""

import numpy as np
import pandas as pd

from .settings import COLUMNS, DATE_FORMAT, MOVIE, TV_SHOW

COUNTRIES   = ["United States", "India", "United Kingdom", "Canada",
               "France", "Japan", "Spain", "South Korea", "Mexico", "Australia"]
RATINGS     = ["TV-MA", "TV-14", "TV-PG", "R", "PG-13", "PG", "TV-G", "G", "NR"]
GENRES      = ["Dramas", "Comedies", "Action & Adventure", "Documentaries",
               "Thrillers", "Romantic Movies", "Horror Movies", "International Movies",
               "Kids' TV", "Crime TV Shows"]
TYPES       = [MOVIE, TV_SHOW]
DIRECTORS   = [f"Director {i}" for i in range(1, 50)]
ACTORS      = [f"Actor {i}" for i in range(1, 80)]


def make_demo_catalog(n: int = 6000, seed: int = 42,
                      missing_rate: float = 0.02,
                      duplicate_rate: float = 0.01) -> pd.DataFrame:
    """
    Build ``n`` raw title records plus a few exact duplicates.

    Values look like the real CSV: ``date_added`` is text such as
    ``"September 9, 2019"``, lists are comma-joined and a fraction of
    ``rating``, ``country``, ``director`` and ``date_added`` is missing.
    """
    rng = np.random.RandomState(seed)

    def sample(seq, size, replace=True, p=None):
        return rng.choice(seq, size=size, replace=replace, p=p)

    def joined(seq, low, high):
        k = rng.randint(low, high)
        return ", ".join(rng.choice(seq, size=k, replace=False))

    types = sample(TYPES, n, p=[0.70, 0.30])
    dates = pd.date_range("2010-01-01", "2021-09-25", periods=n)
    catalog = pd.DataFrame({
        "show_id":      [f"s{i}" for i in range(1, n + 1)],
        "type":         types,
        "title":        [f"Title {i}" for i in range(1, n + 1)],
        "director":     [joined(DIRECTORS, 1, 3) for _ in range(n)],
        "cast":         [joined(ACTORS, 1, 6) for _ in range(n)],
        "country":      [joined(COUNTRIES, 1, 3) for _ in range(n)],
        "date_added":   [d.strftime(DATE_FORMAT) for d in dates],
        "release_year": rng.randint(2000, 2022, n),
        "rating":       sample(RATINGS, n),
        "duration":     [f"{rng.randint(60, 180)} min" if t == MOVIE
                         else "1 Season" if rng.rand() < 0.5
                         else f"{rng.randint(2, 8)} Seasons"
                         for t in types],
        "listed_in":    [joined(GENRES, 1, 4) for _ in range(n)],
        "description":  [f"A {g.lower()} story about drama and suspense."
                         for g in sample(GENRES, n)],
    }, columns=COLUMNS)

    for column in ["rating", "country", "director", "date_added"]:
        gaps = rng.rand(n) < missing_rate
        catalog[column] = catalog[column].astype(object).where(~gaps)

    dupes = catalog.sample(frac=duplicate_rate, random_state=rng)
    return pd.concat([catalog, dupes], ignore_index=True)
