import numpy as np
import pandas as pd
import pytest

from netflix_eda.preprocess import clean_catalog
from netflix_eda.settings import COLUMNS


def make_row(**values):
    row = dict.fromkeys(COLUMNS, np.nan)
    row.update(values)
    return row


@pytest.fixture
def raw_catalog():
    """Six raw records: one exact duplicate and one running time stored as rating."""
    alpha = dict(type="Movie", title="Alpha", director="Ann Lee", cast="Tom, Jo",
                 country="United States", date_added="January 1, 2020",
                 release_year=2019, rating="TV-MA", duration="90 min",
                 listed_in="Dramas, Comedies", description="A first film.")
    rows = [
        make_row(show_id="s1", **alpha),
        make_row(show_id="s2", type="Movie", title="Beta", director="Ann Lee, Bob Ray",
                 cast="Tom", country="United States, United Kingdom",
                 date_added=" February 3, 2020", release_year=2018, rating=np.nan,
                 duration="120 min", listed_in="Dramas"),
        make_row(show_id="s3", type="TV Show", title="Gamma", cast="Jo, Kim",
                 date_added="March 5, 2021", release_year=2021, rating="TV-MA",
                 duration="2 Seasons", listed_in="Kids' TV"),
        make_row(show_id="s4", type="TV Show", title="Delta", director="Cy Young",
                 cast="Kim", country="India", release_year=2020, rating="TV-14",
                 duration="1 Season", listed_in="Kids' TV, Comedies"),
        make_row(show_id="s5", **alpha),
        make_row(show_id="s6", type="Movie", title="Epsilon", director="Bob Ray",
                 cast="Tom", country="United Kingdom", date_added="not a date",
                 release_year=2017, rating="74 min", listed_in="Comedies"),
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


@pytest.fixture
def catalog(raw_catalog):
    return clean_catalog(raw_catalog)
