"""
Tests for loading, cleaning and multi-valued column explosion.
"""

import numpy as np
import pandas as pd
import pytest

from netflix_eda.preprocess import (clean_catalog, explode_column, fill_mode,
                                    load_catalog, parse_date_added, split_tokens,
                                    validate_columns)
from netflix_eda.settings import DEDUP_KEYS


class TestExplodeColumn:
    """Test cases for explode_column and split_tokens."""

    def test_documented_example(self):
        """Two-country row splits in two, the NA-country row disappears."""
        df = pd.DataFrame({
            "title": ["A", "B", "C"],
            "type": ["Movie", "Movie", "TV Show"],
            "country": ["US", "US, UK", np.nan],
        })
        out = explode_column(df, "country")
        assert list(out.itertuples(index=False, name=None)) == [
            ("A", "Movie", "US"),
            ("B", "Movie", "US"),
            ("B", "Movie", "UK"),
        ]

    def test_row_count_matches_token_count(self, catalog):
        """A row with k countries yields k rows carrying its type."""
        out = explode_column(catalog, "country")
        beta = out[out["title"] == "Beta"]
        assert list(beta["country"]) == ["United States", "United Kingdom"]
        assert set(beta["type"]) == {"Movie"}
        expected = sum(len(split_tokens(v)) for v in catalog["country"].dropna())
        assert len(out) == expected

    def test_null_rows_dropped(self, catalog):
        out = explode_column(catalog, "country")
        assert "Gamma" not in set(out["title"])

    def test_input_not_modified(self, catalog):
        before = catalog.copy()
        explode_column(catalog, "cast")
        pd.testing.assert_frame_equal(catalog, before)

    def test_split_tokens_edge_cases(self):
        """Blanks are dropped and non-strings become a single token."""
        assert split_tokens("US, , UK ") == ["US", "UK"]
        assert split_tokens(42) == ["42"]
        assert split_tokens(np.nan) == []
        assert split_tokens(None) == []

    def test_container_cell_is_one_token(self):
        """A non-text cell is kept whole instead of being split on its repr."""
        df = pd.DataFrame({"type": ["Movie"], "country": [("US", "UK")]})
        out = explode_column(df, "country")
        assert list(out["country"]) == ["('US', 'UK')"]
        assert list(out["type"]) == ["Movie"]

    def test_only_blank_tokens_dropped(self):
        df = pd.DataFrame({"type": ["Movie", "Movie"], "cast": [" , ", "Tom"]})
        out = explode_column(df, "cast")
        assert list(out["cast"]) == ["Tom"]


class TestFillMode:
    """Test cases for mode imputation."""

    def test_missing_replaced_by_mode(self):
        series = pd.Series(["TV-MA", "R", "TV-MA", None, np.nan])
        filled = fill_mode(series)
        assert filled.isna().sum() == 0
        assert list(filled) == ["TV-MA", "R", "TV-MA", "TV-MA", "TV-MA"]

    def test_all_missing_left_alone(self):
        series = pd.Series([np.nan, np.nan])
        assert fill_mode(series).isna().all()

    def test_mode_tie_takes_first(self):
        """With a tie the lexically smallest value fills the gaps."""
        series = pd.Series(["R", "PG", "R", "PG", np.nan])
        assert list(fill_mode(series)) == ["R", "PG", "R", "PG", "PG"]


class TestCleanCatalog:
    """Test cases for clean_catalog."""

    def test_id_column_dropped(self, catalog):
        assert "show_id" not in catalog.columns

    def test_no_duplicate_keys(self, catalog):
        """No two rows share title, country, type and release year."""
        assert not catalog.duplicated(subset=DEDUP_KEYS).any()
        assert len(catalog) == 5

    def test_ratings_imputed(self, catalog):
        assert catalog["rating"].isna().sum() == 0
        beta = catalog.set_index("title").loc["Beta"]
        assert beta["rating"] == "TV-MA"

    def test_misplaced_duration_repaired(self, catalog):
        epsilon = catalog.set_index("title").loc["Epsilon"]
        assert epsilon["duration"] == "74 min"
        assert epsilon["duration_num"] == 74.0
        assert epsilon["rating"] == "TV-MA"

    def test_dates_parsed(self, catalog):
        dates = catalog.set_index("title")["date_added"]
        assert pd.api.types.is_datetime64_any_dtype(dates)
        assert dates["Beta"] == pd.Timestamp("2020-02-03")
        assert pd.isna(dates["Epsilon"])
        assert pd.isna(dates["Delta"])

    def test_datetime_passthrough(self):
        """A column that is already datetime is returned as is."""
        dates = pd.Series(pd.to_datetime(["2020-01-01", None]))
        assert parse_date_added(dates) is dates

    def test_duration_numbers(self, catalog):
        durations = catalog.set_index("title")["duration_num"]
        assert durations["Alpha"] == 90.0
        assert durations["Gamma"] == 2.0
        assert durations["Delta"] == 1.0

    def test_raw_frame_untouched(self, raw_catalog):
        before = raw_catalog.copy()
        clean_catalog(raw_catalog)
        pd.testing.assert_frame_equal(raw_catalog, before)


class TestLoadCatalog:
    """Test cases for reading and validating the CSV."""

    def test_round_trip(self, raw_catalog, tmp_path):
        path = tmp_path / "netflix_titles.csv"
        raw_catalog.to_csv(path, index=False)
        loaded = load_catalog(path)
        assert len(loaded) == 6
        assert list(loaded.columns) == list(raw_catalog.columns)

    def test_missing_column(self, raw_catalog):
        with pytest.raises(ValueError, match="show_id"):
            validate_columns(raw_catalog.drop(columns=["show_id"]))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "nope.csv")
