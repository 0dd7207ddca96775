"""
End-to-end run: clean the catalog, aggregate, draw every chart, print the
top-N tables and write the interactive report.
"""

import logging

from . import aggregate, charts, report
from .preprocess import clean_catalog
from .settings import (BOX_COUNTRIES, FOCUS_COUNTRY, MOVIE, OUTPUT_DIR,
                       TOP_COUNTRIES, TOP_GENRES, TOP_PEOPLE, TV_SHOW)

logger = logging.getLogger(__name__)


def _banner(text):
    print("\n" + "=" * 60)
    print(text)
    print("=" * 60)


def run_analysis(catalog, output_dir=OUTPUT_DIR, top_countries=TOP_COUNTRIES,
                 top_people=TOP_PEOPLE, top_genres=TOP_GENRES,
                 box_countries=BOX_COUNTRIES, focus_country=FOCUS_COUNTRY,
                 with_report=True):
    """
    Run the whole analysis over a raw catalog frame.

    Returns a dict with the cleaned frame (``catalog``), the two people
    tables (``directors``, ``actors``), the saved PNG paths (``figures``) and
    the report path (``report``, ``None`` when ``with_report`` is false).
    """
    charts.apply_theme()
    df = clean_catalog(catalog)

    logger.info("Aggregating %s titles", f"{len(df):,}")
    type_counts = aggregate.count_by_type(df)
    countries = aggregate.country_type_counts(df, top_countries)
    timeline = aggregate.cumulative_by_date(df)
    ratings = aggregate.rating_type_counts(df)
    genres = aggregate.genre_type_counts(df, top_genres)
    movie_box, movie_order = aggregate.duration_by_country(df, MOVIE, box_countries)
    show_box, show_order = aggregate.duration_by_country(df, TV_SHOW, box_countries)
    cooccurrence = aggregate.genre_cooccurrence(df, MOVIE)
    directors = aggregate.top_directors(df, top_people)
    actors = aggregate.top_actors(df, focus_country, top_people)

    figures = [
        charts.plot_type_pie(type_counts, output_dir),
        charts.plot_country_stacked(countries, output_dir),
        charts.plot_cumulative(timeline, output_dir),
        charts.plot_rating_stacked(ratings, output_dir),
        charts.plot_genre_stacked(genres, output_dir),
        charts.plot_duration_boxes(movie_box, movie_order,
                                   "Movie Duration Distribution by Country (min)",
                                   "Duration (minutes)",
                                   "06_movie_duration_boxplots.png", output_dir),
        charts.plot_duration_boxes(show_box, show_order,
                                   "TV Show Seasons by Country",
                                   "Number of Seasons",
                                   "07_tv_seasons_boxplots.png", output_dir),
        charts.plot_top_people(directors, actors, focus_country, output_dir),
        charts.plot_genre_heatmap(cooccurrence, "Genre Co-occurrence — Movies",
                                  "09_genre_cooccurrence_movies.png", output_dir),
    ]
    figures = [path for path in figures if path]

    _banner(f"TOP {len(directors)} DIRECTORS")
    print(directors.to_string(index=False))
    _banner(f"TOP {len(actors)} ACTORS ({focus_country})")
    print(actors.to_string(index=False))

    report_path = None
    if with_report:
        sections = []
        if not type_counts.empty:
            sections.append(("Content by type", report.type_pie(type_counts)))
        if not countries.empty:
            sections.append(("Top countries", report.stacked_bar(
                countries, "Top Countries — Netflix Content Distribution", "Country")))
        if not timeline.empty:
            sections.append(("Content added over time", report.cumulative_line(timeline)))
        if not ratings.empty:
            sections.append(("Content by rating", report.stacked_bar(
                ratings, "Netflix Content by Rating", "Rating")))
        if not genres.empty:
            sections.append(("Top genres", report.stacked_bar(
                genres, "Top Genres on Netflix", "Genre")))
        if movie_order:
            sections.append(("Movie durations", report.duration_box(
                movie_box, movie_order, "Movie Duration by Country", "Duration (minutes)")))
        if show_order:
            sections.append(("TV show seasons", report.duration_box(
                show_box, show_order, "TV Show Seasons by Country", "Number of Seasons")))
        if cooccurrence.shape[0] >= 2:
            sections.append(("Genre co-occurrence", report.genre_heatmap(
                cooccurrence, "Genre Co-occurrence — Movies")))
        tables = [(f"Top {len(directors)} directors", directors),
                  (f"Top {len(actors)} actors ({focus_country})", actors)]
        report_path = report.write_report(sections, tables, output_dir)

    _banner("✅  ANALYSIS COMPLETE")
    print(f"  Total titles analysed : {len(df):,}")
    print(f"  Movies                : {(df['type'] == MOVIE).sum():,}")
    print(f"  TV Shows              : {(df['type'] == TV_SHOW).sum():,}")
    print(f"  Countries represented : {len(aggregate.country_type_counts(df, None)):,}")
    print(f"  Figures saved         : {len(figures)}")
    print(f"\n  Output saved to: {output_dir}/")

    return {
        "catalog":   df,
        "directors": directors,
        "actors":    actors,
        "figures":   figures,
        "report":    report_path,
    }
