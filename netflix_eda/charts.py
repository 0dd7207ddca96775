"""
Static PNG figures in the dark Netflix theme.

Each ``plot_*`` function takes an aggregate from :mod:`netflix_eda.aggregate`,
renders it and returns the saved path, or ``None`` when there was nothing to
draw.
"""

import logging
import os
from itertools import cycle

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from .settings import (NETFLIX_DARK, NETFLIX_RED, OUTPUT_DIR, PALETTE,
                       TYPE_COLORS)

logger = logging.getLogger(__name__)

THEME = {
    "figure.facecolor": NETFLIX_DARK,
    "axes.facecolor":   "#1a1a1a",
    "axes.edgecolor":   "#444",
    "axes.labelcolor":  "white",
    "xtick.color":      "white",
    "ytick.color":      "white",
    "text.color":       "white",
    "grid.color":       "#333",
    "grid.linestyle":   "--",
    "grid.alpha":       0.4,
    "font.family":      "DejaVu Sans",
}


def apply_theme():
    plt.rcParams.update(THEME)


def save_fig(fig, name: str, output_dir: str = OUTPUT_DIR) -> str:
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, name)
    fig.patch.set_facecolor(NETFLIX_DARK)
    fig.savefig(path, dpi=150, bbox_inches="tight",
                facecolor=NETFLIX_DARK, edgecolor="none")
    plt.close(fig)
    logger.info("Saved → %s", path)
    return path


def _title(ax, text, size=15):
    ax.set_title(text, fontsize=size, fontweight="bold", color="white")


def _rotate_xticks(ax, rotation=35, size=10):
    ax.tick_params(axis="x", labelrotation=rotation, labelsize=size)
    plt.setp(ax.get_xticklabels(), ha="right")


def _type_colors(columns):
    return [TYPE_COLORS.get(c, PALETTE[i % len(PALETTE)])
            for i, c in enumerate(columns)]


def plot_type_pie(type_counts, output_dir=OUTPUT_DIR):
    if type_counts.empty:
        logger.warning("No titles to plot by type, skipping pie chart")
        return None

    fig, ax = plt.subplots(figsize=(7, 7))
    _, _, autotexts = ax.pie(
        type_counts,
        labels=type_counts.index,
        autopct="%1.1f%%",
        startangle=140,
        colors=_type_colors(type_counts.index),
        wedgeprops=dict(width=0.6, edgecolor=NETFLIX_DARK, linewidth=3),
        textprops=dict(color="white", fontsize=13),
    )
    for at in autotexts:
        at.set_fontsize(14)
        at.set_fontweight("bold")
    ax.set_title("Netflix Content by Type", fontsize=16, fontweight="bold",
                 color="white", pad=20)
    return save_fig(fig, "01_content_type_pie.png", output_dir)


def _stacked_bar(pivot, title, xlabel, filename, output_dir, figsize=(12, 6)):
    if pivot.empty:
        logger.warning("Nothing to plot for %r, skipping", title)
        return None

    fig, ax = plt.subplots(figsize=figsize)
    pivot.plot(kind="bar", stacked=True, ax=ax,
               color=_type_colors(pivot.columns), edgecolor="none", width=0.7)
    _title(ax, title)
    ax.set_xlabel(xlabel, fontsize=12)
    ax.set_ylabel("Number of Titles", fontsize=12)
    ax.legend(title="Type", facecolor="#222", labelcolor="white",
              title_fontsize=11)
    _rotate_xticks(ax)
    ax.grid(axis="y")
    return save_fig(fig, filename, output_dir)


def plot_country_stacked(pivot, output_dir=OUTPUT_DIR):
    return _stacked_bar(pivot, f"Top {len(pivot)} Countries — Netflix Content Distribution",
                        "Country", "02_top_countries_stacked.png", output_dir)


def plot_cumulative(timeline, output_dir=OUTPUT_DIR):
    if timeline.empty:
        logger.warning("No dated titles, skipping cumulative chart")
        return None

    fig, ax = plt.subplots(figsize=(13, 6))
    for i, (label, grp) in enumerate(timeline.groupby("type")):
        ax.plot(grp["date_added"], grp["cumulative"], label=label,
                color=TYPE_COLORS.get(label, PALETTE[i % len(PALETTE)]),
                linewidth=2)
    _title(ax, "Cumulative Netflix Content Over Time")
    ax.set_xlabel("Date Added", fontsize=12)
    ax.set_ylabel("Total Titles", fontsize=12)
    ax.legend(facecolor="#222", labelcolor="white")
    ax.grid(True)
    return save_fig(fig, "03_content_over_time.png", output_dir)


def plot_rating_stacked(pivot, output_dir=OUTPUT_DIR):
    return _stacked_bar(pivot, "Netflix Content by Rating", "Rating",
                        "04_rating_distribution.png", output_dir, figsize=(10, 5))


def plot_genre_stacked(pivot, output_dir=OUTPUT_DIR):
    return _stacked_bar(pivot, f"Top {len(pivot)} Genres on Netflix", "Genre",
                        "05_top_genres.png", output_dir, figsize=(14, 6))


def plot_duration_boxes(frame, order, title, ylabel, filename, output_dir=OUTPUT_DIR):
    """One box per country, in ``order``."""
    if not order:
        logger.warning("No durations for %r, skipping", title)
        return None

    box_data = [frame.loc[frame["country"] == c, "duration_num"].values
                for c in order]
    fig, ax = plt.subplots(figsize=(14, 6))
    bp = ax.boxplot(box_data, patch_artist=True, notch=False,
                    medianprops=dict(color="white", linewidth=2))
    for patch, color in zip(bp["boxes"], cycle(PALETTE)):
        patch.set_facecolor(color)
        patch.set_alpha(0.8)
    ax.set_xticks(range(1, len(order) + 1))
    ax.set_xticklabels(order, rotation=30, ha="right", fontsize=10)
    _title(ax, title)
    ax.set_xlabel("Country", fontsize=12)
    ax.set_ylabel(ylabel, fontsize=12)
    ax.grid(axis="y")
    return save_fig(fig, filename, output_dir)


def plot_genre_heatmap(matrix, title, filename, output_dir=OUTPUT_DIR):
    if matrix.shape[0] < 2:
        logger.warning("Fewer than two genres for %r, skipping heatmap", title)
        return None

    fig, ax = plt.subplots(figsize=(12, 10))
    mask = np.zeros_like(matrix, dtype=bool)
    mask[np.triu_indices_from(mask)] = True
    sns.heatmap(matrix, ax=ax, mask=mask, cmap="RdYlGn",
                linewidths=0.3, linecolor="#111",
                cbar_kws={"shrink": 0.7, "label": "Co-occurrence Count"})
    _title(ax, title)
    ax.set_xticklabels(ax.get_xticklabels(), rotation=45, ha="right", fontsize=9)
    ax.set_yticklabels(ax.get_yticklabels(), rotation=0, fontsize=9)
    return save_fig(fig, filename, output_dir)


def plot_top_people(directors, actors, country, output_dir=OUTPUT_DIR):
    """Side-by-side horizontal bars of the director and actor tables."""
    if directors.empty and actors.empty:
        logger.warning("No directors or cast to plot, skipping")
        return None

    fig, axes = plt.subplots(1, 2, figsize=(16, 8))
    for ax, table, label, color in zip(
            axes, [directors, actors],
            [f"Top {len(directors)} Directors", f"Top {len(actors)} Actors ({country})"],
            ["#b5421a", "#1f77b4"]):
        names = table.iloc[::-1, 0]
        counts = table["count"].values[::-1]
        ax.barh(names, counts, color=color, edgecolor="none")
        for i, v in enumerate(counts):
            ax.text(v + 0.1, i, str(v), va="center", fontsize=9, color="white")
        _title(ax, label, size=13)
        ax.set_xlabel("Number of Titles", fontsize=11)
        ax.grid(axis="x")

    fig.suptitle("People Behind Netflix Content",
                 fontsize=16, fontweight="bold", color=NETFLIX_RED, y=1.01)
    return save_fig(fig, "08_top_directors_actors.png", output_dir)
