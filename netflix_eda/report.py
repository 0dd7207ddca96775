"""
Interactive HTML report.

The same aggregates the static figures use are redrawn with plotly and
written, together with the top-N tables, into one standalone HTML document.
plotly.js is inlined once, with the first chart.
"""

import html
import logging
import os

import plotly.express as px

from .settings import (NETFLIX_DARK, NETFLIX_RED, OUTPUT_DIR, PALETTE,
                       REPORT_NAME, TYPE_COLORS)

logger = logging.getLogger(__name__)

TEMPLATE = "plotly_dark"

PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
  body {{ background: {dark}; color: #eee; font-family: "DejaVu Sans", Arial, sans-serif;
         max-width: 1200px; margin: 0 auto; padding: 20px; }}
  h1 {{ color: {red}; }}
  h2 {{ border-bottom: 1px solid #333; padding-bottom: 4px; }}
  table {{ border-collapse: collapse; margin-bottom: 24px; }}
  th, td {{ border: 1px solid #333; padding: 4px 12px; text-align: left; }}
  th {{ background: #222; }}
</style>
</head>
<body>
<h1>{title}</h1>
{body}
</body>
</html>
"""


def type_pie(type_counts):
    frame = type_counts.rename_axis("type").reset_index(name="count")
    return px.pie(frame, names="type", values="count", hole=0.4,
                  color="type", color_discrete_map=TYPE_COLORS,
                  title="Netflix Content by Type", template=TEMPLATE)


def stacked_bar(pivot, title, xlabel):
    label = pivot.index.name or "index"
    frame = pivot.reset_index().melt(id_vars=label, var_name="type", value_name="count")
    fig = px.bar(frame, x=label, y="count", color="type", barmode="stack",
                 color_discrete_map=TYPE_COLORS, title=title, template=TEMPLATE,
                 category_orders={label: list(pivot.index)})
    fig.update_layout(xaxis_title=xlabel, yaxis_title="Number of Titles")
    return fig


def cumulative_line(timeline):
    fig = px.line(timeline, x="date_added", y="cumulative", color="type",
                  color_discrete_map=TYPE_COLORS, template=TEMPLATE,
                  title="Cumulative Netflix Content Over Time")
    fig.update_layout(xaxis_title="Date Added", yaxis_title="Total Titles")
    return fig


def duration_box(frame, order, title, ylabel):
    fig = px.box(frame, x="country", y="duration_num", color="country",
                 category_orders={"country": order},
                 color_discrete_sequence=PALETTE, title=title, template=TEMPLATE)
    fig.update_layout(xaxis_title="Country", yaxis_title=ylabel, showlegend=False)
    return fig


def genre_heatmap(matrix, title):
    fig = px.imshow(matrix, color_continuous_scale="RdYlGn", title=title,
                    template=TEMPLATE, labels=dict(color="Co-occurrence Count"))
    return fig


def _figure_html(fig, first):
    fig.update_layout(paper_bgcolor=NETFLIX_DARK, title_font_color=NETFLIX_RED)
    return fig.to_html(full_html=False, include_plotlyjs=first)


def write_report(figures, tables, output_dir=OUTPUT_DIR, filename=REPORT_NAME,
                 title="Netflix Content Analysis"):
    """
    Write the HTML report and return its path.

    ``figures`` is a list of ``(heading, plotly Figure)`` pairs; ``tables`` is
    a list of ``(heading, DataFrame)`` pairs rendered after the charts.
    """
    parts = []
    for i, (heading, fig) in enumerate(figures):
        parts.append(f"<h2>{html.escape(heading)}</h2>")
        parts.append(_figure_html(fig, first=(i == 0)))
    for heading, table in tables:
        parts.append(f"<h2>{html.escape(heading)}</h2>")
        parts.append(table.to_html(index=False, border=0))

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, filename)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(PAGE.format(title=html.escape(title), body="\n".join(parts),
                             dark=NETFLIX_DARK, red=NETFLIX_RED))
    logger.info("Report written → %s (%d charts, %d tables)",
                path, len(figures), len(tables))
    return path
