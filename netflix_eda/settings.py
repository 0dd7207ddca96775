"""Schema, cleaning keys, output locations and chart colours."""

#  Catalog schema
COLUMNS = ["show_id", "type", "title", "director", "cast", "country",
           "date_added", "release_year", "rating", "duration",
           "listed_in", "description"]
ID_COLUMN      = "show_id"
DEDUP_KEYS     = ["title", "country", "type", "release_year"]
MULTI_VALUED   = ["director", "cast", "country", "listed_in"]
DATE_FORMAT    = "%B %d, %Y"          # "September 9, 2019"

MOVIE   = "Movie"
TV_SHOW = "TV Show"
TOTAL   = "Total"

#  Top-N sizes
TOP_COUNTRIES     = 10
TOP_PEOPLE        = 20
TOP_GENRES        = 20
BOX_COUNTRIES     = 10
FOCUS_COUNTRY     = "United States"

#  Outputs
OUTPUT_DIR  = "outputs"
REPORT_NAME = "netflix_report.html"

#  Aesthetics
NETFLIX_RED  = "#E50914"
NETFLIX_DARK = "#141414"
TV_BLUE      = "#1f77b4"
TOTAL_ORANGE = "#ff7f0e"
PALETTE      = ["#E50914", "#1f77b4", "#9467bd", "#ff7f0e", "#2ca02c",
                "#d62728", "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22"]
TYPE_COLORS  = {MOVIE: NETFLIX_RED, TV_SHOW: TV_BLUE, TOTAL: TOTAL_ORANGE}
