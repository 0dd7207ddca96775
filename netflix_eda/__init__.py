"""
Netflix catalog exploratory analysis.

  1. Loading & cleaning   (netflix_eda.preprocess)
  2. Aggregations         (netflix_eda.aggregate)
  3. Static figures       (netflix_eda.charts)
  4. Interactive report   (netflix_eda.report)
"""

__version__ = "0.1.0"
