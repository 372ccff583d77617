"""
Movie Records.
Validated loading of movie CSV files, year/rating/language queries,
and a per-year text file organizer.
"""

__version__ = "1.0.0"
