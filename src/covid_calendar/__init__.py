"""
covid-calendar - Daily COVID-19 case report for a Japanese prefecture.

Fetches the per-prefecture patients CSV, keeps the rows of one prefecture and
prints them as ``<date> <infected>`` lines.
"""

__version__ = "0.1.0"
