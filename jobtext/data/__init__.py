"""
Data loading utilities.

This subpackage provides:
- functions to load the job postings table (CSV, TSV, JSON, pickle)
- loaders for the bing and loughran sentiment lexicons.
"""
