"""
Text processing for job descriptions.

This subpackage includes:
- boilerplate removal and ASCII transliteration
- tidy tokenization, stop-word removal and stemming
- word frequency tables
- sentiment lexicon joins and per-category aggregates.
"""
