"""
Top-level package for the job postings text-mining project.

This package contains modules for:
- loading the job postings dataset and sentiment lexicons
- cleaning descriptions (boilerplate sentences, encoding artifacts)
- tidy tokenization, stop-word removal and stemming
- word frequency and lexicon-based sentiment tables
- plotting helpers for the resulting charts
- the end-to-end analysis pipeline

Run the whole analysis with `python scripts/run_eda.py`.
"""
