"""
Plotting helpers for word frequency and sentiment charts.
"""
