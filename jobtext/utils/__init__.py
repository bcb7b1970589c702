"""
Shared utility functions.

This subpackage includes:
- run configuration loading
- directory creation for outputs
- logging helpers used across the project.
"""
