"""
Feature modules for Pace Band.

Each feature is a self-contained module with:
- schemas.py - Pydantic schemas (optional)
- calculation or rendering logic
- __init__.py re-exporting the public names
"""
