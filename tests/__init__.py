"""
Test suite for the position leaderboard

Contains:
- tests/unit/          : Unit tests for individual modules and the full pipeline
"""
