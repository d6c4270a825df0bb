"""
Test suite for clock-coincidence

Contains:
- tests/unit/          : Unit tests for individual modules
"""
