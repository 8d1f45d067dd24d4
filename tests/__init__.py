"""
Test suite for uscu

Contains:
- tests/unit/          : Unit tests for individual modules and end-to-end expression scenarios
"""
