"""
Test suite for star-rays

Contains:
- tests/unit/          : Unit tests for individual modules
"""
