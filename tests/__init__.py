"""
Test suite for carrydiv

Contains:
- tests/unit/          : Unit tests for individual modules
"""
