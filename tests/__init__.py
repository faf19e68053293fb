"""
Test suite for feed field extraction

Contains:
- tests/unit/          : Unit tests for individual modules
"""
