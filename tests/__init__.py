"""
Test suite for the QRON reward core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
