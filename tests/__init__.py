"""
Test suite for bigprime

Contains:
- tests/unit/          : Unit tests for individual modules and the CLI
"""
