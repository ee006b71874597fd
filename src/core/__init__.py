"""
Core arithmetic, domain models, and output contracts.

This module contains the computation layer that is independent of the
textual front end (argument parsing, console output).
"""
