"""Pyramid grader: scores C star-pyramid programs against expected shapes."""

__version__ = "0.1.0"
