"""Vacancy eligibility screening: rule schema, evaluation and decisions."""

__version__ = "0.1.0"
