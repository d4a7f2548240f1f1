"""Summarise GitHub Actions workflows and their latest runs."""

__version__ = "0.1.0"
