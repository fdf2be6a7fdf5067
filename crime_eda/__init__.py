"""Exploratory analysis of NYPD crime complaint records."""

__version__ = "0.1.0"
