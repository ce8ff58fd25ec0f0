"""Run a baseline task and comparison tasks once, or benchmark their timings."""

__version__ = "0.1.0"