"""Fitness tracker: users, their trainings, and an HTTP API over both."""

__version__ = "1.0.0"
