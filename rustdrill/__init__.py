"""Worked solutions to small programming exercises, and terminal status helpers."""

__version__ = "4.6.0"