"""Periodization and workload planning for youth sports classes."""

__version__ = "0.1.0"
