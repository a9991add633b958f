"""Ant farm solver: parse farm descriptions, find paths, and simulate ant moves."""

__version__ = "0.1.0"
__all__ = ["cli", "farm", "simulate", "solver"]