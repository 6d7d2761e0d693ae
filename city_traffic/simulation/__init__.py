"""Grid world collaborator driving vehicles tick by tick."""

from .world import GridWorld, TickSummary

__all__ = ["GridWorld", "TickSummary"]
