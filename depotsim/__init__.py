"""Discrete-event simulation of package routing through a depot network."""

__version__ = "0.1.0"
__all__ = [
    "structures",
    "minheap",
    "depot",
    "graph",
    "package",
    "event",
    "scheduler",
    "simulation",
]