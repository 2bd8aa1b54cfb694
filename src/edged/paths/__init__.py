"""Shortest-path consumers of the graph capabilities."""

from .dijkstra import dijkstra

__all__ = ["dijkstra"]
