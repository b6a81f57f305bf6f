"""Graph construction and routing for the terminal layout.

This subpackage contains the immutable graph, the builder that validates
raw layouts into graphs, and the Dijkstra router that queries them.
"""

from .builder import GraphBuilder
from .dijkstra import DijkstraRouter
from .graph import Graph

__all__ = ["Graph", "GraphBuilder", "DijkstraRouter"]
