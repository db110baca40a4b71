"""
foodweb
=======

An in-memory predator/prey food web with interactive mutation and
trophic analyses.

Core idea:
- Organisms are addressed by position; extinction renumbers every
  prey reference so the web stays consistent.

Public API:
- GraphStore
- GraphBuilder
- GraphMutator
- FoodWebQueryEngine
"""

from foodweb.graph.graph_store import GraphStore
from foodweb.graph.graph_builder import GraphBuilder
from foodweb.graph.graph_mutator import GraphMutator
from foodweb.graph.graph_query import FoodWebQueryEngine

__all__ = [
    "GraphStore",
    "GraphBuilder",
    "GraphMutator",
    "FoodWebQueryEngine",
]

__version__ = "0.1.0"
