"""
Graph subsystem for foodweb.

Defines the predator/prey graph and the operations on it:
- index-stable insertion and validated relations
- extinction with prey-index renumbering
- derived analyses (heights, vore types, fan-in / fan-out)
"""

from foodweb.graph.graph_schema import (
    Organism,
    Relation,
    OrganismView,
    Outcome,
    RejectReason,
)
from foodweb.graph.graph_store import GraphStore, VoreTypes
from foodweb.graph.graph_builder import GraphBuilder
from foodweb.graph.graph_query import FoodWebQueryEngine, FoodWebReport
from foodweb.graph.graph_mutator import GraphMutator, MutationResult

__all__ = [
    "Organism",
    "Relation",
    "OrganismView",
    "Outcome",
    "RejectReason",
    "GraphStore",
    "VoreTypes",
    "GraphBuilder",
    "FoodWebQueryEngine",
    "FoodWebReport",
    "GraphMutator",
    "MutationResult",
]
