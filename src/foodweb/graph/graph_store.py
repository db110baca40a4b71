from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple

import networkx as nx
import numpy as np

from foodweb.graph.graph_schema import (
    Organism,
    OrganismView,
    Outcome,
    RejectReason,
    Relation,
)


logger = logging.getLogger("foodweb.graph")


@dataclass(frozen=True)
class VoreTypes:
    """
    Diet classification of every organism, as ascending index lists.
    """

    producers: List[int]
    herbivores: List[int]
    omnivores: List[int]
    carnivores: List[int]


class GraphStore:
    """
    Authoritative in-memory food web.

    Organisms are keyed by their positional index (0..n-1) in an
    `nx.DiGraph`; each organism's successors, in insertion order, are
    its prey. Removing an organism renumbers every later index and
    every prey reference to it.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()
        self.metadata: Dict[str, Any] = {}

    # -------------------- Nodes --------------------

    def insert_node(self, name: str) -> int:
        index = self._graph.number_of_nodes()
        self._graph.add_node(index, data=Organism.create(name))
        logger.debug("inserted organism %r at index %s", name, index)
        return index

    def get_node(self, index: int) -> Organism:
        self._check_index(index)
        return self._graph.nodes[index]["data"]

    def name_of(self, index: int) -> str:
        return self.get_node(index).name

    def prey_of(self, index: int) -> Tuple[int, ...]:
        self._check_index(index)
        return tuple(self._graph.successors(index))

    def index_of(self, organism_id: str) -> int:
        for index, data in self._graph.nodes(data=True):
            if data["data"].id == organism_id:
                return index
        raise KeyError(organism_id)

    def nodes(self) -> Iterator[OrganismView]:
        for index, data in self._graph.nodes(data=True):
            organism = data["data"]
            yield OrganismView(
                index=index,
                id=organism.id,
                name=organism.name,
                prey=tuple(self._graph.successors(index)),
            )

    def remove_node(self, index: int) -> Outcome:
        n = self._graph.number_of_nodes()
        if n == 0:
            return self._reject(
                RejectReason.EMPTY_GRAPH,
                "The food web is empty. No organism removed from the food web.",
            )
        if not self._in_range(index):
            return self._reject(
                RejectReason.INVALID_INDEX,
                "Invalid extinction index. No organism removed from the food web.",
            )

        removed = self._graph.nodes[index]["data"]

        # Built into fresh storage; self._graph is untouched until the swap.
        rebuilt = nx.DiGraph()
        for old, data in self._graph.nodes(data=True):
            if old == index:
                continue
            rebuilt.add_node(_shift(old, index), data=data["data"])

        for predator in range(n):
            if predator == index:
                continue
            new_predator = _shift(predator, index)
            for prey in self._graph.successors(predator):
                if prey == index:
                    continue
                rebuilt.add_edge(new_predator, _shift(prey, index))

        self._graph = rebuilt
        logger.debug(
            "removed organism %r from index %s; %s organisms remain",
            removed.name,
            index,
            n - 1,
        )
        return Outcome.success(index=index, message=removed.name)

    # -------------------- Edges --------------------

    def connect(self, predator: int, prey: int) -> Outcome:
        if (
            not self._in_range(predator)
            or not self._in_range(prey)
            or predator == prey
        ):
            reason = (
                RejectReason.SELF_LOOP
                if predator == prey and self._in_range(predator)
                else RejectReason.INVALID_INDEX
            )
            return self._reject(
                reason,
                "Invalid predator and/or prey index. "
                "No relation added to the food web.",
            )

        if self._graph.has_edge(predator, prey):
            return self._reject(
                RejectReason.DUPLICATE_EDGE,
                "Duplicate predator/prey relation. "
                "No relation added to the food web.",
            )

        self._graph.add_edge(predator, prey)
        logger.debug("connected predator %s -> prey %s", predator, prey)
        return Outcome.success(index=predator)

    def has_edge(self, predator: int, prey: int) -> bool:
        return self._graph.has_edge(predator, prey)

    def relations(self) -> Iterator[Relation]:
        for predator in self._graph.nodes:
            for prey in self._graph.successors(predator):
                yield Relation(predator=predator, prey=prey)

    # -------------------- Analytics --------------------

    def node_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def fan_out_counts(self) -> Dict[int, int]:
        return {index: self._graph.out_degree(index) for index in self._graph.nodes}

    def fan_in_counts(self) -> Dict[int, int]:
        n = self._graph.number_of_nodes()
        targets = [prey for _, prey in self._graph.edges]
        counts = np.bincount(np.asarray(targets, dtype=np.int64), minlength=n)
        return {index: int(counts[index]) for index in range(n)}

    def compute_heights(self) -> Dict[int, int]:
        """
        Trophic height of every organism by iterative relaxation.

        Producers sit at 0; every other organism is one above its
        highest prey. All heights start at 0 and every node is
        recomputed in index order, in place, until a full pass changes
        nothing.

        Heights saturate at the node count. An acyclic web never gets
        that high, so its heights match the recursive definition;
        organisms fed by a predator/prey loop settle at the ceiling
        instead of growing forever.
        """
        n = self._graph.number_of_nodes()
        prey_lists = [list(self._graph.successors(i)) for i in range(n)]
        height = [0] * n

        changed = True
        while changed:
            changed = False
            for i in range(n):
                new_height = 0
                if prey_lists[i]:
                    new_height = min(
                        1 + max(height[p] for p in prey_lists[i]),
                        n,
                    )
                if new_height != height[i]:
                    height[i] = new_height
                    changed = True

        if n and max(height) == n:
            logger.warning(
                "heights saturated at %s; the web contains a predator/prey loop",
                n,
            )
        return dict(enumerate(height))

    def classify(self) -> VoreTypes:
        producer = [self._graph.out_degree(i) == 0 for i in range(self.node_count())]

        producers: List[int] = []
        herbivores: List[int] = []
        omnivores: List[int] = []
        carnivores: List[int] = []

        for i, is_producer in enumerate(producer):
            if is_producer:
                producers.append(i)
                continue

            eats_producer = False
            eats_consumer = False
            for p in self._graph.successors(i):
                if producer[p]:
                    eats_producer = True
                else:
                    eats_consumer = True

            if eats_producer and eats_consumer:
                omnivores.append(i)
            elif eats_producer:
                herbivores.append(i)
            else:
                carnivores.append(i)

        return VoreTypes(
            producers=producers,
            herbivores=herbivores,
            omnivores=omnivores,
            carnivores=carnivores,
        )

    # -------------------- Cloning --------------------

    def clone(self) -> "GraphStore":
        g = GraphStore()
        g._graph = self._graph.copy()
        g.metadata = dict(self.metadata)
        return g

    # -------------------- Internals --------------------

    def _in_range(self, index: int) -> bool:
        return 0 <= index < self._graph.number_of_nodes()

    def _check_index(self, index: int) -> None:
        if not self._in_range(index):
            raise IndexError(f"organism index out of range: {index}")

    def _reject(self, reason: RejectReason, message: str) -> Outcome:
        logger.warning("rejected (%s): %s", reason.value, message)
        return Outcome.rejected(reason, message)


def _shift(index: int, removed: int) -> int:
    return index - 1 if index > removed else index
