from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

from foodweb.graph.graph_schema import Outcome
from foodweb.graph.graph_store import GraphStore


class GraphBuilder:
    """
    Constructs the initial food web from organism names and index pairs.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def add_organisms(self, names: Iterable[str]) -> List[int]:
        return [self.store.insert_node(name) for name in names]

    def add_relations(self, pairs: Iterable[Tuple[int, int]]) -> int:
        added = 0
        for predator, prey in pairs:
            if self.store.connect(predator, prey):
                added += 1
        return added

    def add_relations_until_invalid(
        self,
        pairs: Iterable[Tuple[int, int]],
        on_rejected: Optional[Callable[[Outcome], None]] = None,
    ) -> int:
        """
        Consume pairs until one has an out-of-range index or names the
        same organism twice. That pair ends the build and is not added.

        Duplicates are rejected by the store but do not end the build;
        each rejection is passed to `on_rejected`.
        """
        n = self.store.node_count()
        added = 0
        for predator, prey in pairs:
            if not (0 <= predator < n and 0 <= prey < n) or predator == prey:
                break
            outcome = self.store.connect(predator, prey)
            if outcome:
                added += 1
            elif on_rejected is not None:
                on_rejected(outcome)
        return added
