from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from foodweb.graph.graph_store import GraphStore, VoreTypes


@dataclass(frozen=True)
class FoodWebReport:
    """
    Every derived characteristic of a food web at one point in time.
    """

    apex_predators: List[int]
    producers: List[int]
    most_flexible_eaters: List[int]
    tastiest_food: List[int]
    heights: Dict[int, int]
    vore_types: VoreTypes


class FoodWebQueryEngine:
    """
    Read-only analyses layered over the store's fan-in / fan-out counts.
    """

    def __init__(self, store: GraphStore) -> None:
        self.store = store

    def apex_predators(self) -> List[int]:
        return [i for i, count in self.store.fan_in_counts().items() if count == 0]

    def producers(self) -> List[int]:
        return [i for i, count in self.store.fan_out_counts().items() if count == 0]

    def most_flexible_eaters(self) -> List[int]:
        return _argmax_all(self.store.fan_out_counts())

    def tastiest_food(self) -> List[int]:
        return _argmax_all(self.store.fan_in_counts())

    def report(self) -> FoodWebReport:
        return FoodWebReport(
            apex_predators=self.apex_predators(),
            producers=self.producers(),
            most_flexible_eaters=self.most_flexible_eaters(),
            tastiest_food=self.tastiest_food(),
            heights=self.store.compute_heights(),
            vore_types=self.store.classify(),
        )


def _argmax_all(counts: Dict[int, int]) -> List[int]:
    # Ties all qualify; with every count at zero, every organism does.
    best = max(counts.values(), default=0)
    return [i for i, count in counts.items() if count == best]
