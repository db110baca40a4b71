from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from foodweb.config.settings import ModeConfig
from foodweb.graph.graph_schema import RejectReason
from foodweb.graph.graph_store import GraphStore


logger = logging.getLogger("foodweb.mutation")


@dataclass(frozen=True)
class MutationResult:
    """
    What a modification did to the web, ready to show to a user.
    """

    ok: bool
    action: str
    message: str
    reason: Optional[RejectReason] = None
    snapshot: Optional[str] = None
    index: Optional[int] = None

    def __bool__(self) -> bool:
        return self.ok


class GraphMutator:
    """
    Applies user-driven modifications to a food web.

    Expansion adds an organism, supplementation adds a predator/prey
    relation and extinction removes an organism. Basic mode rejects all
    of them. In debug mode, `render` turns the web into the snapshot
    attached to every result.
    """

    def __init__(
        self,
        *,
        store: GraphStore,
        modes: ModeConfig,
        render: Optional[Callable[[GraphStore], str]] = None,
    ) -> None:
        self.store = store
        self.modes = modes
        self.render = render

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def expand(self, name: str) -> MutationResult:
        if self.modes.basic:
            return self._read_only("expansion")

        index = self.store.insert_node(name)
        logger.info("expansion: %s", name)
        return self._result(
            action="expansion",
            index=index,
            message=f"Species Expansion: {name}",
            debug_title="DEBUG MODE - added an organism:",
        )

    def supplement(self, predator: int, prey: int) -> MutationResult:
        if self.modes.basic:
            return self._read_only("supplementation")

        outcome = self.store.connect(predator, prey)
        if not outcome:
            return self._result(
                action="supplementation",
                message=outcome.message,
                reason=outcome.reason,
                debug_title="DEBUG MODE - added a relation:",
            )

        predator_name = self.store.name_of(predator)
        prey_name = self.store.name_of(prey)
        logger.info("supplementation: %s eats %s", predator_name, prey_name)
        return self._result(
            action="supplementation",
            index=predator,
            message=f"New Food Source: {predator_name} eats {prey_name}",
            debug_title="DEBUG MODE - added a relation:",
        )

    def extinguish(self, index: int) -> MutationResult:
        if self.modes.basic:
            return self._read_only("extinction")

        outcome = self.store.remove_node(index)
        if not outcome:
            return self._result(
                action="extinction",
                message="Invalid index for species extinction",
                reason=outcome.reason,
                debug_title="DEBUG MODE - removed an organism:",
            )

        logger.info("extinction: %s", outcome.message)
        return self._result(
            action="extinction",
            index=index,
            message=f"Species Extinction: {outcome.message}",
            debug_title="DEBUG MODE - removed an organism:",
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _result(
        self,
        *,
        action: str,
        message: str,
        debug_title: str,
        reason: Optional[RejectReason] = None,
        index: Optional[int] = None,
    ) -> MutationResult:
        snapshot = None
        if self.modes.debug and self.render is not None:
            snapshot = f"{debug_title}\n{self.render(self.store)}"
        return MutationResult(
            ok=reason is None,
            action=action,
            message=message,
            reason=reason,
            snapshot=snapshot,
            index=index,
        )

    def _read_only(self, action: str) -> MutationResult:
        logger.warning("%s rejected: basic mode is read-only", action)
        return MutationResult(
            ok=False,
            action=action,
            message="Basic mode is read-only. The food web was not modified.",
            reason=RejectReason.READ_ONLY,
        )
