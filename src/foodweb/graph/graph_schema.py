from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple
from uuid import uuid4


@dataclass(frozen=True)
class Organism:
    """
    Species in the food web.

    `id` is a stable handle; the positional index used by callers
    is not, since it shifts whenever an earlier organism is removed.
    """

    id: str
    name: str

    @staticmethod
    def create(name: str) -> "Organism":
        return Organism(id=str(uuid4()), name=name)


@dataclass(frozen=True)
class Relation:
    """
    Directed predator -> prey relationship, addressed by position.
    """

    predator: int
    prey: int


@dataclass(frozen=True)
class OrganismView:
    """
    Read-only snapshot of one organism and its ordered prey.
    """

    index: int
    id: str
    name: str
    prey: Tuple[int, ...]


class RejectReason(str, Enum):
    INVALID_INDEX = "invalid_index"
    SELF_LOOP = "self_loop"
    DUPLICATE_EDGE = "duplicate_edge"
    EMPTY_GRAPH = "empty_graph"
    READ_ONLY = "read_only"


@dataclass(frozen=True)
class Outcome:
    """
    Result of a graph mutation.

    Truthy on success. On rejection the graph is unchanged and
    `reason` / `message` describe why.
    """

    ok: bool
    reason: Optional[RejectReason] = None
    message: str = ""
    index: Optional[int] = None

    def __bool__(self) -> bool:
        return self.ok

    @staticmethod
    def success(index: Optional[int] = None, message: str = "") -> "Outcome":
        return Outcome(ok=True, index=index, message=message)

    @staticmethod
    def rejected(reason: RejectReason, message: str) -> "Outcome":
        return Outcome(ok=False, reason=reason, message=message)
