from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from backend.app.api.schemas import (
    GraphStatsResponse,
    MutationResponse,
    OrganismCreated,
    OrganismNode,
    OrganismRequest,
    RelationRequest,
    ReportResponse,
    VoreTypesResponse,
)
from backend.app.config import AppConfig
from backend.app.dependencies import get_config, get_graph, get_graph_lock
from foodweb.graph.graph_mutator import GraphMutator, MutationResult
from foodweb.graph.graph_query import FoodWebQueryEngine
from foodweb.graph.graph_schema import RejectReason
from foodweb.utils.text import normalize_name

router = APIRouter()

_STATUS_FOR_REASON = {
    RejectReason.INVALID_INDEX: status.HTTP_404_NOT_FOUND,
    RejectReason.EMPTY_GRAPH: status.HTTP_404_NOT_FOUND,
    RejectReason.SELF_LOOP: status.HTTP_409_CONFLICT,
    RejectReason.DUPLICATE_EDGE: status.HTTP_409_CONFLICT,
    RejectReason.READ_ONLY: status.HTTP_403_FORBIDDEN,
}


def _mutator(graph, config: AppConfig) -> GraphMutator:
    return GraphMutator(store=graph, modes=config.foodweb.modes)


def _raise_for(result: MutationResult) -> None:
    raise HTTPException(
        status_code=_STATUS_FOR_REASON.get(result.reason, status.HTTP_400_BAD_REQUEST),
        detail={"reason": result.reason.value, "message": result.message},
    )


# Every route holds the lock: reads iterate the live graph and extinction
# replaces it wholesale.


@router.get("/stats", response_model=GraphStatsResponse)
def graph_stats(graph=Depends(get_graph), lock=Depends(get_graph_lock)):
    with lock:
        return GraphStatsResponse(
            nodes=graph.node_count(),
            edges=graph.edge_count(),
            metadata=dict(graph.metadata),
        )


@router.get("/organisms", response_model=List[OrganismNode])
def list_organisms(graph=Depends(get_graph), lock=Depends(get_graph_lock)):
    with lock:
        return [
            OrganismNode(index=v.index, id=v.id, name=v.name, prey=list(v.prey))
            for v in graph.nodes()
        ]


@router.post(
    "/organisms",
    response_model=OrganismCreated,
    status_code=status.HTTP_201_CREATED,
)
def add_organism(
    body: OrganismRequest,
    graph=Depends(get_graph),
    lock=Depends(get_graph_lock),
    config=Depends(get_config),
):
    name = normalize_name(body.name, config.foodweb.max_name_length)
    with lock:
        result = _mutator(graph, config).expand(name)
        if not result:
            _raise_for(result)
        organism = graph.get_node(result.index)
    return OrganismCreated(index=result.index, id=organism.id, name=organism.name)


@router.post(
    "/relations",
    response_model=MutationResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_relation(
    body: RelationRequest,
    graph=Depends(get_graph),
    lock=Depends(get_graph_lock),
    config=Depends(get_config),
):
    with lock:
        result = _mutator(graph, config).supplement(body.predator, body.prey)
    if not result:
        _raise_for(result)
    return MutationResponse(ok=True, message=result.message)


@router.delete("/organisms/{index}", response_model=MutationResponse)
def remove_organism(
    index: int,
    graph=Depends(get_graph),
    lock=Depends(get_graph_lock),
    config=Depends(get_config),
):
    with lock:
        result = _mutator(graph, config).extinguish(index)
    if not result:
        _raise_for(result)
    return MutationResponse(ok=True, message=result.message)


@router.get("/report", response_model=ReportResponse)
def graph_report(graph=Depends(get_graph), lock=Depends(get_graph_lock)):
    with lock:
        report = FoodWebQueryEngine(graph).report()
    vores = report.vore_types
    return ReportResponse(
        apex_predators=report.apex_predators,
        producers=report.producers,
        most_flexible_eaters=report.most_flexible_eaters,
        tastiest_food=report.tastiest_food,
        heights=report.heights,
        vore_types=VoreTypesResponse(
            producers=vores.producers,
            herbivores=vores.herbivores,
            omnivores=vores.omnivores,
            carnivores=vores.carnivores,
        ),
    )
