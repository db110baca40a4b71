from typing import List, Dict, Any
from pydantic import BaseModel


class OrganismRequest(BaseModel):
    name: str


class OrganismCreated(BaseModel):
    index: int
    id: str
    name: str


class RelationRequest(BaseModel):
    predator: int
    prey: int


class MutationResponse(BaseModel):
    ok: bool
    message: str


class GraphStatsResponse(BaseModel):
    nodes: int
    edges: int
    metadata: Dict[str, Any]


class OrganismNode(BaseModel):
    index: int
    id: str
    name: str
    prey: List[int]


class VoreTypesResponse(BaseModel):
    producers: List[int]
    herbivores: List[int]
    omnivores: List[int]
    carnivores: List[int]


class ReportResponse(BaseModel):
    apex_predators: List[int]
    producers: List[int]
    most_flexible_eaters: List[int]
    tastiest_food: List[int]
    heights: Dict[int, int]
    vore_types: VoreTypesResponse
