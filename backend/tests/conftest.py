from __future__ import annotations

import dataclasses

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_config, get_graph

from foodweb.config.settings import ModeConfig
from foodweb.graph.graph_store import GraphStore


@pytest.fixture()
def store() -> GraphStore:
    return GraphStore()


@pytest.fixture()
def grass_web() -> GraphStore:
    """
    Grass(0) <- Rabbit(1) <- Fox(2)
    """
    graph = GraphStore()
    for name in ("Grass", "Rabbit", "Fox"):
        graph.insert_node(name)
    assert graph.connect(1, 0)
    assert graph.connect(2, 1)
    return graph


def _make_client(graph: GraphStore, *, basic: bool):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    config = AppConfig()
    config = dataclasses.replace(
        config,
        foodweb=dataclasses.replace(config.foodweb, modes=ModeConfig(basic=basic)),
    )

    app = create_app(config)
    app.router.lifespan_context = _no_lifespan
    app.dependency_overrides[get_graph] = lambda: graph
    app.dependency_overrides[get_config] = lambda: config
    return app


@pytest.fixture()
def client(store: GraphStore):
    app = _make_client(store, basic=False)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def read_only_client(grass_web: GraphStore):
    app = _make_client(grass_web, basic=True)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
