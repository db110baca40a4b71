from functools import lru_cache
import logging
import threading

from foodweb.graph.graph_store import GraphStore

from backend.app.config import AppConfig


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_graph() -> GraphStore:
    graph = GraphStore()
    graph.metadata["source"] = "backend"
    logging.getLogger("foodweb.startup").info("[startup] empty food web created")
    return graph


@lru_cache
def get_graph_lock() -> threading.Lock:
    # Held for the full duration of every mutation; extinction rewrites
    # the whole edge set.
    return threading.Lock()
