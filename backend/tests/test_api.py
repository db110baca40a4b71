import threading

from backend.app.api.routes_graph import graph_report, list_organisms
from foodweb.graph.graph_store import GraphStore


def _seed(client):
    for name in ("Grass", "Rabbit", "Fox"):
        assert client.post("/graph/organisms", json={"name": name}).status_code == 201
    assert client.post("/graph/relations", json={"predator": 1, "prey": 0}).status_code == 201
    assert client.post("/graph/relations", json={"predator": 2, "prey": 1}).status_code == 201


def test_add_and_list_organisms(client):
    response = client.post("/graph/organisms", json={"name": "Grass"})
    assert response.status_code == 201
    body = response.json()
    assert body["index"] == 0
    assert body["name"] == "Grass"

    listed = client.get("/graph/organisms").json()
    assert listed == [{"index": 0, "id": body["id"], "name": "Grass", "prey": []}]


def test_relation_rejections(client):
    _seed(client)

    self_loop = client.post("/graph/relations", json={"predator": 0, "prey": 0})
    assert self_loop.status_code == 409
    assert self_loop.json()["detail"]["reason"] == "self_loop"

    duplicate = client.post("/graph/relations", json={"predator": 1, "prey": 0})
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"]["reason"] == "duplicate_edge"

    missing = client.post("/graph/relations", json={"predator": 0, "prey": 8})
    assert missing.status_code == 404
    assert missing.json()["detail"]["reason"] == "invalid_index"

    assert client.get("/graph/stats").json()["edges"] == 2


def test_extinction_renumbers(client):
    _seed(client)

    response = client.delete("/graph/organisms/0")
    assert response.status_code == 200
    assert response.json()["message"] == "Species Extinction: Grass"

    listed = client.get("/graph/organisms").json()
    assert [(o["name"], o["prey"]) for o in listed] == [("Rabbit", []), ("Fox", [0])]

    report = client.get("/graph/report").json()
    assert report["vore_types"]["producers"] == [0]
    assert report["vore_types"]["herbivores"] == [1]


def test_extinction_on_empty_web(client):
    response = client.delete("/graph/organisms/0")
    assert response.status_code == 404
    assert response.json()["detail"]["reason"] == "empty_graph"


def test_report(client):
    _seed(client)
    report = client.get("/graph/report").json()
    assert report["apex_predators"] == [2]
    assert report["heights"] == {"0": 0, "1": 1, "2": 2}
    assert report["vore_types"]["carnivores"] == [2]


def test_read_only_mode_rejects_mutations(read_only_client):
    for response in (
        read_only_client.post("/graph/organisms", json={"name": "Hawk"}),
        read_only_client.post("/graph/relations", json={"predator": 2, "prey": 0}),
        read_only_client.delete("/graph/organisms/0"),
    ):
        assert response.status_code == 403
        assert response.json()["detail"]["reason"] == "read_only"

    stats = read_only_client.get("/graph/stats").json()
    assert stats["nodes"] == 3
    assert stats["edges"] == 2


def test_reads_are_consistent_while_mutations_run():
    graph = GraphStore()
    lock = threading.Lock()
    for name in ("Grass", "Rabbit", "Fox", "Hawk"):
        graph.insert_node(name)
    stop = threading.Event()

    def _writer():
        while not stop.is_set():
            with lock:
                last = graph.node_count() - 1
                graph.remove_node(last)
                index = graph.insert_node("Hawk")
                graph.connect(index, 0)
                graph.connect(index, 1)

    writer = threading.Thread(target=_writer)
    writer.start()
    try:
        for _ in range(300):
            organisms = list_organisms(graph=graph, lock=lock)
            report = graph_report(graph=graph, lock=lock)
            assert len(organisms) == 4
            assert all(p < 4 for o in organisms for p in o.prey)
            assert sorted(report.heights) == [0, 1, 2, 3]
    finally:
        stop.set()
        writer.join()
