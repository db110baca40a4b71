from foodweb.config.settings import ModeConfig
from foodweb.graph.graph_mutator import GraphMutator
from foodweb.graph.graph_schema import RejectReason
from foodweb.report.renderer import render_web


def test_expansion_supplementation_extinction(grass_web):
    mutator = GraphMutator(store=grass_web, modes=ModeConfig())

    result = mutator.expand("Hawk")
    assert result.ok
    assert result.message == "Species Expansion: Hawk"
    assert result.snapshot is None

    result = mutator.supplement(3, 1)
    assert result.ok
    assert result.message == "New Food Source: Hawk eats Rabbit"

    result = mutator.extinguish(1)
    assert result.ok
    assert result.message == "Species Extinction: Rabbit"
    assert grass_web.prey_of(2) == ()
    assert grass_web.prey_of(1) == ()


def test_rejections_carry_reason(grass_web):
    mutator = GraphMutator(store=grass_web, modes=ModeConfig())

    dup = mutator.supplement(1, 0)
    assert not dup
    assert dup.reason is RejectReason.DUPLICATE_EDGE
    assert dup.message.startswith("Duplicate predator/prey relation")

    bad = mutator.extinguish(9)
    assert not bad
    assert bad.reason is RejectReason.INVALID_INDEX
    assert bad.message == "Invalid index for species extinction"


def test_basic_mode_is_read_only(grass_web):
    mutator = GraphMutator(store=grass_web, modes=ModeConfig(basic=True))

    for result in (
        mutator.expand("Hawk"),
        mutator.supplement(2, 0),
        mutator.extinguish(0),
    ):
        assert not result
        assert result.reason is RejectReason.READ_ONLY

    assert grass_web.node_count() == 3
    assert grass_web.edge_count() == 2


def test_debug_mode_attaches_snapshot(grass_web):
    mutator = GraphMutator(
        store=grass_web,
        modes=ModeConfig(debug=True),
        render=render_web,
    )

    result = mutator.extinguish(0)
    assert result.snapshot == (
        "DEBUG MODE - removed an organism:\n"
        "  (0) Rabbit\n"
        "  (1) Fox eats Rabbit\n"
        "\n"
    )

    rejected = mutator.supplement(0, 0)
    assert not rejected
    assert rejected.snapshot.startswith("DEBUG MODE - added a relation:\n")


def test_results_carry_affected_index(grass_web):
    mutator = GraphMutator(store=grass_web, modes=ModeConfig())
    assert mutator.expand("Hawk").index == 3
    assert mutator.supplement(3, 2).index == 3
    assert mutator.extinguish(1).index == 1


def test_debug_mode_without_renderer_has_no_snapshot(grass_web):
    mutator = GraphMutator(store=grass_web, modes=ModeConfig(debug=True))
    assert mutator.expand("Hawk").snapshot is None
