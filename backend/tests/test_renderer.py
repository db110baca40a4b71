from foodweb.report.renderer import render_report, render_web


def test_render_web(grass_web):
    grass_web.connect(2, 0)
    assert render_web(grass_web) == (
        "  (0) Grass\n"
        "  (1) Rabbit eats Grass\n"
        "  (2) Fox eats Rabbit, Grass\n"
        "\n"
    )


def test_render_report_sections(grass_web):
    text = render_report(grass_web)
    assert text.startswith("Food Web Predators & Prey:\n  (0) Grass\n")
    assert "Apex Predators:\n  Fox\n\n" in text
    assert "Producers:\n  Grass\n\n" in text
    assert "Most Flexible Eaters:\n  Rabbit\n  Fox\n\n" in text
    assert "Tastiest Food:\n  Grass\n  Rabbit\n\n" in text
    assert "Food Web Heights:\n  Grass: 0\n  Rabbit: 1\n  Fox: 2\n\n" in text
    assert text.endswith(
        "Vore Types:\n"
        "  Producers:\n    Grass\n"
        "  Herbivores:\n    Rabbit\n"
        "  Omnivores:\n"
        "  Carnivores:\n    Fox\n"
        "\n"
    )
    assert "UPDATED" not in text


def test_render_report_marks_updates(grass_web):
    text = render_report(grass_web, modified=True)
    for heading in (
        "Food Web Predators & Prey:",
        "Apex Predators:",
        "Producers:",
        "Most Flexible Eaters:",
        "Tastiest Food:",
        "Food Web Heights:",
        "Vore Types:",
    ):
        assert f"UPDATED {heading}" in text
