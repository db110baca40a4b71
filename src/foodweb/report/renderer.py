from __future__ import annotations

from typing import Iterable, List

from foodweb.graph.graph_query import FoodWebQueryEngine
from foodweb.graph.graph_store import GraphStore


def render_web(store: GraphStore) -> str:
    """
    One line per organism: `  (index) Name eats Prey1, Prey2`,
    followed by a blank line.
    """
    names = [view.name for view in store.nodes()]
    lines: List[str] = []
    for view in store.nodes():
        line = f"  ({view.index}) {view.name}"
        if view.prey:
            line += " eats " + ", ".join(names[p] for p in view.prey)
        lines.append(line)
    return "".join(f"{line}\n" for line in lines) + "\n"


def render_report(store: GraphStore, modified: bool = False) -> str:
    """
    Full characteristics of the web, section by section.

    Every heading is prefixed with `UPDATED ` once the web has been
    modified after the initial build.
    """
    prefix = "UPDATED " if modified else ""
    report = FoodWebQueryEngine(store).report()
    names = [view.name for view in store.nodes()]

    out: List[str] = []
    out.append(f"{prefix}Food Web Predators & Prey:\n")
    out.append(render_web(store))

    out.append(_section(prefix + "Apex Predators", names, report.apex_predators))
    out.append(_section(prefix + "Producers", names, report.producers))
    out.append(
        _section(prefix + "Most Flexible Eaters", names, report.most_flexible_eaters)
    )
    out.append(_section(prefix + "Tastiest Food", names, report.tastiest_food))

    out.append(f"{prefix}Food Web Heights:\n")
    for index, height in report.heights.items():
        out.append(f"  {names[index]}: {height}\n")
    out.append("\n")

    vores = report.vore_types
    out.append(f"{prefix}Vore Types:\n")
    for title, members in (
        ("Producers", vores.producers),
        ("Herbivores", vores.herbivores),
        ("Omnivores", vores.omnivores),
        ("Carnivores", vores.carnivores),
    ):
        out.append(f"  {title}:\n")
        out.extend(f"    {names[i]}\n" for i in members)
    out.append("\n")

    return "".join(out)


def _section(title: str, names: List[str], members: Iterable[int]) -> str:
    body = "".join(f"  {names[i]}\n" for i in members)
    return f"{title}:\n{body}\n"
