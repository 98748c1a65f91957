"""Consistency checks for house tree data."""

import networkx as nx

from graph import build_graph, iter_families, iter_houses
from models import House


def _fmt_path(path: tuple) -> str:
    return " > ".join(path) or "<root>"


def validate_tree(root: House) -> list[str]:
    """
    Validate a house tree for:
    - Cycles in parent-child relationships
    - People referenced by families but never declared
    - People declared in more than one house
    - Families with neither parents nor children

    Returns a list of warning messages. Rendering works regardless.
    """
    warnings: list[str] = []
    G = build_graph(root)

    try:
        cycle = nx.find_cycle(G, orientation="original")
        cycle_nodes = [edge[0] for edge in cycle]
        warnings.append(f"Cycle detected in parent-child relationships: {cycle_nodes}")
    except nx.NetworkXNoCycle:
        pass

    for ident, data in G.nodes(data=True):
        if not data["declared"]:
            warnings.append(f"Undeclared person referenced by a family: {ident}")
        elif len(data["houses"]) > 1:
            where = ", ".join(_fmt_path(p) for p in data["houses"])
            warnings.append(f"Person {ident} declared in several houses: {where}")

    for path, house in iter_houses(root):
        for family in iter_families(house.families):
            if not family.all_parents and not family.all_children:
                warnings.append(f"Empty family (no parents, no children) in {_fmt_path(path)}")

    return warnings
