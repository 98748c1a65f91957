"""NetworkX projection of a house tree."""

from typing import Iterator

import networkx as nx

from models import Family, House


def iter_houses(house: House, path: tuple = ()) -> Iterator[tuple[tuple, House]]:
    """Depth-first (path, house) pairs, root first."""
    yield path, house
    for key, sub in house.houses.items():
        yield from iter_houses(sub, path + (key,))


def iter_families(families: list[Family]) -> Iterator[Family]:
    """All families including nested sub-families, in declaration order."""
    for family in families:
        yield family
        yield from iter_families(family.families)


def build_graph(root: House) -> nx.DiGraph:
    """
    Build a directed graph of people with PARENT_OF edges.

    Declared people carry declared=True and the path of every house declaring
    them. Ids only referenced from families are added with declared=False.
    """
    G = nx.DiGraph()

    for path, house in iter_houses(root):
        for ident in house.people:
            if ident in G:
                G.nodes[ident]["houses"].append(path)
            else:
                G.add_node(ident, declared=True, houses=[path])

    for _, house in iter_houses(root):
        for family in iter_families(house.families):
            for ident in family.all_parents + family.all_children:
                if ident not in G:
                    G.add_node(ident, declared=False, houses=[])
            for parent in family.all_parents:
                for child in family.all_children:
                    G.add_edge(parent, child, relationship_type="PARENT_OF")

    return G
