"""
House tree -> Graphviz DOT document.

Houses become clusters, each family becomes its own cluster holding a
"union" node (the parents as a couple) and a "siblings" node (the children
as a group), and each person becomes a node with an HTML-like table label.
"""

import json
import logging
from dataclasses import dataclass

from blocks import Indent, serialize
from config import RenderConfig
from counters import CounterScope
from labels import escape_id, html_text, person_label
from models import Family, House, Person
from parsing import normalize
from slugs import slugify
from styles import HtmlLabel, StyleResolver

logger = logging.getLogger(__name__)

LINE = "#" * 75
LINE2 = "# " + "-" * 73


def comment_text(text: str) -> str:
    """Keep user text inside a single # comment line."""
    return text.replace("\r", "\\r").replace("\n", "\\n")


@dataclass
class RenderContext:
    """Per-render state: resolved styles, palette and the family color counter."""

    styles: StyleResolver
    palette: list[str]
    counters: CounterScope

    def style(self, classes: list[str], overrides: dict | None = None) -> list[str]:
        return self.styles.resolve(classes, overrides)

    def next_color(self) -> str:
        return self.palette[self.counters.next("family") % len(self.palette)]


def render(data, config: RenderConfig | None = None, counters: CounterScope | None = None) -> str:
    """
    Render raw house data (nested mappings) into a DOT document.

    A fresh counter scope is used unless `counters` is given, so rendering
    the same data twice gives the same colors. Pass a shared CounterScope to
    keep the color rotation going across calls.
    """
    config = config or RenderConfig()
    root = data if isinstance(data, House) else normalize(data)
    ctx = RenderContext(
        styles=StyleResolver(config.styles, root.styles),
        palette=config.palette,
        counters=counters if counters is not None else CounterScope(),
    )

    document = [
        "digraph G {",
        Indent(
            "edge [",
            Indent(ctx.style([":edge"])),
            "]",
            "",
            "node [",
            Indent(ctx.style([":node"])),
            "]",
            "",
            ctx.style([":digraph"]),
            render_house(ctx, root, []),
        ),
        "}",
    ]
    return serialize(document, indent_unit=config.indent) + "\n"


def render_house(ctx: RenderContext, house: House, path: list) -> list:
    """Families, then people, then nested houses; wrapped in a cluster unless root."""
    meat = [
        [render_family(ctx, f, path + [idx]) for idx, f in enumerate(house.families)],
        [render_person(ctx, p, path + [ident]) for ident, p in house.people.items()],
        [render_house(ctx, h, path + [key]) for key, h in house.houses.items()],
    ]

    if not path:
        return meat

    logger.debug("Rendering house %s", "/".join(map(str, path)))
    name = house.name or str(path[-1])
    return [
        "",
        LINE,
        f"# House {comment_text(' > '.join(map(str, path)))}",
        LINE,
        "",
        f"subgraph cluster_house_{slugify(path)} {{",
        Indent(
            ctx.style([":house", f":house-{len(path)}"], {"label": HtmlLabel(f"<<b>{html_text(name)}</b>>")}),
            "",
            meat,
        ),
        "}",
    ]


def summarize_family(family: Family) -> str:
    """Comment form of a family: "[A, B] -> [C, D]"."""
    parents = ", ".join(family.all_parents)
    children = ", ".join(family.all_children)
    return comment_text(f"[{parents}] -> [{children}]")


def render_family(ctx: RenderContext, family: Family, path: list) -> list:
    slug = slugify(path)
    color = ctx.next_color()
    union = f"union_{slug}"
    kids = f"siblings_{slug}"

    parents = family.all_parents
    children = family.all_children
    logger.debug("Rendering family %s %s (%s)", slug, summarize_family(family), color)

    return [
        "",
        f"subgraph cluster_family_{slug} {{",
        Indent(
            ctx.style([":family"]),
            family.house and _house_prelude(ctx, family),
            _sub_families(ctx, family, path),
            "",
            f"# Family {summarize_family(family)}",
            LINE2,
            "",
            bool(parents) and _parents(ctx, family, union, color),
            bool(parents and children) and _union_to_siblings(ctx, union, kids, color),
            bool(children) and _siblings(ctx, family, kids, color),
            len(children) > 1 and _sibling_order(ctx, children),
        ),
        "}",
    ]


def _house_prelude(ctx: RenderContext, family: Family) -> list[str]:
    label = HtmlLabel(f"<<b>{html_text(family.house)}</b>>")
    labelhref = family.links[0] if family.links else None
    return ctx.style([":house"], {"label": label, "labelhref": labelhref})


def _sub_families(ctx: RenderContext, family: Family, path: list) -> list:
    # Deeper families are declared last; render them first so their unions
    # claim their parents before the outer family does.
    return [
        render_family(ctx, sub, path + [idx])
        for idx, sub in reversed(list(enumerate(family.families)))
    ]


def _id_set(ids: list[str]) -> str:
    return "{" + ", ".join(escape_id(i) for i in ids) + "}"


def _parents(ctx: RenderContext, family: Family, union: str, color: str) -> list:
    groups = [
        (family.parents, [":parent-link"]),
        (family.parents2, [":parent-link", ":parent2-link"]),
    ]
    return [
        f"{union} [",
        Indent(ctx.style([":union"], {"fillcolor": color})),
        "]",
        "",
        [
            [f"{_id_set(ids)} -> {union} [", Indent(ctx.style(classes, {"color": color})), "]"]
            for ids, classes in groups
            if ids
        ],
    ]


def _union_to_siblings(ctx: RenderContext, union: str, kids: str, color: str) -> list:
    return [
        f"{union} -> {kids} [",
        Indent(ctx.style([":parent-link", ":parent-child-link"], {"color": color})),
        "]",
    ]


def _siblings(ctx: RenderContext, family: Family, kids: str, color: str) -> list:
    groups = [
        (family.children, [":child-link"]),
        (family.children2, [":child-link", ":child2-link"]),
    ]
    return [
        f"{kids} [",
        Indent(ctx.style([":children"], {"fillcolor": color})),
        "]",
        [
            [f"{kids} -> {_id_set(ids)} [", Indent(ctx.style(classes, {"color": color})), "]"]
            for ids, classes in groups
            if ids
        ],
    ]


def _sibling_order(ctx: RenderContext, children: list[str]) -> list:
    """Invisible edge chain keeping siblings in declaration order."""
    chain = " -> ".join(json.dumps(c, ensure_ascii=False) for c in children)
    return [
        f"{chain} [",
        Indent(ctx.style([":child-links"], {"style": "invis"})),
        "]",
    ]


def render_person(ctx: RenderContext, person: Person, path: list) -> list:
    ident = str(path[-1])
    href = person.links[0] if person.links else None
    label = person_label(person, ident)

    return [
        f"{json.dumps(ident, ensure_ascii=False)} [",
        Indent(ctx.style(person.classes, {"label": label, "href": href})),
        "]",
    ]
