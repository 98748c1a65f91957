"""Style classes and their resolution into DOT attribute statements."""

import json

# Family colors, handed out round-robin
COLORS = [
    "#c0392b",
    "#2980b9",
    "#27ae60",
    "#8e44ad",
    "#d35400",
    "#16a085",
    "#7f8c8d",
    "#b7950b",
    "#2c3e50",
    "#a93226",
]

DEFAULT_STYLES: dict[str, dict] = {
    ":digraph": {
        "rankdir": "LR",
        "ranksep": 0.4,
        "nodesep": 0.2,
        "splines": "spline",
        "compound": True,
    },
    ":edge": {
        "arrowsize": 0.5,
        "color": "#999999",
        "penwidth": 1,
    },
    ":node": {
        "shape": "box",
        "style": "filled,rounded",
        "fillcolor": "#ffffff",
        "color": "#cccccc",
        "fontname": "Helvetica",
        "fontsize": 11,
        "margin": "0.15,0.05",
    },
    ":house": {
        "style": "filled",
        "color": "#eeeeee",
        "fillcolor": "#fafafa",
        "fontname": "Helvetica",
        "fontsize": 12,
        "labeljust": "l",
        "margin": 12,
    },
    ":family": {
        "label": "",
        "style": "invis",
        "margin": 0,
    },
    ":union": {
        "shape": "circle",
        "style": "filled",
        "label": "",
        "height": 0.08,
        "width": 0.08,
        "penwidth": 0,
    },
    ":children": {
        "shape": "circle",
        "style": "filled",
        "label": "",
        "height": 0.08,
        "width": 0.08,
        "penwidth": 0,
    },
    ":parent-link": {
        "arrowhead": "none",
        "penwidth": 1.5,
    },
    ":parent2-link": {
        "style": "dashed",
    },
    ":parent-child-link": {
        "weight": 3,
    },
    ":child-link": {
        "penwidth": 1.5,
    },
    ":child2-link": {
        "style": "dashed",
    },
    ":child-links": {
        "weight": 0,
    },
}


class HtmlLabel(str):
    """An HTML-like label ("<...>") built by the renderer, emitted unquoted."""


def format_value(value) -> str:
    """Format an attribute value as DOT source."""
    if isinstance(value, HtmlLabel):
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(str(value), ensure_ascii=False)


class StyleResolver:
    """Resolves style class names (plus per-node overrides) into attribute lines."""

    def __init__(self, *layers: dict[str, dict]):
        # Each layer extends the previous one attribute by attribute
        self.styles = {name: dict(attrs) for name, attrs in DEFAULT_STYLES.items()}
        for layer in layers:
            for name, attrs in (layer or {}).items():
                self.styles.setdefault(name, {}).update(attrs)

    def attributes(self, classes: list[str], overrides: dict | None = None) -> dict:
        """Merged attributes: later classes win over earlier ones, overrides win over all."""
        merged: dict = {k: v for k, v in (overrides or {}).items() if v is not None}
        from_classes: dict = {}
        for name in classes:
            from_classes.update(self.styles.get(name, {}))
        for key, value in from_classes.items():
            if key not in merged and value is not None:
                merged[key] = value
        return merged

    def resolve(self, classes: list[str], overrides: dict | None = None) -> list[str]:
        return [f"{key}={format_value(value)}" for key, value in self.attributes(classes, overrides).items()]
