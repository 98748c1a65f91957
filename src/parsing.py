"""Input loading and normalization into House / Family / Person trees."""

import logging
from pathlib import Path
from typing import Any

import yaml

from models import Family, House, InputShapeError, Person

logger = logging.getLogger(__name__)

PERSON_FIELDS = ("name", "fullname", "born", "died", "birthplace", "deathplace")
FAMILY_GROUPS = ("parents", "parents2", "children", "children2", "affinity", "links")


def load_data(path: Path) -> House:
    """Read a YAML (or JSON) file and normalize it into a House tree."""
    with path.open("r", encoding="utf-8") as fp:
        raw = yaml.safe_load(fp)
    return normalize(raw)


def normalize(raw: Any) -> House:
    """
    Coerce raw nested mappings into a root House.

    Missing collections become empty ones, None entries become empty records,
    and scalars (ints from YAML) become strings. Anything that is structurally
    not a tree raises InputShapeError.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise InputShapeError(f"Expected a mapping at the top level, got {type(raw).__name__}")

    root = _normalize_house(raw, [])
    root.styles = _as_mapping(raw.get("styles"), ["styles"])
    for class_name, style in root.styles.items():
        if not isinstance(style, dict):
            raise InputShapeError(f"Style {class_name!r} must be a mapping")

    logger.debug(
        "Normalized tree: %d people, %d families, %d houses at root",
        len(root.people),
        len(root.families),
        len(root.houses),
    )
    return root


def _normalize_house(raw: dict, path: list) -> House:
    people = {
        str(key): _normalize_person(value, path + [key])
        for key, value in _as_mapping(raw.get("people"), path + ["people"]).items()
    }
    families = [
        _normalize_family(value, path + [idx])
        for idx, value in enumerate(_as_list(raw.get("families"), path + ["families"]))
    ]
    houses = {}
    for key, value in _as_mapping(raw.get("houses"), path + ["houses"]).items():
        value = {} if value is None else value
        if not isinstance(value, dict):
            raise InputShapeError(f"House at {_fmt(path + [key])} must be a mapping")
        houses[str(key)] = _normalize_house(value, path + [str(key)])

    return House(
        name=_as_text(raw.get("name")),
        people=people,
        families=families,
        houses=houses,
    )


def _normalize_person(raw: Any, path: list) -> Person:
    if raw is None:
        return Person()
    if not isinstance(raw, dict):
        raise InputShapeError(f"Person at {_fmt(path)} must be a mapping")

    files = {
        str(k): str(v)
        for k, v in _as_mapping(raw.get("files"), path + ["files"]).items()
        if v is not None
    }
    return Person(
        **{f: _as_text(raw.get(f)) for f in PERSON_FIELDS},
        files=files,
        links=_as_ids(raw.get("links"), path + ["links"]),
        classes=_as_ids(raw.get("class"), path + ["class"]),
    )


def _normalize_family(raw: Any, path: list) -> Family:
    if raw is None:
        return Family()
    if not isinstance(raw, dict):
        raise InputShapeError(f"Family at {_fmt(path)} must be a mapping")

    groups = {g: _as_ids(raw.get(g), path + [g]) for g in FAMILY_GROUPS}
    families = [
        _normalize_family(value, path + [idx])
        for idx, value in enumerate(_as_list(raw.get("families"), path + ["families"]))
    ]
    return Family(**groups, families=families, house=_as_text(raw.get("house")))


def _as_mapping(value: Any, path: list) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise InputShapeError(f"Expected a mapping at {_fmt(path)}, got {type(value).__name__}")
    return value


def _as_list(value: Any, path: list) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise InputShapeError(f"Expected a list at {_fmt(path)}, got {type(value).__name__}")
    return value


def _as_ids(value: Any, path: list) -> list[str]:
    """A list of strings; a lone scalar counts as a one-item list."""
    if value is None:
        return []
    if isinstance(value, (str, int, float)):
        value = [value]
    if isinstance(value, dict):
        raise InputShapeError(f"Expected a list at {_fmt(path)}, got dict")
    return [str(v) for v in value if v is not None and v != ""]


def _as_text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _fmt(path: list) -> str:
    return "/".join(str(p) for p in path) or "<root>"
