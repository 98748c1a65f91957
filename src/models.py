"""Data classes for house / family / person trees."""

from dataclasses import dataclass, field
from enum import Enum


class InputShapeError(ValueError):
    """Raised when raw input cannot be coerced into a house tree."""


class DocumentKind(Enum):
    BIRTH_CERTIFICATE = "acte_naissance"
    MARRIAGE_CERTIFICATE = "acte_mariage"
    DEATH_CERTIFICATE = "acte_deces"
    BIRTH_PUBLICATION = "table_naissance"
    MARRIAGE_PUBLICATION = "table_mariage"
    DEATH_PUBLICATION = "table_deces"


DOCUMENT_LABELS = {
    DocumentKind.BIRTH_CERTIFICATE: "acte de naissance",
    DocumentKind.MARRIAGE_CERTIFICATE: "acte de mariage",
    DocumentKind.DEATH_CERTIFICATE: "acte de décès",
    DocumentKind.BIRTH_PUBLICATION: "publication de naissance",
    DocumentKind.MARRIAGE_PUBLICATION: "publication de mariage",
    DocumentKind.DEATH_PUBLICATION: "publication de décès",
}


def document_label(key: str) -> str:
    """Human-readable label for a document key; unknown keys pass through as-is."""
    try:
        return DOCUMENT_LABELS[DocumentKind(key)]
    except ValueError:
        return key


@dataclass
class Person:
    name: str | None = None
    fullname: str | None = None
    born: str | None = None
    died: str | None = None
    birthplace: str | None = None
    deathplace: str | None = None
    files: dict[str, str] = field(default_factory=dict)  # document key -> filename
    links: list[str] = field(default_factory=list)
    classes: list[str] = field(default_factory=list)  # "class" in input data


@dataclass
class Family:
    parents: list[str] = field(default_factory=list)
    parents2: list[str] = field(default_factory=list)
    children: list[str] = field(default_factory=list)
    children2: list[str] = field(default_factory=list)
    families: list["Family"] = field(default_factory=list)
    house: str | None = None  # label of an associated house
    affinity: list[str] = field(default_factory=list)
    links: list[str] = field(default_factory=list)

    @property
    def all_parents(self) -> list[str]:
        return [p for p in self.parents + self.parents2 if p]

    @property
    def all_children(self) -> list[str]:
        return [c for c in self.children + self.children2 if c]


@dataclass
class House:
    name: str | None = None
    people: dict[str, Person] = field(default_factory=dict)
    families: list[Family] = field(default_factory=list)
    houses: dict[str, "House"] = field(default_factory=dict)
    styles: dict[str, dict] = field(default_factory=dict)  # only read on the root house
