"""HTML-like label composition for person nodes, and identifier escaping."""

import html
import json
import re

from models import Person, document_label
from styles import HtmlLabel

BIRTH_COLOR = "#264d18"
DEATH_COLOR = "#6f1d1d"
FULLNAME_COLOR = "#666666"
DOCUMENT_COLOR = "#0069c2"

BARE_ID = re.compile(r"[A-Za-z]+")
PASCAL_WORD = re.compile(r"[A-Z][^A-Z]+")

TABLE_OPEN = '<table align="center" border="0" cellpadding="0" cellspacing="2" width="4">'


def html_text(text: str) -> str:
    """Escape text for HTML-like labels, keeping it on one line."""
    return html.escape(text).replace("\r\n", "&#10;").replace("\n", "&#10;").replace("\r", "&#10;")


def escape_id(ident: str) -> str:
    """Letters-only identifiers stay bare, anything else becomes a quoted string."""
    if BARE_ID.fullmatch(ident):
        return ident
    return json.dumps(ident, ensure_ascii=False)


def split_pascal_case(word: str) -> list[str]:
    """Split on PascalCase boundaries: "JeanDupont" -> ["Jean", "Dupont"]."""
    return PASCAL_WORD.findall(word)


def devise_name(person: Person, ident: str) -> tuple[str | None, str | None]:
    """
    Resolve (name, fullname) for a person.

    Explicit fields win. Otherwise the identifier is split on PascalCase
    boundaries: the first word becomes the name and all words the fullname.
    An identifier that cannot be split contributes nothing.
    """
    names = split_pascal_case(ident)
    if not names:
        return (person.name, person.fullname)
    return (person.name or names[0], person.fullname or " ".join(names))


def make_row(content: str, color: str, size: int = 10) -> str:
    if not content:
        return ""
    return (
        f'<tr><td align="center"><font point-size="{size}" color="{color}">'
        f"{content}</font></td></tr>"
    )


def highlight_year(text: str | None, color: str) -> str:
    """Row with the trailing token (the year) in bold."""
    if not text:
        return ""
    tokens = str(text).split()
    if not tokens:
        return ""
    *rest, year = tokens
    content = f"<b>{html_text(year)}</b>"
    if rest:
        content = f"{html_text(' '.join(rest))} {content}"
    return make_row(content, color)


def place_row(place: str | None, color: str) -> str:
    if not place:
        return ""
    return make_row(f"<i>{html_text(place)}</i>", color, size=9)


def document_rows(person: Person) -> list[str]:
    return [
        f'<tr><td align="center" cellpadding="1" href="files/{html_text(filename)}">'
        f'<font point-size="8" color="{DOCUMENT_COLOR}"><u>{html_text(document_label(kind))}</u>'
        f"</font></td></tr>"
        for kind, filename in person.files.items()
    ]


def person_label(person: Person, ident: str) -> str | HtmlLabel:
    """Table label when a name is known, the bare identifier otherwise."""
    name, fullname = devise_name(person, ident)
    if not (name or fullname):
        return ident

    rows = [f'<tr><td align="center">{html_text(name or ident)}</td></tr>']
    subtitle = fullname or person.name
    if subtitle:
        rows.append(make_row(html_text(subtitle), FULLNAME_COLOR))
    rows += [
        highlight_year(person.born, BIRTH_COLOR),
        place_row(person.birthplace, BIRTH_COLOR),
        highlight_year(person.died, DEATH_COLOR),
        place_row(person.deathplace, DEATH_COLOR),
    ]
    rows += document_rows(person)

    return HtmlLabel("<" + TABLE_OPEN + "".join(rows) + "</table>>")
