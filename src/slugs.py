"""Graph-safe tokens for tree paths."""

import re

SAFE_CHARS = re.compile(r"[A-Za-z0-9]")
SEPARATOR = "__"


def _slug_segment(segment) -> str:
    if isinstance(segment, int) and not isinstance(segment, bool):
        return f"_n{segment}"

    out = []
    for ch in str(segment):
        if SAFE_CHARS.match(ch):
            out.append(ch)
        else:
            out.extend(f"_{byte:02x}" for byte in ch.encode("utf-8"))
    return "".join(out)


def slugify(path) -> str:
    """
    Map a path of keys/indices to a bare DOT identifier fragment.

    Alphanumerics are kept, every other character becomes "_xx" per UTF-8
    byte, integer indices become "_n<index>" and segments are joined by "__".
    A single "_" is therefore always followed by a hex digit or "n", which
    keeps distinct paths distinct.
    """
    return SEPARATOR.join(_slug_segment(s) for s in path)
