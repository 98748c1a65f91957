"""Nested block structures flattened into indented text lines."""

from collections.abc import Iterable, Iterator


class Indent(list):
    """A group of block items rendered one indentation level deeper."""

    def __init__(self, *items):
        super().__init__(items)


def iter_lines(tree, depth: int = 0) -> Iterator[tuple[int, str]]:
    """Yield (depth, line) pairs; None and False entries are skipped."""
    if tree is None or tree is False:
        return
    if isinstance(tree, str):
        yield (depth, tree)
    elif isinstance(tree, Indent):
        for item in tree:
            yield from iter_lines(item, depth + 1)
    elif isinstance(tree, Iterable):
        for item in tree:
            yield from iter_lines(item, depth)
    else:
        raise TypeError(f"Unsupported block item: {tree!r}")


def serialize(tree, indent_unit: str = "  ") -> str:
    """Flatten a block tree into text. Blank lines carry no indentation."""
    return "\n".join(
        indent_unit * depth + line if line else ""
        for depth, line in iter_lines(tree)
    )
