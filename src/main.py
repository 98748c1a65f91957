"""
housegraph: render a house/family/person tree (YAML or JSON) as Graphviz DOT.

1) Load render settings (optional YAML config).
2) Read and normalize the tree data.
3) Validate it (cycles, undeclared or duplicated people, empty families).
4) Render the DOT document to a file or stdout.
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from config import RenderConfig, load_config
from models import InputShapeError
from parsing import load_data
from render import render
from validation import validate_tree

logger = logging.getLogger("housegraph")

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_VALIDATION = 2


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a family tree file to Graphviz DOT.")
    parser.add_argument("input", type=Path, help="YAML or JSON family tree file.")
    parser.add_argument("-o", "--output", type=Path, help="Write DOT here instead of stdout.")
    parser.add_argument("-c", "--config", type=Path, help="YAML render settings.")
    parser.add_argument(
        "--strict", action="store_true", help="Exit with status 2 when validation finds problems."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config) if args.config else RenderConfig()
    except (OSError, yaml.YAMLError, ValidationError) as exc:
        configure_logging("ERROR")
        logger.error("Cannot load config %s: %s", args.config, exc)
        return EXIT_INPUT_ERROR

    configure_logging("DEBUG" if args.verbose else config.log_level)

    logger.info("Reading %s", args.input)
    try:
        tree = load_data(args.input)
    except (OSError, yaml.YAMLError, InputShapeError) as exc:
        logger.error("Cannot read %s: %s", args.input, exc)
        return EXIT_INPUT_ERROR

    warnings = validate_tree(tree)
    for w in warnings:
        logger.warning(w)
    if warnings and args.strict:
        logger.error("%d validation warnings, not rendering (--strict)", len(warnings))
        return EXIT_VALIDATION

    document = render(tree, config)

    if args.output:
        args.output.write_text(document, encoding="utf-8")
        logger.info("DOT written to %s", args.output)
    else:
        sys.stdout.write(document)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
