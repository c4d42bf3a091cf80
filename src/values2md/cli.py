"""Command-line entry point for values2md."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from values2md.config import (
    VALUES2MD_LOG_LEVEL,
    VALUES2MD_REFERENCE_PATH,
    VALUES2MD_REPO_PATH,
    VALUES2MD_VALUES_PATH,
)
from values2md.exceptions import Values2mdError
from values2md.generation import TEMPLATES, generate_docs
from values2md.splice import update_reference_file

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="values2md",
        description="Generate Markdown reference docs from an annotated values.yaml.",
    )
    parser.add_argument(
        "repo_path",
        nargs="?",
        help=f"Path to the repo holding the reference document (default: {VALUES2MD_REPO_PATH})",
    )
    parser.add_argument(
        "--template",
        default="table",
        choices=sorted(TEMPLATES),
        help="Template to use for generating the markdown",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Only validate that the markdown can be generated; print it instead of writing it",
    )
    parser.add_argument("--values", type=Path, default=VALUES2MD_VALUES_PATH, help="Values YAML file to document")
    parser.add_argument(
        "--reference",
        type=Path,
        default=VALUES2MD_REFERENCE_PATH,
        help="Reference document, relative to the repo path",
    )
    parser.add_argument(
        "--log-level",
        default=VALUES2MD_LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: %(default)s)",
    )
    return parser


def resolve_repo_path(repo_path: str | None) -> Path:
    """Resolve the repo path, relative paths being taken from the working directory."""
    if not repo_path:
        resolved = VALUES2MD_REPO_PATH.expanduser().resolve()
        logger.info("Defaulting to repo path: %s", resolved)
        return resolved
    resolved = Path(repo_path).expanduser().resolve()
    logger.info("Using repo path: %s", resolved)
    return resolved


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        yaml_text = args.values.read_text(encoding="utf-8")
        output = generate_docs(yaml_text, args.template)
    except (OSError, Values2mdError) as exc:
        logger.error("%s", exc)
        return 1

    # Validation only needs generation to succeed.
    if args.validate:
        print(output)
        return 0

    reference_file = resolve_repo_path(args.repo_path) / args.reference
    try:
        update_reference_file(reference_file, output)
    except (OSError, Values2mdError) as exc:
        logger.error("%s", exc)
        return 1
    logger.info("Updated with generated docs: %s", reference_file)
    return 0
