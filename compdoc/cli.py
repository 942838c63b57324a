"""CLI entrypoints for compdoc commands."""

from __future__ import annotations

import argparse
import json
import sys
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

from .config import ConfigError, GeneratorConfig, load_config
from .generator import ComponentDocGenerator
from .logging import configure_logging


def _add_logging_options(
    parser: argparse.ArgumentParser, *, inherit_defaults: bool = False
) -> None:
    """Register log flags; subcommands inherit defaults so flags work on either side."""

    def default(value: object) -> object:
        return argparse.SUPPRESS if inherit_defaults else value

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default(False),
        help="Log debug details, including every resolved ancestor.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default(False),
        help="Only log warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        default=default(None),
        help="Also write a debug-level log to this file.",
    )


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-s",
        "--source",
        default=None,
        help="Path to the components source directory (overrides components_source_path).",
    )
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .compdoc.yml or the directory containing it (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compdoc",
        description="Extract props, methods, events and styles from UI component sources.",
    )
    _add_logging_options(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Print documentation records for all components or a single component.",
    )
    _add_logging_options(generate_parser, inherit_defaults=True)
    _add_source_options(generate_parser)
    target = generate_parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Generate records for every discovered component.",
    )
    target.add_argument(
        "-c",
        "--component",
        default=None,
        help="Generate the record for a single component (case-insensitive name).",
    )

    list_parser = subparsers.add_parser(
        "list",
        help="List discovered components grouped by category.",
    )
    _add_logging_options(list_parser, inherit_defaults=True)
    _add_source_options(list_parser)

    return parser


def _resolve_source(args: argparse.Namespace, config: GeneratorConfig) -> Path:
    if args.source:
        return Path(args.source).expanduser().resolve()
    if config.components_source_path is not None:
        return config.components_source_path
    return Path.cwd()


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for compdoc commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=Path(args.log_file) if args.log_file else None,
    )

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    source = _resolve_source(args, config)
    if not source.is_dir():
        parser.exit(1, f"Components source path not found: {source}\n")

    generator = ComponentDocGenerator(source, config)

    if args.command == "list":
        components = generator.find_all_components()
        by_category: Dict[str, List[str]] = defaultdict(list)
        for location in components:
            by_category[location.category].append(Path(location.path).name)
        print(f"Found {len(components)} components:")
        for category, names in by_category.items():
            print(f"{category}/ ({len(names)})")
            for name in names:
                print(f"  - {name}")
    elif args.command == "generate":
        if args.all:
            result = generator.generate_all()
            print(json.dumps([doc.to_dict() for doc in result.docs], indent=2))
            for failure in result.failures:
                logger.warning("Failed: %s (%s)", failure.path, failure.reason)
            logger.info("Generated %d record(s); %d failed", result.succeeded, result.failed)
        else:
            location = generator.find_component(args.component)
            if location is None:
                parser.exit(1, f"Component '{args.component}' not found\n")
            doc = generator.generate_component_doc(location.path, location.category)
            if doc is None:
                parser.exit(1, "Failed to generate documentation. Run with --verbose for more details.\n")
            print(doc.to_json())
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


if __name__ == "__main__":
    main(sys.argv[1:])
