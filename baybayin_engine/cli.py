#!/usr/bin/env python3

"""
Command-line front end for manual conversions.

    baybayin convert --to-baybayin [--no-word-mapping] kumusta ka
    baybayin convert --to-latin ᜃᜓᜋᜓᜐ᜔ᜆ

The converted text goes to stdout, diagnostics to stderr. The exit code is
always 0 once the arguments parse, because conversion cannot fail.
"""

import argparse
import dataclasses
from typing import List, Optional

import structlog
from rich.console import Console
from rich.markup import escape

from baybayin_engine.baybayin_types import TranslationResult
from baybayin_engine.enums import DiagnosticSeverity, Direction
from baybayin_engine.logging_setup import setup_logging
from baybayin_engine.translator import BaybayinEngine, get_engine

logger = structlog.get_logger(__name__)

SEVERITY_STYLES = {
    DiagnosticSeverity.ERROR: "bold red",
    DiagnosticSeverity.WARNING: "yellow",
    DiagnosticSeverity.INFO: "cyan",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="baybayin", description="Convert between Latin-alphabet Filipino and Baybayin"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser("convert", help="Convert text in either direction")
    direction = convert.add_mutually_exclusive_group(required=True)
    direction.add_argument(
        "--to-baybayin", dest="direction", action="store_const", const=Direction.TO_BAYBAYIN,
        help="Latin-alphabet text to Baybayin",
    )
    direction.add_argument(
        "--to-latin", dest="direction", action="store_const", const=Direction.TO_LATIN,
        help="Baybayin to approximate Latin-alphabet text",
    )
    convert.add_argument(
        "--no-word-mapping", dest="use_word_mapping", action="store_false", default=None,
        help="Skip the common-word lexicon and use syllable rules only",
    )
    convert.add_argument(
        "--fold-diacritics", action="store_true",
        help="Fold accented letters (ñ, é) to plain ASCII before converting",
    )
    convert.add_argument("text", nargs="+", help="Text to convert (words are joined with spaces)")
    return parser


def print_diagnostics(result: TranslationResult, console: Console) -> None:
    for diagnostic in result.diagnostics:
        style = SEVERITY_STYLES[diagnostic.severity]
        console.print(
            f"[{style}]{diagnostic.severity.value}[/]: {escape(diagnostic.message)}",
            soft_wrap=True,
        )


def run_convert(args: argparse.Namespace) -> TranslationResult:
    engine = get_engine()
    if args.fold_diacritics and not engine.config.fold_diacritics:
        engine = BaybayinEngine(
            engine.glyph_table,
            engine.lexicon,
            config=dataclasses.replace(engine.config, fold_diacritics=True),
        )
    text = " ".join(args.text)
    logger.debug("convert", direction=str(args.direction), length=len(text))
    return engine.translate(text, args.direction, use_word_mapping=args.use_word_mapping)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    err_console = Console(stderr=True)
    result = run_convert(args)
    print(result.text)
    print_diagnostics(result, err_console)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
