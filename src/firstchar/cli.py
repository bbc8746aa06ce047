"""Command-line interface for firstchar."""

from __future__ import annotations

import argparse
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from firstchar.classes import CharacterClass, RepetitionPolicy
from firstchar.errors import (
    FirstCharError,
    FlagArgumentError,
    InputArgumentError,
    render_exit_codes_help,
)

CONFIG_NAME = "firstchar.toml"

_CATEGORY_OPTIONS: tuple[tuple[CharacterClass, str], ...] = (
    (CharacterClass.LETTER, "--include-letter"),
    (CharacterClass.PUNCTUATION, "--include-punctuation"),
    (CharacterClass.SYMBOL, "--include-symbol"),
)


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options, merged with the config file."""

    input_file: Path
    format_name: str
    categories: frozenset[CharacterClass]
    debug: bool
    # Config-file category words, used only when no category flag was given
    config_categories: tuple[str, ...] = ()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="firstchar",
        description="Report the first non-, least or most repeating character per category",
        epilog=render_exit_codes_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        exit_on_error=False,
    )
    p.add_argument(
        "-i",
        "-input",
        "--input",
        nargs="?",
        const="",
        default=None,
        metavar="FILE",
        help="Input text file",
    )
    p.add_argument(
        "-f",
        "-format",
        "--format",
        nargs="?",
        const="",
        default=None,
        metavar="NAME",
        help="non-repeating, least-repeating or most-repeating",
    )
    for cls, long_flag in _CATEGORY_OPTIONS:
        p.add_argument(
            cls.flag,
            long_flag,
            dest="categories",
            action="append_const",
            const=cls,
            help=f"Report the {cls.word} category",
        )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump frequency tables to stderr")
    return p


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse known arguments; unknown ones and stray words are ignored.

    Category flags take no value, so a flag written with one (e.g. ``-L=``) is
    ignored like any other unknown word.
    """
    if argv is None:
        argv = sys.argv[1:]
    flags = {opt for cls, long_flag in _CATEGORY_OPTIONS for opt in (cls.flag, long_flag)}
    argv = [arg for arg in argv if not ("=" in arg and arg.partition("=")[0] in flags)]
    try:
        args, _unknown = build_parser().parse_known_args(argv)
    except argparse.ArgumentError as exc:
        # Only glued short flags with a value (e.g. -LP=x) get here
        raise FlagArgumentError(str(exc)) from exc
    return args


def parse_category_word(word: str) -> CharacterClass:
    """Parse a category word from the config file."""
    cls = CharacterClass.from_word(word)
    if cls is None:
        choices = ", ".join(c.word for c in CharacterClass)
        raise FlagArgumentError(f"unknown category {word!r} (expected one of: {choices})")
    return cls


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise InputArgumentError(f"cannot read config {path}: {exc}") from exc


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    raw_input = args.input or ""
    if not raw_input.strip():
        raise InputArgumentError("no input file given (use -i=FILE or --input=FILE)")

    input_file = Path(raw_input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Format: config < CLI
    format_name = ""
    cfg_format = config.get("format")
    if isinstance(cfg_format, str):
        format_name = cfg_format
    if args.format is not None:
        format_name = args.format

    # Categories: config < CLI. Config words are checked in run(), after the content
    categories = frozenset(args.categories or ())
    config_categories: tuple[str, ...] = ()
    cfg_categories = config.get("categories")
    if isinstance(cfg_categories, list):
        config_categories = tuple(str(w) for w in cfg_categories)

    return CliOptions(
        input_file=input_file,
        format_name=format_name,
        categories=categories,
        debug=args.debug,
        config_categories=config_categories,
    )


def read_input(path: Path) -> bytes:
    """Read the whole input file; any failure is an input error."""
    if not path.is_file():
        raise InputArgumentError(f"file not found: {path}")
    try:
        return path.read_bytes()
    except OSError as exc:
        raise InputArgumentError(f"cannot read {path}: {exc.strerror or exc}") from exc


def run(options: CliOptions) -> list[str]:
    """Read, classify, validate, and render the report lines for one file.

    Checks run in a fixed order: file, content, format, categories.
    """
    from firstchar.counter import classify
    from firstchar.debug import dump_tables
    from firstchar.report import render_report

    content = read_input(options.input_file)
    tables = classify(content, str(options.input_file))

    if options.debug:
        dump_tables(tables)

    policy = RepetitionPolicy.from_name(options.format_name)
    categories = options.categories or frozenset(
        parse_category_word(w) for w in options.config_categories
    )
    if not categories:
        raise FlagArgumentError("no category given (use -L, -P and/or -S)")

    return render_report(str(options.input_file), tables, policy, categories)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0-4). Does not call sys.exit()."""
    try:
        args = parse_args(argv)
        options = resolve_options(args)
        lines = run(options)
    except FirstCharError as exc:
        print(str(exc), file=sys.stderr)
        return exc.exit_code

    for line in lines:
        print(line)

    return 0


def console_main() -> None:
    """Console script wrapper around main()."""
    raise SystemExit(main())
