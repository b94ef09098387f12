"""CLI for QuickPass — generate passwords and list the character classes."""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .generator import CANONICAL_ORDER, CharacterClass, generate_from
from .log import setup_logging
from .options import DEFAULT_CONFIG, MAX_LENGTH, MIN_LENGTH, ConfigError, parse_classes, validate

logger = logging.getLogger(__name__)
console = Console(emoji=False, highlight=False)

EXIT_INVALID = 2

_DISABLE_FLAGS = (
    ("no_upper", CharacterClass.UPPERCASE),
    ("no_lower", CharacterClass.LOWERCASE),
    ("no_digits", CharacterClass.NUMBERS),
    ("no_symbols", CharacterClass.SYMBOLS),
)


def _config_from_args(args):
    classes = parse_classes(args.classes) if args.classes else DEFAULT_CONFIG.classes
    for flag, cls in _DISABLE_FLAGS:
        if getattr(args, flag):
            classes = classes - {cls}
    return validate(DEFAULT_CONFIG.with_classes(classes).with_length(args.length))


def cmd_generate(args) -> int:
    try:
        cfg = _config_from_args(args)
    except ConfigError as e:
        console.print(f"[red]Invalid options: {escape(str(e))}[/red]")
        return EXIT_INVALID
    logger.info("generating %d password(s): length=%d classes=%s", args.copies, cfg.length, cfg.ids())
    for i in range(args.copies):
        pw = generate_from(cfg)
        if args.plain:
            console.print(escape(pw))
        else:
            console.print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")
    return 0


def cmd_classes(args) -> int:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Id")
    table.add_column("Label")
    table.add_column("Size", justify="right")
    table.add_column("Characters")
    for c in CANONICAL_ORDER:
        table.add_row(c.value, c.label, str(len(c.chars)), escape(c.chars))
    console.print(table)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quickpass")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=DEFAULT_CONFIG.length,
                     help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH})")
    gen.add_argument("--classes", nargs="+", metavar="CLASS",
                     help="Character classes to enable: " + ", ".join(c.value for c in CANONICAL_ORDER))
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.add_argument("--plain", action="store_true", help="Print bare passwords, one per line")
    gen.set_defaults(func=cmd_generate)

    cl = sub.add_parser("classes", help="List the character classes")
    cl.set_defaults(func=cmd_classes)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
