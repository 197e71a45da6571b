"""
strkit Command-Line Interface.

Thin wrapper over the text transformation toolkit.

Usage:
    strkit format "{}-{}" 1 2              # 1-2
    strkit split "a,,b" , --keep-empty     # one token per line
    strkit replace aXbXc X - --mode last   # aXb-c
    strkit translate hello el ip           # hippo
    strkit random alpha --length 8
    strkit info
"""

import argparse
import logging
import re
import sys
from typing import Any, Optional

from strkit import __version__
from strkit.config import ToolkitConfig, get_config
from strkit.engine.formatter import sformat
from strkit.engine.replace import ReplaceMode, replace
from strkit.engine.split import regex_split, split
from strkit.engine.translate import maketrans
from strkit.runtime.stdlib.random import (
    UINT32_MAX,
    UINT64_MAX,
    random_alphabet_string,
    random_number_string,
    random_number_string_64,
    set_seed,
)
from strkit.utils.errors import StrKitError

logger = logging.getLogger("strkit")


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.CYAN = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_logging(level_name: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level_name.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _coerce_arg(text: str) -> Any:
    """
    Interpret a command-line format argument as int, then float, else text.

    A number is only used when its canonical text is exactly the input,
    so spellings like "007", "1_000" or "Infinity" stay as written.
    """
    try:
        value = int(text)
        if str(value) == text:
            return value
    except ValueError:
        pass
    try:
        value = float(text)
        if repr(value) == text:
            return value
    except ValueError:
        pass
    return text


def create_parser(config: Optional[ToolkitConfig] = None) -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    config = config or get_config()

    parser = argparse.ArgumentParser(
        prog="strkit",
        description="strkit - string splitting, replacement, transliteration and templates",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default=config.log_level.lower(),
        help=f"Logging level (default: {config.log_level.lower()})",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Format command
    format_parser = subparsers.add_parser(
        "format",
        aliases=["f"],
        help="Expand a brace template with positional arguments",
    )
    format_parser.add_argument("template", help="Template such as '{}-{}' or '{1}{0}'")
    format_parser.add_argument("args", nargs="*", help="Positional arguments")

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        aliases=["s"],
        help="Split text by delimiter characters or a pattern",
    )
    split_parser.add_argument("text", help="Text to split")
    split_parser.add_argument("delimiters", help="Delimiter characters (or a pattern with --regex)")
    split_parser.add_argument(
        "--keep-empty",
        action=argparse.BooleanOptionalAction,
        default=config.keep_empty,
        help="Keep empty tokens between adjacent delimiters",
    )
    split_parser.add_argument("--regex", action="store_true", help="Treat delimiters as a pattern")

    # Replace command
    replace_parser = subparsers.add_parser(
        "replace",
        aliases=["r"],
        help="Replace the first, last or every occurrence of a target",
    )
    replace_parser.add_argument("text", help="Input text")
    replace_parser.add_argument("target", help="Literal target (or a pattern with --regex)")
    replace_parser.add_argument("replacement", help="Replacement text ($1 references with --regex)")
    replace_parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ReplaceMode],
        default=ReplaceMode.ALL.value,
        help="Which occurrences to replace (default: all)",
    )
    replace_parser.add_argument("--regex", action="store_true", help="Treat target as a pattern")

    # Translate command
    translate_parser = subparsers.add_parser(
        "translate",
        aliases=["tr"],
        help="Map characters of FROM onto TO",
    )
    translate_parser.add_argument("text", help="Input text")
    translate_parser.add_argument("from_chars", metavar="from", help="Source characters")
    translate_parser.add_argument("to_chars", metavar="to", help="Target characters")

    # Random command
    random_parser = subparsers.add_parser(
        "random",
        help="Generate a random number or character string",
    )
    random_parser.add_argument("kind", choices=["number", "number64", "alpha"])
    random_parser.add_argument("--length", type=int, default=16, help="Length for alpha strings")
    random_parser.add_argument("--min", dest="minimum", type=int, default=0, help="Minimum value")
    random_parser.add_argument("--max", dest="maximum", type=int, default=None, help="Maximum value")
    random_parser.add_argument("--seed", type=int, default=None, help="Seed the generator first")

    # Info command
    subparsers.add_parser(
        "info",
        help="Show version and configuration",
    )

    return parser


def cmd_format(args: argparse.Namespace) -> int:
    """Handle the format command."""
    values = [_coerce_arg(text) for text in args.args]
    print(sformat(args.template, *values))
    return 0


def cmd_split(args: argparse.Namespace) -> int:
    """Handle the split command."""
    if args.regex:
        tokens = regex_split(args.text, args.delimiters, args.keep_empty)
    else:
        tokens = split(args.text, args.delimiters, args.keep_empty)
    logger.debug("split produced %d token(s)", len(tokens))
    for token in tokens:
        print(token)
    return 0


def cmd_replace(args: argparse.Namespace) -> int:
    """Handle the replace command."""
    print(replace(args.text, args.target, args.replacement, ReplaceMode(args.mode), regex=args.regex))
    return 0


def cmd_translate(args: argparse.Namespace) -> int:
    """Handle the translate command."""
    print(maketrans(args.text, args.from_chars, args.to_chars))
    return 0


def cmd_random(args: argparse.Namespace) -> int:
    """Handle the random command."""
    if args.seed is not None:
        set_seed(args.seed)

    if args.kind == "alpha":
        print(random_alphabet_string(args.length))
    elif args.kind == "number64":
        maximum = UINT64_MAX if args.maximum is None else args.maximum
        print(random_number_string_64(args.minimum, maximum))
    else:
        maximum = UINT32_MAX if args.maximum is None else args.maximum
        print(random_number_string(args.minimum, maximum))
    return 0


def cmd_info(args: argparse.Namespace) -> int:
    """Handle the info command."""
    config = get_config()
    print(f"{Colors.BOLD}strkit{Colors.RESET} {__version__}")
    print(f"  {Colors.CYAN}log level:{Colors.RESET}  {config.log_level}")
    print(f"  {Colors.CYAN}keep empty:{Colors.RESET} {config.keep_empty}")
    print(f"  {Colors.CYAN}color:{Colors.RESET}      {config.color}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    try:
        config = get_config()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    if not config.color:
        Colors.disable()

    parser = create_parser(config)
    args = parser.parse_args(argv)
    _init_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "format": cmd_format,
        "f": cmd_format,
        "split": cmd_split,
        "s": cmd_split,
        "replace": cmd_replace,
        "r": cmd_replace,
        "translate": cmd_translate,
        "tr": cmd_translate,
        "random": cmd_random,
        "info": cmd_info,
    }

    handler = command_handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (StrKitError, ValueError, re.error) as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
