"""
Command-line interface for nameparts.

Parses names given as arguments, or one per line on stdin, and prints one JSON
document per name.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from nameparts.parser import FullNameParser
from nameparts.types import FixCase, NameParseError, ParsedName, ParserConfig, PartToReturn


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nameparts",
        description="Split full names into title, first, middle, last, nickname and suffix.",
    )
    parser.add_argument("names", nargs="*", help="Names to parse (default: read one per line from stdin)")
    parser.add_argument(
        "--part",
        choices=[part.value for part in PartToReturn],
        default=PartToReturn.ALL.value,
        help="Only print this part of each name",
    )
    parser.add_argument(
        "--fix-case",
        choices=[option.value for option in FixCase],
        default=FixCase.AUTO.value,
        help="Repair capitalisation (auto: only for ALL CAPS or all lower-case input)",
    )
    parser.add_argument("--stop-on-error", action="store_true", help="Fail on the first parse diagnostic")
    parser.add_argument("--expanded-lists", action="store_true", help="Use the larger title and prefix lists")
    parser.add_argument("--normalize", action="store_true", help="Map title/suffix synonyms to one spelling")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log pipeline stages")
    return parser


def _to_json(value: ParsedName | str | list[str]) -> str:
    if isinstance(value, ParsedName):
        value = value.as_dict()
    return json.dumps(value, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ParserConfig(
        fix_case=FixCase(args.fix_case),
        stop_on_error=args.stop_on_error,
        use_expanded_lists=args.expanded_lists,
        normalize=args.normalize,
        part_to_return=PartToReturn(args.part),
    )
    name_parser = FullNameParser(config)

    names = args.names or (line.rstrip("\n") for line in sys.stdin)
    for name in names:
        try:
            print(_to_json(name_parser.extract(name)))
        except NameParseError as e:
            print(f"{name}: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
