#!/usr/bin/env python3
"""
gkverb - conjugate Greek verbs from their stems.

Usage:
    gkverb --stem pres:παυ --tva pai,ppi        # print the requested parts
    gkverb --stem pres:παυ --all                # print all parts for the stem
    gkverb --stem aor:λυ --tva api --to-csv     # also write ./test-output.csv
    gkverb --stem aor:λυ --tva api --outfile FILE.csv
    gkverb --infile STEMS.csv --outfile FILE.csv
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import config
from .csv_io import conjugate_file, write_rows
from .errors import PersistenceFailure
from .paradigms import is_known_code, parse_codes
from .verb import Verb

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='gkverb', description='Conjugate Greek verbs')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('-s', '--stem', type=str, help='Tense and stem, e.g. pres:παυ')
    source.add_argument('-i', '--infile', type=Path, help='CSV file of stems, one per row')
    parser.add_argument('-t', '--tva', type=str, action='append', default=None,
                        help='Tense, voice and mood, e.g. pai,ppi')
    parser.add_argument('-a', '--all', action='store_true',
                        help='Print all combinations of tense, voice and mood for the given stem')
    parser.add_argument('-c', '--to-csv', action='store_true',
                        help=f'Write forms to {config.default_output}')
    parser.add_argument('-o', '--outfile', type=Path, default=None, help='Write forms to this CSV file')
    parser.add_argument('--delimiter', type=str, default=config.delimiter,
                        help='Separator between printed forms')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def print_reqs(verb: Verb, reqs: List[str], delimiter: str) -> None:
    """Print one line per conjugated code; warn about codes with no forms."""
    for code in reqs:
        line = verb.format_line(code, delimiter)
        if line is None:
            if not is_known_code(code):
                logger.warning(f"{code}: part not recognised")
            continue
        print(line)


def run_single(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    verb = Verb(args.stem)
    if args.tva:
        reqs = parse_codes(args.tva)
    elif args.all:
        reqs = verb.default_codes()
    else:
        parser.error('one of the arguments -t/--tva -a/--all is required with --stem')

    logger.debug(f"{verb.stem.tag}:{verb.stem.text} -> {reqs}")
    verb.conjugate_requests(reqs)
    print_reqs(verb, reqs, args.delimiter)

    outfile = args.outfile or (config.default_output if args.to_csv else None)
    if outfile is not None:
        write_rows(outfile, verb.rows(reqs))


def run_batch(args: argparse.Namespace) -> None:
    codes = parse_codes(args.tva) if args.tva else None
    conjugate_file(args.infile, args.outfile or config.default_output, codes)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format=config.log_format
    )

    try:
        if args.infile is not None:
            run_batch(args)
        else:
            run_single(args, parser)
    except PersistenceFailure as err:
        logger.error(f"{err} (cause: {err.cause!r})")
        return 1
    except (OSError, UnicodeDecodeError) as err:
        if args.infile is None:
            raise
        logger.error(f"Could not read {args.infile}: {err}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
