#!/usr/bin/env python3
"""Decode METAR reports stored in files and save them into a JSON (or CSV) file."""

import sys
import argparse
import logging
from datetime import datetime
from typing import List, Optional

from metar_decoder import config
from metar_decoder.sources import (
    MetarFileFormat,
    decode_files,
    expand_globs,
    metars_to_json,
    metars_to_dataframe,
)

logger = logging.getLogger(__name__)


def _anchor_date(text: str):
    try:
        return datetime.strptime(text, config.ANCHOR_DATE_FORMAT).date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid anchor date, expected YYYY-MM-DD, given {text}")


def _file_format(text: str) -> MetarFileFormat:
    try:
        return MetarFileFormat.from_string(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='CLI decoder of METAR reports')
    parser.add_argument('input_globs', help='Input files (glob patterns)', nargs='+')
    parser.add_argument('output', help='Output JSON file, identical reports are deduplicated')
    parser.add_argument('-q', '--quiet', help='Only log errors', action='store_true')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    parser.add_argument(
        '-f', '--file-format',
        help='METAR file format (noaa-metar-cycles, plain)',
        type=_file_format,
        default=MetarFileFormat.from_string(config.DEFAULT_FILE_FORMAT),
    )
    parser.add_argument('-p', '--pretty-print', help='Indent the output JSON', action='store_true')
    parser.add_argument(
        '-a', '--anchor-time',
        help='Day (YYYY-MM-DD) close to when the reports of a plain file were collected',
        type=_anchor_date,
    )
    parser.add_argument('--csv', help='Write a flattened CSV table instead of JSON', action='store_true')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.quiet:
        logging.getLogger().setLevel(logging.ERROR)

    paths = expand_globs(args.input_globs)
    logger.info(f'Found {len(paths)} file(s)')
    if not paths:
        logger.error(f'No input file matches {" ".join(args.input_globs)}')
        return 1

    metars = decode_files(paths, args.file_format, args.anchor_time)

    if args.csv:
        metars_to_dataframe(metars).to_csv(args.output, index=False)
        logger.info(f'Saved {len(metars)} report(s) to {args.output}')
    else:
        metars_to_json(metars, args.output, pretty=args.pretty_print)

    return 0


if __name__ == '__main__':
    sys.exit(main())
