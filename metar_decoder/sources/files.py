"""
File readers for METAR reports.

Two layouts are supported:

NOAA cycle files (https://tgftp.nws.noaa.gov/data/observations/metar/cycles/)
hold one block per report, a "YYYY/MM/DD HH:MM" line followed by the report
itself:

    2023/05/12 16:00
    LFBD 121600Z 33015G32KT 270V040 9999 FEW020 18/15 Q1012

Plain files hold one report per line and carry no date, so an anchor date
has to be supplied to get full observation datetimes.
"""

import glob
import logging
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Tuple, Union, Iterable

from metar_decoder import config
from metar_decoder.exceptions import MetarDecodeError
from metar_decoder.metar.models import Metar
from metar_decoder.metar.parser import MetarDecoder

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
Anchor = Union[date, datetime]


class MetarFileFormat(Enum):
    NOAA_METAR_CYCLES = "noaa-metar-cycles"
    PLAIN = "plain"

    @classmethod
    def from_string(cls, text: str) -> 'MetarFileFormat':
        """
        Look up a file format by its command line name.

        Raises:
            ValueError: If the name is unknown
        """
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Invalid METAR file format, given {text}") from None


def _parse_cycle_time(line: str) -> Optional[datetime]:
    try:
        return datetime.strptime(line, config.CYCLE_TIME_FORMAT)
    except ValueError:
        return None


def read_noaa_metar_cycles(path: PathLike) -> Iterator[Tuple[datetime, str]]:
    """
    Read a NOAA cycle file.

    Some files start with garbage lines, everything before the first
    timestamp line is ignored. A report spread over several lines is
    joined with single spaces.

    Args:
        path: Cycle file

    Yields:
        (timestamp of the block, report text) pairs
    """
    anchor = None
    parts: List[str] = []

    with open(path, encoding=config.CYCLES_ENCODING, errors='replace') as f:
        for line in f:
            line = line.strip()

            timestamp = _parse_cycle_time(line)
            if timestamp is not None:
                if anchor is not None and parts:
                    yield anchor, ' '.join(parts)
                anchor = timestamp
                parts = []
                continue

            if anchor is None:
                continue

            if not line:
                if parts:
                    yield anchor, ' '.join(parts)
                    parts = []
                continue

            parts.append(line)

    if anchor is not None and parts:
        yield anchor, ' '.join(parts)


def read_plain(path: PathLike) -> Iterator[str]:
    """Read a plain file, yielding each non-empty line as a report."""
    with open(path, encoding=config.PLAIN_ENCODING, errors='replace') as f:
        for line in f:
            line = line.strip()
            if line:
                yield line


def _decode_reports(reports: Iterable[Tuple[Optional[Anchor], str]]) -> List[Metar]:
    metars = []
    for anchor, report in reports:
        try:
            metars.append(MetarDecoder.decode(report, anchor=anchor))
        except MetarDecodeError as e:
            logger.warning(f"Skipping report: {e}")
    return metars


def decode_file(
    path: PathLike,
    file_format: MetarFileFormat = MetarFileFormat.NOAA_METAR_CYCLES,
    anchor: Optional[Anchor] = None,
) -> List[Metar]:
    """
    Decode all reports of a file.

    Reports of a cycle file are anchored on their block timestamp, reports
    of a plain file on the given anchor. Reports without a decodable header
    are logged and skipped.

    Args:
        path: Input file
        file_format: Layout of the file
        anchor: Anchor date for plain files

    Returns:
        Decoded reports in file order
    """
    if file_format == MetarFileFormat.NOAA_METAR_CYCLES:
        reports = read_noaa_metar_cycles(path)
    else:
        reports = ((anchor, report) for report in read_plain(path))

    metars = _decode_reports(reports)
    logger.debug(f"Decoded {len(metars)} report(s) from {path}")
    return metars


def decode_files(
    paths: Iterable[PathLike],
    file_format: MetarFileFormat = MetarFileFormat.NOAA_METAR_CYCLES,
    anchor: Optional[Anchor] = None,
) -> List[Metar]:
    """
    Decode the reports of many files, dropping repeated reports.

    Two reports are the same when their text is identical; the first one
    read is kept.
    """
    seen = set()
    metars = []

    for path in paths:
        for metar in decode_file(path, file_format, anchor):
            if metar.report in seen:
                continue
            seen.add(metar.report)
            metars.append(metar)

    return metars


def expand_globs(patterns: Iterable[str]) -> List[Path]:
    """Return the sorted, unique files matching any of the glob patterns."""
    paths = set()
    for pattern in patterns:
        for match in glob.glob(pattern, recursive=True):
            path = Path(match)
            if path.is_file():
                paths.add(path)
    return sorted(paths)
