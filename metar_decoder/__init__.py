"""
METAR/SPECI aviation weather report decoding library.

This package decodes METAR and SPECI reports into typed, JSON-serializable
structures, and reads reports from NOAA cycle files and plain text files.

The main public API includes:
- decode_metar: Decode one raw report
- Metar: Decoded report
- Value: Typed quantity with units
- MetarDecodeError: Raised when a report has no decodable header
- decode_files: Decode and deduplicate reports from many files
"""

from metar_decoder.exceptions import MetarDecodeError
from metar_decoder.metar import Metar, Value, Unit, MetarDecoder, decode_metar
from metar_decoder.sources import MetarFileFormat, decode_file, decode_files

__version__ = '0.1.0'
__all__ = [
    'MetarDecodeError',
    'Metar',
    'Value',
    'Unit',
    'MetarDecoder',
    'decode_metar',
    'MetarFileFormat',
    'decode_file',
    'decode_files',
]
