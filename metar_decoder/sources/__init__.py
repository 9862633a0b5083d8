"""
Readers supplying raw METAR reports from files.

Provides:
- MetarFileFormat: Supported input layouts
- read_noaa_metar_cycles / read_plain: Raw report readers
- decode_file / decode_files: Decode reports, deduplicated by report text
- metars_to_json / metars_to_dataframe: Export helpers
"""

from metar_decoder.sources.files import (
    MetarFileFormat,
    read_noaa_metar_cycles,
    read_plain,
    decode_file,
    decode_files,
    expand_globs,
)
from metar_decoder.sources.export import metars_to_json, metars_to_dataframe

__all__ = [
    'MetarFileFormat',
    'read_noaa_metar_cycles',
    'read_plain',
    'decode_file',
    'decode_files',
    'expand_globs',
    'metars_to_json',
    'metars_to_dataframe',
]
