"""
Configuration for the METAR decoder tools.
"""

import os

# Logging Configuration
LOG_LEVEL = os.getenv("METAR_DECODER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Input files
# NOAA cycle files are not UTF-8, they carry Windows-1252 bytes
CYCLES_ENCODING = os.getenv("METAR_DECODER_CYCLES_ENCODING", "cp1252")
PLAIN_ENCODING = "utf-8"
CYCLE_TIME_FORMAT = "%Y/%m/%d %H:%M"
ANCHOR_DATE_FORMAT = "%Y-%m-%d"

DEFAULT_FILE_FORMAT = "noaa-metar-cycles"
