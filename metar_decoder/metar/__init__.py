"""
METAR module for decoding METAR/SPECI reports.

Provides:
- MetarDecoder / decode_metar: Decode raw report text into a Metar
- Metar: Decoded report, serializable with to_dict()
- Value / Unit: Typed quantities (exact, above, below, variable, range)
- MetarTokenizer: Report groups and section markers
- DateTimeResolver / MetarTime: Observation time resolution against an anchor date

Example:
    from datetime import date
    from metar_decoder.metar import decode_metar

    metar = decode_metar("LFBD 121600Z 33015KT 9999 FEW020 18/15 Q1012", anchor=date(2023, 5, 10))
    print(metar.observation_time.date_time)  # 2023-05-12 16:00:00
"""

from metar_decoder.metar.models import (
    Metar,
    Value,
    ValueType,
    Unit,
    ReportType,
    DirectionalVisibility,
    DirectionOctant,
    RunwayVisualRange,
    RunwayVisualRangeTrend,
    WeatherCondition,
    WeatherIntensity,
    WeatherDescriptor,
    WeatherPhenomenon,
    CloudLayer,
    CloudCover,
    CloudType,
    WindShear,
    SeaState,
    TrendChange,
    TrendIndicator,
)
from metar_decoder.metar.datetime_resolver import MetarTime, DateTimeResolver
from metar_decoder.metar.tokenizer import MetarTokenizer, Token, Section
from metar_decoder.metar.parser import MetarDecoder, decode_metar

__all__ = [
    'Metar',
    'Value',
    'ValueType',
    'Unit',
    'ReportType',
    'DirectionalVisibility',
    'DirectionOctant',
    'RunwayVisualRange',
    'RunwayVisualRangeTrend',
    'WeatherCondition',
    'WeatherIntensity',
    'WeatherDescriptor',
    'WeatherPhenomenon',
    'CloudLayer',
    'CloudCover',
    'CloudType',
    'WindShear',
    'SeaState',
    'TrendChange',
    'TrendIndicator',
    'MetarTime',
    'DateTimeResolver',
    'MetarTokenizer',
    'Token',
    'Section',
    'MetarDecoder',
    'decode_metar',
]
